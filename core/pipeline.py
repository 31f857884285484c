# core/pipeline.py
"""
Itinerary generation, end to end.

    raw payload → validate → expand dates → build prompt → Gemini → parse

Each call is independent: nothing is shared between runs, so a regenerate is
just another call with the same payload.
"""

import logging
from typing import Any, Mapping, Optional

from ai.gemini import GeminiGateway
from ai.parser import parse_itinerary
from ai.prompt import build_prompt
from core.errors import InternalError, TripPlannerError
from core.planner import plan_dates
from core.result import Err, Ok, Result
from core.validation import validate_trip_request

logger = logging.getLogger(__name__)


def generate_itinerary(raw: Mapping[str, Any], gateway: Optional[GeminiGateway] = None) -> Result:
    """
    Run the whole pipeline on a raw trip submission.

    Returns Ok(itinerary_payload) or Err(error); never raises. Any exception
    outside the pipeline's own error types is wrapped in InternalError.
    """
    try:
        req = validate_trip_request(raw)
        dates = plan_dates(req)
        prompt = build_prompt(req, dates)
        logger.info("Generating %d-day itinerary for %s", len(dates), req.destination)

        gateway = gateway or GeminiGateway()
        reply = gateway.generate(prompt)
        return parse_itinerary(reply)
    except TripPlannerError as e:
        logger.warning("Itinerary generation failed: %s", e)
        return Err(e)
    except Exception as e:
        logger.exception("API Error")
        return Err(InternalError(e))


def to_response(result: Result) -> tuple[dict, int]:
    """(body, HTTP status) for a pipeline result."""
    if isinstance(result, Ok):
        return result.value, 200
    return result.error.to_payload(), result.error.http_status
