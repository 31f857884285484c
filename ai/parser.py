# ai/parser.py

import json
import logging
import re

from core.errors import ParseError, ShapeError
from core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# ```json / ```JSON / bare ``` opening the reply, ``` closing it; backticks
# inside the payload are left alone
_OPEN_FENCE = re.compile(r"\A\s*```[A-Za-z]*[ \t]*\r?\n?")
_CLOSE_FENCE = re.compile(r"\r?\n?```\s*\Z")


def strip_fences(text: str) -> str:
    text = _OPEN_FENCE.sub("", text, count=1)
    return _CLOSE_FENCE.sub("", text, count=1).strip()


def parse_itinerary(text: str) -> Result:
    """
    Turn the model reply into an itinerary payload.

    Only the top level is checked: the value must be an object holding a
    ``days`` list. Days and activities are passed through untouched.
    """
    cleaned = strip_fences(text or "")
    try:
        data = json.loads(cleaned)
    except ValueError as e:
        logger.error("JSON parse error: %s\nAI response text: %s", e, text)
        return Err(ParseError(raw_text=text, underlying=e))

    if not isinstance(data, dict) or not isinstance(data.get("days"), list):
        logger.error("Invalid itinerary structure: %s", data)
        return Err(ShapeError(data))
    return Ok(data)
