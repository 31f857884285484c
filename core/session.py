# core/session.py
"""
Hand-off between the form and the results view.

The generated itinerary travels together with the request that produced it,
as one explicit ``TripSession`` value. It is stored in a single slot
(``SESSION_KEY``): the generate call is the only writer, the results view and
regenerate are the only readers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from core.pipeline import generate_itinerary
from core.result import Err, Ok, Result
from core.validation import validate_trip_request

SESSION_KEY = "travelItinerary"


@dataclass(frozen=True)
class TripSession:
    request: dict        # camelCase TripRequest payload, re-sent verbatim on regenerate
    itinerary: dict      # {"days": [...]} exactly as returned by the pipeline

    def to_dict(self) -> dict:
        return {"itinerary": self.itinerary, "formData": self.request}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TripSession":
        return cls(request=dict(data["formData"]), itinerary=dict(data["itinerary"]))

    def save(self, path) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")

    @classmethod
    def load(cls, path) -> "TripSession":
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))


Generator = Callable[[Mapping[str, Any]], Result]


def start_session(request: Mapping[str, Any], generate: Optional[Generator] = None) -> tuple[Optional[TripSession], Result]:
    """
    Generate a first itinerary; the session is None when generation failed.
    The stored request is the normalised wire form of the validated request.
    """
    result = (generate or generate_itinerary)(request)
    if isinstance(result, Err):
        return None, result
    stored = validate_trip_request(request).to_payload()
    return TripSession(request=stored, itinerary=result.value), result


def regenerate(session: TripSession, generate: Optional[Generator] = None) -> tuple[TripSession, Result]:
    """
    Re-send the stored request unchanged. On success only the itinerary is
    replaced; on failure the previous session is returned as is.
    """
    result = (generate or generate_itinerary)(session.request)
    if isinstance(result, Ok):
        return replace(session, itinerary=result.value), result
    return session, result
