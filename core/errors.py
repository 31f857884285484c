# core/errors.py
"""
Error taxonomy of the itinerary pipeline.

Every error knows the HTTP status it maps to and how to render itself as the
``{error, status?, details?}`` payload returned to the presentation layer.
"""

from __future__ import annotations

from typing import Any, Optional


class TripPlannerError(Exception):
    http_status = 500
    label = "Internal server error"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        payload: dict = {"error": self.label}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(TripPlannerError):
    """Malformed trip submission. The message is shown to the user as is."""

    http_status = 400

    def to_payload(self) -> dict:
        return {"error": self.message}


class ConfigurationError(TripPlannerError):
    """Missing or unusable settings (e.g. no API key)."""

    def to_payload(self) -> dict:
        return {"error": self.label, "details": self.message}


class GatewayError(TripPlannerError):
    """
    The model endpoint could not be used: either the call itself failed
    (``status`` is the upstream HTTP code, or None when no response arrived)
    or it succeeded without any reply text (``empty_reply``).
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        details: Any = None,
        empty_reply: bool = False,
    ):
        super().__init__(message, details)
        self.status = status
        self.empty_reply = empty_reply

    @property
    def http_status(self) -> int:  # type: ignore[override]
        return 500 if self.empty_reply else 503

    def to_payload(self) -> dict:
        if self.empty_reply:
            return {"error": "No response from AI", "details": self.details}
        return {
            "error": "AI service unavailable",
            "status": self.status,
            "details": self.details,
        }


class ParseError(TripPlannerError):
    """Reply text is not well-formed JSON once the code fences are gone."""

    label = "Invalid AI response format"

    def __init__(self, raw_text: str, underlying: Exception):
        super().__init__(f"could not parse model reply: {underlying}", raw_text)
        self.raw_text = raw_text
        self.underlying = underlying

    def to_payload(self) -> dict:
        return {
            "error": self.label,
            "details": self.raw_text,
            "parseError": str(self.underlying),
        }


class ShapeError(TripPlannerError):
    """Reply parsed, but has no ``days`` list."""

    label = "Invalid itinerary structure"

    def __init__(self, parsed: Any):
        super().__init__("model reply has no 'days' list", parsed)
        self.parsed = parsed

    def to_payload(self) -> dict:
        return {"error": self.label, "details": self.parsed}


class InternalError(TripPlannerError):
    """Any unclassified failure caught at the pipeline boundary."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause), str(cause))
        self.cause = cause
