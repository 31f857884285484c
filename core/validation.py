# core/validation.py

import datetime as dt
from typing import Any, Mapping

from core.errors import ValidationError
from core.models import Budget, Pace, TripRequest

REQUIRED_FIELDS = ("destination", "startDate", "endDate", "budget", "pace")


def _blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _to_date(value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(str(value).strip())


def _interests(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    tags: list[str] = []
    for tag in value:
        tag = str(tag).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def validate_trip_request(raw: Mapping[str, Any]) -> TripRequest:
    """
    Check a raw trip submission (camelCase keys, as posted by the form) and
    return it as a TripRequest.

    Raises ValidationError("missing required fields") when one of the five
    required fields is absent or empty and ValidationError("invalid date
    range") when the dates do not parse or the end is not after the start.
    """
    if not isinstance(raw, Mapping) or any(_blank(raw.get(k)) for k in REQUIRED_FIELDS):
        raise ValidationError("missing required fields")
    if not isinstance(raw["destination"], str):
        raise ValidationError("invalid destination")

    try:
        start = _to_date(raw["startDate"])
        end = _to_date(raw["endDate"])
    except (TypeError, ValueError):
        raise ValidationError("invalid date range") from None
    if end <= start:
        raise ValidationError("invalid date range")

    try:
        budget = Budget(str(raw["budget"]).strip().lower())
    except ValueError:
        raise ValidationError("invalid budget level") from None
    try:
        pace = Pace(str(raw["pace"]).strip().lower())
    except ValueError:
        raise ValidationError("invalid pace") from None

    return TripRequest(
        destination=raw["destination"].strip(),
        start=start,
        end=end,
        budget=budget,
        pace=pace,
        interests=_interests(raw.get("interests")),
    )
