# core/planner.py

import datetime as dt
import math

from core.errors import ValidationError

_ONE_DAY = dt.timedelta(days=1)


def day_count(start: dt.date, end: dt.date) -> int:
    """Number of itinerary days between ``start`` and ``end`` (end excluded)."""
    return math.ceil((end - start) / _ONE_DAY)


def expand_dates(start: dt.date, n: int) -> list[str]:
    """
    Return ``n`` consecutive ISO dates beginning at ``start``.

    Works on calendar dates only, so the result never depends on the local
    time zone.
    """
    if n <= 0:
        raise ValidationError("invalid date range")
    if isinstance(start, dt.datetime):
        start = start.date()
    return [(start + i * _ONE_DAY).isoformat() for i in range(n)]


def plan_dates(req) -> list[str]:
    return expand_dates(req.start, req.day_count)
