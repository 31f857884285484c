# core/result.py

from dataclasses import dataclass
from typing import Any, Union

from core.errors import TripPlannerError


@dataclass(frozen=True)
class Ok:
    value: Any
    ok = True


@dataclass(frozen=True)
class Err:
    error: TripPlannerError
    ok = False


Result = Union[Ok, Err]
