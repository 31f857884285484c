# core/models.py

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List

from core.planner import day_count


class Budget(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Pace(str, Enum):
    RELAXED = "relaxed"
    BALANCED = "balanced"
    FAST = "fast"


@dataclass
class TripRequest:
    destination: str
    start: date
    end: date
    budget: Budget
    pace: Pace
    interests: List[str] = field(default_factory=list)

    @property
    def day_count(self) -> int:
        return day_count(self.start, self.end)

    def to_payload(self) -> dict:
        """Wire shape of the request, as posted by the form and by regenerate."""
        return {
            "destination": self.destination,
            "startDate": self.start.isoformat(),
            "endDate": self.end.isoformat(),
            "budget": self.budget.value,
            "pace": self.pace.value,
            "interests": list(self.interests),
        }


@dataclass
class Activity:
    time: str
    title: str
    description: str = ""


@dataclass
class Day:
    date: str
    activities: List[Activity] = field(default_factory=list)


@dataclass
class Itinerary:
    days: List[Day] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "Itinerary":
        """
        Typed view over a shape-checked payload. Only ``days`` is guaranteed
        by the parser; a day or activity missing a field raises here.
        """
        return cls(
            days=[
                Day(
                    date=d["date"],
                    activities=[
                        Activity(
                            time=a["time"],
                            title=a["title"],
                            description=a.get("description", ""),
                        )
                        for a in d.get("activities") or []
                    ],
                )
                for d in payload["days"]
            ]
        )
