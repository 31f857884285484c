# ai/prompt.py
# ------------------------------------------------------------------------------
import textwrap
from typing import Sequence

from core.models import TripRequest

# ──────────────────────────────────────────────────────────────────────────────
# Prompt template – day-by-day itinerary as strict JSON
# ──────────────────────────────────────────────────────────────────────────────
_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    You are a professional travel planner. Create a detailed {day_count}-day itinerary for {destination}.

    Trip Details:
    - Destination: {destination}
    - Dates: {start} to {end} ({day_count} days)
    - Budget: {budget}
    - Pace: {pace}
    - Interests: {interests}

    Create activities appropriate for the budget level:
    - Low budget: Free/cheap activities, local food, public transport
    - Medium budget: Mix of paid attractions, good restaurants, some tours
    - High budget: Premium experiences, fine dining, private tours

    Activity count per day based on pace:
    - Relaxed: 2-3 activities per day
    - Balanced: 4-5 activities per day
    - Fast: 6+ activities per day

    CRITICAL: You MUST respond with ONLY valid JSON in this exact format (no other text):
    {{
      "days": [
        {{
          "date": "{first_date}",
          "activities": [
            {{
              "time": "09:00",
              "title": "Activity Name",
              "description": "Detailed description of the activity"
            }}
          ]
        }}
      ]
    }}

    Include realistic times (use 24-hour format like "09:00", "14:30"). Make sure each day has activities from morning to evening. Include specific locations, restaurants, and attractions in {destination}."""
)


def build_prompt(req: TripRequest, dates: Sequence[str]) -> str:
    """Return the itinerary prompt for ``req``; ``dates`` comes from the planner."""
    return _PROMPT_TEMPLATE.format(
        destination=req.destination,
        start=req.start.isoformat(),
        end=req.end.isoformat(),
        day_count=len(dates),
        budget=req.budget.value,
        pace=req.pace.value,
        interests=", ".join(req.interests) or "none specified",
        first_date=dates[0],
    )
