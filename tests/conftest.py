# tests/conftest.py

import json

import pytest

from core.config import Settings


class FakeGateway:
    """Stands in for GeminiGateway: returns canned replies, records prompts."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    # same rule as requests.Response.ok: anything below 400, redirects included
    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


def envelope(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def tokyo_payload():
    return {
        "destination": "Tokyo",
        "startDate": "2025-06-01",
        "endDate": "2025-06-03",
        "budget": "medium",
        "pace": "balanced",
        "interests": ["food"],
    }


@pytest.fixture
def tokyo_reply():
    days = [
        {
            "date": "2025-06-01",
            "activities": [
                {"time": "09:00", "title": "Tsukiji Outer Market", "description": "Breakfast sushi"},
                {"time": "14:00", "title": "Senso-ji", "description": "Temple walk in Asakusa"},
            ],
        },
        {
            "date": "2025-06-02",
            "activities": [
                {"time": "10:00", "title": "Meiji Jingu", "description": "Shrine and forest"},
                {"time": "19:30", "title": "Omoide Yokocho", "description": "Yakitori alley"},
            ],
        },
    ]
    return "```json\n" + json.dumps({"days": days}, indent=2) + "\n```"


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", gemini_model="gemini-test")
