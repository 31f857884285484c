# tests/test_gemini.py

import pytest
import requests

from ai.gemini import GENERATION_CONFIG, GeminiGateway, extract_text
from conftest import FakeResponse, envelope
from core.config import Settings
from core.errors import ConfigurationError, GatewayError


class RecordingSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


def test_success_returns_reply_text(settings):
    session = RecordingSession(FakeResponse(200, envelope('{"days": []}')))
    text = GeminiGateway(settings, session).generate("plan my trip")

    assert text == '{"days": []}'
    assert len(session.calls) == 1
    url, kwargs = session.calls[0]
    assert url.endswith("/models/gemini-test:generateContent")
    assert kwargs["headers"]["x-goog-api-key"] == "test-key"
    assert kwargs["json"]["contents"] == [{"parts": [{"text": "plan my trip"}]}]
    assert kwargs["json"]["generationConfig"] == {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 8192,
    }
    assert kwargs["timeout"] is None


def test_uses_requests_post_by_default(settings, monkeypatch):
    calls = []

    def fake_post(url, **kwargs):
        calls.append(url)
        return FakeResponse(200, envelope("hello"))

    monkeypatch.setattr(requests, "post", fake_post)
    assert GeminiGateway(settings).generate("hi") == "hello"
    assert len(calls) == 1


def test_http_failure_carries_status_and_body(settings):
    session = RecordingSession(FakeResponse(500, text="upstream exploded"))
    with pytest.raises(GatewayError) as exc:
        GeminiGateway(settings, session).generate("x")

    err = exc.value
    assert err.status == 500
    assert err.details == "upstream exploded"
    assert err.http_status == 503
    assert err.to_payload() == {"error": "AI service unavailable", "status": 500, "details": "upstream exploded"}


def test_transport_error(settings):
    session = RecordingSession(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(GatewayError) as exc:
        GeminiGateway(settings, session).generate("x")
    assert exc.value.status is None
    assert exc.value.http_status == 503
    assert "connection refused" in exc.value.details


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"promptFeedback": {"blockReason": "SAFETY"}},
    ],
)
def test_success_without_reply_text(settings, body):
    session = RecordingSession(FakeResponse(200, body))
    with pytest.raises(GatewayError, match="no response from AI") as exc:
        GeminiGateway(settings, session).generate("x")
    assert exc.value.empty_reply
    assert exc.value.http_status == 500
    assert exc.value.to_payload() == {"error": "No response from AI", "details": body}


def test_success_with_non_json_body(settings):
    session = RecordingSession(FakeResponse(200, None, text="<html>oops</html>"))
    with pytest.raises(GatewayError) as exc:
        GeminiGateway(settings, session).generate("x")
    assert exc.value.empty_reply
    assert exc.value.details == "<html>oops</html>"


def test_missing_api_key_makes_no_call():
    session = RecordingSession(FakeResponse(200, envelope("x")))
    with pytest.raises(ConfigurationError):
        GeminiGateway(Settings(gemini_api_key=""), session).generate("x")
    assert session.calls == []


def test_timeout_is_passed_through():
    session = RecordingSession(FakeResponse(200, envelope("x")))
    GeminiGateway(Settings(gemini_api_key="k", gemini_timeout=30), session).generate("x")
    assert session.calls[0][1]["timeout"] == 30


def test_extract_text_handles_non_dict():
    assert extract_text("not an envelope") is None
    assert extract_text(None) is None
    assert GENERATION_CONFIG["maxOutputTokens"] == 8192


@pytest.mark.parametrize("status", [301, 302, 304])
def test_redirect_is_a_transport_failure(settings, status):
    # requests counts 3xx as ok; the endpoint only answers with 2xx
    session = RecordingSession(FakeResponse(status, text=""))
    with pytest.raises(GatewayError) as exc:
        GeminiGateway(settings, session).generate("x")

    assert exc.value.status == status
    assert not exc.value.empty_reply
    assert exc.value.http_status == 503
