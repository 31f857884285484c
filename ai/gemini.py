# ai/gemini.py
# ------------------------------------------------------------------------------
import logging
from typing import Any, Optional

import requests

from core.config import Settings, get_settings
from core.errors import ConfigurationError, GatewayError

logger = logging.getLogger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}


def build_payload(prompt: str) -> dict:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": dict(GENERATION_CONFIG),
    }


def extract_text(envelope: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None if any level is missing."""
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


# ──────────────────────────────────────────────────────────────────────────────
# Gateway to the Gemini generateContent endpoint
# ──────────────────────────────────────────────────────────────────────────────
class GeminiGateway:
    """
    Sends one prompt to Gemini and returns the raw reply text.

    A single POST per call, no retry. Failures are raised as GatewayError:
    non-2xx responses (redirects included) and transport errors carry the
    upstream status/body, a 2xx without reply text carries the whole envelope.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Any = None):
        self.settings = settings or get_settings()
        self.session = session or requests

    def generate(self, prompt: str) -> str:
        api_key = self.settings.gemini_api_key
        if not api_key:
            raise ConfigurationError("Environment variable GEMINI_API_KEY is missing.")

        url = self.settings.generate_url
        logger.info("Calling %s (%d prompt chars)", self.settings.gemini_model, len(prompt))
        try:
            r = self.session.post(
                url,
                json=build_payload(prompt),
                headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
                timeout=self.settings.gemini_timeout,
            )
        except requests.RequestException as e:
            logger.error("Gemini request failed: %s", e)
            raise GatewayError(f"request to {url} failed", status=None, details=str(e)) from e

        if not 200 <= r.status_code < 300:
            logger.error("Gemini API error: %s %s", r.status_code, r.text)
            raise GatewayError(
                f"Gemini returned HTTP {r.status_code}",
                status=r.status_code,
                details=r.text,
            )

        try:
            envelope = r.json()
        except ValueError:
            envelope = r.text
        text = extract_text(envelope)
        if text is None:
            logger.error("No response from AI. Gemini raw response: %s", envelope)
            raise GatewayError("no response from AI", status=r.status_code, details=envelope, empty_reply=True)
        return text
