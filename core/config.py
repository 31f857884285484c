# core/config.py

import logging
import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash-latest"


class Settings(BaseModel):
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    gemini_api_base: str = DEFAULT_API_BASE
    # None → no timeout on the outbound call
    gemini_timeout: Optional[float] = None
    log_level: str = "INFO"

    @property
    def generate_url(self) -> str:
        return f"{self.gemini_api_base.rstrip('/')}/models/{self.gemini_model}:generateContent"


def get_settings() -> Settings:
    """Read settings from the environment (call ``load_dotenv()`` first)."""
    timeout = os.getenv("GEMINI_TIMEOUT")
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_api_base=os.getenv("GEMINI_API_BASE", DEFAULT_API_BASE),
        gemini_timeout=float(timeout) if timeout else None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO", handlers: Optional[list] = None) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s" if handlers else "%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
