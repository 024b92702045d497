"""Configuration settings for the workout speech API."""
import logging
import os
from typing import List, Literal


logger = logging.getLogger(__name__)

EnvironmentType = Literal["development", "staging", "production"]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Parsing
    MAX_TRANSCRIPT_CHARS: int = 5000
    AUTO_ACCEPT_CONFIDENCE: float = 0.7

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Parsing
        self.MAX_TRANSCRIPT_CHARS = _env_int("MAX_TRANSCRIPT_CHARS", 5000)
        self.AUTO_ACCEPT_CONFIDENCE = _env_float("AUTO_ACCEPT_CONFIDENCE", 0.7)

        # HTTP
        origins = os.getenv("CORS_ORIGINS")
        if origins:
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]


settings = Settings()
