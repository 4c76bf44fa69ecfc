# config.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str):
    value = os.environ.get(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, value)
        return None


def _env_int(name: str, default: int = 0) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, value)
        return default


class Config:
    # Gemini
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
    GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
    GEMINI_API_URL = os.environ.get(
        "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models"
    )
    GEMINI_TIMEOUT = _env_float("GEMINI_TIMEOUT")  # None = transport default

    # Rate limiting (read by Flask-Limiter). Only /api/generate is limited.
    GENERATE_RATE_LIMIT = os.environ.get("GENERATE_RATE_LIMIT", "10 per 10 minutes")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_STRATEGY = "fixed-window"
    RATELIMIT_ENABLED = os.environ.get("RATELIMIT_ENABLED", "true").lower() in ("true", "1", "yes")

    # Number of reverse proxies whose X-Forwarded-For entry is trusted (0 = ignore the header)
    TRUSTED_PROXIES = _env_int("TRUSTED_PROXIES")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")
