# gemini_client.py
"""
Thin client for the Gemini ``generateContent`` REST endpoint.

One call per ``generate``; no retries. Failures surface as
``ConfigurationError`` (no credential, raised before any network I/O)
or ``UpstreamError`` (transport error, HTTP error status, undecodable body).
"""
import logging
from typing import Any, Optional

import requests

from errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"


def build_url(api_url: str, model: str) -> str:
    return f"{api_url.rstrip('/')}/{model}:generateContent"


def extract_text(data: Any) -> str:
    """Text of the first candidate's first part, or "" when the structure is missing or odd."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def generate(
    prompt: str,
    temperature: float,
    api_key: Optional[str] = None,
    model: str = DEFAULT_MODEL,
    api_url: str = DEFAULT_API_URL,
    timeout: Optional[float] = None,
) -> str:
    if not api_key:
        logger.warning("GEMINI_API_KEY is not configured")
        raise ConfigurationError("GEMINI_API_KEY is not set")

    body = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {"temperature": temperature},
    }
    headers = {"Content-Type": "application/json", "x-goog-api-key": api_key}

    try:
        resp = requests.post(build_url(api_url, model), json=body, headers=headers, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.HTTPError as e:
        logger.error("Gemini API returned an error status: %s", e)
        raise UpstreamError(f"HTTP error from Gemini: {e}") from e
    except ValueError as e:
        # requests' JSONDecodeError is both a ValueError and a RequestException
        logger.error("Gemini API returned a non-JSON body: %s", e)
        raise UpstreamError("Malformed response body from Gemini") from e
    except requests.RequestException as e:
        logger.error("Gemini API request failed: %s", e)
        raise UpstreamError(f"Network error calling Gemini: {e}") from e

    logger.debug("Gemini API response: %s", data)
    return extract_text(data)
