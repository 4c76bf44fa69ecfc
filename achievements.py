# achievements.py
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import gemini_client
from errors import ValidationError

logger = logging.getLogger(__name__)

# CONFIG
MAX_FIELD_LEN = 32
DEFAULT_MAX_LEN = 64
MIN_COUNT = 1
MAX_COUNT = 10
DEFAULT_COUNT = 5
DEFAULT_ABSURDITY = "Medium"
DEFAULT_LANGUAGE = "en"
ABSURDITY_TEMPERATURES = {"Low": 0.4, "Medium": 0.7, "High": 1.2}
UNLOCK_MARKER = "unlocked:"

_DISALLOWED = re.compile(r"[^\w\s\-.,'!]", re.ASCII)
_LINE_BREAKS = re.compile(r"\n+")


@dataclass(frozen=True)
class GenerationRequest:
    name: str
    category: str
    count: int = DEFAULT_COUNT
    absurdity: str = DEFAULT_ABSURDITY
    language: str = DEFAULT_LANGUAGE
    language_prompt: str = ""

    @property
    def temperature(self) -> float:
        return ABSURDITY_TEMPERATURES[self.absurdity]


# HELPERS
def sanitize(s: str, max_len: int = DEFAULT_MAX_LEN) -> str:
    """Drop characters outside the allow-set, trim, and cap the length.

    The result is trimmed again after truncation so that sanitizing an
    already-sanitized string returns it unchanged.
    """
    if not s:
        return ""
    return _DISALLOWED.sub("", s).strip()[:max_len].rstrip()


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def coerce_count(value: Any) -> int:
    """Numbers (or numeric strings) within [1, 10] pass; anything else becomes the default."""
    if isinstance(value, bool):
        return DEFAULT_COUNT
    try:
        count = float(value)
    except (TypeError, ValueError):
        return DEFAULT_COUNT
    if not MIN_COUNT <= count <= MAX_COUNT:
        return DEFAULT_COUNT
    return int(count)


def coerce_absurdity(value: Any) -> str:
    if isinstance(value, str) and value in ABSURDITY_TEMPERATURES:
        return value
    return DEFAULT_ABSURDITY


def build_request(payload: Dict[str, Any]) -> GenerationRequest:
    """Sanitize and coerce a raw JSON payload. Raises ValidationError on empty name/category."""
    name = sanitize(_as_text(payload.get("name")), MAX_FIELD_LEN)
    category = sanitize(_as_text(payload.get("category")), MAX_FIELD_LEN)
    if not name or not category:
        raise ValidationError("name and category must be non-empty after sanitization")

    return GenerationRequest(
        name=name,
        category=category,
        count=coerce_count(payload.get("number")),
        absurdity=coerce_absurdity(payload.get("absurdity")),
        language=_as_text(payload.get("language")) or DEFAULT_LANGUAGE,
        language_prompt=sanitize(_as_text(payload.get("languagePrompt")), MAX_FIELD_LEN),
    )


# PROMPT
def build_prompt(req: GenerationRequest) -> str:
    prompt = ""
    if req.language_prompt and req.language != DEFAULT_LANGUAGE:
        prompt += f"ALL OUTPUT MUST BE IN {req.language_prompt.upper()}.\n"
    prompt += (
        f"Generate {req.count} funny, absurd and ridiculous achievements in the format:\n"
        f'"{req.name} unlocked: [ACHIEVEMENT NAME] — [DESCRIPTION]"\n'
        f'Make the achievements themed around "{req.category}" and tailored to the '
        f'selected absurdity level: "{req.absurdity}".\n'
        "Make them creative, funny, and shareable. Do not use markdown or asterisks for bold. "
        "Output in plain text only."
    )
    return prompt


# PARSER
def parse_achievements(raw_text: Optional[str]) -> List[str]:
    if not raw_text:
        return []
    lines = (line.strip() for line in _LINE_BREAKS.split(raw_text))
    return [line for line in lines if line and UNLOCK_MARKER in line]


# FLASK WEB WRAPPER
def generate_web(
    payload: Dict[str, Any],
    api_key: Optional[str],
    model: str = gemini_client.DEFAULT_MODEL,
    api_url: str = gemini_client.DEFAULT_API_URL,
    timeout: Optional[float] = None,
) -> Dict[str, List[str]]:
    req = build_request(payload)
    logger.info(
        "Generating %d achievement(s) for name=%r category=%r absurdity=%s language=%s",
        req.count, req.name, req.category, req.absurdity, req.language,
    )

    prompt = build_prompt(req)
    raw_text = gemini_client.generate(
        prompt,
        req.temperature,
        api_key=api_key,
        model=model,
        api_url=api_url,
        timeout=timeout,
    )

    achievements = parse_achievements(raw_text)
    if not achievements:
        logger.warning("Upstream returned no usable achievement lines")
    logger.info("Returning %d achievement(s)", len(achievements))
    return {"achievements": achievements}
