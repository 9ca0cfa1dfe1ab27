"""Recover a JSON payload from raw model text.

Steps, in order:
1. drop a leading ```` ``` ```` / ```` ```json ```` fence opener
2. drop a trailing ```` ``` ```` fence closer
3. slice from the first open delimiter to the last close delimiter
4. otherwise leave the fence-stripped text alone

The boundary scan is plain index arithmetic. A payload whose last string value
contains the close delimiter can be mis-trimmed; callers see that as a
``ParseError`` like any other bad output.
"""

import json
import logging
import re
from typing import Any, Literal

from services.ai_output.errors import ParseError

logger = logging.getLogger(__name__)

Shape = Literal["object", "array"]

_FENCE_OPEN_RE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\s*```\s*$")

DELIMITERS: dict[str, tuple[str, str]] = {
    "object": ("{", "}"),
    "array": ("[", "]"),
}


def strip_fences(raw: str) -> str:
    """Remove a leading fence opener and a trailing fence closer."""
    if not raw:
        return ""
    text = raw.strip()
    text = _FENCE_OPEN_RE.sub("", text, count=1)
    text = _FENCE_CLOSE_RE.sub("", text, count=1)
    return text.strip()


def extract_boundaries(text: str, shape: Shape = "object") -> str:
    """Slice ``text`` to the span between the first open and last close delimiter."""
    open_char, close_char = DELIMITERS[shape]
    start = text.find(open_char)
    end = text.rfind(close_char)
    if start != -1 and end != -1 and end > start:
        return text[start : end + 1]
    return text


def strip_fences_and_boundaries(raw: str, shape: Shape = "object") -> str:
    return extract_boundaries(strip_fences(raw), shape)


def snippet(raw: str | None, limit: int) -> str:
    """Size-capped copy of raw model output for errors and logs."""
    if not raw:
        return ""
    return raw[:limit]


def normalize_and_parse(raw: str, shape: Shape = "object", snippet_chars: int = 5000) -> Any:
    """Strip ``raw`` and decode it as JSON. Raises ``ParseError`` on failure."""
    cleaned = strip_fences_and_boundaries(raw or "", shape)
    if not cleaned:
        raise ParseError("AI response was empty", raw_snippet="")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.debug("JSON decode failed at pos %d: %s", e.pos, cleaned[:200])
        raise ParseError(f"AI response is not valid JSON: {e.msg}", raw_snippet=snippet(raw, snippet_chars)) from e
