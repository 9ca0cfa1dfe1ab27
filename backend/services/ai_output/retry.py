"""Bounded retry around "generate -> strip -> parse -> validate".

Attempts run strictly one after another; every attempt owns nothing but local
variables, so concurrent requests never share retry state.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from config import settings
from services.ai_output.errors import (
    AIInvocationError,
    ParseError,
    RetryExhaustedError,
    ValidationError,
)
from services.ai_output.shapes import ShapeDescriptor, validate
from services.ai_output.stripper import normalize_and_parse, snippet

logger = logging.getLogger(__name__)

TextGenerator = Callable[[str], Awaitable[str]]


async def run_with_retry(
    generate: TextGenerator,
    prompt: str,
    descriptor: ShapeDescriptor,
    max_attempts: int,
    *,
    escalation_prompt: str | None = None,
    snippet_chars: int | None = None,
) -> Any:
    """Call ``generate`` until its output validates or ``max_attempts`` calls are spent.

    ``escalation_prompt`` replaces ``prompt`` from the second attempt on.
    Raises ``RetryExhaustedError`` carrying the last error and a capped copy of
    the last raw text.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    if snippet_chars is None:
        snippet_chars = settings.raw_snippet_chars

    last_error: Exception | None = None
    last_raw = ""

    for attempt in range(max_attempts):
        current_prompt = prompt if attempt == 0 or not escalation_prompt else escalation_prompt
        raw = None
        try:
            raw = await generate(current_prompt)
            parsed = normalize_and_parse(raw, descriptor.shape, snippet_chars)
            outcome = validate(parsed, descriptor)
            if not outcome.passed:
                raise ValidationError(outcome.reason, outcome.missing)
        except (AIInvocationError, ParseError, ValidationError) as e:
            last_error = e
            if raw is not None:
                last_raw = raw
            logger.warning(
                "AI attempt %d/%d failed (%s): %s",
                attempt + 1, max_attempts, type(e).__name__, e,
            )
            if raw:
                logger.debug("Raw AI output (attempt %d): %s", attempt + 1, raw[:500])
            continue

        if outcome.dropped:
            logger.info("Dropped %d invalid item(s) from AI response", outcome.dropped)
        if attempt:
            logger.info("AI output accepted on attempt %d/%d", attempt + 1, max_attempts)
        return outcome.value

    logger.error("All %d AI attempts failed: %s", max_attempts, last_error)
    raise RetryExhaustedError(max_attempts, last_error, snippet(last_raw, snippet_chars))
