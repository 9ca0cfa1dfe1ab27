"""Shared dependencies for API routes."""

from collections.abc import AsyncIterator

import httpx

from config import settings
from services.ai_output.retry import TextGenerator
from services.gemini_client import generate_text
from services.link_validator import TRUSTED_DOMAINS, LinkValidator


def get_text_generator() -> TextGenerator:
    return generate_text


async def get_link_validator() -> AsyncIterator[LinkValidator]:
    async with httpx.AsyncClient(timeout=settings.link_check_timeout_seconds) as client:
        yield LinkValidator(client, TRUSTED_DOMAINS)
