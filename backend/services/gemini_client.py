"""Google Gemini API wrapper with error classification."""

import logging

from google import genai
from google.genai import errors, types

from config import settings
from services.ai_output.errors import AIInvocationError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=settings.gemini_timeout_seconds * 1000),
        )
    return _client


async def generate_text(prompt: str) -> str:
    """Send a prompt to Gemini and return the raw response text.

    The text is returned untouched (it may be fenced or wrapped in prose).
    Failures of the call itself raise ``AIInvocationError``.
    """
    client = get_client()
    if client is None:
        raise AIInvocationError("GEMINI_API_KEY is not set", kind="configuration")

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )
    except errors.ClientError as e:
        logger.error("Gemini rejected the request (%s): %s", e.code, e.message)
        raise AIInvocationError(f"Gemini client error {e.code}: {e.message}", kind="client") from e
    except errors.ServerError as e:
        logger.error("Gemini server error (%s): %s", e.code, e.message)
        raise AIInvocationError(f"Gemini server error {e.code}: {e.message}", kind="server") from e
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise AIInvocationError(f"Gemini API error: {e}", kind="network") from e

    return response.text or ""
