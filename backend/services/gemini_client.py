"""Google Gemini API wrapper with timeout and error handling."""

import asyncio
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def generate_text(
    prompt: str,
    system_instruction: str | None = None,
    timeout: float | None = None,
) -> str | None:
    """Send a prompt to Gemini and return the raw response text.

    Returns None when the client is not configured, the call fails or it
    exceeds `timeout` seconds. Task cancellation is not swallowed, so an
    abandoned request aborts the outbound call.
    """
    client = get_client()
    if client is None:
        return None

    timeout = settings.evaluation_timeout_seconds if timeout is None else timeout
    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    temperature=settings.gemini_temperature,
                    max_output_tokens=settings.gemini_max_output_tokens,
                ),
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.error("Gemini request timed out after %.1fs", timeout)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    text = response.text
    if not text:
        logger.warning("Gemini returned an empty response")
        return None
    return text
