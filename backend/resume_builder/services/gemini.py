"""
Gemini client wrapper.

Sends a single string prompt to the configured model and returns the
response text. There is no retry or backoff: any SDK failure is raised
to the caller as an ``AIServiceError``.
"""
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from ..config import get_settings
from ..exceptions import AIServiceError

logger = logging.getLogger(__name__)


def extract_response_text(response: Any) -> str:
    """
    Return the text of a generate_content response.

    ``response.text`` is the usual accessor; when it is missing (no text
    parts, or an unexpected response object) fall back to the parts of the
    first candidate.
    """
    text = getattr(response, "text", None)
    if isinstance(text, str):
        return text

    try:
        parts = response.candidates[0].content.parts
    except (AttributeError, IndexError, TypeError):
        return ""
    return "".join(getattr(part, "text", None) or "" for part in parts or [])


class GeminiClient:
    """Thin adapter over ``google.genai.Client`` bound to one model."""

    def __init__(self, api_key: str, model: str, client: Optional[genai.Client] = None):
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    async def generate(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        config = None
        if temperature is not None or max_output_tokens is not None:
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            )

        logger.debug(f"Calling {self.model} with a {len(prompt)} character prompt")
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise AIServiceError(str(e)) from e

        return extract_response_text(response)


_ai_client: Optional[GeminiClient] = None


def get_ai_client() -> GeminiClient:
    """FastAPI dependency: the process-wide Gemini client, created on first use."""
    global _ai_client
    if _ai_client is None:
        settings = get_settings()
        _ai_client = GeminiClient(api_key=settings.gemini_api_key, model=settings.gemini_model)
    return _ai_client
