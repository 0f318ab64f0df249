"""
Gemini client wrapper.

Sends one prompt per call to the generative-language service, normalizes the
response into plain text and translates provider errors into the
ProviderError hierarchy.
"""
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors

from src.config.settings import get_settings
from src.services.gemini.exceptions import (
    ProviderRateLimited,
    ProviderUnavailable,
    ProviderUnknownError,
)

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "⚠️ No reply received from Gemini."
DEFAULT_RETRY_HINT = "a few seconds"


def extract_text(response: Any) -> Optional[str]:
    """
    Return the first candidate's first text part, or None.

    Every level (candidates, content, parts, text) may be missing or empty;
    all of those cases return None.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return None
    text = getattr(parts[0], "text", None)
    if not isinstance(text, str) or not text:
        return None
    return text


def retry_hint(error: errors.APIError) -> str:
    """Pull the RetryInfo delay out of a rate-limit error's details."""
    details = error.details
    if isinstance(details, dict):
        body = details.get("error", details)
        details = body.get("details") if isinstance(body, dict) else None
    if not isinstance(details, list):
        return DEFAULT_RETRY_HINT

    for detail in details:
        if isinstance(detail, dict) and "RetryInfo" in detail.get("@type", ""):
            return detail.get("retryDelay") or DEFAULT_RETRY_HINT
    return DEFAULT_RETRY_HINT


class GeminiClient:
    """Async wrapper around the google-genai SDK."""

    def __init__(self, api_key: str, model: str):
        self.api_key = api_key
        self.model = model
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        # Built on first use so a missing key fails the request, not startup
        if self._client is None:
            if not self.api_key:
                raise ProviderUnknownError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str, fallback: str = DEFAULT_FALLBACK) -> str:
        """
        Generate text for a single prompt.

        Args:
            prompt: Complete prompt text
            fallback: Returned when the response carries no text

        Returns:
            Generated text, never empty

        Raises:
            ProviderUnavailable: Provider is overloaded (503)
            ProviderRateLimited: Provider rate limit exceeded (429)
            ProviderUnknownError: Any other failure
        """
        return await self._generate(prompt, fallback)

    async def generate_from_payload(
        self, payload: Dict[str, Any], fallback: str = DEFAULT_FALLBACK
    ) -> str:
        """Generate text from an opaque client payload.

        Uses ``payload["contents"]`` when given, else the whole payload as JSON.
        """
        if "contents" in payload:
            contents = payload["contents"]
        else:
            contents = json.dumps(payload)
        return await self._generate(contents, fallback)

    async def _generate(self, contents: Any, fallback: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except errors.APIError as e:
            if e.code == 503 or e.status == "UNAVAILABLE":
                logger.warning(f"Gemini unavailable: {e}")
                raise ProviderUnavailable(str(e)) from e
            if e.code == 429 or e.status == "RESOURCE_EXHAUSTED":
                logger.warning(f"Gemini rate limit exceeded: {e}")
                raise ProviderRateLimited(retry_hint(e)) from e
            logger.error(f"Gemini API error: {e}", exc_info=True)
            raise ProviderUnknownError(str(e)) from e
        except ProviderUnknownError:
            logger.error("Gemini client is not configured")
            raise
        except Exception as e:
            logger.error(f"Gemini request failed: {e}", exc_info=True)
            raise ProviderUnknownError(str(e)) from e

        text = extract_text(response)
        if text is None:
            logger.warning("Gemini returned no text, using fallback reply")
            return fallback
        return text


@lru_cache()
def get_gemini_client() -> GeminiClient:
    """Get the process-wide Gemini client."""
    settings = get_settings()
    return GeminiClient(api_key=settings.gemini_api_key, model=settings.gemini_model)
