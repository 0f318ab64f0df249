"""
Controller for the raw generation endpoint.
"""
import logging
from typing import Any, Dict

from fastapi import status

from src.api.models.chat import ChatResponse
from src.controllers.exceptions import EndpointError
from src.services.gemini import GeminiClient, ProviderError, ProviderRateLimited

logger = logging.getLogger(__name__)


class GenerateController:
    """Forwards an opaque client payload to Gemini."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def generate(self, payload: Dict[str, Any]) -> ChatResponse:
        """
        Raises:
            EndpointError 429: Rate limit exceeded, with the provider's retry hint
            EndpointError 500: Any other failure
        """
        try:
            reply = await self.client.generate_from_payload(payload)
        except ProviderRateLimited as e:
            raise EndpointError(
                status.HTTP_429_TOO_MANY_REQUESTS,
                "error",
                f"Rate limit exceeded. Try again after {e.retry_after}.",
            )
        except ProviderError as e:
            logger.error(f"Gemini API error: {e}")
            raise EndpointError.server_error("error", "Internal Server Error")

        return ChatResponse(reply=reply)
