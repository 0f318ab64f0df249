"""
Counsellor chat controller.

Handles the plain relay chat, the general counsellor that infers the
condition, and the specialised counsellor for a chosen condition.
"""
import logging
from dataclasses import dataclass

from fastapi import status

from src.api.models.chat import ChatRequest, ChatResponse, SpecialisedChatRequest
from src.controllers.exceptions import EndpointError
from src.services.gemini import (
    DEFAULT_FALLBACK,
    GeminiClient,
    ProviderError,
    ProviderUnavailable,
)
from src.services.prompts import general_chat_prompt, specialised_chat_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplyMessages:
    """User-facing strings for one chat endpoint."""

    fallback: str
    busy: str
    failed: str


CHAT_MESSAGES = ReplyMessages(
    fallback=DEFAULT_FALLBACK,
    busy="⚠️ Gemini servers are busy, please try again later.",
    failed="⚠️ Sorry, something went wrong on the server.",
)

GENERAL_CHAT_MESSAGES = ReplyMessages(
    fallback="⚠️ Sorry, I couldn't process that. Please try again.",
    busy="⚠️ Gemini servers are busy, try again later.",
    failed="⚠️ Something went wrong on the server.",
)

EMPTY_MESSAGE = "⚠️ Message cannot be empty."
MISSING_SPECIALISED_FIELDS = "❌ Disorder and message are required."


class ChatController:
    """Controller for counsellor chat operations."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """Relay the user's message to Gemini without a template."""
        return await self._reply(request.message or "", CHAT_MESSAGES, "Chat")

    async def general_chat(self, request: ChatRequest) -> ChatResponse:
        """
        Counsel the user and refer them to a professional.

        Raises:
            EndpointError 400: If the message is missing or blank
        """
        if not request.message or not request.message.strip():
            raise EndpointError.bad_request("reply", EMPTY_MESSAGE)

        prompt = general_chat_prompt(request.message)
        return await self._reply(prompt, GENERAL_CHAT_MESSAGES, "General chat")

    async def specialised_chat(self, request: SpecialisedChatRequest) -> ChatResponse:
        """
        Counsel the user about the condition they selected.

        Raises:
            EndpointError 400: If disorder or message is missing
        """
        if not request.disorder or not request.message:
            raise EndpointError.bad_request("reply", MISSING_SPECIALISED_FIELDS)

        prompt = specialised_chat_prompt(request.disorder, request.message)
        return await self._reply(prompt, CHAT_MESSAGES, "Specialised chat")

    async def _reply(
        self, prompt: str, messages: ReplyMessages, label: str
    ) -> ChatResponse:
        try:
            reply = await self.client.generate(prompt, fallback=messages.fallback)
        except ProviderUnavailable:
            raise EndpointError(
                status.HTTP_503_SERVICE_UNAVAILABLE, "reply", messages.busy
            )
        except ProviderError as e:
            logger.error(f"{label} error: {e}")
            raise EndpointError.server_error("reply", messages.failed)

        return ChatResponse(reply=reply)
