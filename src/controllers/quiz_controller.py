"""
Quiz controller: generates questions or evaluates submitted answers.
"""
import logging

from src.api.models.chat import ChatResponse
from src.api.models.quiz import QuizRequest
from src.controllers.exceptions import EndpointError
from src.services.gemini import DEFAULT_FALLBACK, GeminiClient, ProviderError
from src.services.prompts import quiz_prompt

logger = logging.getLogger(__name__)

QUIZ_FAILED = "⚠️ Failed to generate quiz."


class QuizController:
    """Controller for quiz operations."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def quiz(self, request: QuizRequest) -> ChatResponse:
        """
        Generate quiz questions, or score answers when they are supplied.

        Raises:
            EndpointError 500: If generation fails for any reason
        """
        prompt = quiz_prompt(request.to_mode())
        try:
            reply = await self.client.generate(prompt, fallback=DEFAULT_FALLBACK)
        except ProviderError as e:
            logger.error(f"Quiz API error: {e}")
            raise EndpointError.server_error("reply", QUIZ_FAILED)

        return ChatResponse(reply=reply)
