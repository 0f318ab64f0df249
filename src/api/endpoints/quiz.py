"""
Quiz endpoint.
"""
from fastapi import APIRouter, Depends, status

from src.api.models import ChatResponse, QuizRequest, ReplyErrorResponse
from src.controllers.quiz_controller import QuizController
from src.services.gemini import GeminiClient, get_gemini_client


def get_quiz_controller(
    client: GeminiClient = Depends(get_gemini_client),
) -> QuizController:
    """Dependency injection for QuizController."""
    return QuizController(client)


router = APIRouter()


@router.post(
    "/quiz",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        500: {"model": ReplyErrorResponse, "description": "Quiz generation failed"},
    },
)
async def quiz(
    request: QuizRequest,
    controller: QuizController = Depends(get_quiz_controller),
) -> ChatResponse:
    """
    Generate or evaluate a quiz.

    Without `answers` the reply is a numbered list of 10 yes/no questions.
    With `answers` the reply is a score out of 100 and a recommendation, plus
    possible conditions for the general diagnosis quiz.
    """
    return await controller.quiz(request)
