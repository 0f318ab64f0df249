"""
Raw generation endpoint.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from src.api.models import ChatResponse, ErrorResponse
from src.controllers.generate_controller import GenerateController
from src.services.gemini import GeminiClient, get_gemini_client


def get_generate_controller(
    client: GeminiClient = Depends(get_gemini_client),
) -> GenerateController:
    """Dependency injection for GenerateController."""
    return GenerateController(client)


router = APIRouter()


@router.post(
    "/generate",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def generate(
    payload: Dict[str, Any] = Body(...),
    controller: GenerateController = Depends(get_generate_controller),
) -> ChatResponse:
    """Forward the request body to Gemini and return the generated text."""
    return await controller.generate(payload)
