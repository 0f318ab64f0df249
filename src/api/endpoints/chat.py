"""
Counsellor chat endpoints.

Provides the plain relay chat, the general counsellor and the specialised
counsellor. All three answer with a `reply` field, errors included.
"""
from fastapi import APIRouter, Depends, status

from src.api.models import (
    ChatRequest,
    ChatResponse,
    ReplyErrorResponse,
    SpecialisedChatRequest,
)
from src.controllers.chat_controller import ChatController
from src.services.gemini import GeminiClient, get_gemini_client

# ============================================================================
# Dependency Injection
# ============================================================================


def get_chat_controller(
    client: GeminiClient = Depends(get_gemini_client),
) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(client)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()

_PROVIDER_ERRORS = {
    500: {"model": ReplyErrorResponse, "description": "Generation failed"},
    503: {"model": ReplyErrorResponse, "description": "Gemini is overloaded"},
}


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses=_PROVIDER_ERRORS,
)
async def chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """Send the user's message to Gemini as-is and return the reply."""
    return await controller.chat(request)


@router.post(
    "/general-chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ReplyErrorResponse, "description": "Empty message"},
        **_PROVIDER_ERRORS,
    },
)
async def general_chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Empathetic counsellor reply.

    The model names the likely condition, answers the user and refers them
    to one professional from the roster with a link to their profile.
    """
    return await controller.general_chat(request)


@router.post(
    "/specialised-chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ReplyErrorResponse, "description": "Missing disorder or message"},
        **_PROVIDER_ERRORS,
    },
)
async def specialised_chat(
    request: SpecialisedChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """Counsellor reply focused on the condition the user selected."""
    return await controller.specialised_chat(request)
