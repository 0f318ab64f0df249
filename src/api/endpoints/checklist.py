"""
Daily checklist endpoint.
"""
from fastapi import APIRouter, Depends, status

from src.api.models import ChecklistRequest, ChecklistResponse, ErrorResponse
from src.controllers.checklist_controller import ChecklistController
from src.services.gemini import GeminiClient, get_gemini_client


def get_checklist_controller(
    client: GeminiClient = Depends(get_gemini_client),
) -> ChecklistController:
    """Dependency injection for ChecklistController."""
    return ChecklistController(client)


router = APIRouter()


@router.post(
    "/checklist-response",
    status_code=status.HTTP_200_OK,
    response_model=ChecklistResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing disorder, invalid type or no tasks"},
        500: {"model": ErrorResponse, "description": "Generation failed"},
    },
)
async def checklist_response(
    request: ChecklistRequest,
    controller: ChecklistController = Depends(get_checklist_controller),
) -> ChecklistResponse:
    """
    Five daily tasks for a condition (`type="checklist"`), or a remark on
    today's completed tasks (`type="remarks"`).
    """
    return await controller.respond(request)
