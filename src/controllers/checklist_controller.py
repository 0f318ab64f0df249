"""
Daily checklist controller.

Produces a fresh task list for a condition, or a remark on how many of
today's tasks the user completed.
"""
import logging

from src.api.models.checklist import ChecklistRequest, ChecklistResponse
from src.controllers.exceptions import EndpointError
from src.services.gemini import DEFAULT_FALLBACK, GeminiClient, ProviderError
from src.services.prompts import (
    CHECKLIST,
    REMARKS,
    ChecklistMode,
    ChecklistRemarks,
    DailyChecklist,
    checklist_prompt,
)

logger = logging.getLogger(__name__)

DISORDER_REQUIRED = "Disorder is required"
INVALID_TYPE = "Invalid type"
TASKS_REQUIRED = "Tasks are required for remarks"
CHECKLIST_FAILED = "Failed to generate checklist or remarks"


class ChecklistController:
    """Controller for checklist and remarks generation."""

    def __init__(self, client: GeminiClient):
        self.client = client

    def _to_mode(self, request: ChecklistRequest) -> ChecklistMode:
        """
        Validate the request and pick the checklist mode.

        Raises:
            EndpointError 400: Missing disorder, unknown type, or remarks
                requested without any tasks
        """
        if not request.disorder:
            raise EndpointError.bad_request("error", DISORDER_REQUIRED)

        if request.type == CHECKLIST:
            return DailyChecklist(disorder=request.disorder)

        if request.type == REMARKS:
            # An empty list would otherwise count as "all done"
            if not request.tasks:
                raise EndpointError.bad_request("error", TASKS_REQUIRED)
            completed = sum(1 for task in request.tasks if task.done)
            return ChecklistRemarks(
                disorder=request.disorder,
                completed=completed,
                total=len(request.tasks),
            )

        raise EndpointError.bad_request("error", INVALID_TYPE)

    async def respond(self, request: ChecklistRequest) -> ChecklistResponse:
        mode = self._to_mode(request)
        try:
            text = await self.client.generate(
                checklist_prompt(mode), fallback=DEFAULT_FALLBACK
            )
        except ProviderError as e:
            logger.error(f"Checklist response error: {e}")
            raise EndpointError.server_error("error", CHECKLIST_FAILED)

        return ChecklistResponse(message=text)
