"""
Request and response models for the daily checklist endpoint.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class ChecklistTask(BaseModel):
    """A task shown to the user, and whether they ticked it."""
    done: bool = False


class ChecklistRequest(BaseModel):
    """Payload for checklist generation or completion remarks.

    - disorder: Condition the checklist is for
    - type: "checklist" for new tasks, "remarks" for feedback on progress
    - tasks: Today's tasks, required for remarks
    """
    disorder: Optional[str] = None
    type: Optional[str] = Field(None, examples=["checklist", "remarks"])
    tasks: Optional[List[ChecklistTask]] = None


class ChecklistResponse(BaseModel):
    message: str
