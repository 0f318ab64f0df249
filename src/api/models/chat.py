"""
Request and response models for counsellor chat endpoints.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Payload for the plain and general chat endpoints.

    Field presence is checked by the controller so a missing message gets
    the endpoint's own 400 reply instead of a schema error.
    """
    message: Optional[str] = Field(None, description="User's message")


class SpecialisedChatRequest(BaseModel):
    """Payload for a chat about a condition the user picked."""
    disorder: Optional[str] = Field(
        None,
        description="Condition category",
        examples=["Anxiety & Depression", "OCD"],
    )
    message: Optional[str] = Field(None, description="User's message")


class ChatResponse(BaseModel):
    """Generated reply, never empty."""
    reply: str
