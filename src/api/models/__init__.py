from .chat import ChatRequest, ChatResponse, SpecialisedChatRequest
from .checklist import ChecklistRequest, ChecklistResponse, ChecklistTask
from .database import DatabaseTimeResponse
from .error import ErrorResponse, ReplyErrorResponse
from .quiz import QuizRequest

__all__ = [
    "ErrorResponse",
    "ReplyErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "SpecialisedChatRequest",
    "ChecklistRequest",
    "ChecklistResponse",
    "ChecklistTask",
    "DatabaseTimeResponse",
    "QuizRequest",
]
