from typing import Any, Dict, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body for endpoints that answer with an `error` field."""

    error: str
    message: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class ReplyErrorResponse(BaseModel):
    """Error body for chat endpoints, which always answer with `reply`."""

    reply: str
