"""
Error handling middleware.
Centralizes error handling and response formatting.
"""
import json
import logging
import traceback
from typing import Callable, Optional

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.controllers.exceptions import EndpointError

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def _get_request_body(self, request: Request) -> Optional[dict]:
        """
        Safely extract request body for error logging.
        """
        try:
            if hasattr(request.state, "body"):
                body_bytes = request.state.body
            else:
                body_bytes = await request.body()
                request.state.body = body_bytes

            if not body_bytes:
                return None

            body_str = body_bytes.decode("utf-8")
            return json.loads(body_str)
        except Exception:
            return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except EndpointError as e:
            # Documented failure, already logged by the controller
            level = logging.ERROR if e.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "Endpoint error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": e.status_code,
                },
            )
            return JSONResponse(status_code=e.status_code, content=e.to_content())

        except Exception as e:
            body = await self._get_request_body(request)

            tb_str = traceback.format_exc()

            from src.config.settings import get_settings

            try:
                settings = get_settings()
                is_production = settings.is_production
            except Exception:
                is_production = True  # Default to production mode for safety

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body,
                    "traceback": tb_str if not is_production else None,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if is_production:
                message = "An internal error occurred. Please try again later."
            else:
                message = f"{type(e).__name__}: {str(e)}"

            response_content = {
                "error": "Internal Server Error",
                "message": message,
            }

            if not is_production:
                response_content["traceback"] = tb_str

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=response_content,
            )


# Field and fixed message for bodies the schema rejects, by route
INVALID_BODY_REPLIES = {
    "/api/chat": ("reply", "⚠️ Message must be text."),
    "/api/general-chat": ("reply", "⚠️ Message must be text."),
    "/api/specialised-chat": ("reply", "❌ Disorder and message are required."),
    "/api/quiz": ("reply", "⚠️ Quiz type and disorder are required."),
    "/api/checklist-response": ("error", "Invalid request body"),
    "/generate": ("error", "Request body must be a JSON object"),
}
DEFAULT_INVALID_BODY_REPLY = ("error", "Invalid request body")


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer schema failures with 400 and the route's plain-string error field."""
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": [
                {"loc": error.get("loc"), "type": error.get("type")}
                for error in exc.errors()
            ],
        },
    )
    field, message = INVALID_BODY_REPLIES.get(
        request.url.path, DEFAULT_INVALID_BODY_REPLY
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={field: message},
    )
