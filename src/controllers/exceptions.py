"""
Errors raised by controllers for documented, user-facing failures.
"""
from fastapi import status


class EndpointError(Exception):
    """
    A failure with a fixed status code and a plain-string body.

    Rendered by ErrorHandlingMiddleware as ``{field: message}``.
    """

    def __init__(self, status_code: int, field: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.field = field
        self.message = message

    @classmethod
    def bad_request(cls, field: str, message: str) -> "EndpointError":
        return cls(status.HTTP_400_BAD_REQUEST, field, message)

    @classmethod
    def server_error(cls, field: str, message: str) -> "EndpointError":
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, field, message)

    def to_content(self) -> dict:
        return {self.field: self.message}
