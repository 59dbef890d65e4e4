"""Errors raised by the contact intake handler."""

from typing import Optional

from litestar.exceptions import HTTPException
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ContactError(HTTPException):
    """Base error rendered as ``{"error": ..., "details"/"message": ...}``."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal server error"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None) -> None:
        self.error = error or self.error
        self.details = details
        super().__init__(detail=self.error, status_code=self.status_code)

    def to_content(self) -> dict:
        content = {"error": self.error}
        if self.details:
            content["details"] = self.details
        return content


class MethodNotAllowed(ContactError):
    status_code = HTTP_405_METHOD_NOT_ALLOWED
    error = "Method not allowed"


class ContactValidationError(ContactError):
    status_code = HTTP_400_BAD_REQUEST
    error = "Validation failed"


class InternalError(ContactError):
    """Unexpected failure; the caller only ever sees a generic apology."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal server error"
    user_message = "Sorry, there was an error processing your message. Please try again."

    def to_content(self) -> dict:
        return {"error": self.error, "message": self.user_message}
