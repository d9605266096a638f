"""
Application error hierarchy.

Every error raised on purpose by use cases and repositories derives from
AppError. The top-level handlers in api.error_handlers turn an AppError into
an HTTP response using its status_code, code and details; anything else is
treated as an internal error.
"""

# Standard library imports
from typing import Any, Optional


class AppError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(AppError):
    """Raised when request data violates the schema."""

    status_code = 400
    code = "VALIDATION_ERROR"


class UnauthorizedError(AppError):
    """Raised for bad credentials or an unusable bearer token."""

    status_code = 401
    code = "UNAUTHORIZED"


class TokenExpiredError(UnauthorizedError):
    code = "TOKEN_EXPIRED"


class InvalidTokenError(UnauthorizedError):
    code = "TOKEN_INVALID"


class ConflictError(AppError):
    """Raised when a unique key (username, deviceId) is already taken."""

    status_code = 409
    code = "CONFLICT"
