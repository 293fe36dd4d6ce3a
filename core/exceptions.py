"""Application error types.

Every error is an ``HTTPException`` so FastAPI renders it directly; the body is
``{"message": ..., "error_code": ..., "details": ...}``.
"""

from typing import Any

from fastapi import HTTPException


class BaseAppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={"message": message, "error_code": error_code, "details": self.details},
            headers=headers,
        )


class ValidationError(BaseAppException):
    """Required form fields were missing; ``details["values"]`` echoes what was submitted."""

    def __init__(self, message: str = "Validation failed", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=400, error_code="VALIDATION_ERROR", details=details)


class NotFoundError(BaseAppException):
    """A referenced project or media item does not exist."""

    def __init__(self, message: str = "Resource not found", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=404, error_code="NOT_FOUND", details=details)


class PersistenceError(BaseAppException):
    """The database rejected a write. No cleanup of partial state is attempted."""

    def __init__(self, message: str = "Storage failure", details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=500, error_code="PERSISTENCE_ERROR", details=details)


class AuthenticationError(BaseAppException):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="NOT_AUTHENTICATED",
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(BaseAppException):
    def __init__(self, message: str = "Edit access required"):
        super().__init__(message=message, status_code=403, error_code="PERMISSION_DENIED")
