# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and, where possible, a suggestion
# telling the caller how to fix the request.
# =============================================================================

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class DirectoryException(Exception):
    """
    Base exception for the User Directory API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "DIRECTORY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class StoreUnavailableError(DirectoryException):
    """
    Raised when a users route runs on an app with no store attached.

    create_app() always attaches one, so this only fires for the users
    router mounted on an app built some other way.
    """

    def __init__(self):
        super().__init__(
            message="No user store is attached to this application",
            code="STORE_UNAVAILABLE",
            status_code=503,
            suggestion="Build the app with create_app(), or set app.state.user_store before serving",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def directory_exception_handler(
    request: Request,
    exc: DirectoryException
) -> JSONResponse:
    """
    Convert DirectoryException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors.

    The directory itself validates nothing; this only fires when the body
    is not valid JSON.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the directory's JSON error handlers to an application."""
    app.add_exception_handler(DirectoryException, directory_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
