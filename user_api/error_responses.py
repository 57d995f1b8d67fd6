"""
Standardized response envelope for API consistency.
Every HTTP response (success or error) follows the same JSON shape:
{success, message?, data?, errors?, error?}
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .application.usecases.user_results import UserError, UserErrorCode


class Envelope(BaseModel):
    """Uniform JSON wrapper for every response."""

    success: bool
    message: str | None = None
    data: Any = None
    errors: Dict[str, List[str]] | None = None
    error: str | None = None


# R: One mapping table from use case error code to HTTP status
STATUS_BY_CODE: Dict[UserErrorCode, int] = {
    UserErrorCode.VALIDATION_ERROR: 400,
    UserErrorCode.INVALID_CREDENTIALS: 401,
    UserErrorCode.UNAUTHENTICATED: 401,
    UserErrorCode.NOT_FOUND: 404,
    UserErrorCode.DUPLICATE_EMAIL: 409,
    UserErrorCode.UNEXPECTED: 500,
}

_OPENAPI_ERROR_CONTENT = {"application/json": {"schema": {"$ref": "#/components/schemas/Envelope"}}}

OPENAPI_ERROR_RESPONSES = {
    "400": {"description": "Validation failed", "model": Envelope, "content": _OPENAPI_ERROR_CONTENT},
    "401": {"description": "Unauthenticated", "model": Envelope, "content": _OPENAPI_ERROR_CONTENT},
    "404": {"description": "Not found", "model": Envelope, "content": _OPENAPI_ERROR_CONTENT},
    "409": {"description": "Conflict", "model": Envelope, "content": _OPENAPI_ERROR_CONTENT},
    "500": {"description": "Unexpected error", "model": Envelope, "content": _OPENAPI_ERROR_CONTENT},
}


class AppHTTPException(HTTPException):
    """Application-specific HTTP exception carrying an envelope."""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Dict[str, List[str]] | None = None,
        error: str | None = None,
        headers: Dict[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message = message
        self.errors = errors
        self.error = error


def envelope_content(
    success: bool,
    message: str | None = None,
    data: Any = None,
    errors: Dict[str, List[str]] | None = None,
    error: str | None = None,
    **extra: Any,
) -> Dict[str, Any]:
    """R: Envelope dict with unset keys dropped; extra keys sit at the top level."""
    content = Envelope(
        success=success, message=message, data=data, errors=errors, error=error
    ).model_dump(exclude_none=True)
    content.update(extra)
    return content


def success_response(
    data: Any = None,
    message: str | None = None,
    status_code: int = 200,
    **extra: Any,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope_content(True, message=message, data=data, **extra),
    )


def app_error(error: UserError) -> AppHTTPException:
    """R: Convert a use case error into its HTTP exception."""
    status_code = STATUS_BY_CODE[error.code]
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return AppHTTPException(
        status_code,
        error.message,
        errors=error.errors,
        error=error.detail,
        headers=headers,
    )


def error_response(error: UserError) -> JSONResponse:
    return exception_response(app_error(error))


def exception_response(exc: AppHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope_content(
            False, message=exc.message, errors=exc.errors, error=exc.error
        ),
        headers=exc.headers,
    )


# Exception handlers for FastAPI
async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """Handler for AppHTTPException."""
    return exception_response(exc)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unhandled exceptions."""
    return JSONResponse(
        status_code=500,
        content=envelope_content(False, message="Internal server error"),
    )
