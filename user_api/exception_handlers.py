"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Convert anything that escapes a route into the response envelope
  - Map request parsing failures to 400 with per-field messages
  - Centralized logging of errors with correlation IDs

Collaborators:
  - main.py: Registers these handlers
  - exceptions.py: UserApiError, DatabaseError
  - error_responses.py: envelope helpers

Constraints:
  - Every response carries {success: false, message, ...}
  - Lower-layer details are logged, never echoed by the fallback handlers
"""

from typing import Dict, List

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error_responses import (
    AppHTTPException,
    app_exception_handler,
    envelope_content,
    generic_exception_handler,
)
from .exceptions import UserApiError
from .logger import logger


def _field_name(loc) -> str:
    # R: ("body", "email") -> "email"; whole-body errors -> "body"
    if not loc:
        return "body"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or str(loc[0])


def _field_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for item in exc.errors():
        errors.setdefault(_field_name(item.get("loc", ())), []).append(
            str(item.get("msg", "Invalid value."))
        )
    return errors


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle unparseable bodies/params as a 400 validation failure."""
    return JSONResponse(
        status_code=400,
        content=envelope_content(
            False, message="Validation failed", errors=_field_errors(exc)
        ),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors (unknown route, method not allowed)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope_content(False, message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def user_api_error_handler(request: Request, exc: UserApiError) -> JSONResponse:
    """Handle typed errors that escaped a use case."""
    details = exc.to_response().to_dict()
    logger.error(
        "Unhandled application error",
        extra={
            "error_id": details["error_id"],
            "error_code": details["error_code"],
            "error_message": details["message"],
        },
    )
    return JSONResponse(
        status_code=500,
        content=envelope_content(
            False, message="Internal server error", error=exc.message
        ),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", extra={"error_type": type(exc).__name__})
    return await generic_exception_handler(request, exc)


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(UserApiError, user_api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
