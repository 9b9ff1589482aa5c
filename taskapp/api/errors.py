"""Translation of domain errors into RFC 7807 problem responses.

Every ErrorKind maps to exactly one HTTP status. Services raise domain
errors; these handlers are the only place that turns them into HTTP.
"""

from __future__ import annotations

from typing import Final

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from taskapp.domain.exceptions import ErrorKind, TaskAppError

logger = structlog.get_logger(__name__)

ERROR_TYPE_BASE: Final[str] = "https://taskapp.example.com/errors"

ERROR_STATUS: Final[dict[ErrorKind, int]] = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_ASSIGNMENT: 400,
    ErrorKind.INVALID_CREDENTIALS: 400,
    ErrorKind.SERVER_FAULT: 500,
}

ERROR_TITLES: Final[dict[ErrorKind, str]] = {
    ErrorKind.UNAUTHENTICATED: "Unauthenticated",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.CONFLICT: "Conflict",
    ErrorKind.INVALID_ASSIGNMENT: "Invalid Assignment",
    ErrorKind.INVALID_CREDENTIALS: "Invalid Credentials",
    ErrorKind.SERVER_FAULT: "Internal Server Error",
}


def problem_response(kind: ErrorKind, detail: str, instance: str) -> JSONResponse:
    """Build a problem detail response for an error kind."""
    status_code = ERROR_STATUS[kind]
    headers = {"WWW-Authenticate": "Bearer"} if kind == ErrorKind.UNAUTHENTICATED else None
    return JSONResponse(
        status_code=status_code,
        content={
            "type": f"{ERROR_TYPE_BASE}/{kind.value.replace('_', '-')}",
            "title": ERROR_TITLES[kind],
            "status": status_code,
            "detail": detail,
            "instance": instance,
        },
        headers=headers,
    )


async def taskapp_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain errors raised by services and auth dependencies."""
    if not isinstance(exc, TaskAppError):
        return await unexpected_error_handler(request, exc)
    if exc.kind == ErrorKind.SERVER_FAULT:
        logger.error("server_fault", path=request.url.path, error=str(exc))
    return problem_response(exc.kind, str(exc), request.url.path)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything else as a server fault, surfacing the cause message."""
    logger.exception(
        "unexpected_error", path=request.url.path, error_type=type(exc).__name__
    )
    return problem_response(
        ErrorKind.SERVER_FAULT, f"Unexpected error: {exc}", request.url.path
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskAppError, taskapp_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
