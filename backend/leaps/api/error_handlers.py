"""Error Handlers — global exception handlers for the LEAPS payload API.

Invariants:
    - Every error body has the LeapsError envelope ({"error": {code, message, ...}})
    - PayloadValidationError details included only when settings.expose_validation_details
    - Request-level validation failures (body missing, not an object) reuse the
      PayloadValidationError envelope, so clients see one 400 shape
    - An X-Request-ID header becomes context.trace_id and is echoed back
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LeapsError), validation (FastAPI), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from leaps.config import get_settings
from leaps.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, LeapsError, PayloadValidationError,
)
from leaps.core.parse_result import FieldIssue

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Request-ID"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_leaps_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _respond(request: Request, exc: LeapsError) -> JSONResponse:
    trace_id = request.headers.get(TRACE_HEADER)
    if trace_id and exc.context.trace_id is None:
        exc.context.trace_id = trace_id

    if isinstance(exc, PayloadValidationError):
        content = exc.to_response(
            include_details=get_settings().expose_validation_details,
        )
    else:
        content = exc.to_response()
    headers = {TRACE_HEADER: exc.context.trace_id} if exc.context.trace_id else None
    return JSONResponse(status_code=exc.http_status, content=content, headers=headers)


def _register_leaps_error_handler(app: FastAPI) -> None:

    @app.exception_handler(LeapsError)
    async def leaps_error_handler(request: Request, exc: LeapsError):
        """Rejected payloads at WARNING, contract violations at ERROR."""
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level, f"LeapsError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "activity_code": exc.context.activity_code,
                "issue_count": (
                    len(exc.issues) if isinstance(exc, PayloadValidationError) else None
                ),
            },
        )
        return _respond(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body failed before reaching a payload parser."""
        issues = tuple(_issue_from_request_error(e) for e in exc.errors())
        logger.warning(
            "Request body rejected",
            extra={"path": request.url.path, "issue_count": len(issues)},
        )
        return _respond(request, PayloadValidationError(
            issues, message="Invalid request data", context=ErrorContext(),
        ))


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return _respond(request, LeapsError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ))


def _issue_from_request_error(error: dict) -> FieldIssue:
    """FastAPI prefixes body locations with "body"; payload paths start below it."""
    loc = tuple(error["loc"])
    if loc and loc[0] == "body":
        loc = loc[1:]
    return FieldIssue(path=loc, message=error["msg"], code=error["type"])
