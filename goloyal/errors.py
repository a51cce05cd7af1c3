"""Application errors and the central FastAPI exception handlers.

Every error response uses the same envelope: ``{"success": false,
"message": ...}``. Validation failures add ``errors`` with one entry per
failing field. In development, 500 responses also carry ``stack``.
"""

import traceback

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from goloyal.config import settings
from goloyal.schemas.demo_request import ErrorResponse, FieldError

logger = structlog.get_logger()


class AppError(Exception):
    """Operational error with an HTTP status."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _field_path(loc: tuple) -> str:
    # Drop the leading "body"/"query" marker FastAPI adds
    if not loc or loc[0] not in ("body", "query", "path"):
        return ".".join(str(p) for p in loc)
    parts = loc[1:]
    # Nothing left, or a JSON decode offset: the error is about the whole body
    if not parts or isinstance(parts[0], int):
        return loc[0]
    return ".".join(str(p) for p in parts)


def _log_error(request: Request, status_code: int, message: str) -> None:
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "server_error" if status_code >= 500 else "client_error",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        message=message,
        user_agent=request.headers.get("user-agent"),
    )


def _respond(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


def _stack(exc: Exception) -> str | None:
    if not settings.is_development:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report every failing field, not just the first."""
    errors = [
        FieldError(
            field=_field_path(tuple(err["loc"])),
            message=err["msg"],
            code=err["type"],
        )
        for err in exc.errors()
    ]
    _log_error(request, 400, f"{len(errors)} invalid field(s)")
    return _respond(400, ErrorResponse(message="Validation error", errors=errors))


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    _log_error(request, exc.status_code, exc.message)
    stack = _stack(exc) if exc.status_code >= 500 else None
    return _respond(exc.status_code, ErrorResponse(message=exc.message, stack=stack))


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    _log_error(request, exc.status_code, str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never leak internals outside development."""
    logger.exception(
        "unhandled_error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
    )
    return _respond(
        500, ErrorResponse(message="Internal Server Error", stack=_stack(exc))
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
