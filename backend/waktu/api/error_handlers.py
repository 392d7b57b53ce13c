"""Error Handlers — global exception handlers for the Waktu API.

Invariants:
    - WaktuError → its own status and {"error", "details"?} envelope
    - RequestValidationError → 400 {"error": "invalid_request", "details"}
    - Starlette HTTPException (unknown path, wrong method) → its status,
      {"error": "not_found" | "method_not_allowed" | "http_error", "details"}
    - Exception (catch-all) → 500 {"error": "internal_server_error", "details": str(exc)}
    - Every handled error is logged with the request path

Design Decisions:
    - Layered handlers: domain (WaktuError), validation (Pydantic),
      framework HTTP errors (routing, static files), catch-all (Exception)
    - The catch-all exposes the exception message in `details`, matching the
      published envelope; no stack traces are ever returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from waktu.core.errors import ErrorCategory, WaktuError, error_envelope

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_waktu_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_waktu_error_handler(app: FastAPI) -> None:
    """Register domain/upstream error handler."""

    @app.exception_handler(WaktuError)
    async def waktu_error_handler(request: Request, exc: WaktuError):
        """Handle all Waktu validation and feed errors."""
        log = (
            logger.warning
            if exc.category == ErrorCategory.VALIDATION else logger.error
        )
        log(
            f"WaktuError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
                "feed_url": exc.context.feed_url,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                "invalid_request", _summarize_validation_errors(exc),
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/static-file HTTP error handler (404, 405, ...)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Re-shape framework HTTP errors into the error envelope."""
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path},
        )
        code = _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — one JSON response for any unexpected fault."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "category": ErrorCategory.INTERNAL.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope("internal_server_error", str(exc)),
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """Flatten Pydantic errors into "field: message" pairs."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
