"""Error Handlers: global exception handlers for the Jokes API.

Invariants:
    - JokesApiError -> its gateway status and structured JSON envelope
    - Exception (catch-all) -> 500, never leaks internal details
    - A failed request always gets a response; the process keeps serving

Design Decisions:
    - Two-layer handler: domain (JokesApiError), catch-all (Exception). Routes take
      only string path segments, so there is no request-validation layer to map
    - Log level follows the error's severity
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jokes_api.core.errors import ErrorCategory, ErrorSeverity, JokesApiError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_jokes_error_handler(app)
    _register_generic_error_handler(app)


def _register_jokes_error_handler(app: FastAPI) -> None:
    """Register domain/upstream error handler."""

    @app.exception_handler(JokesApiError)
    async def jokes_error_handler(request: Request, exc: JokesApiError):
        """Turn an upstream failure into a gateway response for this request only."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{request.method} {request.url.path} failed: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "upstream_path": exc.context.upstream_path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
