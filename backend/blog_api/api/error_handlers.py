"""Error Handlers — global exception handlers for the Blog API.

Invariants:
    - BlogApiError → exc.http_status with exc.to_response() as body
    - RequestValidationError → 400 with a message-only body
    - Exception (catch-all) → 500 that never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BlogApiError), validation (Pydantic), catch-all (Exception)
    - Log level follows the error's severity: not-found is routine, collaborator failure is not
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api.core.errors import BlogApiError, ErrorSeverity

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"

_SEVERITY_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_blog_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_blog_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BlogApiError)
    async def blog_api_error_handler(request: Request, exc: BlogApiError):
        """Handle bad-input, not-found and collaborator failures."""
        logger.log(
            _SEVERITY_LEVELS[exc.severity],
            f"{exc.code}: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed body or parameters — details go to the log, not the client."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "BAD_INPUT"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INVALID_REQUEST_MESSAGE},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )
