"""Error Handlers: global exception handlers for the catalog API.

Invariants:
    - CatalogError → {"success": false, "error": <message>} with the error's HTTP status
    - RequestValidationError (malformed JSON body) → 400 with field-level details
    - Exception (catch-all) → 500 generic message, never leaks internal details
    - Underlying causes reach the client only when settings.expose_error_details is set

Design Decisions:
    - Three-layer handler: domain (CatalogError), request parsing (Pydantic), catch-all (Exception)
    - Extracted from main.py so create_app() stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catalog.core.errors import CatalogError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, expose_details: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app, expose_details)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app, expose_details)


def _register_catalog_error_handler(app: FastAPI, expose_details: bool) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog errors."""
        level = (
            logging.WARNING if exc.severity == ErrorSeverity.WARNING
            else logging.ERROR
        )
        logger.log(
            level,
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
            exc_info=exc.__cause__ if level == logging.ERROR else None,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(include_details=expose_details),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI, expose_details: bool) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details outside development."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        content = {"success": False, "error": "An unexpected error occurred"}
        if expose_details:
            content["details"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "success": False,
        "error": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
