"""Error Handlers — global exception handlers for the Products API.

Invariants:
    - ProductsApiError -> its own to_response() body and http_status
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (ProductsApiError), catch-all (Exception)
    - No RequestValidationError handler: routes declare no FastAPI-typed input,
      the rule gate raises RuleViolationError instead
    - Extracted from main.py to keep the app module to wiring only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from products_api.core.errors import ProductsApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Products API domain/infrastructure error handler."""

    @app.exception_handler(ProductsApiError)
    async def products_api_error_handler(request: Request, exc: ProductsApiError):
        """Handle all Products API domain/infrastructure errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )
