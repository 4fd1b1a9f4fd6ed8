"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.ordering.errors import InvalidOrderError, OrderingDomainError

logger = logging.getLogger(__name__)

HTTP_422 = 422
HTTP_500 = 500
HTTP_502 = 502


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidOrderError)
    async def handle_invalid_order(
        _request: Request, exc: InvalidOrderError
    ) -> JSONResponse:
        """Handle orders that failed validation."""
        logger.warning("Invalid order: %d reason(s)", len(exc.reasons))
        return _error_response(HTTP_422, "Invalid order", exc.message)

    @app.exception_handler(OrderingDomainError)
    async def handle_ordering_domain(
        _request: Request, exc: OrderingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled ordering domain errors."""
        logger.error("Unhandled ordering domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(httpx.HTTPError)
    async def handle_upstream(
        _request: Request, exc: httpx.HTTPError
    ) -> JSONResponse:
        """Handle failures of the fulfillment or email services."""
        logger.error("Upstream service error: %s", type(exc).__name__)
        return _error_response(HTTP_502, "Upstream service error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
