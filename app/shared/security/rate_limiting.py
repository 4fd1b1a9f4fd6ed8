"""
Rate limiting configuration and setup.

Uses slowapi to throttle order placement per client address.
Each placement reaches the fulfillment and email services, so
bursts from one client are rejected before any collaborator is called.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

limiter = Limiter(key_func=get_remote_address)


def order_rate_limit() -> str:
    """Return the current order placement rate limit.

    Evaluated per request, so a changed setting applies immediately.
    """
    return settings.rate_limit_default


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
