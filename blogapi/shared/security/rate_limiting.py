"""
Rate limiting configuration and setup.

Uses slowapi with a single default limit per client address, applied
to every route by SlowAPIMiddleware.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from blogapi.core.config import Settings

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Args:
        settings: Supplies the default limit and the on/off switch.

    Returns:
        A Limiter with in-memory counters keyed by client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> PlainTextResponse:
    """Answer a throttled request with 429 and the exceeded limit."""
    return PlainTextResponse(
        f"Rate limit exceeded: {exc.detail}", status_code=HTTP_429
    )
