"""
Rate limiting for every route.

slowapi (built on `limits`) with the fixed-window strategy: once a client
address has made `rate_limit_requests` requests to a route inside the
current window of `rate_limit_window_seconds`, further requests to that
route get 429 until the window rolls over. Each app gets its own Limiter
and in-memory counters.
"""

from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from shorturl_app.config import Settings


def create_limiter(settings: Settings) -> Limiter:
    # Default limits are counted per (route, client address), so GET / and
    # POST / each get their own budget.
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        strategy="fixed-window",
        storage_uri="memory://",
        enabled=settings.rate_limit_enabled,
    )


def install_rate_limiter(app: FastAPI, settings: Settings) -> Limiter:
    # SlowAPIMiddleware only sees routes registered as APIRoute; FastAPI is
    # held below 0.116 in pyproject.toml for that reason.
    limiter = create_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
