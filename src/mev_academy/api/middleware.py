"""HTTP middleware: compression, rate limiting, security headers and access log."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.gzip import GZipMiddleware

from mev_academy.api.responses import failure
from mev_academy.config.settings import Settings
from mev_academy.gateway.rate_limiter import ClientRateLimiter
from mev_academy.utils.time import LatencyTimer, format_duration_us


access_logger = logging.getLogger("mev_academy.access")

GZIP_MINIMUM_SIZE = 1024

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}

CallNext = Callable[[Request], Awaitable[Response]]


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def install_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Register, from innermost to outermost: response compression, the rate
    limiter, security headers and the access log.

    The limiter is skipped when ``rate_limit_requests`` is 0.
    """
    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)

    if settings.rate_limit_enabled:
        limiter = ClientRateLimiter(
            settings.rate_limit_requests,
            settings.rate_limit_window_seconds,
        )
        app.state.rate_limiter = limiter

        @app.middleware("http")
        async def rate_limit(request: Request, call_next: CallNext) -> Response:
            if not await limiter.allow(_client_key(request)):
                return failure(RATE_LIMIT_MESSAGE, status_code=429)
            return await call_next(request)

    @app.middleware("http")
    async def security_headers(request: Request, call_next: CallNext) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def access_log(request: Request, call_next: CallNext) -> Response:
        with LatencyTimer() as timer:
            response = await call_next(request)
        access_logger.info(
            f'{_client_key(request)} "{request.method} {request.url.path}" '
            f"{response.status_code} {format_duration_us(timer.latency_us)}"
        )
        return response
