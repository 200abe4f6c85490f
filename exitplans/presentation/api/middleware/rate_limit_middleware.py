"""Rate limit middleware for FastAPI.

This middleware intercepts HTTP requests and applies admission control based
on the endpoint's policy. It handles:
- Per-IP identity resolution behind CDNs and reverse proxies
- HTTP 429 responses with the public rate-limit body and headers
- X-RateLimit-* headers on admitted responses
- Degrade-open semantics (never blocks if rate limit infrastructure fails)

Architecture:
    Presentation Layer middleware that uses RateLimitProtocol (domain) via
    SlidingWindowAdapter (infrastructure) from the container.

Usage:
    # In main.py
    from exitplans.presentation.api.middleware import RateLimitMiddleware

    app.add_middleware(RateLimitMiddleware)
"""

import math
import time
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from exitplans.core.config import settings
from exitplans.core.constants import UNKNOWN_IDENTIFIER
from exitplans.core.result import Success
from exitplans.domain.value_objects import RateLimitResult
from exitplans.infrastructure.rate_limit.config import get_policy_for_endpoint

if TYPE_CHECKING:
    from exitplans.domain.protocols.logger_protocol import LoggerProtocol
    from exitplans.domain.protocols.rate_limit_protocol import RateLimitProtocol

RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."


def format_reset_in(reset_at_ms: int, now_ms: int) -> str:
    """Describe the wait until reset_at_ms in whole minutes or hours.

    Args:
        reset_at_ms: Epoch milliseconds when a slot frees up.
        now_ms: Current epoch milliseconds.

    Returns:
        str: "N minute(s)" under an hour, else "N hour(s)" (rounded up).
    """
    minutes = max(1, math.ceil((reset_at_ms - now_ms) / 60000))
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    hours = math.ceil(minutes / 60)
    return f"{hours} hour{'s' if hours != 1 else ''}"


def get_client_ip(request: Request) -> str:
    """Resolve the caller's IP address.

    Order: CF-Connecting-IP (Cloudflare), X-Real-IP, first X-Forwarded-For
    entry, the socket peer, then "unknown".

    Args:
        request: HTTP request.

    Returns:
        Client IP address or "unknown".
    """
    cf_ip = request.headers.get("CF-Connecting-IP")
    if cf_ip and cf_ip.strip():
        return cf_ip.strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # First entry is the client, the rest is the proxy chain
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    if request.client and request.client.host:
        return request.client.host

    return UNKNOWN_IDENTIFIER


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Starlette middleware for admission control on HTTP requests.

    Degrade-Open Design:
        All errors result in admitting the request. Rate limit
        infrastructure failures should NEVER cause denial of service.

    Response Headers:
        - Retry-After: Seconds until retry allowed (on 429)
        - X-RateLimit-Limit: Maximum requests per window
        - X-RateLimit-Remaining: Requests remaining in the window
        - X-RateLimit-Reset: Epoch milliseconds when a slot frees up

    Attributes:
        _rate_limit: RateLimitProtocol implementation (lazy loaded from container).
        _logger: LoggerProtocol for structured logging (lazy loaded).
        _clock: Current epoch milliseconds (injectable for tests).
    """

    def __init__(
        self,
        app: ASGIApp,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize rate limit middleware.

        Args:
            app: The ASGI application to wrap.
            clock: Optional epoch-milliseconds clock.
        """
        super().__init__(app)
        self._rate_limit: RateLimitProtocol | None = None
        self._logger: LoggerProtocol | None = None
        self._clock = clock or (lambda: int(time.time() * 1000))

    def _get_rate_limit(self) -> "RateLimitProtocol":
        """Lazy load rate limiter from container.

        Returns:
            RateLimitProtocol implementation.
        """
        if self._rate_limit is None:
            from exitplans.core.container import get_rate_limit

            self._rate_limit = get_rate_limit()
        return self._rate_limit

    def _get_logger(self) -> "LoggerProtocol":
        """Lazy load logger from container.

        Returns:
            LoggerProtocol implementation.
        """
        if self._logger is None:
            from exitplans.core.container import get_logger

            self._logger = get_logger()
        return self._logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Intercept request and apply admission control.

        Args:
            request: Incoming HTTP request.
            call_next: Next handler in middleware chain.

        Returns:
            Response: Either rate limit rejection (429) or downstream response.
        """
        if not settings.rate_limit_enabled:
            return await call_next(request)

        # Build endpoint key: "METHOD /path"
        endpoint = f"{request.method} {request.url.path}"
        policy = get_policy_for_endpoint(endpoint)
        if policy is None or not policy.enabled:
            return await call_next(request)

        identifier = get_client_ip(request)

        try:
            result = await self._get_rate_limit().check(
                policy=policy, identifier=identifier
            )
        except Exception as exc:  # noqa: BLE001 - degrade open on any failure
            self._log_fail_open(
                "rate_limit_middleware_exception",
                endpoint,
                identifier,
                error=str(exc),
            )
            return await call_next(request)

        match result:
            case Success(value=rate_result):
                if not rate_result.admitted:
                    return self._build_429_response(rate_result)

                response = await call_next(request)
                response.headers.update(rate_result.headers())
                return response

            case _:
                self._log_fail_open("rate_limit_result_failure", endpoint, identifier)
                return await call_next(request)

    def _build_429_response(self, rate_result: RateLimitResult) -> JSONResponse:
        """Build the HTTP 429 rejection.

        Body:
            {error, message, resetTime (ISO-8601 UTC), resetIn}

        Args:
            rate_result: Denied check result.

        Returns:
            JSONResponse with 429 status and rate limit headers.
        """
        now_ms = self._clock()
        reset_time = rate_result.reset_time.isoformat(timespec="milliseconds")
        content = {
            "error": "rate_limit_exceeded",
            "message": RATE_LIMIT_MESSAGE,
            "resetTime": reset_time.replace("+00:00", "Z"),
            "resetIn": format_reset_in(rate_result.reset_at_ms, now_ms),
        }
        return JSONResponse(
            status_code=429,
            content=content,
            headers={
                "Retry-After": str(rate_result.retry_after_seconds(now_ms)),
                **rate_result.headers(),
            },
        )

    def _log_fail_open(
        self,
        event: str,
        endpoint: str,
        identifier: str,
        error: str | None = None,
    ) -> None:
        """Log fail-open event for monitoring.

        Args:
            event: Event type (for categorization).
            endpoint: Endpoint that was being checked.
            identifier: Rate limit identifier.
            error: Optional error message.
        """
        self._get_logger().warning(
            "Rate limit fail-open",
            event=event,
            endpoint=endpoint,
            identifier=identifier,
            error=error,
            result="fail_open",
        )
