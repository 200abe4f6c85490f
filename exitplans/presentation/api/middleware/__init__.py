"""Request middleware."""

from exitplans.presentation.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from exitplans.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["RateLimitMiddleware", "TraceMiddleware", "get_trace_id"]
