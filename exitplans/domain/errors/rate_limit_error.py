"""Rate limit error types.

Used when admission control storage fails (Redis errors, Lua script failures).

Usage:
    from exitplans.domain.errors import RateLimitError
    from exitplans.core.enums import ErrorCode
    from exitplans.core.result import Failure

    return Failure(error=RateLimitError(
        code=ErrorCode.RATE_LIMIT_CHECK_FAILED,
        message="Failed to check rate limit: Redis connection lost",
    ))
"""

from dataclasses import dataclass

from exitplans.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitError(DomainError):
    """Rate limit system failure.

    A DENIED request is NOT an error; it is a successful check that returns
    admitted=False. This error is for storage failures only.

    Design:
        Admission control degrades open. The storage layer reports failures
        with this error and the adapter turns them into admitted results.
        Reset operations surface it to the caller.
    """

    pass  # Inherits all fields from DomainError
