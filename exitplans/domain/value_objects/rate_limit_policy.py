"""Rate limit policy and result value objects.

A policy fixes the parameters of one sliding-window limiter: how many events
are admitted inside a trailing window, and under which key prefix the event
log is kept.

Usage:
    from exitplans.domain.value_objects import RateLimitPolicy

    policy = RateLimitPolicy(
        name=RateLimitPolicyName.IDEA_VALIDATION,
        max_requests=1,
        window_ms=24 * 60 * 60 * 1000,
        key_prefix="ratelimit:idea-validation",
    )
"""

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from exitplans.domain.enums import RateLimitPolicyName


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitPolicy:
    """Sliding-window rate limit policy (value object).

    Sliding Window Log:
        - Every admitted event is recorded with its timestamp
        - Events older than window_ms fall out of the window
        - A request is admitted iff fewer than max_requests events remain

    Unlike fixed windows, a burst straddling a window boundary cannot admit
    2 * max_requests events.

    Attributes:
        name: Policy name (selected by the endpoint).
        max_requests: Events admitted per trailing window.
        window_ms: Window length in milliseconds.
        key_prefix: Storage key prefix; the identifier is appended.
        enabled: Whether this policy is enforced.

    Raises:
        ValueError: If max_requests <= 0, window_ms <= 0 or key_prefix is empty.
    """

    name: RateLimitPolicyName
    max_requests: int
    window_ms: int
    key_prefix: str
    enabled: bool = True

    def __post_init__(self) -> None:
        """Validate policy parameters."""
        if self.max_requests <= 0:
            raise ValueError(f"max_requests must be positive, got {self.max_requests}")
        if self.window_ms <= 0:
            raise ValueError(f"window_ms must be positive, got {self.window_ms}")
        if not self.key_prefix:
            raise ValueError("key_prefix must not be empty")

    @property
    def window_seconds(self) -> int:
        """Window length in whole seconds (rounded up)."""
        return math.ceil(self.window_ms / 1000)

    def key_for(self, identifier: str) -> str:
        """Build the storage key for an identifier.

        Args:
            identifier: Caller identity (IP, email or composite key).

        Returns:
            str: Key in the form "{key_prefix}:{identifier}".
        """
        return f"{self.key_prefix}:{identifier}"


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Outcome of one admission check (value object).

    Attributes:
        admitted: Whether the request may proceed.
        limit: Maximum events per window (X-RateLimit-Limit).
        remaining: Events left in the current window (X-RateLimit-Remaining).
        reset_at_ms: Epoch milliseconds when the oldest in-window event
            ages out (X-RateLimit-Reset).
    """

    admitted: bool
    limit: int
    remaining: int
    reset_at_ms: int

    def retry_after_seconds(self, now_ms: int) -> int:
        """Seconds until another request could be admitted.

        Args:
            now_ms: Current epoch milliseconds.

        Returns:
            int: Whole seconds, at least 1.
        """
        return max(1, math.ceil((self.reset_at_ms - now_ms) / 1000))

    @property
    def reset_time(self) -> datetime:
        """reset_at_ms as an aware UTC datetime."""
        return datetime.fromtimestamp(self.reset_at_ms / 1000, tz=UTC)

    def headers(self) -> dict[str, str]:
        """Rate limit response headers for this result.

        Returns:
            dict[str, str]: X-RateLimit-Limit, X-RateLimit-Remaining and
                X-RateLimit-Reset (epoch ms).
        """
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset_at_ms),
        }
