"""Counter store protocol for sliding-window event logs.

Storage implementations own atomicity: record() must check and insert in a
single step so concurrent callers sharing an identifier cannot both take the
last slot.
"""

from typing import Protocol

from exitplans.core.result import Result
from exitplans.domain.errors import RateLimitError


class CounterStoreProtocol(Protocol):
    """Sliding-window event log storage.

    Implementations:
        - RedisSlidingWindowStorage: Lua script over a sorted set (shared)
        - InMemorySlidingWindowStorage: Single-process, tests
    """

    async def record(
        self,
        *,
        key: str,
        window_ms: int,
        max_requests: int,
        now_ms: int,
    ) -> Result[tuple[bool, int, int], RateLimitError]:
        """Evict expired events, then admit and record if below the limit.

        Args:
            key: Window key.
            window_ms: Window length in milliseconds.
            max_requests: Events admitted per window.
            now_ms: Current epoch milliseconds.

        Returns:
            Success((admitted, remaining, reset_at_ms)) or
            Failure(RateLimitError) on storage errors.
        """
        ...

    async def clear(self, *, key: str) -> Result[None, RateLimitError]:
        """Delete the window for key.

        Args:
            key: Window key.

        Returns:
            Success(None) or Failure(RateLimitError).
        """
        ...
