"""In-memory sliding-window storage.

Same semantics as the Redis storage for a single process. record() performs
no awaits between eviction, counting and insertion, so it is atomic with
respect to other tasks on the same event loop. Used in tests and as a local
stand-in; it is not shared across processes.
"""

from collections import deque

from exitplans.core.result import Result, Success
from exitplans.domain.errors import RateLimitError


class InMemorySlidingWindowStorage:
    """Process-local sliding-window event log (implements CounterStoreProtocol)."""

    def __init__(self) -> None:
        self._windows: dict[str, deque[int]] = {}

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
            Success((admitted, remaining, reset_at_ms)).
        """
        events = self._windows.setdefault(key, deque())
        cutoff = now_ms - window_ms
        while events and events[0] <= cutoff:
            events.popleft()

        admitted = len(events) < max_requests
        if admitted:
            events.append(now_ms)

        reset_at_ms = (events[0] + window_ms) if events else now_ms + window_ms
        remaining = max(0, max_requests - len(events))
        return Success(value=(admitted, remaining, reset_at_ms))

    async def clear(self, *, key: str) -> Result[None, RateLimitError]:
        """Delete the window for key."""
        self._windows.pop(key, None)
        return Success(value=None)
