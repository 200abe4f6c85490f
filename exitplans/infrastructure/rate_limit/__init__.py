"""Sliding-window admission control adapters.

Usage:
    from exitplans.infrastructure.rate_limit import SlidingWindowAdapter
"""

from exitplans.infrastructure.rate_limit.in_memory_storage import (
    InMemorySlidingWindowStorage,
)
from exitplans.infrastructure.rate_limit.redis_storage import RedisSlidingWindowStorage
from exitplans.infrastructure.rate_limit.sliding_window_adapter import (
    SlidingWindowAdapter,
)

__all__ = [
    "InMemorySlidingWindowStorage",
    "RedisSlidingWindowStorage",
    "SlidingWindowAdapter",
]
