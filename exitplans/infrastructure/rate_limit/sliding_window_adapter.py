"""Sliding-window admission controller implementing RateLimitProtocol.

Coordinates:
- Counter storage (Redis Lua script or in-memory) for atomic check-and-record
- Policies chosen by the calling endpoint
- Structured logging for degrade-open events

Degrade-open:
    - No storage configured (storage=None): every request is admitted with
      sentinel limits; a single warning is logged at construction.
    - Storage error during a check: the request is admitted and a warning is
      logged. Errors never reach the caller.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from time import perf_counter
from typing import TYPE_CHECKING

from exitplans.core.constants import UNKNOWN_IDENTIFIER, UNLIMITED_SENTINEL
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import RateLimitError
from exitplans.domain.value_objects.rate_limit_policy import (
    RateLimitPolicy,
    RateLimitResult,
)

if TYPE_CHECKING:
    from exitplans.domain.protocols.counter_store_protocol import CounterStoreProtocol
    from exitplans.domain.protocols.logger_protocol import LoggerProtocol


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class SlidingWindowAdapter:
    """Sliding-window rate limiter.

    Args:
        storage: Counter store, or None when no shared store is configured.
        logger: Structured logger.
        clock: Returns current epoch milliseconds (injectable for tests).
    """

    def __init__(
        self,
        *,
        storage: CounterStoreProtocol | None,
        logger: LoggerProtocol,
        clock: Callable[[], int] = _epoch_ms,
    ) -> None:
        self._storage = storage
        self._logger = logger
        self._clock = clock
        if storage is None:
            self._logger.warning(
                "Rate limit store not configured - admitting all requests",
                mode="degrade_open",
            )

    @property
    def enforcing(self) -> bool:
        """Whether a counter store backs this limiter."""
        return self._storage is not None

    # -------------------------------------------------------------------------
    # RateLimitProtocol implementation
    # -------------------------------------------------------------------------
    async def check(
        self,
        *,
        policy: RateLimitPolicy,
        identifier: str,
    ) -> Result[RateLimitResult, RateLimitError]:
        """Check the window for identifier and record the request if admitted.

        Args:
            policy: Policy chosen by the endpoint.
            identifier: Caller identity; blank values use the shared
                "unknown" bucket.

        Returns:
            Success(RateLimitResult): Always (degrade-open on errors).
        """
        now_ms = self._clock()
        identifier = identifier.strip() or UNKNOWN_IDENTIFIER

        if self._storage is None:
            return Success(value=self._unlimited(now_ms))

        if not policy.enabled:
            return Success(
                value=RateLimitResult(
                    admitted=True,
                    limit=policy.max_requests,
                    remaining=policy.max_requests,
                    reset_at_ms=now_ms,
                )
            )

        start_time = perf_counter()
        result = await self._storage.record(
            key=policy.key_for(identifier),
            window_ms=policy.window_ms,
            max_requests=policy.max_requests,
            now_ms=now_ms,
        )
        elapsed_ms = (perf_counter() - start_time) * 1000

        match result:
            case Success(value=(admitted, remaining, reset_at_ms)):
                if not admitted:
                    self._logger.info(
                        "Rate limit exceeded",
                        policy=policy.name.value,
                        identifier=identifier,
                        reset_at_ms=reset_at_ms,
                    )
                else:
                    self._logger.debug(
                        "Rate limit check passed",
                        policy=policy.name.value,
                        identifier=identifier,
                        remaining=remaining,
                        execution_time_ms=round(elapsed_ms, 2),
                    )
                return Success(
                    value=RateLimitResult(
                        admitted=admitted,
                        limit=policy.max_requests,
                        remaining=remaining,
                        reset_at_ms=reset_at_ms,
                    )
                )
            case Failure(error=error):
                self._logger.warning(
                    "Rate limit storage error - admitting request",
                    policy=policy.name.value,
                    identifier=identifier,
                    error_message=error.message,
                )
                return Success(
                    value=RateLimitResult(
                        admitted=True,
                        limit=policy.max_requests,
                        remaining=policy.max_requests,
                        reset_at_ms=now_ms + policy.window_ms,
                    )
                )

    async def reset(
        self,
        *,
        policy: RateLimitPolicy,
        identifier: str,
    ) -> Result[None, RateLimitError]:
        """Clear the window for identifier.

        Unlike check(), this does NOT degrade open.

        Args:
            policy: Policy whose window is cleared.
            identifier: Caller identity.

        Returns:
            Result[None, RateLimitError]: Success or failure.
        """
        if self._storage is None:
            return Success(value=None)

        identifier = identifier.strip() or UNKNOWN_IDENTIFIER
        result = await self._storage.clear(key=policy.key_for(identifier))

        match result:
            case Success():
                self._logger.info(
                    "Rate limit reset",
                    policy=policy.name.value,
                    identifier=identifier,
                )
            case Failure(error=err):
                self._logger.error(
                    "Rate limit reset failed",
                    policy=policy.name.value,
                    identifier=identifier,
                    error_message=str(err),
                )

        return result

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def _unlimited(now_ms: int) -> RateLimitResult:
        return RateLimitResult(
            admitted=True,
            limit=UNLIMITED_SENTINEL,
            remaining=UNLIMITED_SENTINEL,
            reset_at_ms=now_ms,
        )
