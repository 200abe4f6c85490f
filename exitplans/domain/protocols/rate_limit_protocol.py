"""Rate limit protocol (port) for sliding-window admission control.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (SlidingWindowAdapter)
- Presentation middleware uses the protocol via the container

Usage:
    from exitplans.domain.protocols import RateLimitProtocol

    result = await rate_limit.check(policy=policy, identifier="203.0.113.4")
    match result:
        case Success(value=decision) if not decision.admitted:
            ...  # 429
"""

from typing import Protocol

from exitplans.core.result import Result
from exitplans.domain.errors import RateLimitError
from exitplans.domain.value_objects.rate_limit_policy import (
    RateLimitPolicy,
    RateLimitResult,
)


class RateLimitProtocol(Protocol):
    """Protocol for admission control.

    Degrade-Open Design:
        check() MUST return Success(admitted=True) when the counter store is
        unconfigured or failing. Infrastructure outages never deny service.
    """

    async def check(
        self,
        *,
        policy: RateLimitPolicy,
        identifier: str,
    ) -> Result[RateLimitResult, RateLimitError]:
        """Atomically check the window and record the request if admitted.

        Args:
            policy: Policy chosen by the endpoint.
            identifier: Caller identity; blank values map to "unknown".

        Returns:
            Success(RateLimitResult): Always, including degrade-open results.
        """
        ...

    async def reset(
        self,
        *,
        policy: RateLimitPolicy,
        identifier: str,
    ) -> Result[None, RateLimitError]:
        """Clear the window for an identifier.

        Unlike check(), reset does NOT degrade open.

        Args:
            policy: Policy whose window is cleared.
            identifier: Caller identity.

        Returns:
            Success(None) or Failure(RateLimitError).
        """
        ...
