"""Fire-and-forget dispatcher protocol."""

from typing import Any, Protocol


class DispatcherProtocol(Protocol):
    """Best-effort, unacknowledged outbound notifications.

    dispatch() returns immediately. The send runs on a detached task bounded
    by timeout_seconds; its outcome is logged and never reported back.
    """

    def dispatch(
        self,
        url: str,
        envelope: dict[str, Any],
        *,
        timeout_seconds: float,
        purpose: str,
    ) -> None:
        """Schedule a send and return without waiting.

        Args:
            url: Destination endpoint.
            envelope: JSON body.
            timeout_seconds: Upper bound on the send.
            purpose: Short label for logs (e.g., "coach_nudge").
        """
        ...

    async def drain(self) -> None:
        """Wait for in-flight sends (shutdown and tests)."""
        ...
