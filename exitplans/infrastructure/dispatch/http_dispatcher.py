"""Fire-and-forget HTTP dispatcher.

dispatch() schedules the send on a detached asyncio task and returns at once.
The task holds the only meaningful reference to the send, so the dispatcher
keeps tasks in a set until they finish; otherwise the event loop could
garbage-collect a pending send.

Failure policy:
    Non-2xx responses, timeouts and connection errors are logged. Nothing is
    raised to the caller and nothing is retried.
"""

import asyncio
from time import perf_counter
from typing import Any

import httpx

from exitplans.domain.protocols.logger_protocol import LoggerProtocol


class HttpDispatcher:
    """Detached-task JSON POST sender (implements DispatcherProtocol).

    Args:
        logger: Logger for send outcomes.
    """

    def __init__(self, *, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of sends still in flight."""
        return len(self._tasks)

    def dispatch(
        self,
        url: str,
        envelope: dict[str, Any],
        *,
        timeout_seconds: float,
        purpose: str,
    ) -> None:
        """Schedule a POST of envelope to url without waiting for it.

        Must be called from a running event loop (request handlers).

        Args:
            url: Destination endpoint.
            envelope: JSON body.
            timeout_seconds: Total deadline for the send, body included.
            purpose: Short label for logs.
        """
        task = asyncio.get_running_loop().create_task(
            self._send(url, envelope, timeout_seconds=timeout_seconds, purpose=purpose)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._logger.debug("Dispatch scheduled", purpose=purpose, url=url)

    async def drain(self) -> None:
        """Wait for every in-flight send to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _send(
        self,
        url: str,
        envelope: dict[str, Any],
        *,
        timeout_seconds: float,
        purpose: str,
    ) -> None:
        start = perf_counter()
        try:
            # httpx timeouts bound each phase; the outer deadline bounds the send.
            async with asyncio.timeout(timeout_seconds):
                async with httpx.AsyncClient(timeout=timeout_seconds) as client:
                    response = await client.post(url, json=envelope)
        except (TimeoutError, httpx.TimeoutException) as e:
            self._logger.error(
                "Dispatch timed out",
                error=e,
                purpose=purpose,
                url=url,
                timeout_seconds=timeout_seconds,
            )
            return
        except httpx.HTTPError as e:
            self._logger.error("Dispatch failed", error=e, purpose=purpose, url=url)
            return
        except Exception as e:  # noqa: BLE001 - a detached task has no caller to raise to
            self._logger.error("Dispatch crashed", error=e, purpose=purpose, url=url)
            return

        latency_ms = round((perf_counter() - start) * 1000, 1)
        if response.is_success:
            self._logger.info(
                "Dispatch sent",
                purpose=purpose,
                status_code=response.status_code,
                latency_ms=latency_ms,
            )
        else:
            self._logger.error(
                "Dispatch rejected",
                purpose=purpose,
                url=url,
                status_code=response.status_code,
                latency_ms=latency_ms,
            )
