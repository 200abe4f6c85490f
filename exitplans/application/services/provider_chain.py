"""Provider chain orchestrator.

Runs an ordered list of interchangeable providers for one unit of work and
returns the first success. Each provider gets at most one attempt, bounded by
its own timeout; failures, timeouts and crashes move the chain on to the next
provider immediately.

Architecture:
    - Application service (depends only on domain protocols)
    - Providers are data: adding or reordering backends changes the list,
      not this loop
    - Returns Result types; exhaustion is a single AllProvidersFailedError

Usage:
    orchestrator = ProviderChainOrchestrator(logger=logger)
    result = await orchestrator.run(
        chain_name="idea_validation",
        work=idea,
        providers=[n8n_provider, gemini_provider, heuristic_provider],
    )
    match result:
        case Success(value=chain_result):
            analysis = chain_result.value
        case Failure(error=error):
            ...  # generic 500
"""

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime
from time import perf_counter
from typing import Any, TypeVar

from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.enums import AttemptOutcome
from exitplans.domain.errors import AllProvidersFailedError, ProviderTimeoutError
from exitplans.domain.protocols.logger_protocol import LoggerProtocol
from exitplans.domain.protocols.provider_protocol import ProviderProtocol
from exitplans.domain.value_objects import ChainResult, ProviderAttempt

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class ProviderChainOrchestrator:
    """Sequential first-success runner over provider chains.

    Behavior per provider, in order:
        - Unavailable: recorded as skipped, never invoked.
        - Success within the timeout: recorded, returned; later providers
          are never invoked.
        - Failure result or raised exception: recorded as error.
        - Timeout: the attempt is cancelled and recorded as timeout.

    No provider is retried.
    """

    def __init__(self, *, logger: LoggerProtocol) -> None:
        """Initialize orchestrator.

        Args:
            logger: Logger for attempt outcomes and exhaustion.
        """
        self._logger = logger

    async def run(
        self,
        *,
        chain_name: str,
        work: InputT,
        providers: Sequence[ProviderProtocol[InputT, OutputT]],
    ) -> Result[ChainResult[OutputT], AllProvidersFailedError]:
        """Try providers in order until one succeeds.

        Args:
            chain_name: Chain identifier for logs and errors.
            work: Unit of work passed to every provider.
            providers: Providers in priority order.

        Returns:
            Success(ChainResult): First successful provider's output.
            Failure(AllProvidersFailedError): Every provider failed or was
                skipped (also for an empty chain).
        """
        attempts: list[ProviderAttempt] = []

        for provider in providers:
            started_at = datetime.now(UTC)
            timeout = provider.timeout_seconds

            if not provider.available:
                attempts.append(
                    ProviderAttempt(
                        provider_name=provider.name,
                        started_at=started_at,
                        timeout_seconds=timeout,
                        outcome=AttemptOutcome.SKIPPED,
                    )
                )
                self._logger.debug(
                    "Provider skipped (not configured)",
                    chain=chain_name,
                    provider=provider.name,
                )
                continue

            start = perf_counter()
            outcome: AttemptOutcome
            error_message: str | None = None
            value: Any = None

            try:
                result = await asyncio.wait_for(provider.attempt(work), timeout=timeout)
            except TimeoutError:
                outcome = AttemptOutcome.TIMEOUT
                error_message = f"Timed out after {timeout}s"
            except Exception as e:  # noqa: BLE001 - a crashing provider is a failed attempt
                outcome = AttemptOutcome.ERROR
                error_message = f"{type(e).__name__}: {e}"
            else:
                match result:
                    case Success(value=output):
                        outcome = AttemptOutcome.SUCCESS
                        value = output
                    case Failure(error=ProviderTimeoutError() as provider_error):
                        outcome = AttemptOutcome.TIMEOUT
                        error_message = provider_error.message
                    case Failure(error=provider_error):
                        outcome = AttemptOutcome.ERROR
                        error_message = provider_error.message

            attempt = ProviderAttempt(
                provider_name=provider.name,
                started_at=started_at,
                timeout_seconds=timeout,
                outcome=outcome,
                latency_ms=round((perf_counter() - start) * 1000, 1),
                error_message=error_message,
            )
            attempts.append(attempt)

            if outcome == AttemptOutcome.SUCCESS:
                self._logger.info(
                    "Provider attempt succeeded",
                    chain=chain_name,
                    provider=provider.name,
                    latency_ms=attempt.latency_ms,
                    attempt_number=len(attempts),
                )
                return Success(
                    value=ChainResult(
                        value=value,
                        provider_used=provider.name,
                        attempts=tuple(attempts),
                    )
                )

            self._logger.warning(
                "Provider attempt failed",
                chain=chain_name,
                provider=provider.name,
                outcome=outcome.value,
                latency_ms=attempt.latency_ms,
                error_message=error_message,
            )

        self._logger.error(
            "Provider chain exhausted",
            chain=chain_name,
            attempts=[
                {"provider": a.provider_name, "outcome": a.outcome.value}
                for a in attempts
            ],
        )
        return Failure(
            error=AllProvidersFailedError(
                code=ErrorCode.ALL_PROVIDERS_FAILED,
                message=f"All providers failed for chain '{chain_name}'",
                chain=chain_name,
                attempts=tuple(attempts),
            )
        )
