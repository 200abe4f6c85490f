"""Provider attempt records and chain results.

ProviderAttempt records are ephemeral: built by the chain orchestrator, logged,
and returned for diagnostics. They are never persisted.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from exitplans.domain.enums import AttemptOutcome

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderAttempt:
    """One provider attempt inside a chain.

    Attributes:
        provider_name: Provider identifier (e.g., "n8n", "gemini").
        started_at: When the attempt started (UTC).
        timeout_seconds: Deadline for the attempt; None means unbounded.
        outcome: success, timeout, error or skipped.
        latency_ms: Wall time spent on the attempt.
        error_message: Failure description (never sent to clients).
    """

    provider_name: str
    started_at: datetime
    timeout_seconds: float | None
    outcome: AttemptOutcome
    latency_ms: float = 0.0
    error_message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChainResult(Generic[T]):
    """Successful chain run.

    Attributes:
        value: Output of the provider that succeeded.
        provider_used: Name of that provider.
        attempts: Every attempt in order, ending with the successful one.
    """

    value: T
    provider_used: str
    attempts: tuple[ProviderAttempt, ...]
