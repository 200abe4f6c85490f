"""Provider protocol for provider chains.

A provider is one interchangeable backend able to turn a unit of work into a
validated result: an external workflow webhook, an AI API, or a deterministic
local fallback. Chains are ordered lists of providers, so adding or reordering
backends is a data change.

Usage:
    providers: list[ProviderProtocol[IdeaInput, IdeaAnalysis]] = [
        n8n_provider,
        gemini_provider,
        heuristic_provider,
    ]
    result = await orchestrator.run(work=idea, providers=providers)
"""

from typing import Protocol, TypeVar

from exitplans.core.result import Result
from exitplans.domain.errors import ProviderError

InputT = TypeVar("InputT", contravariant=True)
OutputT = TypeVar("OutputT", covariant=True)


class ProviderProtocol(Protocol[InputT, OutputT]):
    """One backend in a provider chain.

    Attributes:
        name: Provider identifier used in logs and ChainResult.provider_used.
        available: Capability flag computed at startup; unavailable providers
            are skipped, never attempted.
        timeout_seconds: Per-attempt deadline enforced by the orchestrator;
            None for local deterministic providers.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        ...

    @property
    def available(self) -> bool:
        """Whether the provider is configured."""
        ...

    @property
    def timeout_seconds(self) -> float | None:
        """Per-attempt deadline in seconds."""
        ...

    async def attempt(self, work: InputT) -> Result[OutputT, ProviderError]:
        """Produce a validated result for work.

        Raw output must be parsed and validated before returning Success;
        malformed output is Failure(ProviderInvalidResponseError).

        Args:
            work: Unit of work.

        Returns:
            Success(output) or Failure(ProviderError).
        """
        ...
