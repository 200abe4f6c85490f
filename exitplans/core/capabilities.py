"""Capability flags computed once at startup.

Optional infrastructure (Redis, n8n, Gemini) is detected from settings a
single time and passed into component constructors, instead of re-checking
environment variables at each call site.

Usage:
    from exitplans.core.capabilities import Capabilities
    from exitplans.core.config import settings

    capabilities = Capabilities.from_settings(settings)
    if not capabilities.rate_limit_store:
        ...  # admission control degrades open
"""

from dataclasses import asdict, dataclass

from exitplans.core.config import Settings


@dataclass(frozen=True, slots=True, kw_only=True)
class Capabilities:
    """Availability of optional collaborators.

    Attributes:
        rate_limit_store: Shared counter store configured (else degrade-open).
        job_store: Durable job store configured (else in-memory).
        n8n_validation: Synchronous validation webhook configured.
        n8n_jobs: Asynchronous job webhook configured.
        n8n_coach_nudge: Coaching nudge webhook configured.
        gemini: Gemini API key configured.
    """

    rate_limit_store: bool
    job_store: bool
    n8n_validation: bool
    n8n_jobs: bool
    n8n_coach_nudge: bool
    gemini: bool

    @classmethod
    def from_settings(cls, settings: Settings) -> "Capabilities":
        """Derive capability flags from settings.

        Args:
            settings: Application settings.

        Returns:
            Capabilities: Flags for every optional collaborator.
        """
        has_redis = bool(settings.redis_url)
        return cls(
            rate_limit_store=has_redis,
            job_store=has_redis,
            n8n_validation=settings.n8n_validation_url is not None,
            n8n_jobs=settings.n8n_jobs_url is not None,
            n8n_coach_nudge=settings.n8n_coach_nudge_url is not None,
            gemini=bool(settings.google_gemini_api_key),
        )

    def to_dict(self) -> dict[str, bool]:
        """Serialize for the health endpoint."""
        return asdict(self)
