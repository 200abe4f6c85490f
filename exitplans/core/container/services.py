"""Application service and provider chain factories.

Provider lists and services are built once from capabilities: endpoints are
passed to constructors only when their capability flag is set, so Capabilities
is the single switch for every optional collaborator. A provider whose
endpoint or key is missing is still part of its chain, but reports
available=False and is skipped by the orchestrator.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from exitplans.core.config import settings
from exitplans.core.container.infrastructure import (
    get_capabilities,
    get_dispatcher,
    get_job_store,
    get_logger,
    get_record_store,
)

if TYPE_CHECKING:
    from exitplans.application.services import (
        CoachNudgeService,
        JobSubmissionService,
        JobTracker,
        ProviderChainOrchestrator,
    )
    from exitplans.domain.protocols.provider_protocol import ProviderProtocol
    from exitplans.domain.value_objects import (
        CoachingReply,
        CoachingRequest,
        IdeaAnalysis,
        IdeaInput,
    )
    from exitplans.infrastructure.providers import GeminiClient


def _endpoint(enabled: bool, url: str | None) -> str | None:
    """Return url when its capability is enabled, else None."""
    return url if enabled else None


@lru_cache()
def get_orchestrator() -> "ProviderChainOrchestrator":
    """Get the provider chain orchestrator singleton."""
    from exitplans.application.services import ProviderChainOrchestrator

    return ProviderChainOrchestrator(logger=get_logger())


@lru_cache()
def get_gemini_client() -> "GeminiClient | None":
    """Get the Gemini client, or None when no API key is configured."""
    if not get_capabilities().gemini:
        return None

    from exitplans.infrastructure.providers import GeminiClient

    return GeminiClient(
        api_key=settings.google_gemini_api_key or "",
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.gemini_timeout_seconds,
    )


@lru_cache()
def get_validation_providers() -> "tuple[ProviderProtocol[IdeaInput, IdeaAnalysis], ...]":
    """Idea validation chain: workflow webhook, then Gemini, then heuristic.

    Returns:
        Providers in priority order.
    """
    from exitplans.infrastructure.providers import (
        GeminiValidationProvider,
        HeuristicValidationProvider,
        N8nValidationProvider,
    )

    return (
        N8nValidationProvider(
            webhook_url=_endpoint(
                get_capabilities().n8n_validation, settings.n8n_validation_url
            ),
            timeout_seconds=settings.n8n_validation_timeout_seconds,
        ),
        GeminiValidationProvider(
            client=get_gemini_client(),
            timeout_seconds=settings.gemini_timeout_seconds,
        ),
        HeuristicValidationProvider(),
    )


@lru_cache()
def get_coach_providers() -> "tuple[ProviderProtocol[CoachingRequest, CoachingReply], ...]":
    """Coaching chain: Gemini, then heuristic.

    Returns:
        Providers in priority order.
    """
    from exitplans.infrastructure.providers import (
        GeminiCoachProvider,
        HeuristicCoachProvider,
    )

    return (
        GeminiCoachProvider(
            client=get_gemini_client(),
            timeout_seconds=settings.gemini_timeout_seconds,
        ),
        HeuristicCoachProvider(),
    )


@lru_cache()
def get_job_tracker() -> "JobTracker":
    """Get the job tracker with its completion hooks.

    VALIDATION jobs save a validated idea record when they complete.
    """
    from exitplans.application.services import (
        JobTracker,
        ValidationCompletionHandler,
    )
    from exitplans.domain.enums import JobType

    return JobTracker(
        store=get_job_store(),
        logger=get_logger(),
        completion_handlers={
            JobType.VALIDATION: ValidationCompletionHandler(
                record_store=get_record_store()
            ),
        },
    )


@lru_cache()
def get_job_submission_service() -> "JobSubmissionService":
    """Get the job submission service."""
    from exitplans.application.services import JobSubmissionService

    return JobSubmissionService(
        tracker=get_job_tracker(),
        dispatcher=get_dispatcher(),
        logger=get_logger(),
        jobs_url=_endpoint(get_capabilities().n8n_jobs, settings.n8n_jobs_url),
        callback_url=settings.job_callback_url,
        timeout_seconds=settings.job_dispatch_timeout_seconds,
    )


@lru_cache()
def get_coach_nudge_service() -> "CoachNudgeService":
    """Get the coaching nudge service."""
    from exitplans.application.services import CoachNudgeService

    return CoachNudgeService(
        dispatcher=get_dispatcher(),
        logger=get_logger(),
        nudge_url=_endpoint(
            get_capabilities().n8n_coach_nudge, settings.n8n_coach_nudge_url
        ),
        timeout_seconds=settings.nudge_timeout_seconds,
    )
