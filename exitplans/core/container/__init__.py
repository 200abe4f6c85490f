"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from exitplans.core.container import get_logger, get_job_tracker

The container is organized into modules:
- infrastructure: Core services (Redis, logging, rate limiting, stores, dispatch)
- services: Provider chains and application services
"""

from exitplans.core.container.infrastructure import (
    get_capabilities,
    get_dispatcher,
    get_job_store,
    get_logger,
    get_rate_limit,
    get_record_store,
    get_redis_client,
)
from exitplans.core.container.services import (
    get_coach_nudge_service,
    get_coach_providers,
    get_gemini_client,
    get_job_submission_service,
    get_job_tracker,
    get_orchestrator,
    get_validation_providers,
)

__all__ = [
    "get_capabilities",
    "get_coach_nudge_service",
    "get_coach_providers",
    "get_dispatcher",
    "get_gemini_client",
    "get_job_store",
    "get_job_submission_service",
    "get_job_tracker",
    "get_logger",
    "get_orchestrator",
    "get_rate_limit",
    "get_record_store",
    "get_redis_client",
    "get_validation_providers",
]
