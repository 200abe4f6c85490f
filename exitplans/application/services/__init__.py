"""Application services."""

from exitplans.application.services.coach_nudge import CoachNudgeService, NudgeRequest
from exitplans.application.services.completion_handlers import (
    ValidationCompletionHandler,
)
from exitplans.application.services.job_submission import JobSubmissionService
from exitplans.application.services.job_tracker import (
    CompletionHandler,
    JobTracker,
    JobUpdate,
)
from exitplans.application.services.provider_chain import ProviderChainOrchestrator

__all__ = [
    "CoachNudgeService",
    "CompletionHandler",
    "JobSubmissionService",
    "JobTracker",
    "JobUpdate",
    "NudgeRequest",
    "ProviderChainOrchestrator",
    "ValidationCompletionHandler",
]
