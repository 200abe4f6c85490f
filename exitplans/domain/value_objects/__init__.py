"""Domain value objects.

Usage:
    from exitplans.domain.value_objects import RateLimitPolicy, RateLimitResult
"""

from exitplans.domain.value_objects.coaching import (
    ChatMessage,
    CoachingReply,
    CoachingRequest,
    RoadmapContext,
)
from exitplans.domain.value_objects.idea_analysis import (
    CompetitorLandscape,
    IdeaAnalysis,
    IdeaInput,
    MarketValidation,
)
from exitplans.domain.value_objects.provider_attempt import ChainResult, ProviderAttempt
from exitplans.domain.value_objects.rate_limit_policy import (
    RateLimitPolicy,
    RateLimitResult,
)
from exitplans.domain.value_objects.roadmap_progress import RoadmapProgress, RoadmapTask
from exitplans.domain.value_objects.validated_idea_record import ValidatedIdeaRecord

__all__ = [
    "ChainResult",
    "ChatMessage",
    "CoachingReply",
    "CoachingRequest",
    "CompetitorLandscape",
    "IdeaAnalysis",
    "IdeaInput",
    "MarketValidation",
    "ProviderAttempt",
    "RateLimitPolicy",
    "RateLimitResult",
    "RoadmapContext",
    "RoadmapProgress",
    "RoadmapTask",
    "ValidatedIdeaRecord",
]
