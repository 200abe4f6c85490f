"""Provider chain backends.

Idea validation: N8nValidationProvider → GeminiValidationProvider →
HeuristicValidationProvider.

Coaching: GeminiCoachProvider → HeuristicCoachProvider.
"""

from exitplans.infrastructure.providers.gemini_client import GeminiClient
from exitplans.infrastructure.providers.gemini_coach_provider import GeminiCoachProvider
from exitplans.infrastructure.providers.gemini_validation_provider import (
    GeminiValidationProvider,
)
from exitplans.infrastructure.providers.heuristic_coach_provider import (
    HeuristicCoachProvider,
)
from exitplans.infrastructure.providers.heuristic_validation_provider import (
    HeuristicValidationProvider,
)
from exitplans.infrastructure.providers.n8n_validation_provider import (
    N8nValidationProvider,
)

__all__ = [
    "GeminiClient",
    "GeminiCoachProvider",
    "GeminiValidationProvider",
    "HeuristicCoachProvider",
    "HeuristicValidationProvider",
    "N8nValidationProvider",
]
