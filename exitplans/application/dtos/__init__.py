"""Application DTOs."""

from exitplans.application.dtos.dispatch_envelopes import (
    JobEnvelope,
    NudgeEnvelope,
    NudgeTask,
)

__all__ = ["JobEnvelope", "NudgeEnvelope", "NudgeTask"]
