"""Coaching request/response schemas.

Endpoints:
    POST /coach-nudge - Request an emailed coaching nudge
    POST /coach-chat  - Chat with the AI business coach
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from exitplans.application.services import NudgeRequest
from exitplans.domain.value_objects import (
    ChatMessage,
    CoachingRequest,
    RoadmapContext,
    RoadmapTask,
)
from exitplans.schemas.common_schemas import CamelModel


# =============================================================================
# Coach Nudge
# =============================================================================


class RoadmapTaskSchema(CamelModel):
    """Roadmap task."""

    id: str
    day: int = Field(..., ge=1)
    title: str


class CoachNudgeRequest(CamelModel):
    """Request schema for a coaching nudge.

    POST /coach-nudge

    The caller owns roadmap storage and sends the snapshot needed to compute
    today's progress.
    """

    email: str = Field(..., min_length=3, description="Recipient email")
    user_name: str | None = Field(None, description="Display name")
    business_title: str = Field(..., min_length=1, description="Roadmap title")
    roadmap_id: str = Field(..., min_length=1, description="Roadmap identifier")
    start_date: datetime = Field(..., description="Plan start date")
    tasks: list[RoadmapTaskSchema] = Field(default_factory=list)
    completed_task_ids: list[str] = Field(default_factory=list)
    coaching_style: str | None = None
    content_depth: str | None = None
    blocked_reason: str = ""
    request_type: str = "check_in"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "founder@example.com",
                "businessTitle": "ShiftSwap",
                "roadmapId": "rm_123",
                "startDate": "2024-05-01T00:00:00Z",
                "tasks": [{"id": "t1", "day": 1, "title": "Interview 5 managers"}],
                "completedTaskIds": [],
                "requestType": "check_in",
            }
        }
    )

    @field_validator("start_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive start dates as UTC."""
        return v if v.tzinfo is not None else v.replace(tzinfo=UTC)

    def to_nudge_request(self) -> NudgeRequest:
        """Convert to the service request."""
        return NudgeRequest(
            email=self.email,
            user_name=self.user_name,
            business_title=self.business_title,
            roadmap_id=self.roadmap_id,
            start_date=self.start_date,
            tasks=tuple(
                RoadmapTask(id=task.id, day=task.day, title=task.title)
                for task in self.tasks
            ),
            completed_task_ids=frozenset(self.completed_task_ids),
            coaching_style=self.coaching_style,
            content_depth=self.content_depth,
            blocked_reason=self.blocked_reason,
            request_type=self.request_type,
        )


class CoachNudgeResponse(CamelModel):
    """Response schema for a coaching nudge.

    POST /coach-nudge
    Returns: 200 OK (the nudge is sent in the background)
    """

    success: bool = True
    message: str = "Nudge on its way to your inbox!"
    current_day: int
    progress_pct: int


# =============================================================================
# Coach Chat
# =============================================================================


class ChatMessageSchema(CamelModel):
    """Prior chat message."""

    role: Literal["user", "assistant"]
    content: str


class RoadmapContextSchema(CamelModel):
    """Business and roadmap context for the coach."""

    business: str = Field(..., min_length=1)
    business_type: str | None = None
    industry: str | None = None
    target_customer: str | None = None
    problem_solved: str | None = None
    hours_per_week: int | None = Field(None, ge=0)
    budget: str | None = None
    biggest_gap: str | None = None
    revenue_goal: str | None = None
    completed_tasks: int = Field(0, ge=0)
    total_tasks: int = Field(0, ge=0)
    current_day: int = Field(1, ge=1)
    total_days: int = Field(84, ge=1)
    first_sale_target: str | None = None
    coaching_style: str = "balanced"

    def to_context(self) -> RoadmapContext:
        """Convert to the RoadmapContext value object."""
        return RoadmapContext(**self.model_dump())


class CoachChatRequest(CamelModel):
    """Request schema for coach chat.

    POST /coach-chat
    """

    message: str = Field(..., description="User message")
    context: RoadmapContextSchema | None = None
    history: list[ChatMessageSchema] = Field(default_factory=list)

    def to_coaching_request(self) -> CoachingRequest:
        """Convert to the CoachingRequest value object."""
        return CoachingRequest(
            message=self.message.strip(),
            context=self.context.to_context() if self.context else None,
            history=tuple(
                ChatMessage(role=m.role, content=m.content) for m in self.history
            ),
        )


class CoachChatResponse(CamelModel):
    """Response schema for coach chat.

    POST /coach-chat
    Returns: 200 OK
    """

    reply: str
    provider_used: str = Field(..., examples=["gemini", "heuristic"])
