"""Outbound dispatch envelopes.

JSON bodies sent fire-and-forget to the workflow engine. Field names are
snake_case in Python and camelCase on the wire (serialize with
model_dump(by_alias=True)).

Envelopes:
    - NudgeEnvelope: Coaching nudge request (email generated by the engine)
    - JobEnvelope: Asynchronous job submission with callback URL
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Envelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class NudgeTask(_Envelope):
    """Incomplete task scheduled for the current plan day."""

    id: str
    day: int
    title: str


class NudgeEnvelope(_Envelope):
    """Coaching nudge request.

    Attributes:
        email: Recipient email.
        user_name: Display name (defaults to the email local part).
        business_title: Roadmap title.
        roadmap_id: Roadmap identifier.
        current_day: 1-based plan day.
        progress_pct: Completed tasks as a rounded percentage.
        coaching_style: Preferred tone.
        content_depth: Preferred level of detail.
        todays_tasks: Up to three incomplete tasks for current_day.
        blocked_reason: What the user says is blocking them.
        request_type: Kind of nudge (check_in, blocked, ...).
    """

    email: str
    user_name: str
    business_title: str
    roadmap_id: str
    current_day: int
    progress_pct: int
    coaching_style: str | None = None
    content_depth: str | None = None
    todays_tasks: list[NudgeTask] = Field(default_factory=list)
    blocked_reason: str = ""
    request_type: str = "check_in"


class JobEnvelope(_Envelope):
    """Asynchronous job submission.

    Attributes:
        job_id: Tracker job id echoed back in the callback.
        type: Job type value.
        payload: Caller-supplied job input.
        callback_url: Where the engine posts the result.
    """

    job_id: str
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
    callback_url: str
