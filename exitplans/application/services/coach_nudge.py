"""On-demand coaching nudge.

Computes the roadmap snapshot (current day, progress, today's tasks) and hands
the nudge to the workflow engine fire-and-forget. The caller gets the
snapshot back immediately; email generation and delivery happen elsewhere.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from exitplans.application.dtos import NudgeEnvelope, NudgeTask
from exitplans.domain.protocols.dispatcher_protocol import DispatcherProtocol
from exitplans.domain.protocols.logger_protocol import LoggerProtocol
from exitplans.domain.value_objects import RoadmapProgress, RoadmapTask


@dataclass(frozen=True, slots=True, kw_only=True)
class NudgeRequest:
    """Roadmap snapshot supplied by the caller.

    Attributes:
        email: Recipient email.
        user_name: Display name; None uses the email local part.
        business_title: Roadmap title.
        roadmap_id: Roadmap identifier.
        start_date: Plan start (aware datetime).
        tasks: All roadmap tasks.
        completed_task_ids: IDs of completed tasks.
        coaching_style: Preferred tone.
        content_depth: Preferred level of detail.
        blocked_reason: What is blocking the user.
        request_type: Kind of nudge.
    """

    email: str
    business_title: str
    roadmap_id: str
    start_date: datetime
    user_name: str | None = None
    tasks: tuple[RoadmapTask, ...] = ()
    completed_task_ids: frozenset[str] = field(default_factory=frozenset)
    coaching_style: str | None = None
    content_depth: str | None = None
    blocked_reason: str = ""
    request_type: str = "check_in"


class CoachNudgeService:
    """Build and dispatch coaching nudges."""

    def __init__(
        self,
        *,
        dispatcher: DispatcherProtocol,
        logger: LoggerProtocol,
        nudge_url: str | None,
        timeout_seconds: float,
    ) -> None:
        """Initialize service.

        Args:
            dispatcher: Fire-and-forget sender.
            logger: Logger.
            nudge_url: Nudge webhook; None disables sending.
            timeout_seconds: Bound on the send.
        """
        self._dispatcher = dispatcher
        self._logger = logger
        self._nudge_url = nudge_url
        self._timeout_seconds = timeout_seconds

    @property
    def configured(self) -> bool:
        """Whether nudges are sent (a webhook URL is set)."""
        return bool(self._nudge_url)

    def request_nudge(
        self, request: NudgeRequest, *, now: datetime | None = None
    ) -> RoadmapProgress:
        """Compute progress and schedule the nudge.

        Never waits for the send. Without a configured webhook the nudge is
        logged and dropped; the snapshot is still returned.

        Args:
            request: Roadmap snapshot.
            now: Current time override (for testing).

        Returns:
            RoadmapProgress: Snapshot reported back to the caller.
        """
        progress = RoadmapProgress.compute(
            start_date=request.start_date,
            tasks=request.tasks,
            completed_task_ids=request.completed_task_ids,
            now=now or datetime.now(UTC),
        )

        if not self.configured:
            self._logger.warning(
                "Coach nudge webhook not configured; nudge dropped",
                roadmap_id=request.roadmap_id,
            )
            return progress

        envelope = NudgeEnvelope(
            email=request.email,
            user_name=request.user_name or request.email.split("@")[0],
            business_title=request.business_title,
            roadmap_id=request.roadmap_id,
            current_day=progress.current_day,
            progress_pct=progress.progress_pct,
            coaching_style=request.coaching_style,
            content_depth=request.content_depth,
            todays_tasks=[
                NudgeTask(id=task.id, day=task.day, title=task.title)
                for task in progress.todays_tasks
            ],
            blocked_reason=request.blocked_reason,
            request_type=request.request_type,
        )
        self._dispatcher.dispatch(
            self._nudge_url,
            envelope.to_wire(),
            timeout_seconds=self._timeout_seconds,
            purpose="coach_nudge",
        )
        return progress
