"""Roadmap progress snapshot used in coaching nudge envelopes."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from exitplans.core.constants import TODAYS_TASKS_LIMIT
from exitplans.domain.value_objects.coaching import progress_percentage


@dataclass(frozen=True, slots=True, kw_only=True)
class RoadmapTask:
    """A single roadmap task scheduled for a plan day."""

    id: str
    day: int
    title: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RoadmapProgress:
    """Point-in-time progress of a roadmap.

    Attributes:
        current_day: 1-based plan day.
        progress_pct: Completed tasks as a rounded percentage.
        todays_tasks: Up to three incomplete tasks for current_day.
    """

    current_day: int
    progress_pct: int
    todays_tasks: tuple[RoadmapTask, ...]

    @classmethod
    def compute(
        cls,
        *,
        start_date: datetime,
        tasks: Iterable[RoadmapTask],
        completed_task_ids: Iterable[str],
        now: datetime,
    ) -> "RoadmapProgress":
        """Compute progress from roadmap state.

        Args:
            start_date: When the plan started (aware datetime).
            tasks: All roadmap tasks.
            completed_task_ids: IDs of completed tasks.
            now: Current time (aware datetime).

        Returns:
            RoadmapProgress: Snapshot for the nudge envelope.

        Example:
            >>> RoadmapProgress.compute(
            ...     start_date=now - timedelta(days=2, hours=3),
            ...     tasks=tasks,
            ...     completed_task_ids={"t1"},
            ...     now=now,
            ... ).current_day
            3
        """
        all_tasks = list(tasks)
        completed = set(completed_task_ids)
        current_day = max(1, (now - start_date) // timedelta(days=1) + 1)
        todays = tuple(
            task
            for task in all_tasks
            if task.day == current_day and task.id not in completed
        )[:TODAYS_TASKS_LIMIT]
        return cls(
            current_day=current_day,
            progress_pct=progress_percentage(len(completed), len(all_tasks)),
            todays_tasks=todays,
        )
