"""Asynchronous job lifecycle states.

State Machine:
    PENDING → PROCESSING → COMPLETED
    PENDING → PROCESSING → FAILED

    - PENDING: Created by the triggering request
    - PROCESSING: Workflow engine reported it picked the job up
    - COMPLETED: Result delivered (terminal)
    - FAILED: Error delivered (terminal)

Usage:
    from exitplans.domain.enums import JobStatus

    if job.status.is_terminal:
        # Late callbacks are duplicates
"""

from enum import Enum


class JobStatus(str, Enum):
    """Asynchronous job lifecycle states.

    String Enum:
        Values are uppercase to match the workflow engine's callback payloads.

    State Transitions:
        Forward only. PROCESSING may be skipped (PENDING → COMPLETED) when the
        engine reports the result directly. Nothing leaves a terminal state.
    """

    PENDING = "PENDING"
    """Initial state at creation."""

    PROCESSING = "PROCESSING"
    """Work picked up by the workflow engine."""

    COMPLETED = "COMPLETED"
    """Result recorded. Terminal."""

    FAILED = "FAILED"
    """Error recorded. Terminal."""

    @property
    def is_terminal(self) -> bool:
        """Whether no further transitions are allowed."""
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)

    @property
    def rank(self) -> int:
        """Position in the lifecycle (terminal states share the top rank)."""
        return _RANKS[self]


_RANKS: dict[JobStatus, int] = {
    JobStatus.PENDING: 0,
    JobStatus.PROCESSING: 1,
    JobStatus.COMPLETED: 2,
    JobStatus.FAILED: 2,
}
