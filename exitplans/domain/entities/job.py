"""Job domain entity.

A job represents long-running work delegated to the external workflow engine.
It is created synchronously by the triggering request and completed later by
an inbound callback; clients poll it by id.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable: transitions return a new Job (dataclasses.replace)
    - State machine with forward-only transitions

Usage:
    from exitplans.domain.entities import Job
    from exitplans.domain.enums import JobStatus, JobType

    job = Job.create(JobType.VALIDATION)
    if job.can_transition_to(JobStatus.COMPLETED):
        job = job.transition(JobStatus.COMPLETED, result={"score": 72}, now=now)
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any

from uuid_extensions import uuid7

from exitplans.domain.enums import JobStatus, JobType


@dataclass(frozen=True, slots=True, kw_only=True)
class Job:
    """Asynchronous work unit tracked by id.

    State Machine:
        PENDING → PROCESSING → COMPLETED | FAILED

        Transitions only move forward. Terminal states accept nothing, so a
        late or repeated callback cannot change a finished job.

    Attributes:
        id: Opaque unique identifier (UUIDv7 string).
        type: Job type; decides completion side effects.
        status: Current lifecycle state.
        result: Result payload (any JSON value), present only when COMPLETED.
        error: Error message, present only when FAILED.
        created_at: Creation timestamp (UTC).
        updated_at: Last transition timestamp (UTC).
    """

    id: str
    type: JobType
    status: JobStatus = JobStatus.PENDING
    result: Any = None
    error: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, job_type: JobType, *, now: datetime | None = None) -> "Job":
        """Create a new PENDING job with a fresh id.

        Args:
            job_type: Kind of work.
            now: Creation time override (for testing).

        Returns:
            Job: New job in PENDING state.
        """
        created = now or datetime.now(UTC)
        return cls(
            id=str(uuid7()),
            type=job_type,
            status=JobStatus.PENDING,
            created_at=created,
            updated_at=created,
        )

    @property
    def is_terminal(self) -> bool:
        """Whether the job reached COMPLETED or FAILED."""
        return self.status.is_terminal

    def can_transition_to(self, status: JobStatus) -> bool:
        """Check whether moving to status is a forward transition.

        Args:
            status: Target status.

        Returns:
            bool: False from a terminal state or for same/backward moves.
        """
        if self.is_terminal:
            return False
        return status.rank > self.status.rank

    def transition(
        self,
        status: JobStatus,
        *,
        result: Any = None,
        error: str | None = None,
        now: datetime | None = None,
    ) -> "Job":
        """Return a copy of this job moved to status.

        Callers check can_transition_to() first; this method does not guard.
        Result is kept only for COMPLETED and error only for FAILED.

        Args:
            status: Target status.
            result: Result payload (COMPLETED).
            error: Error message (FAILED).
            now: Update time override (for testing).

        Returns:
            Job: Updated job.
        """
        return replace(
            self,
            status=status,
            result=result if status == JobStatus.COMPLETED else None,
            error=error if status == JobStatus.FAILED else None,
            updated_at=now or datetime.now(UTC),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage.

        Returns:
            dict[str, Any]: JSON-compatible representation.
        """
        return {
            "id": self.id,
            "type": self.type.value,
            "status": self.status.value,
            "result": self.result,
            "error": self.error,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Job":
        """Rebuild a job from its stored representation.

        Args:
            data: Output of to_dict().

        Returns:
            Job: Reconstructed job.
        """
        return cls(
            id=data["id"],
            type=JobType(data["type"]),
            status=JobStatus(data["status"]),
            result=data.get("result"),
            error=data.get("error"),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
