"""Job store protocol.

The store's update() is an atomic read-modify-write by id. Together with the
single-writer rule (only the completion callback mutates a job after
creation) this keeps the job state machine race-free without locks.
"""

from collections.abc import Callable
from typing import Protocol

from exitplans.core.result import Result
from exitplans.domain.entities.job import Job
from exitplans.domain.errors import JobError

JobMutation = Callable[[Job], Job | None]
"""Receives the stored job; returns the replacement, or None to keep it."""


class JobStoreProtocol(Protocol):
    """Durable job storage.

    Implementations:
        - RedisJobStore: JSON values, WATCH/MULTI optimistic updates
        - InMemoryJobStore: Single-process, tests
    """

    async def add(self, job: Job) -> Result[None, JobError]:
        """Persist a newly created job.

        Args:
            job: Job to store.

        Returns:
            Success(None) or Failure(JobError).
        """
        ...

    async def get(self, job_id: str) -> Result[Job | None, JobError]:
        """Fetch a job by id.

        Args:
            job_id: Job identifier.

        Returns:
            Success(Job), Success(None) when unknown, or Failure(JobError).
        """
        ...

    async def update(
        self, job_id: str, mutation: JobMutation
    ) -> Result[tuple[Job, bool] | None, JobError]:
        """Atomically apply mutation to the stored job.

        Args:
            job_id: Job identifier.
            mutation: Pure function from the current job to its replacement
                (or None to leave it untouched). May run more than once under
                contention.

        Returns:
            Success((job, applied)) with the stored job after the call,
            Success(None) when the job is unknown, or Failure(JobError).
        """
        ...
