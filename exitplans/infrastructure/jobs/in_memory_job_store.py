"""In-memory job store.

Used when no Redis URL is configured and in tests. update() performs its
read-modify-write without awaiting, so it is atomic within one event loop.
Jobs do not survive a restart.

Expiry mirrors the Redis store: every write sets a job's deadline to now plus
the TTL, and expired jobs read as unknown. Deadlines are kept in write order,
so eviction only inspects the oldest entries.
"""

from collections.abc import Callable
from time import monotonic

from exitplans.core.result import Result, Success
from exitplans.domain.entities.job import Job
from exitplans.domain.errors import JobError
from exitplans.domain.protocols.job_store_protocol import JobMutation


class InMemoryJobStore:
    """Dict-backed job store (implements JobStoreProtocol).

    Args:
        ttl_seconds: Expiry applied on every write. None keeps jobs forever.
        clock: Monotonic time source in seconds (for testing).
    """

    def __init__(
        self,
        *,
        ttl_seconds: int | None = None,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._jobs: dict[str, Job] = {}
        # job id -> deadline, ordered by last write
        self._deadlines: dict[str, float] = {}

    def __len__(self) -> int:
        self._evict_expired()
        return len(self._jobs)

    async def add(self, job: Job) -> Result[None, JobError]:
        self._evict_expired()
        self._write(job)
        return Success(value=None)

    async def get(self, job_id: str) -> Result[Job | None, JobError]:
        self._evict_expired()
        return Success(value=self._jobs.get(job_id))

    async def update(
        self, job_id: str, mutation: JobMutation
    ) -> Result[tuple[Job, bool] | None, JobError]:
        self._evict_expired()
        current = self._jobs.get(job_id)
        if current is None:
            return Success(value=None)
        updated = mutation(current)
        if updated is None:
            return Success(value=(current, False))
        self._write(updated)
        return Success(value=(updated, True))

    def _write(self, job: Job) -> None:
        self._jobs[job.id] = job
        if self._ttl_seconds is None:
            return
        self._deadlines.pop(job.id, None)
        self._deadlines[job.id] = self._clock() + self._ttl_seconds

    def _evict_expired(self) -> None:
        if self._ttl_seconds is None:
            return
        now = self._clock()
        while self._deadlines:
            job_id, deadline = next(iter(self._deadlines.items()))
            if deadline > now:
                break
            del self._deadlines[job_id]
            self._jobs.pop(job_id, None)
