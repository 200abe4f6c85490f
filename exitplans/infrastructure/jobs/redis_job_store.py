"""Redis-backed job store.

Jobs are stored as JSON strings under `job:{id}` with a TTL. Updates use
optimistic locking (WATCH/MULTI/EXEC): the job is read under WATCH, the
mutation is applied in Python, and the write is committed only if nobody else
wrote the key in between. Conflicts are retried a bounded number of times.
"""

import json
from typing import Any

from redis.exceptions import RedisError, WatchError

from exitplans.core.constants import JOB_KEY_PREFIX, JOB_UPDATE_MAX_RETRIES
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.entities.job import Job
from exitplans.domain.errors import JobError
from exitplans.domain.protocols.job_store_protocol import JobMutation


class RedisJobStore:
    """Job store on Redis (implements JobStoreProtocol).

    Args:
        redis_client: Async Redis client created with decode_responses=True.
        ttl_seconds: Expiry applied on every write.
        max_retries: Optimistic-lock retries per update.
    """

    def __init__(
        self,
        *,
        redis_client: Any,
        ttl_seconds: int,
        max_retries: int = JOB_UPDATE_MAX_RETRIES,
    ) -> None:
        self.redis = redis_client
        self._ttl_seconds = ttl_seconds
        self._max_retries = max_retries

    @staticmethod
    def _key(job_id: str) -> str:
        return f"{JOB_KEY_PREFIX}:{job_id}"

    async def add(self, job: Job) -> Result[None, JobError]:
        """Store a new job with TTL."""
        try:
            await self.redis.set(
                self._key(job.id), json.dumps(job.to_dict()), ex=self._ttl_seconds
            )
            return Success(value=None)
        except RedisError as exc:
            return Failure(error=self._store_error("add", job.id, exc))

    async def get(self, job_id: str) -> Result[Job | None, JobError]:
        """Fetch and decode a job; unknown ids give Success(None)."""
        try:
            raw = await self.redis.get(self._key(job_id))
        except RedisError as exc:
            return Failure(error=self._store_error("get", job_id, exc))
        if raw is None:
            return Success(value=None)
        try:
            return Success(value=Job.from_dict(json.loads(raw)))
        except (ValueError, KeyError) as exc:
            return Failure(error=self._store_error("decode", job_id, exc))

    async def update(
        self, job_id: str, mutation: JobMutation
    ) -> Result[tuple[Job, bool] | None, JobError]:
        """Apply mutation under WATCH/MULTI with bounded retries.

        Args:
            job_id: Job identifier.
            mutation: Current job to replacement (None keeps the job).

        Returns:
            Success((job, applied)), Success(None) for unknown ids,
            Failure(JobError) on Redis errors or when retries run out.
        """
        key = self._key(job_id)
        try:
            async with self.redis.pipeline(transaction=True) as pipe:
                for _ in range(self._max_retries):
                    try:
                        await pipe.watch(key)
                        raw = await pipe.get(key)
                        if raw is None:
                            await pipe.unwatch()
                            return Success(value=None)

                        current = Job.from_dict(json.loads(raw))
                        updated = mutation(current)
                        if updated is None:
                            await pipe.unwatch()
                            return Success(value=(current, False))

                        pipe.multi()
                        pipe.set(key, json.dumps(updated.to_dict()), ex=self._ttl_seconds)
                        await pipe.execute()
                        return Success(value=(updated, True))
                    except WatchError:
                        continue
        except (RedisError, ValueError, KeyError) as exc:
            return Failure(error=self._store_error("update", job_id, exc))

        return Failure(
            error=JobError(
                code=ErrorCode.JOB_UPDATE_CONFLICT,
                message=f"Job '{job_id}' kept changing; update abandoned",
                details={"job_id": job_id, "retries": self._max_retries},
            )
        )

    @staticmethod
    def _store_error(operation: str, job_id: str, exc: Exception) -> JobError:
        return JobError(
            code=ErrorCode.JOB_STORE_FAILED,
            message=f"Job store {operation} failed for '{job_id}': {exc}",
            details={"job_id": job_id, "operation": operation},
        )
