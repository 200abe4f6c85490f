"""Asynchronous job tracker.

Owns the job lifecycle: jobs are created by the triggering request and
completed later by the workflow engine's callback. Updates go through the
store's atomic read-modify-write, so concurrent and repeated callbacks are
safe: the first terminal write wins and later ones are reported as not
applied.

Completion hooks run once, when an update newly moves a job to COMPLETED
with a non-empty result.
Hook failures are logged and swallowed; they never change the callback's
outcome.

Usage:
    tracker = JobTracker(
        store=job_store,
        logger=logger,
        completion_handlers={JobType.VALIDATION: validation_handler},
    )
    result = await tracker.update_job(job_id, JobStatus.COMPLETED, result=payload)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol

from exitplans.core.enums import ErrorCode
from exitplans.core.errors import DomainError, ValidationError
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.entities.job import Job
from exitplans.domain.enums import JobStatus, JobType
from exitplans.domain.errors import JobError, JobNotFoundError
from exitplans.domain.protocols.job_store_protocol import JobStoreProtocol
from exitplans.domain.protocols.logger_protocol import LoggerProtocol


class CompletionHandler(Protocol):
    """Side effect run when a job of one type completes."""

    async def handle(self, job: Job) -> Result[None, DomainError]:
        """Run the side effect for a newly completed job.

        Args:
            job: Job in COMPLETED state.

        Returns:
            Success(None) or Failure(DomainError); failures are only logged.
        """
        ...


@dataclass(frozen=True, slots=True, kw_only=True)
class JobUpdate:
    """Outcome of an update request.

    Attributes:
        job: Stored job after the call.
        applied: False when the update was ignored (duplicate or backward).
    """

    job: Job
    applied: bool


class JobTracker:
    """Create, complete and look up asynchronous jobs.

    Dependencies (injected via constructor):
        - JobStoreProtocol: Durable storage with atomic updates
        - LoggerProtocol: Structured logging
        - Completion handlers keyed by JobType
    """

    def __init__(
        self,
        *,
        store: JobStoreProtocol,
        logger: LoggerProtocol,
        completion_handlers: Mapping[JobType, CompletionHandler] | None = None,
    ) -> None:
        """Initialize tracker.

        Args:
            store: Job store.
            logger: Logger.
            completion_handlers: Hooks run when a job newly completes.
        """
        self._store = store
        self._logger = logger
        self._completion_handlers = dict(completion_handlers or {})

    async def create_job(self, job_type: JobType) -> Result[Job, JobError]:
        """Create and store a new PENDING job.

        Args:
            job_type: Kind of work.

        Returns:
            Success(Job) or Failure(JobError) when the store fails.
        """
        job = Job.create(job_type)
        result = await self._store.add(job)
        if isinstance(result, Failure):
            self._logger.error(
                "Job creation failed",
                job_type=job_type.value,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
            return result

        self._logger.info("Job created", job_id=job.id, job_type=job_type.value)
        return Success(value=job)

    async def get_job(self, job_id: str) -> Result[Job | None, JobError]:
        """Look up a job; unknown or malformed ids give Success(None)."""
        return await self._store.get(job_id)

    async def update_job(
        self,
        job_id: str,
        status: JobStatus,
        result: Any = None,
        error: str | None = None,
    ) -> Result[JobUpdate, DomainError]:
        """Move a job forward in its lifecycle.

        Args:
            job_id: Job identifier.
            status: Target status (PROCESSING, COMPLETED or FAILED).
            result: Result payload for COMPLETED.
            error: Error message for FAILED.

        Returns:
            Success(JobUpdate): applied=True if the job moved, False if the
                update was a duplicate or backward transition.
            Failure(ValidationError): status is PENDING.
            Failure(JobNotFoundError): Unknown job id.
            Failure(JobError): Store failure.
        """
        if status == JobStatus.PENDING:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_JOB_STATUS,
                    message="A job cannot be moved back to PENDING",
                    field="status",
                )
            )

        now = datetime.now(UTC)

        def mutation(current: Job) -> Job | None:
            if not current.can_transition_to(status):
                return None
            return current.transition(status, result=result, error=error, now=now)

        store_result = await self._store.update(job_id, mutation)

        if isinstance(store_result, Failure):
            self._logger.error(
                "Job update failed",
                job_id=job_id,
                status=status.value,
                error_code=store_result.error.code.value,
                error_message=store_result.error.message,
            )
            return store_result

        if store_result.value is None:
            self._logger.warning("Job update for unknown job", job_id=job_id)
            return Failure(error=JobNotFoundError.for_id(job_id))

        job, applied = store_result.value

        if not applied:
            self._logger.info(
                "Job update ignored",
                job_id=job_id,
                requested_status=status.value,
                current_status=job.status.value,
            )
            return Success(value=JobUpdate(job=job, applied=False))

        self._logger.info(
            "Job updated",
            job_id=job_id,
            job_type=job.type.value,
            status=job.status.value,
        )

        if job.status == JobStatus.COMPLETED:
            await self._run_completion_handler(job)

        return Success(value=JobUpdate(job=job, applied=True))

    async def _run_completion_handler(self, job: Job) -> None:
        handler = self._completion_handlers.get(job.type)
        if handler is None:
            return
        if not job.result:
            self._logger.info(
                "Job completed without a result; completion handler skipped",
                job_id=job.id,
                job_type=job.type.value,
            )
            return

        try:
            outcome = await handler.handle(job)
        except Exception as e:  # noqa: BLE001 - secondary effects never fail the callback
            self._logger.error(
                "Job completion handler crashed",
                error=e,
                job_id=job.id,
                job_type=job.type.value,
            )
            return

        if isinstance(outcome, Failure):
            self._logger.error(
                "Job completion handler failed",
                job_id=job.id,
                job_type=job.type.value,
                error_code=outcome.error.code.value,
                error_message=outcome.error.message,
            )
