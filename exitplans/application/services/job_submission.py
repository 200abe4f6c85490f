"""Asynchronous job submission.

Creates a tracked job and hands the work to the workflow engine
fire-and-forget. The engine reports back through the job-result webhook,
which completes the job via JobTracker.update_job().
"""

from typing import Any

from exitplans.application.dtos import JobEnvelope
from exitplans.application.services.job_tracker import JobTracker
from exitplans.core.enums import ErrorCode
from exitplans.core.errors import DomainError
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.entities.job import Job
from exitplans.domain.enums import JobType
from exitplans.domain.errors import ProviderUnavailableError
from exitplans.domain.protocols.dispatcher_protocol import DispatcherProtocol
from exitplans.domain.protocols.logger_protocol import LoggerProtocol


class JobSubmissionService:
    """Create jobs and dispatch them to the job workflow."""

    def __init__(
        self,
        *,
        tracker: JobTracker,
        dispatcher: DispatcherProtocol,
        logger: LoggerProtocol,
        jobs_url: str | None,
        callback_url: str,
        timeout_seconds: float,
    ) -> None:
        """Initialize service.

        Args:
            tracker: Job tracker.
            dispatcher: Fire-and-forget sender.
            logger: Logger.
            jobs_url: Job workflow webhook; None means jobs are unavailable.
            callback_url: Job-result webhook URL sent to the engine.
            timeout_seconds: Bound on the dispatch.
        """
        self._tracker = tracker
        self._dispatcher = dispatcher
        self._logger = logger
        self._jobs_url = jobs_url
        self._callback_url = callback_url
        self._timeout_seconds = timeout_seconds

    @property
    def configured(self) -> bool:
        """Whether jobs can be submitted (a workflow URL is set)."""
        return bool(self._jobs_url)

    async def submit(
        self, job_type: JobType, payload: dict[str, Any]
    ) -> Result[Job, DomainError]:
        """Create a PENDING job and dispatch it.

        No job is created when the workflow is not configured, so clients
        never poll a job nobody will complete.

        Args:
            job_type: Kind of work.
            payload: Job input forwarded to the engine.

        Returns:
            Success(Job): Created job (dispatch outcome is only logged).
            Failure(ProviderUnavailableError): Workflow not configured.
            Failure(JobError): Job store failure.
        """
        if not self.configured:
            self._logger.warning(
                "Job workflow not configured; job rejected",
                job_type=job_type.value,
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_NOT_CONFIGURED,
                    message="Job workflow is not configured",
                    provider_name="n8n",
                    is_transient=False,
                )
            )

        created = await self._tracker.create_job(job_type)
        if isinstance(created, Failure):
            return created
        job = created.value

        envelope = JobEnvelope(
            job_id=job.id,
            type=job.type.value,
            payload=payload,
            callback_url=self._callback_url,
        )
        self._dispatcher.dispatch(
            self._jobs_url,
            envelope.to_wire(),
            timeout_seconds=self._timeout_seconds,
            purpose="job_dispatch",
        )
        return Success(value=job)
