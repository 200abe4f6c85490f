"""Job tracker error types.

Usage:
    from exitplans.domain.errors import JobNotFoundError

    return Failure(error=JobNotFoundError.for_id(job_id))
"""

from dataclasses import dataclass

from exitplans.core.enums import ErrorCode
from exitplans.core.errors import DomainError, NotFoundError


@dataclass(frozen=True, slots=True, kw_only=True)
class JobError(DomainError):
    """Job store failure (connection loss, serialization, lock contention)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class JobNotFoundError(NotFoundError):
    """Job id does not exist.

    Only updates report this as an error; reads return None instead.
    """

    @classmethod
    def for_id(cls, job_id: str) -> "JobNotFoundError":
        """Build the error for a job id.

        Args:
            job_id: Unknown job id.

        Returns:
            JobNotFoundError: Error with resource details filled in.
        """
        return cls(
            code=ErrorCode.JOB_NOT_FOUND,
            message=f"Job '{job_id}' not found",
            resource_type="Job",
            resource_id=job_id,
        )
