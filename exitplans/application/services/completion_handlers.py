"""Job completion side effects.

Registered with the JobTracker per JobType and run once when a job of that
type newly completes.
"""

from collections.abc import Callable
from datetime import UTC, datetime

from exitplans.core.result import Result, Success
from exitplans.domain.entities.job import Job
from exitplans.domain.errors import RecordStoreError
from exitplans.domain.protocols.record_store_protocol import RecordStoreProtocol
from exitplans.domain.value_objects import ValidatedIdeaRecord


class ValidationCompletionHandler:
    """Persist a ValidatedIdeaRecord for every completed VALIDATION job."""

    def __init__(
        self,
        *,
        record_store: RecordStoreProtocol,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        """Initialize handler.

        Args:
            record_store: Destination for validated idea records.
            clock: Timestamp source (for testing).
        """
        self._record_store = record_store
        self._clock = clock

    async def handle(self, job: Job) -> Result[None, RecordStoreError]:
        """Map the job result to a record and save it.

        Results that are not JSON objects carry no idea fields and are skipped.
        """
        if not isinstance(job.result, dict):
            return Success(value=None)
        record = ValidatedIdeaRecord.from_job_result(job.result, now=self._clock())
        return await self._record_store.save_validated_idea(record)
