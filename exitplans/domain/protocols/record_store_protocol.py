"""Record store protocol for secondary business records."""

from typing import Protocol

from exitplans.core.result import Result
from exitplans.domain.errors import RecordStoreError
from exitplans.domain.value_objects.validated_idea_record import ValidatedIdeaRecord


class RecordStoreProtocol(Protocol):
    """Storage for records derived from completed jobs."""

    async def save_validated_idea(
        self, record: ValidatedIdeaRecord
    ) -> Result[None, RecordStoreError]:
        """Append a validated idea record.

        Args:
            record: Record built from a completed VALIDATION job.

        Returns:
            Success(None) or Failure(RecordStoreError).
        """
        ...
