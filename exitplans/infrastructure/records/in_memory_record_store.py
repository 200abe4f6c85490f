"""In-memory record store for single-process use and tests."""

from exitplans.core.result import Result, Success
from exitplans.domain.errors import RecordStoreError
from exitplans.domain.value_objects import ValidatedIdeaRecord


class InMemoryRecordStore:
    """List-backed record store (implements RecordStoreProtocol).

    Attributes:
        validated_ideas: Saved records in insertion order.
    """

    def __init__(self) -> None:
        self.validated_ideas: list[ValidatedIdeaRecord] = []

    async def save_validated_idea(
        self, record: ValidatedIdeaRecord
    ) -> Result[None, RecordStoreError]:
        self.validated_ideas.append(record)
        return Success(value=None)
