"""Redis-backed record store.

Validated idea records are appended as JSON to a Redis list, giving an
append-only log that spreadsheet or warehouse exports can read in order.
"""

import json
from typing import Any

from redis.exceptions import RedisError

from exitplans.core.constants import VALIDATED_IDEAS_KEY
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import RecordStoreError
from exitplans.domain.value_objects import ValidatedIdeaRecord


class RedisRecordStore:
    """Record store on a Redis list (implements RecordStoreProtocol).

    Args:
        redis_client: Async Redis client.
        key: List key for validated ideas.
    """

    def __init__(self, *, redis_client: Any, key: str = VALIDATED_IDEAS_KEY) -> None:
        self.redis = redis_client
        self._key = key

    async def save_validated_idea(
        self, record: ValidatedIdeaRecord
    ) -> Result[None, RecordStoreError]:
        """RPUSH the record as JSON."""
        try:
            await self.redis.rpush(self._key, json.dumps(record.to_dict()))
            return Success(value=None)
        except RedisError as exc:
            return Failure(
                error=RecordStoreError(
                    code=ErrorCode.RECORD_WRITE_FAILED,
                    message=f"Failed to save validated idea: {exc}",
                    details={"key": self._key, "idea_name": record.idea_name},
                )
            )
