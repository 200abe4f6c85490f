"""Integration tests for RedisRecordStore."""

import json
from datetime import UTC, datetime

import pytest

from exitplans.core.result import Failure, Success
from exitplans.domain.value_objects import ValidatedIdeaRecord
from exitplans.infrastructure.records import RedisRecordStore


def _record(name: str) -> ValidatedIdeaRecord:
    return ValidatedIdeaRecord.from_job_result(
        {"ideaName": name, "email": "founder@example.com", "marketValidation": {"score": 70}},
        now=datetime(2024, 5, 1, tzinfo=UTC),
    )


@pytest.mark.integration
class TestRedisRecordStore:
    @pytest.mark.asyncio
    async def test_records_append_in_order(self, redis_client, clean_keys) -> None:
        key = f"{clean_keys}:validated-ideas"
        store = RedisRecordStore(redis_client=redis_client, key=key)

        first = await store.save_validated_idea(_record("ShiftSwap"))
        second = await store.save_validated_idea(_record("PantryPal"))

        assert isinstance(first, Success)
        assert isinstance(second, Success)
        rows = [json.loads(raw) for raw in await redis_client.lrange(key, 0, -1)]
        assert [row["ideaName"] for row in rows] == ["ShiftSwap", "PantryPal"]
        assert rows[0]["score"] == 70
        assert rows[0]["status"] == "COMPLETED"
        assert rows[0]["timestamp"] == "2024-05-01T00:00:00+00:00"

    @pytest.mark.asyncio
    async def test_wrong_key_type_is_failure(self, redis_client, clean_keys) -> None:
        key = f"{clean_keys}:not-a-list"
        await redis_client.set(key, "x")
        store = RedisRecordStore(redis_client=redis_client, key=key)

        result = await store.save_validated_idea(_record("ShiftSwap"))

        assert isinstance(result, Failure)
        assert result.error.details["idea_name"] == "ShiftSwap"
