"""Secondary record store adapters."""

from exitplans.infrastructure.records.in_memory_record_store import InMemoryRecordStore
from exitplans.infrastructure.records.redis_record_store import RedisRecordStore

__all__ = ["InMemoryRecordStore", "RedisRecordStore"]
