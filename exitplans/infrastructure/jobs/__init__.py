"""Job store adapters."""

from exitplans.infrastructure.jobs.in_memory_job_store import InMemoryJobStore
from exitplans.infrastructure.jobs.redis_job_store import RedisJobStore

__all__ = ["InMemoryJobStore", "RedisJobStore"]
