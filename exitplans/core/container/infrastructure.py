# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Capabilities (computed once from settings)
- Redis client (shared connection pool, optional)
- Logging (console, JSON in testing/ci)
- Rate limiting (sliding window, degrade-open)
- Job and record stores (Redis or in-memory)
- Fire-and-forget dispatcher

Every factory is wrapped in lru_cache, so the first call builds the instance
and later calls (including FastAPI Depends) share it. Tests replace them with
app.dependency_overrides or by calling cache_clear().
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Any

from exitplans.core.capabilities import Capabilities
from exitplans.core.config import settings

if TYPE_CHECKING:
    from exitplans.domain.protocols.dispatcher_protocol import DispatcherProtocol
    from exitplans.domain.protocols.job_store_protocol import JobStoreProtocol
    from exitplans.domain.protocols.logger_protocol import LoggerProtocol
    from exitplans.domain.protocols.rate_limit_protocol import RateLimitProtocol
    from exitplans.domain.protocols.record_store_protocol import RecordStoreProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_capabilities() -> Capabilities:
    """Get capability flags (computed once at startup).

    Returns:
        Capabilities: Which optional collaborators are configured.
    """
    return Capabilities.from_settings(settings)


@lru_cache()
def get_redis_client() -> Any | None:
    """Get the shared async Redis client, or None when Redis is not configured.

    One connection pool serves rate limiting, jobs and records. The lifespan
    closes it at shutdown.

    Returns:
        redis.asyncio.Redis | None: Client with decode_responses=True.
    """
    if not settings.redis_url:
        return None

    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=20,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    import logging

    from exitplans.infrastructure.logging.console_adapter import ConsoleAdapter

    env = settings.environment.value
    use_json = env in {"testing", "ci"}
    level = logging.DEBUG if settings.debug else logging.INFO
    return ConsoleAdapter(use_json=use_json, level=level)


@lru_cache()
def get_rate_limit() -> "RateLimitProtocol":
    """Get rate limiter singleton (app-scoped).

    Creates SlidingWindowAdapter with:
    - RedisSlidingWindowStorage for the atomic Lua check-and-record
    - No storage at all when Redis is not configured (degrade-open)
    - Logger for structured logging

    Degrade-Open Design:
        Admission control never causes denial of service. Missing or failing
        storage admits requests.

    Returns:
        Rate limiter implementing RateLimitProtocol.
    """
    from exitplans.infrastructure.rate_limit import (
        RedisSlidingWindowStorage,
        SlidingWindowAdapter,
    )

    redis_client = get_redis_client() if get_capabilities().rate_limit_store else None
    storage = (
        RedisSlidingWindowStorage(redis_client=redis_client)
        if redis_client is not None
        else None
    )
    return SlidingWindowAdapter(storage=storage, logger=get_logger())


@lru_cache()
def get_job_store() -> "JobStoreProtocol":
    """Get job store singleton.

    Returns:
        RedisJobStore when Redis is configured, else InMemoryJobStore.
    """
    if get_capabilities().job_store:
        from exitplans.infrastructure.jobs import RedisJobStore

        return RedisJobStore(
            redis_client=get_redis_client(),
            ttl_seconds=settings.job_ttl_seconds,
        )

    from exitplans.infrastructure.jobs import InMemoryJobStore

    get_logger().warning(
        "Job store not configured - jobs kept in memory",
        mode="in_memory",
    )
    return InMemoryJobStore(ttl_seconds=settings.job_ttl_seconds)


@lru_cache()
def get_record_store() -> "RecordStoreProtocol":
    """Get record store singleton.

    Returns:
        RedisRecordStore when Redis is configured, else InMemoryRecordStore.
    """
    if get_capabilities().job_store:
        from exitplans.infrastructure.records import RedisRecordStore

        return RedisRecordStore(redis_client=get_redis_client())

    from exitplans.infrastructure.records import InMemoryRecordStore

    return InMemoryRecordStore()


@lru_cache()
def get_dispatcher() -> "DispatcherProtocol":
    """Get the fire-and-forget dispatcher singleton.

    The lifespan drains it at shutdown so in-flight sends can finish.
    """
    from exitplans.infrastructure.dispatch import HttpDispatcher

    return HttpDispatcher(logger=get_logger())
