"""Fixtures for integration tests against a real Redis.

Set TEST_REDIS_URL to point at a disposable database (default db 15 on
localhost). Tests are skipped when Redis is unreachable.
"""

import os
from uuid import uuid4

import pytest
import pytest_asyncio
from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

TEST_REDIS_URL = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest_asyncio.fixture
async def redis_client():
    """Async Redis client with decode_responses=True, as the container builds it."""
    pool = ConnectionPool.from_url(
        TEST_REDIS_URL,
        max_connections=30,
        decode_responses=True,
    )
    client = Redis(connection_pool=pool)
    try:
        await client.ping()
    except (RedisError, OSError) as exc:
        await client.aclose()
        await pool.disconnect()
        pytest.skip(f"Redis not reachable at {TEST_REDIS_URL}: {exc}")
    yield client
    await client.aclose()
    await pool.disconnect()


@pytest.fixture
def key_namespace() -> str:
    """Unique key prefix so tests never share windows or jobs."""
    return f"test:{uuid4().hex}"


@pytest_asyncio.fixture
async def clean_keys(redis_client, key_namespace):
    """Delete every key under the test namespace after the test."""
    yield key_namespace
    keys = [key async for key in redis_client.scan_iter(match=f"{key_namespace}*")]
    if keys:
        await redis_client.delete(*keys)
