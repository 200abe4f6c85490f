"""Redis-backed sliding-window storage using an atomic Lua script.

Each window is a sorted set of event timestamps. The Lua script evicts
expired events, counts the rest and records the new event only when below the
limit, all in one EVALSHA round trip, so two concurrent requests for the same
identifier can never both take the last slot.

Failure policy:
    Storage errors are returned as Failure(RateLimitError). The adapter above
    turns check failures into admitted results (degrade-open); reset failures
    reach the caller.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Any
from uuid import uuid4

from redis.exceptions import NoScriptError

from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import RateLimitError


@dataclass(slots=True)
class _LuaRefs:
    """Holds loaded Lua script SHA references."""

    sliding_window_sha: str | None = None


class RedisSlidingWindowStorage:
    """Sliding-window event log in Redis (implements CounterStoreProtocol).

    The Lua script is loaded once and executed via EVALSHA. When Redis loses
    its script cache (restart, SCRIPT FLUSH) the script is reloaded once.

    Args:
        redis_client: An async Redis client (redis.asyncio.Redis compatible).
    """

    def __init__(self, *, redis_client: Any) -> None:
        self.redis = redis_client
        self._lua = _LuaRefs()
        self._script_lock = asyncio.Lock()

    # ---------------------------------------------------------------------
    # CounterStoreProtocol
    # ---------------------------------------------------------------------
    async def record(
        self,
        *,
        key: str,
        window_ms: int,
        max_requests: int,
        now_ms: int,
    ) -> Result[tuple[bool, int, int], RateLimitError]:
        """Atomically evict, check and record one event.

        Args:
            key: Window key.
            window_ms: Window length in milliseconds.
            max_requests: Events admitted per window.
            now_ms: Current epoch milliseconds.

        Returns:
            Success((admitted, remaining, reset_at_ms)) or
            Failure(RateLimitError) on any Redis error.
        """
        member = f"{now_ms}-{uuid4().hex}"
        try:
            try:
                resp = await self._run_sliding_window(
                    key, now_ms, window_ms, max_requests, member
                )
            except NoScriptError:
                self._lua.sliding_window_sha = None
                resp = await self._run_sliding_window(
                    key, now_ms, window_ms, max_requests, member
                )
            return Success(value=(bool(int(resp[0])), int(resp[1]), int(resp[2])))
        except Exception as exc:
            return Failure(
                error=RateLimitError(
                    code=ErrorCode.RATE_LIMIT_CHECK_FAILED,
                    message=f"Failed to check rate limit for '{key}': {exc}",
                    details={"key": key},
                )
            )

    async def clear(self, *, key: str) -> Result[None, RateLimitError]:
        """Delete the window for key.

        Args:
            key: Window key.

        Returns:
            Success(None) or Failure(RateLimitError).
        """
        try:
            await self.redis.delete(key)
            return Success(value=None)
        except Exception as exc:
            return Failure(
                error=RateLimitError(
                    code=ErrorCode.RATE_LIMIT_RESET_FAILED,
                    message=f"Failed to reset rate limit for '{key}': {exc}",
                    details={"key": key},
                )
            )

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    async def _run_sliding_window(
        self, key: str, now_ms: int, window_ms: int, max_requests: int, member: str
    ) -> list[Any]:
        sha = await self._ensure_sliding_window_script()
        return await self.redis.evalsha(
            sha,
            1,
            key,
            int(now_ms),
            int(window_ms),
            int(max_requests),
            member,
        )

    async def _ensure_sliding_window_script(self) -> str:
        """Load the sliding window Lua script into Redis and cache the SHA.

        Returns:
            str: Script SHA.
        """
        if self._lua.sliding_window_sha:
            return self._lua.sliding_window_sha
        async with self._script_lock:
            if self._lua.sliding_window_sha:
                return self._lua.sliding_window_sha
            script = await _read_lua_script("lua_scripts/sliding_window.lua")
            sha: str = await self.redis.script_load(script)
            if isinstance(sha, bytes):
                sha = sha.decode("ascii")
            self._lua.sliding_window_sha = sha
            return sha


def _read_lua_script_sync(path: Path) -> str:
    """Synchronous helper to read a Lua script (called via run_in_executor)."""
    return path.read_text(encoding="utf-8")


async def _read_lua_script(rel_path: str) -> str:
    """Read a Lua script file relative to this module without blocking the loop.

    Args:
        rel_path: Relative path from this module's directory.

    Returns:
        Script contents as string.
    """
    full_path = Path(__file__).parent / rel_path
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, partial(_read_lua_script_sync, full_path))
