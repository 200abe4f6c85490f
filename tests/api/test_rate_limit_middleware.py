"""API tests for rate limit middleware.

Tests unlimited routes, degrade-open behavior and the global switch.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from exitplans.core.config import settings
from exitplans.core.constants import UNLIMITED_SENTINEL
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure
from exitplans.domain.errors import RateLimitError
from exitplans.infrastructure.rate_limit import SlidingWindowAdapter


class FailingStorage:
    """Counter store that is unreachable."""

    async def record(self, *, key, window_ms, max_requests, now_ms):
        return Failure(
            error=RateLimitError(
                code=ErrorCode.RATE_LIMIT_CHECK_FAILED,
                message="Connection refused",
            )
        )

    async def clear(self, *, key):
        return Failure(
            error=RateLimitError(
                code=ErrorCode.RATE_LIMIT_RESET_FAILED,
                message="Connection refused",
            )
        )


@pytest.mark.api
class TestUnlimitedRoutes:
    def test_health_has_no_rate_limit_headers(self, client) -> None:
        for _ in range(5):
            response = client.get("/health")
            assert response.status_code == 200
            assert "X-RateLimit-Limit" not in response.headers

    def test_job_polling_has_no_rate_limit_headers(self, client) -> None:
        response = client.get("/jobs/missing")

        assert "X-RateLimit-Limit" not in response.headers


@pytest.mark.api
class TestDegradeOpenWithoutStore:
    @pytest.fixture
    def rate_limiter(self, mock_logger):
        return SlidingWindowAdapter(storage=None, logger=mock_logger)

    def test_every_request_admitted_with_sentinel_headers(self, client, idea_payload):
        responses = [client.post("/validate", json=idea_payload) for _ in range(3)]

        assert [r.status_code for r in responses] == [200, 200, 200]
        assert responses[-1].headers["X-RateLimit-Limit"] == str(UNLIMITED_SENTINEL)
        assert responses[-1].headers["X-RateLimit-Remaining"] == str(UNLIMITED_SENTINEL)


@pytest.mark.api
class TestDegradeOpenOnStoreError:
    @pytest.fixture
    def rate_limiter(self, mock_logger):
        return SlidingWindowAdapter(storage=FailingStorage(), logger=mock_logger)

    def test_store_errors_admit_requests(self, client, idea_payload, mock_logger):
        responses = [client.post("/validate", json=idea_payload) for _ in range(2)]

        assert [r.status_code for r in responses] == [200, 200]
        assert responses[-1].headers["X-RateLimit-Limit"] == "1"
        assert responses[-1].headers["X-RateLimit-Remaining"] == "1"
        warnings = [c.args[0] for c in mock_logger.warning.call_args_list]
        assert "Rate limit storage error - admitting request" in warnings


@pytest.mark.api
class TestDegradeOpenOnLimiterException:
    @pytest.fixture
    def rate_limiter(self):
        limiter = MagicMock()
        limiter.check = AsyncMock(side_effect=RuntimeError("limiter crashed"))
        return limiter

    def test_exception_admits_request(self, client, idea_payload):
        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 200
        assert "X-RateLimit-Limit" not in response.headers


@pytest.mark.api
class TestRateLimitDisabled:
    def test_disabled_switch_skips_admission_control(
        self, client, idea_payload, monkeypatch
    ):
        monkeypatch.setattr(settings, "rate_limit_enabled", False)

        responses = [client.post("/validate", json=idea_payload) for _ in range(3)]

        assert [r.status_code for r in responses] == [200, 200, 200]
        assert "X-RateLimit-Limit" not in responses[-1].headers
