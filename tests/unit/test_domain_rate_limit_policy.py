"""Unit tests for RateLimitPolicy, RateLimitResult and policy configuration."""

from datetime import UTC, datetime

import pytest

from exitplans.domain.enums import RateLimitPolicyName
from exitplans.domain.value_objects import RateLimitPolicy, RateLimitResult
from exitplans.infrastructure.rate_limit.config import (
    ENDPOINT_POLICIES,
    RATE_LIMIT_POLICIES,
    get_policy_for_endpoint,
)


def _policy(**overrides) -> RateLimitPolicy:
    values = {
        "name": RateLimitPolicyName.API,
        "max_requests": 10,
        "window_ms": 60_000,
        "key_prefix": "ratelimit:api",
    }
    values.update(overrides)
    return RateLimitPolicy(**values)


@pytest.mark.unit
class TestRateLimitPolicy:
    """Test policy validation and key building."""

    def test_key_for_appends_identifier(self):
        assert _policy().key_for("203.0.113.7") == "ratelimit:api:203.0.113.7"

    def test_window_seconds_rounds_up(self):
        assert _policy(window_ms=1500).window_seconds == 2

    @pytest.mark.parametrize(
        "overrides",
        [{"max_requests": 0}, {"window_ms": 0}, {"key_prefix": ""}],
    )
    def test_rejects_invalid_parameters(self, overrides):
        with pytest.raises(ValueError):
            _policy(**overrides)


@pytest.mark.unit
class TestRateLimitResult:
    """Test result helpers."""

    def test_headers(self):
        result = RateLimitResult(
            admitted=True, limit=5, remaining=4, reset_at_ms=1_714_564_800_000
        )

        assert result.headers() == {
            "X-RateLimit-Limit": "5",
            "X-RateLimit-Remaining": "4",
            "X-RateLimit-Reset": "1714564800000",
        }

    def test_retry_after_rounds_up(self):
        result = RateLimitResult(admitted=False, limit=1, remaining=0, reset_at_ms=10_500)

        assert result.retry_after_seconds(now_ms=9_000) == 2

    def test_retry_after_is_at_least_one(self):
        result = RateLimitResult(admitted=False, limit=1, remaining=0, reset_at_ms=1_000)

        assert result.retry_after_seconds(now_ms=5_000) == 1

    def test_reset_time_is_utc(self):
        result = RateLimitResult(
            admitted=False, limit=1, remaining=0, reset_at_ms=1_714_564_800_000
        )

        assert result.reset_time == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.mark.unit
class TestPolicyConfiguration:
    """Test the policy table and endpoint assignments."""

    def test_idea_validation_is_one_per_day(self):
        policy = RATE_LIMIT_POLICIES[RateLimitPolicyName.IDEA_VALIDATION]

        assert policy.max_requests == 1
        assert policy.window_ms == 24 * 60 * 60 * 1000
        assert policy.key_prefix == "ratelimit:idea-validation"

    def test_coaching_is_five_per_fifteen_minutes(self):
        policy = RATE_LIMIT_POLICIES[RateLimitPolicyName.COACHING]

        assert policy.max_requests == 5
        assert policy.window_ms == 15 * 60 * 1000

    def test_api_is_ten_per_minute(self):
        policy = RATE_LIMIT_POLICIES[RateLimitPolicyName.API]

        assert policy.max_requests == 10
        assert policy.window_ms == 60 * 1000

    def test_every_policy_is_registered(self):
        assert set(RATE_LIMIT_POLICIES) == set(RateLimitPolicyName)

    def test_assigned_policies_exist(self):
        for name in ENDPOINT_POLICIES.values():
            assert name in RATE_LIMIT_POLICIES

    def test_validate_uses_idea_validation_policy(self):
        policy = get_policy_for_endpoint("POST /validate")

        assert policy is not None
        assert policy.name == RateLimitPolicyName.IDEA_VALIDATION

    @pytest.mark.parametrize(
        "endpoint",
        ["GET /health", "GET /jobs/abc", "POST /webhooks/job-result", "GET /docs"],
    )
    def test_unlisted_endpoints_are_not_limited(self, endpoint: str):
        assert get_policy_for_endpoint(endpoint) is None
