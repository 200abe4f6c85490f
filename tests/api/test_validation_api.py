"""API tests for POST /validate.

Covers the provider chain result shape, request validation, chain
exhaustion and the one-per-day admission policy.
"""

import pytest

from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure
from exitplans.domain.errors import ProviderUnavailableError
from exitplans.presentation.routers.errors.error_response_builder import (
    GENERIC_SERVER_ERROR,
)


class DownProvider:
    """Provider that is configured but always fails."""

    name = "n8n"
    available = True
    timeout_seconds = 1.0

    async def attempt(self, work):
        return Failure(
            error=ProviderUnavailableError(
                code=ErrorCode.PROVIDER_UNAVAILABLE,
                message="n8n webhook returned 502",
                provider_name=self.name,
            )
        )


@pytest.mark.api
class TestValidateIdea:
    def test_returns_analysis_from_heuristic(self, client, idea_payload):
        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["providerUsed"] == "heuristic"
        analysis = data["analysis"]
        assert analysis["marketValidation"]["score"] == 60
        assert "ShiftSwap" in analysis["marketValidation"]["summary"]
        assert analysis["competitorLandscape"]["competition"] in {"Low", "Medium", "High"}
        assert analysis["quickWins"]
        assert analysis["nextSteps"]

    def test_admitted_response_carries_rate_limit_headers(self, client, idea_payload):
        response = client.post("/validate", json=idea_payload)

        assert response.headers["X-RateLimit-Limit"] == "1"
        assert response.headers["X-RateLimit-Remaining"] == "0"
        assert int(response.headers["X-RateLimit-Reset"]) > 0

    def test_missing_field_is_bad_request(self, client, idea_payload):
        del idea_payload["ideaName"]

        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["title"] == "Validation Failed"
        assert data["detail"] == "Request validation failed. Check 'errors' for details."
        assert data["errors"][0]["field"] == "ideaName"
        assert data["instance"] == "/validate"

    def test_blank_field_is_bad_request(self, client, idea_payload):
        idea_payload["industry"] = ""

        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "industry"


@pytest.mark.api
class TestValidateIdeaChainExhaustion:
    @pytest.fixture
    def validation_providers(self):
        return (DownProvider(),)

    def test_exhausted_chain_is_generic_server_error(self, client, idea_payload):
        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 500
        data = response.json()
        assert data["detail"] == GENERIC_SERVER_ERROR
        assert "502" not in data["detail"]
        assert data["trace_id"] == response.headers["X-Trace-Id"]


@pytest.mark.api
class TestValidateIdeaDailyLimit:
    def test_second_validation_same_day_is_rejected(self, client, idea_payload):
        headers = {"X-Forwarded-For": "203.0.113.4, 10.0.0.1"}

        first = client.post("/validate", json=idea_payload, headers=headers)
        second = client.post("/validate", json=idea_payload, headers=headers)

        assert first.status_code == 200
        assert second.status_code == 429

        body = second.json()
        assert body["error"] == "rate_limit_exceeded"
        assert body["message"] == "Too many requests. Please try again later."
        assert body["resetTime"].endswith("Z")
        assert body["resetIn"] in {"24 hours", "23 hours"}

        assert second.headers["X-RateLimit-Limit"] == "1"
        assert second.headers["X-RateLimit-Remaining"] == "0"
        assert second.headers["X-RateLimit-Reset"] == first.headers["X-RateLimit-Reset"]
        retry_after = int(second.headers["Retry-After"])
        assert 23 * 3600 < retry_after <= 24 * 3600

    def test_rejection_skips_the_provider_chain(self, client, idea_payload, mock_logger):
        client.post("/validate", json=idea_payload)
        mock_logger.reset_mock()

        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 429
        started = [
            c
            for c in mock_logger.info.call_args_list
            if c.args[0] == "Provider attempt succeeded"
        ]
        assert started == []

    def test_limit_is_per_client_ip(self, client, idea_payload):
        first = client.post(
            "/validate", json=idea_payload, headers={"CF-Connecting-IP": "203.0.113.7"}
        )
        other = client.post(
            "/validate", json=idea_payload, headers={"CF-Connecting-IP": "203.0.113.8"}
        )

        assert first.status_code == 200
        assert other.status_code == 200

    def test_rejected_response_keeps_trace_header(self, client, idea_payload):
        client.post("/validate", json=idea_payload)

        response = client.post("/validate", json=idea_payload)

        assert response.status_code == 429
        assert response.headers["X-Trace-Id"]
