"""Unit tests for ErrorResponseBuilder (RFC 7807 responses)."""

import json
from unittest.mock import MagicMock

import pytest

from exitplans.core.enums import ErrorCode
from exitplans.core.errors import ValidationError
from exitplans.domain.errors import (
    AllProvidersFailedError,
    JobError,
    JobNotFoundError,
    ProviderUnavailableError,
)
from exitplans.presentation.routers.errors import ErrorResponseBuilder
from exitplans.presentation.routers.errors.error_response_builder import (
    GENERIC_SERVER_ERROR,
)


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.url.path = "/jobs/abc"
    return request


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Test domain error mapping."""

    def test_not_found_is_404(self, request_mock):
        response = ErrorResponseBuilder.from_domain_error(
            JobNotFoundError.for_id("abc"), request_mock, "trace-1"
        )

        body = _body(response)
        assert response.status_code == 404
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "Job 'abc' not found"
        assert body["instance"] == "/jobs/abc"
        assert body["trace_id"] == "trace-1"
        assert body["type"].endswith("/errors/job-not-found")

    def test_validation_error_includes_field(self, request_mock):
        error = ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message="Message is required",
            field="message",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, None)

        body = _body(response)
        assert response.status_code == 400
        assert body["errors"] == [
            {
                "field": "message",
                "code": "validation_failed",
                "message": "Message is required",
            }
        ]
        assert "trace_id" not in body

    def test_server_errors_are_generic(self, request_mock):
        error = AllProvidersFailedError(
            code=ErrorCode.ALL_PROVIDERS_FAILED,
            message="All providers failed for chain 'idea_validation'",
            chain="idea_validation",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, "t")

        assert response.status_code == 500
        assert _body(response)["detail"] == GENERIC_SERVER_ERROR

    def test_store_failure_is_generic_500(self, request_mock):
        error = JobError(code=ErrorCode.JOB_STORE_FAILED, message="redis down")

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, "t")

        assert response.status_code == 500
        assert "redis" not in response.body.decode()

    def test_not_configured_is_503_with_detail(self, request_mock):
        error = ProviderUnavailableError(
            code=ErrorCode.PROVIDER_NOT_CONFIGURED,
            message="Job workflow is not configured",
            provider_name="n8n",
        )

        response = ErrorResponseBuilder.from_domain_error(error, request_mock, "t")

        assert response.status_code == 503
        assert _body(response)["detail"] == "Job workflow is not configured"

    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ErrorCode.INVALID_JOB_STATUS, 400),
            (ErrorCode.JOB_NOT_FOUND, 404),
            (ErrorCode.JOB_UPDATE_CONFLICT, 500),
            (ErrorCode.PROVIDER_TIMEOUT, 500),
        ],
    )
    def test_status_codes(self, code: ErrorCode, status: int):
        assert ErrorResponseBuilder.get_status_code(code) == status
