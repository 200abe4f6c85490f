"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID extraction from X-Trace-Id header
- Trace ID cleared after the request
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest

from exitplans.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def _request(headers: dict[str, str]) -> MagicMock:
    request = MagicMock()
    request.headers = headers
    return request


@pytest.mark.unit
class TestTraceMiddleware:
    """Test TraceMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_new_trace_id_when_missing(self):
        mock_response = MagicMock()
        mock_response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(
            _request({}), AsyncMock(return_value=mock_response)
        )

        UUID(response.headers["X-Trace-Id"])

    @pytest.mark.asyncio
    async def test_uses_existing_trace_id_from_header(self):
        existing = "12345678-1234-5678-1234-567812345678"
        mock_response = MagicMock()
        mock_response.headers = {}
        middleware = TraceMiddleware(app=MagicMock())
        request = _request({"X-Trace-Id": existing})

        response = await middleware.dispatch(
            request, AsyncMock(return_value=mock_response)
        )

        assert response.headers["X-Trace-Id"] == existing
        assert request.state.trace_id == existing

    @pytest.mark.asyncio
    async def test_trace_id_visible_during_request_only(self):
        seen: list[str | None] = []
        mock_response = MagicMock()
        mock_response.headers = {}

        async def call_next(request):
            seen.append(get_trace_id())
            return mock_response

        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(_request({"X-Trace-Id": "trace-1"}), call_next)

        assert seen == ["trace-1"]
        assert get_trace_id() is None

    def test_get_trace_id_outside_request(self):
        assert get_trace_id() is None
