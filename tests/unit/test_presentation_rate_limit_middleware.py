"""Unit tests for rate limit middleware helpers."""

from unittest.mock import MagicMock

import pytest

from exitplans.presentation.api.middleware.rate_limit_middleware import (
    format_reset_in,
    get_client_ip,
)

MINUTE_MS = 60_000


def _request(headers: dict[str, str] | None = None, host: str | None = "10.0.0.1"):
    request = MagicMock()
    request.headers = headers or {}
    if host is None:
        request.client = None
    else:
        request.client.host = host
    return request


@pytest.mark.unit
class TestGetClientIp:
    """Test caller identity resolution order."""

    def test_cloudflare_header_wins(self):
        request = _request(
            {
                "CF-Connecting-IP": "203.0.113.1",
                "X-Real-IP": "203.0.113.2",
                "X-Forwarded-For": "203.0.113.3",
            }
        )

        assert get_client_ip(request) == "203.0.113.1"

    def test_real_ip_before_forwarded_for(self):
        request = _request(
            {"X-Real-IP": "203.0.113.2", "X-Forwarded-For": "203.0.113.3"}
        )

        assert get_client_ip(request) == "203.0.113.2"

    def test_first_forwarded_for_entry(self):
        request = _request({"X-Forwarded-For": " 203.0.113.3 , 10.0.0.5, 10.0.0.6"})

        assert get_client_ip(request) == "203.0.113.3"

    def test_blank_headers_are_ignored(self):
        request = _request({"CF-Connecting-IP": "  ", "X-Forwarded-For": ""})

        assert get_client_ip(request) == "10.0.0.1"

    def test_unknown_without_any_source(self):
        assert get_client_ip(_request(host=None)) == "unknown"


@pytest.mark.unit
class TestFormatResetIn:
    """Test the human-readable reset hint."""

    @pytest.mark.parametrize(
        ("delta_ms", "expected"),
        [
            (1_000, "1 minute"),
            (MINUTE_MS, "1 minute"),
            (MINUTE_MS + 1, "2 minutes"),
            (59 * MINUTE_MS, "59 minutes"),
            (60 * MINUTE_MS, "1 hour"),
            (61 * MINUTE_MS, "2 hours"),
            (24 * 60 * MINUTE_MS, "24 hours"),
        ],
    )
    def test_format(self, delta_ms: int, expected: str):
        assert format_reset_in(1_000_000 + delta_ms, 1_000_000) == expected
