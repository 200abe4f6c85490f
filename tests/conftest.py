"""Pytest configuration shared by unit, API and integration tests.

This configuration ensures:
1. Settings load in the testing environment (JSON logs, no Redis unless set)
2. Common fakes (logger, dispatcher, stores) are available as fixtures
3. Test markers are registered
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

from typing import Any  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from exitplans.domain.value_objects import IdeaInput  # noqa: E402
from exitplans.infrastructure.jobs import InMemoryJobStore  # noqa: E402
from exitplans.infrastructure.records import InMemoryRecordStore  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: API tests through the FastAPI TestClient")
    config.addinivalue_line(
        "markers", "integration: Integration tests against a real Redis"
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double implementing LoggerProtocol.

    bind() and with_context() return the same mock so bound loggers can be
    asserted on too.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def mock_dispatcher() -> MagicMock:
    """Dispatcher double recording dispatch() calls."""
    return MagicMock()


@pytest.fixture
def job_store() -> InMemoryJobStore:
    return InMemoryJobStore()


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def idea() -> IdeaInput:
    """A complete idea submission."""
    return IdeaInput(
        idea_name="ShiftSwap",
        one_liner="Shift trading app for hourly restaurant staff",
        problem_solved="Managers spend hours every week reshuffling shifts by text",
        target_customer="Independent restaurants",
        business_type="SaaS",
        industry="Hospitality",
        price_range="$29-$99/month",
        email="founder@example.com",
    )


@pytest.fixture
def idea_payload() -> dict[str, Any]:
    """Request body for POST /validate."""
    return {
        "ideaName": "ShiftSwap",
        "oneLiner": "Shift trading app for hourly restaurant staff",
        "problemSolved": "Managers spend hours every week reshuffling shifts by text",
        "targetCustomer": "Independent restaurants",
        "businessType": "SaaS",
        "industry": "Hospitality",
        "priceRange": "$29-$99/month",
    }
