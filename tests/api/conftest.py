"""Fixtures for API tests.

Each test gets a fresh application from create_app() so the rate limit
middleware resolves its limiter on the first request of that test. Services
are swapped in through app.dependency_overrides; outbound sends go to a
MagicMock dispatcher and no lifespan runs.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import exitplans.core.container as container
from exitplans.application.services import (
    CoachNudgeService,
    JobSubmissionService,
    JobTracker,
    ProviderChainOrchestrator,
    ValidationCompletionHandler,
)
from exitplans.domain.enums import JobType
from exitplans.infrastructure.jobs import InMemoryJobStore
from exitplans.infrastructure.providers import (
    HeuristicCoachProvider,
    HeuristicValidationProvider,
)
from exitplans.infrastructure.rate_limit import (
    InMemorySlidingWindowStorage,
    SlidingWindowAdapter,
)
from exitplans.infrastructure.records import InMemoryRecordStore
from exitplans.main import create_app

JOBS_URL = "https://n8n.test/webhook/jobs"
NUDGE_URL = "https://n8n.test/webhook/coach-nudge"
CALLBACK_URL = "http://testserver/webhooks/job-result"


@pytest.fixture
def rate_limiter(mock_logger: MagicMock) -> SlidingWindowAdapter:
    """Enforcing limiter backed by in-memory storage."""
    return SlidingWindowAdapter(
        storage=InMemorySlidingWindowStorage(), logger=mock_logger
    )


@pytest.fixture
def tracker(
    job_store: InMemoryJobStore,
    record_store: InMemoryRecordStore,
    mock_logger: MagicMock,
) -> JobTracker:
    return JobTracker(
        store=job_store,
        logger=mock_logger,
        completion_handlers={
            JobType.VALIDATION: ValidationCompletionHandler(record_store=record_store)
        },
    )


@pytest.fixture
def validation_providers() -> tuple:
    return (HeuristicValidationProvider(),)


@pytest.fixture
def coach_providers() -> tuple:
    return (HeuristicCoachProvider(),)


@pytest.fixture
def jobs_url() -> str | None:
    return JOBS_URL


@pytest.fixture
def nudge_url() -> str | None:
    return NUDGE_URL


@pytest.fixture
def app(
    monkeypatch: pytest.MonkeyPatch,
    rate_limiter: SlidingWindowAdapter,
    tracker: JobTracker,
    mock_dispatcher: MagicMock,
    mock_logger: MagicMock,
    validation_providers: tuple,
    coach_providers: tuple,
    jobs_url: str | None,
    nudge_url: str | None,
) -> FastAPI:
    """Application wired to in-memory collaborators."""
    monkeypatch.setattr(container, "get_rate_limit", lambda: rate_limiter)

    application = create_app()
    orchestrator = ProviderChainOrchestrator(logger=mock_logger)
    submission = JobSubmissionService(
        tracker=tracker,
        dispatcher=mock_dispatcher,
        logger=mock_logger,
        jobs_url=jobs_url,
        callback_url=CALLBACK_URL,
        timeout_seconds=5.0,
    )
    nudges = CoachNudgeService(
        dispatcher=mock_dispatcher,
        logger=mock_logger,
        nudge_url=nudge_url,
        timeout_seconds=5.0,
    )

    application.dependency_overrides.update(
        {
            container.get_orchestrator: lambda: orchestrator,
            container.get_validation_providers: lambda: validation_providers,
            container.get_coach_providers: lambda: coach_providers,
            container.get_job_tracker: lambda: tracker,
            container.get_job_submission_service: lambda: submission,
            container.get_coach_nudge_service: lambda: nudges,
        }
    )
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
