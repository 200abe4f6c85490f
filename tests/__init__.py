"""Test suite for the ExitPlans API.

- unit/: Domain, services and adapters in isolation
- api/: HTTP endpoints through the FastAPI TestClient
- integration/: Redis-backed adapters against a real Redis

Integration tests skip when TEST_REDIS_URL is unreachable.
"""
