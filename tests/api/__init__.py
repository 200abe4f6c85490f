"""API tests package.

End-to-end tests for REST API endpoints using TestClient. Each test builds
its own app with in-memory stores swapped in through dependency overrides,
covering request validation, admission control, response formatting and
HTTP status codes.
"""
