"""API tests for the jobs resource.

POST /jobs creates a PENDING job and dispatches it; GET /jobs/{id} polls it.
"""

import pytest

JOBS_URL = "https://n8n.test/webhook/jobs"
CALLBACK_URL = "http://testserver/webhooks/job-result"


@pytest.mark.api
class TestCreateJob:
    def test_create_job_is_accepted(self, client, mock_dispatcher):
        response = client.post(
            "/jobs",
            json={"type": "VALIDATION", "payload": {"ideaName": "ShiftSwap"}},
        )

        assert response.status_code == 202
        data = response.json()
        assert data["status"] == "PENDING"
        assert data["jobId"]

        mock_dispatcher.dispatch.assert_called_once()
        url, envelope = mock_dispatcher.dispatch.call_args.args
        assert url == JOBS_URL
        assert envelope["jobId"] == data["jobId"]
        assert envelope["type"] == "VALIDATION"
        assert envelope["payload"] == {"ideaName": "ShiftSwap"}
        assert envelope["callbackUrl"] == CALLBACK_URL
        assert mock_dispatcher.dispatch.call_args.kwargs["purpose"] == "job_dispatch"

    def test_created_job_is_pollable(self, client):
        created = client.post("/jobs", json={"type": "TEMPLATE", "payload": {}})

        response = client.get(f"/jobs/{created.json()['jobId']}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created.json()["jobId"]
        assert data["type"] == "TEMPLATE"
        assert data["status"] == "PENDING"
        assert "result" not in data
        assert "error" not in data
        assert data["createdAt"] == data["updatedAt"]

    def test_unknown_job_type_is_bad_request(self, client, mock_dispatcher):
        response = client.post("/jobs", json={"type": "REPORT", "payload": {}})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "type"
        mock_dispatcher.dispatch.assert_not_called()

    def test_create_job_is_rate_limited(self, client):
        statuses = [
            client.post("/jobs", json={"type": "EXPLORE"}).status_code
            for _ in range(11)
        ]

        assert statuses[:10] == [202] * 10
        assert statuses[10] == 429


@pytest.mark.api
class TestCreateJobWithoutWorkflow:
    @pytest.fixture
    def jobs_url(self):
        return None

    def test_returns_service_unavailable(self, client, job_store, mock_dispatcher):
        response = client.post("/jobs", json={"type": "VALIDATION", "payload": {}})

        assert response.status_code == 503
        data = response.json()
        assert data["title"] == "Service Unavailable"
        assert data["detail"] == "Job workflow is not configured"
        assert job_store._jobs == {}
        mock_dispatcher.dispatch.assert_not_called()


@pytest.mark.api
class TestGetJob:
    def test_unknown_job_is_not_found(self, client):
        response = client.get("/jobs/does-not-exist")

        assert response.status_code == 404
        data = response.json()
        assert data["status"] == 404
        assert data["instance"] == "/jobs/does-not-exist"

    def test_completed_job_includes_result(self, client):
        job_id = client.post("/jobs", json={"type": "EXPLORE"}).json()["jobId"]
        client.post(
            "/webhooks/job-result",
            json={"jobId": job_id, "status": "COMPLETED", "result": {"ideas": ["a", "b"]}},
        )

        response = client.get(f"/jobs/{job_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "COMPLETED"
        assert data["result"] == {"ideas": ["a", "b"]}
        assert data["updatedAt"] >= data["createdAt"]

    def test_polling_is_not_rate_limited(self, client):
        statuses = {client.get("/jobs/missing").status_code for _ in range(15)}

        assert statuses == {404}
