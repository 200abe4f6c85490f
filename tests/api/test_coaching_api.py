"""API tests for the coaching endpoints.

POST /coach-nudge schedules an emailed nudge and reports today's progress;
POST /coach-chat answers through the coaching provider chain.
"""

from datetime import UTC, datetime, timedelta

import pytest

NUDGE_URL = "https://n8n.test/webhook/coach-nudge"


@pytest.fixture
def nudge_payload():
    start = datetime.now(UTC) - timedelta(days=1, hours=1)
    return {
        "email": "maria@example.com",
        "businessTitle": "ShiftSwap",
        "roadmapId": "rm_123",
        "startDate": start.isoformat(),
        "tasks": [
            {"id": "t1", "day": 1, "title": "Interview 5 managers"},
            {"id": "t2", "day": 2, "title": "Draft landing page"},
            {"id": "t3", "day": 2, "title": "Price the pilot"},
            {"id": "t4", "day": 3, "title": "Launch pilot"},
        ],
        "completedTaskIds": ["t1"],
    }


@pytest.mark.api
class TestCoachNudge:
    def test_returns_progress_and_dispatches(self, client, nudge_payload, mock_dispatcher):
        response = client.post("/coach-nudge", json=nudge_payload)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Nudge on its way to your inbox!",
            "currentDay": 2,
            "progressPct": 25,
        }

        mock_dispatcher.dispatch.assert_called_once()
        url, envelope = mock_dispatcher.dispatch.call_args.args
        assert url == NUDGE_URL
        assert envelope["userName"] == "maria"
        assert envelope["currentDay"] == 2
        assert [t["id"] for t in envelope["todaysTasks"]] == ["t2", "t3"]
        assert mock_dispatcher.dispatch.call_args.kwargs["purpose"] == "coach_nudge"

    def test_missing_roadmap_id_is_bad_request(self, client, nudge_payload, mock_dispatcher):
        del nudge_payload["roadmapId"]

        response = client.post("/coach-nudge", json=nudge_payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "roadmapId"
        mock_dispatcher.dispatch.assert_not_called()

    def test_sixth_nudge_in_window_is_rejected(self, client, nudge_payload):
        statuses = [
            client.post("/coach-nudge", json=nudge_payload).status_code
            for _ in range(6)
        ]

        assert statuses == [200] * 5 + [429]


@pytest.mark.api
class TestCoachNudgeWithoutWebhook:
    @pytest.fixture
    def nudge_url(self):
        return None

    def test_still_succeeds_without_sending(self, client, nudge_payload, mock_dispatcher):
        response = client.post("/coach-nudge", json=nudge_payload)

        assert response.status_code == 200
        assert response.json()["currentDay"] == 2
        mock_dispatcher.dispatch.assert_not_called()


@pytest.mark.api
class TestCoachChat:
    def test_blank_message_is_bad_request(self, client):
        response = client.post("/coach-chat", json={"message": "   "})

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Message is required"
        assert data["errors"][0]["field"] == "message"

    def test_missing_message_is_bad_request(self, client):
        response = client.post("/coach-chat", json={})

        assert response.status_code == 400

    def test_heuristic_reply_without_context(self, client):
        response = client.post("/coach-chat", json={"message": "How do I price this?"})

        assert response.status_code == 200
        data = response.json()
        assert data["providerUsed"] == "heuristic"
        assert "Tell me what you're building" in data["reply"]

    def test_heuristic_reply_uses_context(self, client):
        response = client.post(
            "/coach-chat",
            json={
                "message": "I'm stuck on marketing",
                "context": {
                    "business": "ShiftSwap",
                    "completedTasks": 6,
                    "totalTasks": 24,
                    "currentDay": 10,
                    "totalDays": 84,
                },
                "history": [
                    {"role": "user", "content": "Hi"},
                    {"role": "assistant", "content": "Hello!"},
                ],
            },
        )

        assert response.status_code == 200
        reply = response.json()["reply"]
        assert "For ShiftSwap, you're on day 10 of 84" in reply

    def test_invalid_history_role_is_bad_request(self, client):
        response = client.post(
            "/coach-chat",
            json={"message": "Hi", "history": [{"role": "system", "content": "x"}]},
        )

        assert response.status_code == 400
