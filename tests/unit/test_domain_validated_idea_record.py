"""Unit tests for ValidatedIdeaRecord mapping."""

import json
from datetime import UTC, datetime

import pytest

from exitplans.domain.value_objects import ValidatedIdeaRecord

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.mark.unit
class TestFromJobResult:
    """Test ValidatedIdeaRecord.from_job_result()."""

    def test_maps_full_result(self):
        result = {
            "email": "founder@example.com",
            "ideaName": "ShiftSwap",
            "oneLiner": "Shift trading app",
            "industry": "Hospitality",
            "marketValidation": {"score": 78, "summary": "Strong demand"},
            "quickWins": ["Talk to managers"],
            "redFlags": ["Crowded scheduling market"],
            "model": "gemini-1.5-pro",
        }

        record = ValidatedIdeaRecord.from_job_result(result, now=NOW)

        assert record.timestamp == NOW.isoformat()
        assert record.email == "founder@example.com"
        assert record.idea_name == "ShiftSwap"
        assert record.score == 78
        assert json.loads(record.market_validation)["summary"] == "Strong demand"
        assert json.loads(record.quick_wins) == ["Talk to managers"]
        assert record.ai_model_used == "gemini-1.5-pro"
        assert record.status == "COMPLETED"

    def test_empty_result_uses_defaults(self):
        record = ValidatedIdeaRecord.from_job_result({}, now=NOW)

        assert record.email == "unknown@email.com"
        assert record.idea_name == "Unknown Idea"
        assert record.score == 0
        assert record.ai_model_used == "Gemini-via-n8n"
        assert record.quick_wins == "[]"

    def test_to_dict_uses_camel_case(self):
        record = ValidatedIdeaRecord.from_job_result({"ideaName": "ShiftSwap"}, now=NOW)

        data = record.to_dict()

        assert data["ideaName"] == "ShiftSwap"
        assert "aiModelUsed" in data
        assert "processingTime" in data
