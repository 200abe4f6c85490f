"""Validated idea record written when a VALIDATION job completes.

The workflow engine posts the analysis together with the original idea fields.
Missing fields fall back to placeholder values so a partial payload still
yields a record.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any

DEFAULT_EMAIL = "unknown@email.com"
DEFAULT_IDEA_NAME = "Unknown Idea"
DEFAULT_MODEL = "Gemini-via-n8n"


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidatedIdeaRecord:
    """Row in the validated-ideas record store.

    JSON-typed columns (market_validation, quick_wins, red_flags) hold
    serialized text so the record maps onto flat sheet/table stores.
    """

    timestamp: str
    email: str
    idea_name: str
    one_liner: str
    problem_solved: str
    target_customer: str
    business_type: str
    industry: str
    price_range: str
    score: int
    market_validation: str
    quick_wins: str
    red_flags: str
    ai_model_used: str
    processing_time: int
    status: str

    @classmethod
    def from_job_result(
        cls, result: dict[str, Any], *, now: datetime
    ) -> "ValidatedIdeaRecord":
        """Map a completed VALIDATION job result to a record.

        Args:
            result: Job result payload from the workflow engine.
            now: Record timestamp.

        Returns:
            ValidatedIdeaRecord: Record with defaults for missing fields.
        """
        market_validation = result.get("marketValidation") or {}
        score = market_validation.get("score") if isinstance(market_validation, dict) else 0
        return cls(
            timestamp=now.isoformat(),
            email=result.get("email") or DEFAULT_EMAIL,
            idea_name=result.get("ideaName") or DEFAULT_IDEA_NAME,
            one_liner=result.get("oneLiner") or "",
            problem_solved=result.get("problemSolved") or "",
            target_customer=result.get("targetCustomer") or "",
            business_type=result.get("businessType") or "",
            industry=result.get("industry") or "",
            price_range=result.get("priceRange") or "",
            score=int(score or 0),
            market_validation=json.dumps(market_validation),
            quick_wins=json.dumps(result.get("quickWins") or []),
            red_flags=json.dumps(result.get("redFlags") or []),
            ai_model_used=result.get("model") or DEFAULT_MODEL,
            processing_time=0,
            status="COMPLETED",
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase column names."""
        return {
            "timestamp": self.timestamp,
            "email": self.email,
            "ideaName": self.idea_name,
            "oneLiner": self.one_liner,
            "problemSolved": self.problem_solved,
            "targetCustomer": self.target_customer,
            "businessType": self.business_type,
            "industry": self.industry,
            "priceRange": self.price_range,
            "score": self.score,
            "marketValidation": self.market_validation,
            "quickWins": self.quick_wins,
            "redFlags": self.red_flags,
            "aiModelUsed": self.ai_model_used,
            "processingTime": self.processing_time,
            "status": self.status,
        }
