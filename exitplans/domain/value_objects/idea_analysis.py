"""Idea validation input and analysis value objects.

Every provider in the idea validation chain (workflow webhook, Gemini,
heuristic scorer) consumes an IdeaInput and produces an IdeaAnalysis, so the
caller cannot tell which provider served the result except through
ChainResult.provider_used.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class IdeaInput:
    """Business idea submitted for validation.

    Attributes:
        idea_name: Short name of the idea.
        one_liner: One-sentence description.
        problem_solved: Problem the idea addresses.
        target_customer: Who pays for it.
        business_type: Business model (SaaS, service, ...).
        industry: Industry / vertical.
        price_range: Intended price point.
        email: Submitter email (forwarded to the workflow engine only).
    """

    idea_name: str
    one_liner: str
    problem_solved: str
    target_customer: str
    business_type: str
    industry: str
    price_range: str
    email: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the workflow engine's camelCase field names."""
        payload: dict[str, Any] = {
            "ideaName": self.idea_name,
            "oneLiner": self.one_liner,
            "problemSolved": self.problem_solved,
            "targetCustomer": self.target_customer,
            "businessType": self.business_type,
            "industry": self.industry,
            "priceRange": self.price_range,
        }
        if self.email:
            payload["email"] = self.email
        return payload


@dataclass(frozen=True, slots=True, kw_only=True)
class MarketValidation:
    """Market opportunity assessment.

    Attributes:
        score: Opportunity score 0-100.
        summary: Two or three sentence summary.
        key_insights: Specific, actionable insights.
    """

    score: int
    summary: str
    key_insights: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class CompetitorLandscape:
    """Competition assessment.

    Attributes:
        competition: Low, Medium or High.
        opportunities: Gaps in current market offerings.
    """

    competition: str
    opportunities: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class IdeaAnalysis:
    """Structured idea validation result."""

    market_validation: MarketValidation
    competitor_landscape: CompetitorLandscape
    quick_wins: tuple[str, ...] = field(default_factory=tuple)
    red_flags: tuple[str, ...] = field(default_factory=tuple)
    next_steps: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the public camelCase response shape.

        Returns:
            dict[str, Any]: marketValidation, competitorLandscape, quickWins,
                redFlags and nextSteps.
        """
        return {
            "marketValidation": {
                "score": self.market_validation.score,
                "summary": self.market_validation.summary,
                "keyInsights": list(self.market_validation.key_insights),
            },
            "competitorLandscape": {
                "competition": self.competitor_landscape.competition,
                "opportunities": list(self.competitor_landscape.opportunities),
            },
            "quickWins": list(self.quick_wins),
            "redFlags": list(self.red_flags),
            "nextSteps": list(self.next_steps),
        }
