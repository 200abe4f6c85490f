"""Idea validation request/response schemas.

Endpoints:
    POST /validate - Validate a business idea through the provider chain
"""

from pydantic import ConfigDict, Field

from exitplans.domain.value_objects import ChainResult, IdeaAnalysis, IdeaInput
from exitplans.schemas.common_schemas import CamelModel


# =============================================================================
# Request Schemas
# =============================================================================


class IdeaValidationRequest(CamelModel):
    """Request schema for idea validation.

    POST /validate
    """

    idea_name: str = Field(..., min_length=1, max_length=200, description="Idea name")
    one_liner: str = Field(..., min_length=1, max_length=500, description="One-sentence pitch")
    problem_solved: str = Field(..., min_length=1, description="Problem the idea solves")
    target_customer: str = Field(..., min_length=1, description="Who pays for it")
    business_type: str = Field(..., min_length=1, description="Business model")
    industry: str = Field(..., min_length=1, description="Industry / vertical")
    price_range: str = Field(..., min_length=1, description="Intended price point")
    email: str | None = Field(None, description="Submitter email (optional)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ideaName": "ShiftSwap",
                "oneLiner": "Shift trading app for hourly restaurant staff",
                "problemSolved": "Managers spend hours every week reshuffling shifts by text",
                "targetCustomer": "Independent restaurants with 10-50 hourly staff",
                "businessType": "SaaS",
                "industry": "Software",
                "priceRange": "$29-$99/month",
            }
        }
    )

    def to_input(self) -> IdeaInput:
        """Convert to the IdeaInput value object."""
        return IdeaInput(
            idea_name=self.idea_name,
            one_liner=self.one_liner,
            problem_solved=self.problem_solved,
            target_customer=self.target_customer,
            business_type=self.business_type,
            industry=self.industry,
            price_range=self.price_range,
            email=self.email,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class MarketValidationSchema(CamelModel):
    """Market opportunity assessment."""

    score: int = Field(..., ge=0, le=100, description="Opportunity score 0-100")
    summary: str = Field(..., description="Market summary")
    key_insights: list[str] = Field(default_factory=list, description="Key insights")


class CompetitorLandscapeSchema(CamelModel):
    """Competition assessment."""

    competition: str = Field(..., description="Low, Medium or High")
    opportunities: list[str] = Field(default_factory=list, description="Market gaps")


class IdeaAnalysisSchema(CamelModel):
    """Structured idea analysis."""

    market_validation: MarketValidationSchema
    competitor_landscape: CompetitorLandscapeSchema
    quick_wins: list[str] = Field(default_factory=list)
    red_flags: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)

    @classmethod
    def from_analysis(cls, analysis: IdeaAnalysis) -> "IdeaAnalysisSchema":
        """Convert the value object to the response schema."""
        return cls(
            market_validation=MarketValidationSchema(
                score=analysis.market_validation.score,
                summary=analysis.market_validation.summary,
                key_insights=list(analysis.market_validation.key_insights),
            ),
            competitor_landscape=CompetitorLandscapeSchema(
                competition=analysis.competitor_landscape.competition,
                opportunities=list(analysis.competitor_landscape.opportunities),
            ),
            quick_wins=list(analysis.quick_wins),
            red_flags=list(analysis.red_flags),
            next_steps=list(analysis.next_steps),
        )


class IdeaValidationResponse(CamelModel):
    """Response schema for idea validation.

    POST /validate
    Returns: 200 OK
    """

    analysis: IdeaAnalysisSchema
    provider_used: str = Field(
        ..., description="Provider that produced the analysis", examples=["gemini"]
    )

    @classmethod
    def from_chain_result(
        cls, chain_result: ChainResult[IdeaAnalysis]
    ) -> "IdeaValidationResponse":
        """Build the response from a successful chain run."""
        return cls(
            analysis=IdeaAnalysisSchema.from_analysis(chain_result.value),
            provider_used=chain_result.provider_used,
        )
