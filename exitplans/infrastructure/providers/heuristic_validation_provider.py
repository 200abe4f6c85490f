"""Deterministic local idea validation.

Last provider in the idea validation chain. It needs no network and never
fails, so the chain always has an answer when the upstream providers are down.
"""

from exitplans.core.result import Result, Success
from exitplans.domain.errors import ProviderError
from exitplans.domain.value_objects import (
    CompetitorLandscape,
    IdeaAnalysis,
    IdeaInput,
    MarketValidation,
)

BASE_SCORE = 60
MAX_SCORE = 85
HOT_INDUSTRIES = ("technology", "saas", "ai", "automation", "software")

QUICK_WINS = (
    "Conduct 10-15 customer interviews to validate the problem and willingness to pay",
    "Create a simple landing page explaining your solution and collect email signups",
    "Build a minimal MVP focusing on the core problem to test with early users",
    "Join 3-5 online communities where your target customers gather",
)
RED_FLAGS = (
    "Significant market validation needed before major investment or quitting day job",
    "Need to understand competitive landscape in detail to ensure differentiation",
)
NEXT_STEPS = (
    "Define your unique value proposition: What makes your solution 10x better?",
    "Research top 5 competitors and identify their weaknesses",
    "Create a 90-day roadmap starting with customer validation",
    "Set clear success metrics: X interviews, Y signups, Z early users",
)
OPPORTUNITIES = (
    "Market shows clear demand for solutions addressing this problem",
    "Potential to differentiate through unique value proposition and customer focus",
)


def heuristic_score(idea: IdeaInput) -> int:
    """Score an idea from the detail it provides.

    Args:
        idea: Submitted idea.

    Returns:
        int: 60 base, +10 for a detailed problem (over 100 chars), +5 for a
            detailed customer (over 50 chars), +10 for a hot industry,
            capped at 85.
    """
    score = BASE_SCORE
    if len(idea.problem_solved) > 100:
        score += 10
    if len(idea.target_customer) > 50:
        score += 5
    industry = idea.industry.lower()
    if any(hot in industry for hot in HOT_INDUSTRIES):
        score += 10
    return min(score, MAX_SCORE)


class HeuristicValidationProvider:
    """Rule-based validation provider (always available, unbounded)."""

    @property
    def name(self) -> str:
        return "heuristic"

    @property
    def available(self) -> bool:
        return True

    @property
    def timeout_seconds(self) -> float | None:
        return None

    async def attempt(self, work: IdeaInput) -> Result[IdeaAnalysis, ProviderError]:
        """Build an analysis from fixed rules and texts."""
        summary = (
            f"{work.idea_name} addresses a need in the {work.industry} space. "
            f"The idea of {work.problem_solved[:100]}... represents a valid market "
            "opportunity worth exploring further."
        )
        insights = (
            f'Target market of "{work.target_customer}" is clearly defined, which '
            "helps with focused customer acquisition",
            f"{work.business_type} business model aligns well with the "
            "problem-solution approach",
            f'Price point of "{work.price_range}" is within typical market '
            "expectations for this industry",
        )
        return Success(
            value=IdeaAnalysis(
                market_validation=MarketValidation(
                    score=heuristic_score(work),
                    summary=summary,
                    key_insights=insights,
                ),
                competitor_landscape=CompetitorLandscape(
                    competition="Medium",
                    opportunities=OPPORTUNITIES,
                ),
                quick_wins=QUICK_WINS,
                red_flags=RED_FLAGS,
                next_steps=NEXT_STEPS,
            )
        )
