"""Parsing and validation of raw provider output.

AI providers answer with free text that should contain one JSON object,
sometimes wrapped in markdown code fences. Workflow webhooks answer with JSON
directly. Both are validated with pydantic models and converted into the
IdeaAnalysis value object before a provider reports Success.

Usage:
    from exitplans.infrastructure.providers.response_parsing import (
        extract_json_object,
        GeminiIdeaPayload,
    )

    data = extract_json_object(text)
    analysis = GeminiIdeaPayload.model_validate(data).to_analysis()
"""

import json
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from exitplans.domain.value_objects import (
    CompetitorLandscape,
    IdeaAnalysis,
    MarketValidation,
)

_FENCE_PATTERN = re.compile(r"```(?:json)?\n?")
_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences (``` and ```json) from text."""
    return _FENCE_PATTERN.sub("", text.strip())


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Extract the first {...} block of text and parse it.

    Args:
        text: Raw model output.

    Returns:
        dict[str, Any] | None: Parsed object, or None when no JSON object
            could be found or parsed.
    """
    match = _JSON_OBJECT_PATTERN.search(strip_code_fences(text))
    if match is None:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def clamp_score(score: int) -> int:
    """Clamp a score into 0..100."""
    return max(0, min(100, score))


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


class GeminiIdeaPayload(BaseModel):
    """Flat JSON object the validation prompt asks Gemini to return.

    Missing or malformed fields fall back to neutral defaults rather than
    failing: score 65, a generic summary, Medium competition, empty lists.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: int = 65
    market_summary: str = Field(default="Market analysis completed", alias="marketSummary")
    key_insights: list[str] = Field(default_factory=list, alias="keyInsights")
    competition_level: str = Field(default="Medium", alias="competitionLevel")
    opportunities: list[str] = Field(default_factory=list)
    quick_wins: list[str] = Field(default_factory=list, alias="quickWins")
    red_flags: list[str] = Field(default_factory=list, alias="redFlags")
    next_steps: list[str] = Field(default_factory=list, alias="nextSteps")

    @field_validator("score", mode="before")
    @classmethod
    def coerce_score(cls, v: Any) -> int:
        """Use 65 for missing, zero or non-numeric scores."""
        try:
            score = int(float(v))
        except (TypeError, ValueError):
            return 65
        return score or 65

    @field_validator("market_summary", "competition_level", mode="before")
    @classmethod
    def blank_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat blank strings as missing."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        return v

    @field_validator(
        "key_insights",
        "opportunities",
        "quick_wins",
        "red_flags",
        "next_steps",
        mode="before",
    )
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        """Non-list values become an empty list."""
        return _string_list(v)

    def to_analysis(self) -> IdeaAnalysis:
        """Convert to the IdeaAnalysis value object."""
        return IdeaAnalysis(
            market_validation=MarketValidation(
                score=clamp_score(self.score),
                summary=self.market_summary,
                key_insights=tuple(self.key_insights),
            ),
            competitor_landscape=CompetitorLandscape(
                competition=self.competition_level,
                opportunities=tuple(self.opportunities),
            ),
            quick_wins=tuple(self.quick_wins),
            red_flags=tuple(self.red_flags),
            next_steps=tuple(self.next_steps),
        )


class _MarketValidationPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    score: int
    summary: str
    key_insights: list[str] = Field(default_factory=list, alias="keyInsights")

    @field_validator("key_insights", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return _string_list(v)


class _CompetitorLandscapePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    competition: str = "Medium"
    opportunities: list[str] = Field(default_factory=list)

    @field_validator("opportunities", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return _string_list(v)


class WorkflowIdeaPayload(BaseModel):
    """Nested analysis object returned by the validation workflow webhook.

    marketValidation (with score and summary) is required; a response without
    it is not an analysis.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    market_validation: _MarketValidationPayload = Field(alias="marketValidation")
    competitor_landscape: _CompetitorLandscapePayload = Field(
        default_factory=_CompetitorLandscapePayload, alias="competitorLandscape"
    )
    quick_wins: list[str] = Field(default_factory=list, alias="quickWins")
    red_flags: list[str] = Field(default_factory=list, alias="redFlags")
    next_steps: list[str] = Field(default_factory=list, alias="nextSteps")

    @field_validator("quick_wins", "red_flags", "next_steps", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> list[str]:
        return _string_list(v)

    def to_analysis(self) -> IdeaAnalysis:
        """Convert to the IdeaAnalysis value object."""
        return IdeaAnalysis(
            market_validation=MarketValidation(
                score=clamp_score(self.market_validation.score),
                summary=self.market_validation.summary,
                key_insights=tuple(self.market_validation.key_insights),
            ),
            competitor_landscape=CompetitorLandscape(
                competition=self.competitor_landscape.competition,
                opportunities=tuple(self.competitor_landscape.opportunities),
            ),
            quick_wins=tuple(self.quick_wins),
            red_flags=tuple(self.red_flags),
            next_steps=tuple(self.next_steps),
        )
