"""Idea validation through Gemini.

Second provider in the idea validation chain. Sends the validation prompt and
parses the JSON object out of the model text.
"""

from exitplans.core.constants import RESPONSE_BODY_MAX_LENGTH
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import (
    ProviderError,
    ProviderInvalidResponseError,
    ProviderUnavailableError,
)
from exitplans.domain.value_objects import IdeaAnalysis, IdeaInput
from exitplans.infrastructure.providers.gemini_client import GeminiClient
from exitplans.infrastructure.providers.response_parsing import (
    GeminiIdeaPayload,
    extract_json_object,
)

VALIDATION_GENERATION_CONFIG = {
    "temperature": 0.7,
    "topP": 0.95,
    "maxOutputTokens": 2048,
}

VALIDATION_PROMPT_TEMPLATE = """You are a business validation expert. Analyze this business idea and provide structured, actionable feedback.

BUSINESS IDEA:
Name: {idea_name}
Description: {one_liner}
Problem Solved: {problem_solved}
Target Customer: {target_customer}
Business Type: {business_type}
Industry: {industry}
Price Range: {price_range}

TASK: Provide a comprehensive validation analysis in JSON format with these sections:

1. MARKET VALIDATION
   - Overall opportunity score (0-100, be realistic)
   - Brief market summary (2-3 sentences explaining the opportunity)
   - 3-5 key market insights (specific, actionable points)

2. COMPETITION ANALYSIS
   - Competition level: Low, Medium, or High
   - 2-3 specific opportunity gaps in the market

3. QUICK WINS
   - 3-4 immediate actions they can take to validate/start (be specific)

4. RED FLAGS
   - 2-3 potential challenges or risks they should watch for

5. NEXT STEPS
   - 3-4 concrete next steps for moving forward

Format your response as valid JSON:
{{
  "score": 75,
  "marketSummary": "Brief 2-3 sentence summary of the opportunity...",
  "keyInsights": ["Specific insight about market size or customer need"],
  "competitionLevel": "Medium",
  "opportunities": ["Specific gap in current market offerings"],
  "quickWins": ["Specific action: Interview 10 target customers to validate X"],
  "redFlags": ["Specific challenge or risk to watch"],
  "nextSteps": ["Step 1: Specific action"]
}}

SCORING GUIDELINES:
- 80-100: Exceptional opportunity, clear market need, low competition
- 70-79: Strong opportunity, good market fit
- 60-69: Decent opportunity, needs more validation
- 50-59: Risky, significant challenges to overcome
- Below 50: Major concerns, recommend rethinking approach

IMPORTANT:
- Be specific and actionable in all feedback
- Focus on practical insights the founder can act on
- Score realistically (60-85 is typical range)
- Each item should be 1-2 sentences maximum

Return ONLY the JSON object, no other text or markdown formatting."""


def build_validation_prompt(idea: IdeaInput) -> str:
    """Render the validation prompt for an idea."""
    return VALIDATION_PROMPT_TEMPLATE.format(
        idea_name=idea.idea_name,
        one_liner=idea.one_liner,
        problem_solved=idea.problem_solved,
        target_customer=idea.target_customer,
        business_type=idea.business_type,
        industry=idea.industry,
        price_range=idea.price_range,
    )


class GeminiValidationProvider:
    """Gemini-backed idea validation provider."""

    def __init__(self, *, client: GeminiClient | None, timeout_seconds: float) -> None:
        """Initialize provider.

        Args:
            client: Gemini client; None when no API key is configured.
            timeout_seconds: Per-attempt deadline.
        """
        self._client = client
        self._timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def available(self) -> bool:
        return self._client is not None

    @property
    def timeout_seconds(self) -> float | None:
        return self._timeout_seconds

    async def attempt(self, work: IdeaInput) -> Result[IdeaAnalysis, ProviderError]:
        """Ask Gemini for an analysis and parse it.

        Args:
            work: Idea to validate.

        Returns:
            Success(IdeaAnalysis): Parsed and normalized analysis.
            Failure(ProviderError): Not configured, HTTP failure, or text
                without a JSON object.
        """
        if self._client is None:
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_NOT_CONFIGURED,
                    message="Gemini API key not configured",
                    provider_name=self.name,
                    is_transient=False,
                )
            )

        result = await self._client.generate(
            contents=[{"role": "user", "parts": [{"text": build_validation_prompt(work)}]}],
            generation_config=VALIDATION_GENERATION_CONFIG,
            operation="validate_idea",
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=text):
                data = extract_json_object(text)
                if data is None:
                    return Failure(error=self._unparseable(text, "No JSON object"))
                try:
                    payload = GeminiIdeaPayload.model_validate(data)
                except ValueError:
                    return Failure(error=self._unparseable(text, "Invalid analysis"))
                return Success(value=payload.to_analysis())

    def _unparseable(self, text: str, reason: str) -> ProviderInvalidResponseError:
        return ProviderInvalidResponseError(
            code=ErrorCode.PROVIDER_INVALID_RESPONSE,
            message=f"{reason} in Gemini response",
            provider_name=self.name,
            response_body=text[:RESPONSE_BODY_MAX_LENGTH],
        )
