"""Unit tests for the idea validation providers (n8n, Gemini, heuristic).

HTTP providers are exercised against pytest-httpx mocks; every provider must
return a validated IdeaAnalysis or a ProviderError, never raw output.
"""

import json

import httpx
import pytest

from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Success
from exitplans.domain.errors import (
    ProviderInvalidResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from exitplans.domain.value_objects import IdeaAnalysis, IdeaInput
from exitplans.infrastructure.providers import (
    GeminiClient,
    GeminiValidationProvider,
    HeuristicValidationProvider,
    N8nValidationProvider,
)
from exitplans.infrastructure.providers.gemini_validation_provider import (
    build_validation_prompt,
)
from exitplans.infrastructure.providers.heuristic_validation_provider import (
    heuristic_score,
)

N8N_URL = "https://n8n.test/webhook/validate-idea"
GEMINI_BASE = "https://gemini.test/v1beta"
GEMINI_URL = f"{GEMINI_BASE}/models/gemini-test:generateContent"

WORKFLOW_ANALYSIS = {
    "marketValidation": {
        "score": 78,
        "summary": "Restaurants churn through scheduling tools.",
        "keyInsights": ["High staff turnover"],
    },
    "competitorLandscape": {"competition": "High", "opportunities": ["SMS-first"]},
    "quickWins": ["Interview 10 managers"],
    "redFlags": ["Crowded market"],
    "nextSteps": ["Build a waitlist"],
}


def _gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}, "finishReason": "STOP"}]}


def _gemini_provider() -> GeminiValidationProvider:
    client = GeminiClient(
        api_key="test-key", model="gemini-test", base_url=GEMINI_BASE, timeout=5.0
    )
    return GeminiValidationProvider(client=client, timeout_seconds=5.0)


@pytest.mark.unit
class TestN8nValidationProvider:
    """Test the workflow webhook provider."""

    def test_unavailable_without_url(self):
        provider = N8nValidationProvider(webhook_url=None, timeout_seconds=10.0)

        assert provider.name == "n8n"
        assert provider.available is False
        assert provider.timeout_seconds == 10.0

    @pytest.mark.asyncio
    async def test_attempt_without_url_fails(self, idea: IdeaInput):
        provider = N8nValidationProvider(webhook_url=None, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROVIDER_NOT_CONFIGURED

    @pytest.mark.asyncio
    async def test_returns_workflow_analysis(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(url=N8N_URL, method="POST", json=WORKFLOW_ANALYSIS)
        provider = N8nValidationProvider(webhook_url=N8N_URL, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Success)
        analysis = result.value
        assert analysis.market_validation.score == 78
        assert analysis.competitor_landscape.competition == "High"
        assert analysis.quick_wins == ("Interview 10 managers",)

        sent = json.loads(httpx_mock.get_request().content)
        assert sent["ideaName"] == "ShiftSwap"
        assert sent["email"] == "founder@example.com"

    @pytest.mark.asyncio
    async def test_unwraps_single_item_list(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(url=N8N_URL, json=[WORKFLOW_ANALYSIS])
        provider = N8nValidationProvider(webhook_url=N8N_URL, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_answer_without_market_validation_fails(
        self, idea: IdeaInput, httpx_mock
    ):
        httpx_mock.add_response(url=N8N_URL, json={"message": "Workflow was started"})
        provider = N8nValidationProvider(webhook_url=N8N_URL, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)

    @pytest.mark.asyncio
    async def test_server_error_fails(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(url=N8N_URL, status_code=502)
        provider = N8nValidationProvider(webhook_url=N8N_URL, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderUnavailableError)

    @pytest.mark.asyncio
    async def test_timeout_fails(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=N8N_URL)
        provider = N8nValidationProvider(webhook_url=N8N_URL, timeout_seconds=10.0)

        result = await provider.attempt(idea)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderTimeoutError)


@pytest.mark.unit
class TestGeminiValidationProvider:
    """Test the Gemini provider."""

    def test_unavailable_without_client(self):
        provider = GeminiValidationProvider(client=None, timeout_seconds=15.0)

        assert provider.name == "gemini"
        assert provider.available is False

    @pytest.mark.asyncio
    async def test_parses_fenced_json(self, idea: IdeaInput, httpx_mock):
        text = (
            "Here is the analysis:\n```json\n"
            + json.dumps(
                {
                    "score": 81,
                    "marketSummary": "Clear pain for managers.",
                    "keyInsights": ["Managers hate group texts"],
                    "competitionLevel": "Low",
                    "opportunities": ["Small restaurants"],
                    "quickWins": ["Call 5 managers"],
                    "redFlags": ["Low willingness to pay"],
                    "nextSteps": ["Build a prototype"],
                }
            )
            + "\n```"
        )
        httpx_mock.add_response(url=GEMINI_URL, method="POST", json=_gemini_body(text))

        result = await _gemini_provider().attempt(idea)

        assert isinstance(result, Success)
        analysis = result.value
        assert isinstance(analysis, IdeaAnalysis)
        assert analysis.market_validation.score == 81
        assert analysis.market_validation.summary == "Clear pain for managers."
        assert analysis.competitor_landscape.competition == "Low"
        assert analysis.next_steps == ("Build a prototype",)

        request = httpx_mock.get_request()
        assert request.headers["x-goog-api-key"] == "test-key"
        body = json.loads(request.content)
        assert body["generationConfig"]["maxOutputTokens"] == 2048
        assert "ShiftSwap" in body["contents"][0]["parts"][0]["text"]

    @pytest.mark.asyncio
    async def test_missing_fields_use_defaults(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(
            url=GEMINI_URL, json=_gemini_body('{"score": 0, "marketSummary": "  "}')
        )

        result = await _gemini_provider().attempt(idea)

        assert isinstance(result, Success)
        analysis = result.value
        assert analysis.market_validation.score == 65
        assert analysis.market_validation.summary == "Market analysis completed"
        assert analysis.competitor_landscape.competition == "Medium"
        assert analysis.quick_wins == ()

    @pytest.mark.asyncio
    async def test_score_is_clamped(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(url=GEMINI_URL, json=_gemini_body('{"score": 250}'))

        result = await _gemini_provider().attempt(idea)

        assert isinstance(result, Success)
        assert result.value.market_validation.score == 100

    @pytest.mark.asyncio
    async def test_text_without_json_fails(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(
            url=GEMINI_URL, json=_gemini_body("I cannot help with that.")
        )

        result = await _gemini_provider().attempt(idea)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)
        assert result.error.response_body == "I cannot help with that."

    @pytest.mark.asyncio
    async def test_empty_candidates_fail(self, idea: IdeaInput, httpx_mock):
        httpx_mock.add_response(url=GEMINI_URL, json={"candidates": []})

        result = await _gemini_provider().attempt(idea)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ProviderInvalidResponseError)

    def test_prompt_includes_every_field(self, idea: IdeaInput):
        prompt = build_validation_prompt(idea)

        for value in (
            idea.idea_name,
            idea.one_liner,
            idea.problem_solved,
            idea.target_customer,
            idea.business_type,
            idea.industry,
            idea.price_range,
        ):
            assert value in prompt
        assert '"marketSummary"' in prompt


@pytest.mark.unit
class TestHeuristicValidationProvider:
    """Test the deterministic fallback."""

    def test_always_available_and_unbounded(self):
        provider = HeuristicValidationProvider()

        assert provider.name == "heuristic"
        assert provider.available is True
        assert provider.timeout_seconds is None

    @pytest.mark.asyncio
    async def test_builds_analysis_from_fields(self, idea: IdeaInput):
        result = await HeuristicValidationProvider().attempt(idea)

        assert isinstance(result, Success)
        analysis = result.value
        assert analysis.market_validation.score == 60
        assert "ShiftSwap" in analysis.market_validation.summary
        assert len(analysis.market_validation.key_insights) == 3
        assert analysis.competitor_landscape.competition == "Medium"
        assert analysis.quick_wins
        assert analysis.red_flags
        assert analysis.next_steps

    def test_score_rewards_detail_and_hot_industry(self, idea: IdeaInput):
        detailed = IdeaInput(
            idea_name=idea.idea_name,
            one_liner=idea.one_liner,
            problem_solved="p" * 101,
            target_customer="c" * 51,
            business_type=idea.business_type,
            industry="B2B SaaS",
            price_range=idea.price_range,
        )

        assert heuristic_score(idea) == 60
        assert heuristic_score(detailed) == 85
