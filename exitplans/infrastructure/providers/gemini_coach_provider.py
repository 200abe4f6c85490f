"""AI business coach replies through Gemini.

First provider in the coaching chain. The persona prompt and the caller's
roadmap context form the system instruction; prior turns are replayed as
conversation history.
"""

from typing import Any

from exitplans.core.constants import COACH_HISTORY_LIMIT
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import ProviderError, ProviderUnavailableError
from exitplans.domain.value_objects import CoachingReply, CoachingRequest
from exitplans.infrastructure.providers.gemini_client import GeminiClient

COACH_GENERATION_CONFIG = {
    "temperature": 0.8,
    "maxOutputTokens": 1024,
}

COACH_SYSTEM_PROMPT = """You are a business coach for YourExitPlans, but not the boring, corporate kind.

You're the friend who actually started businesses (and failed at some), gives honest advice even when it's uncomfortable, uses humor to make hard things feel doable, and cuts through business jargon like it personally offended you.

PERSONALITY:
- Warm but direct
- Occasionally self-deprecating
- Allergic to corporate speak
- Encouraging but not fake
- Uses concrete examples, never vague platitudes

COMMUNICATION RULES:
1. Lead with the action, then explain why
2. One clear next step at the end of every response
3. Use their specific business context in ALL examples; never give generic advice
4. Keep responses concise (under 300 words unless they ask for deep detail)
5. Ask ONE follow-up question if you need clarification, not five
6. If they're stuck or scared, acknowledge it briefly, then move them forward
7. Never say "Great question!" or "Certainly!"; those phrases are banned

If you don't know something specific about their situation, ask. If they haven't told you their business details yet, ask what they're working on before giving advice."""


def build_system_instruction(request: CoachingRequest) -> str:
    """Persona prompt followed by the roadmap context block, if any."""
    if request.context is None:
        return COACH_SYSTEM_PROMPT
    return f"{COACH_SYSTEM_PROMPT}\n\n{request.context.to_prompt()}"


def build_contents(request: CoachingRequest) -> list[dict[str, Any]]:
    """Replay the last history messages, then the new user message.

    Gemini names the assistant role "model".
    """
    history = request.history[-COACH_HISTORY_LIMIT:]
    contents = [
        {
            "role": "model" if message.role == "assistant" else "user",
            "parts": [{"text": message.content}],
        }
        for message in history
    ]
    contents.append({"role": "user", "parts": [{"text": request.message}]})
    return contents


class GeminiCoachProvider:
    """Gemini-backed coaching provider."""

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

    async def attempt(
        self, work: CoachingRequest
    ) -> Result[CoachingReply, ProviderError]:
        """Generate a coach reply.

        Args:
            work: Message, optional context and history.

        Returns:
            Success(CoachingReply): Model reply text.
            Failure(ProviderError): Not configured or upstream failure.
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
            contents=build_contents(work),
            generation_config=COACH_GENERATION_CONFIG,
            system_instruction=build_system_instruction(work),
            operation="coach_chat",
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=text):
                return Success(value=CoachingReply(text=text))
