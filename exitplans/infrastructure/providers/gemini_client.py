"""Gemini REST client (generateContent).

Thin httpx client over the Gemini `models/{model}:generateContent` endpoint,
shared by the validation and coaching providers. Only the text of the first
candidate is returned; interpreting it is the caller's job.

Reference:
    - https://ai.google.dev/api/generate-content
"""

from typing import Any

from exitplans.core.constants import PROVIDER_TIMEOUT_DEFAULT
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import ProviderError
from exitplans.infrastructure.providers.base_api_client import BaseProviderAPIClient


class GeminiClient(BaseProviderAPIClient):
    """Client for Gemini content generation.

    Attributes:
        _api_key: Gemini API key (sent as x-goog-api-key).
        _model: Model name (e.g., "gemini-1.5-flash-latest").
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key.
            model: Model name.
            base_url: REST API base URL (e.g., .../v1beta).
            timeout: HTTP timeout in seconds.
        """
        super().__init__(base_url=base_url, provider_name="gemini", timeout=timeout)
        self._api_key = api_key
        self._model = model

    async def generate(
        self,
        *,
        contents: list[dict[str, Any]],
        generation_config: dict[str, Any],
        system_instruction: str | None = None,
        operation: str,
    ) -> Result[str, ProviderError]:
        """Generate content and return the first candidate's text.

        Args:
            contents: Conversation turns ({"role", "parts": [{"text"}]}).
            generation_config: temperature, topP, maxOutputTokens, ...
            system_instruction: Optional system prompt.
            operation: Operation name for logging.

        Returns:
            Success(str): Concatenated text parts of the first candidate.
            Failure(ProviderError): HTTP error or response without text.
        """
        body: dict[str, Any] = {
            "contents": contents,
            "generationConfig": generation_config,
        }
        if system_instruction:
            body["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        result = await self._execute_and_parse_object(
            method="POST",
            path=f"/models/{self._model}:generateContent",
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": self._api_key,
            },
            json_data=body,
            operation=operation,
        )

        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                text = self._candidate_text(data)
                if not text:
                    self._logger.warning(
                        "gemini_api_empty_candidate",
                        operation=operation,
                        finish_reason=self._finish_reason(data),
                    )
                    return Failure(error=self._invalid_response("Empty candidate"))
                return Success(value=text)

    @staticmethod
    def _candidate_text(data: dict[str, Any]) -> str:
        candidates = data.get("candidates") or []
        if not candidates or not isinstance(candidates[0], dict):
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(
            part.get("text", "") for part in parts if isinstance(part, dict)
        ).strip()

    @staticmethod
    def _finish_reason(data: dict[str, Any]) -> str | None:
        candidates = data.get("candidates") or []
        if candidates and isinstance(candidates[0], dict):
            return candidates[0].get("finishReason")
        return None
