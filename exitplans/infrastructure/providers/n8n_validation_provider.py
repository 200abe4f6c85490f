"""Idea validation through the n8n validation workflow.

First provider in the idea validation chain. Posts the idea to the synchronous
validation webhook and expects the nested analysis object back.
"""

from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import ProviderError, ProviderUnavailableError
from exitplans.domain.value_objects import IdeaAnalysis, IdeaInput
from exitplans.infrastructure.providers.base_api_client import BaseProviderAPIClient
from exitplans.infrastructure.providers.response_parsing import WorkflowIdeaPayload


class N8nValidationProvider(BaseProviderAPIClient):
    """Validation workflow webhook provider.

    Example:
        >>> provider = N8nValidationProvider(
        ...     webhook_url="https://n8n.example.com/webhook/validate-idea",
        ...     timeout_seconds=10.0,
        ... )
        >>> result = await provider.attempt(idea)
    """

    def __init__(self, *, webhook_url: str | None, timeout_seconds: float) -> None:
        """Initialize provider.

        Args:
            webhook_url: Validation webhook URL; None marks the provider
                unavailable.
            timeout_seconds: Per-attempt deadline.
        """
        super().__init__(
            base_url=webhook_url or "",
            provider_name="n8n",
            timeout=timeout_seconds,
        )
        self._webhook_url = webhook_url
        self._timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return "n8n"

    @property
    def available(self) -> bool:
        return bool(self._webhook_url)

    @property
    def timeout_seconds(self) -> float | None:
        return self._timeout_seconds

    async def attempt(self, work: IdeaInput) -> Result[IdeaAnalysis, ProviderError]:
        """Post the idea to the workflow and validate the answer.

        Args:
            work: Idea to validate.

        Returns:
            Success(IdeaAnalysis): Validated workflow analysis.
            Failure(ProviderError): Not configured, HTTP failure, or an
                answer without marketValidation.
        """
        if not self._webhook_url:
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_NOT_CONFIGURED,
                    message="n8n validation webhook not configured",
                    provider_name=self.name,
                    is_transient=False,
                )
            )

        result = await self._execute_and_parse_object(
            method="POST",
            path="",
            headers={"Content-Type": "application/json"},
            json_data=work.to_payload(),
            operation="validate_idea",
        )
        if isinstance(result, Failure):
            return result

        try:
            payload = WorkflowIdeaPayload.model_validate(result.value)
        except ValueError as e:
            self._logger.warning(
                "n8n_api_invalid_analysis",
                operation="validate_idea",
                error=str(e),
            )
            return Failure(error=self._invalid_response("Invalid analysis"))

        return Success(value=payload.to_analysis())
