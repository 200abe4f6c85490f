"""Base API client for provider HTTP communication.

Shared by every network-hop provider (n8n webhooks, Gemini):
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON object parsing with error handling
- Structured logging with provider context

Subclasses build their own headers and payloads and call the base methods.

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for provider failures)
"""

from typing import Any

import httpx
import structlog

from exitplans.core.constants import PROVIDER_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from exitplans.core.enums import ErrorCode
from exitplans.core.result import Failure, Result, Success
from exitplans.domain.errors import (
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)


class BaseProviderAPIClient:
    """Base class for provider API clients with shared HTTP handling.

    Attributes:
        _base_url: Provider base URL (without trailing slash).
        _provider_name: Provider identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with provider context.

    Example:
        >>> class N8nWebhookClient(BaseProviderAPIClient):
        ...     async def post(self, payload):
        ...         return await self._execute_and_parse_object(
        ...             method="POST",
        ...             path="",
        ...             headers={"Content-Type": "application/json"},
        ...             json_data=payload,
        ...             operation="validate_idea",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        provider_name: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base provider API client.

        Args:
            base_url: Provider base URL or full webhook URL.
            provider_name: Provider identifier (e.g., "n8n", "gemini").
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._provider_name = provider_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{provider_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, ProviderError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to base_url ("" for the URL itself).
            headers: HTTP headers.
            params: Optional query parameters.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response.
            Failure(ProviderTimeoutError): On timeout.
            Failure(ProviderUnavailableError): On connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._provider_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderTimeoutError(
                    code=ErrorCode.PROVIDER_TIMEOUT,
                    message=f"{self._provider_name} request timed out",
                    provider_name=self._provider_name,
                    timeout_seconds=self._timeout,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._provider_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"Failed to connect to {self._provider_name}: {e}",
                    provider_name=self._provider_name,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[ProviderError] | None:
        """Map a non-2xx response to a ProviderError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(ProviderError) if error detected, None if response is OK.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            self._logger.warning(
                f"{self._provider_name}_api_rate_limited",
                operation=operation,
                retry_after=retry_seconds,
            )
            return Failure(
                error=ProviderRateLimitError(
                    code=ErrorCode.PROVIDER_RATE_LIMITED,
                    message=f"{self._provider_name} rate limit exceeded",
                    provider_name=self._provider_name,
                    retry_after=retry_seconds,
                )
            )

        if status in (401, 403):
            self._logger.warning(
                f"{self._provider_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=ProviderAuthenticationError(
                    code=ErrorCode.PROVIDER_AUTHENTICATION_FAILED,
                    message=f"{self._provider_name} rejected credentials ({status})",
                    provider_name=self._provider_name,
                )
            )

        if status >= 500:
            self._logger.warning(
                f"{self._provider_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=ProviderUnavailableError(
                    code=ErrorCode.PROVIDER_UNAVAILABLE,
                    message=f"{self._provider_name} server error: {status}",
                    provider_name=self._provider_name,
                )
            )

        self._logger.warning(
            f"{self._provider_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=ProviderInvalidResponseError(
                code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                message=f"Unexpected response from {self._provider_name}: {status}",
                provider_name=self._provider_name,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ProviderError): On HTTP error or invalid JSON.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.warning(
                f"{self._provider_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(error=self._invalid_response("Invalid JSON", response))

        # Webhook nodes commonly wrap the item in a single-element list
        if isinstance(data, list) and len(data) == 1:
            data = data[0]

        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._provider_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(error=self._invalid_response("Expected JSON object", response))

        self._logger.debug(
            f"{self._provider_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], ProviderError]:
        """Execute request and parse response as JSON object.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            headers: HTTP headers.
            params: Optional query parameters.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ProviderError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            headers=headers,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)

    def _invalid_response(
        self, message: str, response: httpx.Response | None = None
    ) -> ProviderInvalidResponseError:
        """Build an invalid-response error for this provider.

        Args:
            message: What was wrong with the response.
            response: Response whose body is kept (truncated) for debugging.

        Returns:
            ProviderInvalidResponseError: Error for a Failure result.
        """
        return ProviderInvalidResponseError(
            code=ErrorCode.PROVIDER_INVALID_RESPONSE,
            message=f"{message} from {self._provider_name}",
            provider_name=self._provider_name,
            response_body=response.text[:RESPONSE_BODY_MAX_LENGTH] if response else None,
        )
