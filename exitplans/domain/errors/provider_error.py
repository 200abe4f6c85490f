"""Provider error types for the provider chain contract.

Providers return these inside Failure results. The chain orchestrator recovers
from every one of them by moving to the next provider; only
AllProvidersFailedError escapes the chain.

Usage:
    from exitplans.domain.errors import ProviderUnavailableError
    from exitplans.core.result import Failure

    return Failure(error=ProviderUnavailableError(
        code=ErrorCode.PROVIDER_UNAVAILABLE,
        message="n8n webhook returned 502",
        provider_name="n8n",
    ))
"""

from dataclasses import dataclass

from exitplans.core.errors import DomainError
from exitplans.domain.value_objects.provider_attempt import ProviderAttempt


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderError(DomainError):
    """Base provider error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        provider_name: Name of the provider (n8n, gemini, ...).
        details: Additional context (status code, response excerpt).
    """

    provider_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderUnavailableError(ProviderError):
    """Provider not configured or unreachable.

    Raised when:
    - Provider endpoint or credentials are missing
    - Provider returns 5xx
    - Connection fails (DNS, TLS, refused)

    Attributes:
        is_transient: Whether the error is likely transient.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderTimeoutError(ProviderError):
    """Provider did not answer within its deadline.

    Attributes:
        timeout_seconds: Deadline that elapsed.
    """

    timeout_seconds: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderRateLimitError(ProviderError):
    """Provider returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds suggested by the provider's Retry-After header.
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderAuthenticationError(ProviderError):
    """Provider rejected our credentials (401/403)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderInvalidResponseError(ProviderError):
    """Provider answered but the content is unusable.

    Raised when:
    - Response is not JSON / contains no JSON object
    - Required fields are missing or have the wrong type
    - Unexpected HTTP status

    A 200 response with unparseable content counts as a chain failure.

    Attributes:
        response_body: Truncated raw body for debugging.
    """

    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AllProvidersFailedError(DomainError):
    """Every provider in a chain failed or was skipped.

    Fatal for the request. Surfaced to clients as a generic 500 without
    upstream detail; attempts are kept for logs.

    Attributes:
        chain: Chain name (e.g., "idea_validation").
        attempts: Every attempt in order.
    """

    chain: str
    attempts: tuple[ProviderAttempt, ...] = ()
