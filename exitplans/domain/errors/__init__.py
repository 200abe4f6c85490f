"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from exitplans.domain.errors import RateLimitError, JobNotFoundError
    from exitplans.domain.errors import ProviderError, AllProvidersFailedError
"""

from exitplans.domain.errors.job_error import JobError, JobNotFoundError
from exitplans.domain.errors.provider_error import (
    AllProvidersFailedError,
    ProviderAuthenticationError,
    ProviderError,
    ProviderInvalidResponseError,
    ProviderRateLimitError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from exitplans.domain.errors.rate_limit_error import RateLimitError
from exitplans.domain.errors.record_store_error import RecordStoreError

__all__ = [
    "AllProvidersFailedError",
    "JobError",
    "JobNotFoundError",
    "ProviderAuthenticationError",
    "ProviderError",
    "ProviderInvalidResponseError",
    "ProviderRateLimitError",
    "ProviderTimeoutError",
    "ProviderUnavailableError",
    "RateLimitError",
    "RecordStoreError",
]
