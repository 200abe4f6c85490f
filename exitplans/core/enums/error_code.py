"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Rate limit errors (RATE_LIMIT_*)
- Provider errors (PROVIDER_*, ALL_PROVIDERS_*)
- Job errors (JOB_*)
- Record store errors (RECORD_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_JOB_STATUS = "invalid_job_status"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    JOB_NOT_FOUND = "job_not_found"

    # Rate limit errors
    RATE_LIMIT_CHECK_FAILED = "rate_limit_check_failed"
    RATE_LIMIT_RESET_FAILED = "rate_limit_reset_failed"

    # Provider errors
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_TIMEOUT = "provider_timeout"
    PROVIDER_RATE_LIMITED = "provider_rate_limited"
    PROVIDER_AUTHENTICATION_FAILED = "provider_authentication_failed"
    PROVIDER_INVALID_RESPONSE = "provider_invalid_response"
    ALL_PROVIDERS_FAILED = "all_providers_failed"

    # Job store errors
    JOB_STORE_FAILED = "job_store_failed"
    JOB_UPDATE_CONFLICT = "job_update_conflict"

    # Record store errors
    RECORD_WRITE_FAILED = "record_write_failed"
