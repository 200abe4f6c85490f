"""Centralized constants for internal implementation details.

This module holds constants that are implementation details, NOT
environment-specific configuration. For environment-specific settings use
`exitplans.core.config` instead.

Categories:
- Timeouts: Default timeouts for external calls
- Rate limiting: Degrade-open sentinels
- Jobs: Store retry bounds and key prefixes
- Limits: Truncation and safety limits

Example:
    >>> from exitplans.core.constants import PROVIDER_TIMEOUT_DEFAULT
    >>> client = N8nWebhookClient(url=url, timeout=PROVIDER_TIMEOUT_DEFAULT)
"""

# =============================================================================
# Timeouts
# =============================================================================

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for external provider API calls in seconds."""


# =============================================================================
# Rate Limiting
# =============================================================================

UNKNOWN_IDENTIFIER: str = "unknown"
"""Shared bucket for callers whose identity cannot be resolved."""

UNLIMITED_SENTINEL: int = 999999
"""Limit/remaining reported while admission control is degraded open."""


# =============================================================================
# Jobs
# =============================================================================

JOB_KEY_PREFIX: str = "job"
"""Redis key prefix for job records (job:{id})."""

JOB_UPDATE_MAX_RETRIES: int = 5
"""Optimistic-lock retries for a single job update before giving up."""

VALIDATED_IDEAS_KEY: str = "records:validated-ideas"
"""Redis list holding validated idea records."""


# =============================================================================
# Coaching
# =============================================================================

TODAYS_TASKS_LIMIT: int = 3
"""Maximum incomplete tasks included in a nudge envelope."""

COACH_HISTORY_LIMIT: int = 20
"""Most recent chat messages sent to the coaching provider."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum characters of an upstream body kept for debugging."""
