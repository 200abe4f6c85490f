"""Admission policy names.

Policies are chosen by the endpoint, never by the caller. Limits live in
exitplans/infrastructure/rate_limit/config.py.

Usage:
    from exitplans.domain.enums import RateLimitPolicyName

    policy = RATE_LIMIT_POLICIES[RateLimitPolicyName.IDEA_VALIDATION]
"""

from enum import Enum


class RateLimitPolicyName(str, Enum):
    """Fixed set of admission policies."""

    IDEA_VALIDATION = "idea_validation"
    """Free idea validation (1 per 24 hours per IP).

    Abuse-sensitive quota backed by paid inference.
    """

    COACHING = "coaching"
    """Coaching nudges (5 per 15 minutes per IP).

    Each admitted request ends in an outbound email.
    """

    API = "api"
    """General API calls (10 per minute per IP)."""
