"""Rate limit policies and endpoint assignments.

Two-tier configuration:

    Tier 1 - Policy implementation (RATE_LIMIT_POLICIES):
        Defines the actual limits per policy.
        Effect: changes limits for ALL endpoints using that policy.

    Tier 2 - Policy assignment (ENDPOINT_POLICIES):
        Assigns a policy to an endpoint ("METHOD /path").
        Effect: changes limits for ONE endpoint.

Endpoints absent from ENDPOINT_POLICIES (health, docs, job polling, the
workflow engine's callback) are not rate limited.

Usage:
    from exitplans.infrastructure.rate_limit.config import get_policy_for_endpoint

    policy = get_policy_for_endpoint("POST /validate")
"""

from exitplans.domain.enums import RateLimitPolicyName
from exitplans.domain.value_objects.rate_limit_policy import RateLimitPolicy

_MINUTE_MS = 60 * 1000
_DAY_MS = 24 * 60 * _MINUTE_MS

RATE_LIMIT_POLICIES: dict[RateLimitPolicyName, RateLimitPolicy] = {
    RateLimitPolicyName.IDEA_VALIDATION: RateLimitPolicy(
        name=RateLimitPolicyName.IDEA_VALIDATION,
        max_requests=1,
        window_ms=_DAY_MS,
        key_prefix="ratelimit:idea-validation",
    ),
    RateLimitPolicyName.COACHING: RateLimitPolicy(
        name=RateLimitPolicyName.COACHING,
        max_requests=5,
        window_ms=15 * _MINUTE_MS,
        key_prefix="ratelimit:coaching",
    ),
    RateLimitPolicyName.API: RateLimitPolicy(
        name=RateLimitPolicyName.API,
        max_requests=10,
        window_ms=_MINUTE_MS,
        key_prefix="ratelimit:api",
    ),
}

ENDPOINT_POLICIES: dict[str, RateLimitPolicyName] = {
    "POST /validate": RateLimitPolicyName.IDEA_VALIDATION,
    "POST /coach-nudge": RateLimitPolicyName.COACHING,
    "POST /coach-chat": RateLimitPolicyName.API,
    "POST /jobs": RateLimitPolicyName.API,
}


def get_policy_for_endpoint(endpoint: str) -> RateLimitPolicy | None:
    """Look up the policy assigned to an endpoint.

    Args:
        endpoint: "METHOD /path" (e.g., "POST /validate").

    Returns:
        RateLimitPolicy, or None when the endpoint is not limited.
    """
    name = ENDPOINT_POLICIES.get(endpoint)
    if name is None:
        return None
    return RATE_LIMIT_POLICIES[name]
