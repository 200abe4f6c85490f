"""Domain enums.

All domain enums live in exitplans/domain/enums/ for discoverability.

Available Enums:
    - JobStatus: Asynchronous job lifecycle states
    - JobType: Kinds of asynchronous work delegated to the workflow engine
    - AttemptOutcome: Result of a single provider attempt in a chain
    - RateLimitPolicyName: Fixed set of admission policies
"""

from exitplans.domain.enums.attempt_outcome import AttemptOutcome
from exitplans.domain.enums.job_status import JobStatus
from exitplans.domain.enums.job_type import JobType
from exitplans.domain.enums.rate_limit_policy_name import RateLimitPolicyName

__all__ = [
    "AttemptOutcome",
    "JobStatus",
    "JobType",
    "RateLimitPolicyName",
]
