"""Domain entities.

Usage:
    from exitplans.domain.entities import Job
"""

from exitplans.domain.entities.job import Job

__all__ = ["Job"]
