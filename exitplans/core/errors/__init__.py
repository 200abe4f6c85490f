"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from exitplans.core.errors import DomainError, ValidationError, NotFoundError
"""

from exitplans.core.errors.common_errors import NotFoundError, ValidationError
from exitplans.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
]
