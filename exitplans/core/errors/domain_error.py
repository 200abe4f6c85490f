"""Base domain error class for railway-oriented programming.

DomainError is the base class for every expected failure in the service.
Errors flow through the system as data inside Result types; they are never
raised.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Does NOT inherit from Exception (returned in Result, not raised)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from exitplans.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from exitplans.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
