"""Common error classes shared across domains.

Error Types:
- ValidationError: Input validation failures (HTTP 400)
- NotFoundError: Resource not found (HTTP 404)

Usage:
    from exitplans.core.errors import ValidationError
    from exitplans.core.enums import ErrorCode
    from exitplans.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_JOB_STATUS,
        message="A job cannot be moved back to PENDING",
        field="status",
    ))
"""

from dataclasses import dataclass

from exitplans.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Job, ...).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str
