"""Record store error types.

Secondary writes (e.g., persisting a validated idea after its job completes)
report failures with this error. The job tracker logs and swallows it.
"""

from dataclasses import dataclass

from exitplans.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordStoreError(DomainError):
    """Secondary record write failure."""

    pass
