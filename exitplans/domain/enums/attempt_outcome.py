"""Outcome of a single provider attempt inside a provider chain."""

from enum import Enum


class AttemptOutcome(str, Enum):
    """Provider attempt outcomes.

    Exactly one SUCCESS ends a chain; every earlier attempt is TIMEOUT, ERROR
    or SKIPPED.
    """

    SUCCESS = "success"
    """Provider returned a validated result."""

    TIMEOUT = "timeout"
    """Attempt exceeded its deadline and was cancelled."""

    ERROR = "error"
    """Provider failed (HTTP error, malformed output, exception)."""

    SKIPPED = "skipped"
    """Provider not configured; never attempted."""
