"""Kinds of asynchronous work delegated to the workflow engine.

The job type decides what the completion callback does with the result
(e.g., VALIDATION results are also written to the validated-ideas store).
"""

from enum import Enum


class JobType(str, Enum):
    """Asynchronous job types."""

    TEMPLATE = "TEMPLATE"
    """Business template generation."""

    VALIDATION = "VALIDATION"
    """Idea validation; completion also persists a validated idea record."""

    EXPLORE = "EXPLORE"
    """Idea exploration / matching."""
