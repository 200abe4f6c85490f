"""Result types for railway-oriented programming.

Operations that can fail in expected ways return a Result instead of raising.
Callers branch on the outcome with structural pattern matching, which keeps
fallback paths (next provider, degrade-open admission) explicit.

Usage:
    async def fetch_analysis(idea: IdeaInput) -> Result[IdeaAnalysis, ProviderError]:
        if not configured:
            return Failure(error=ProviderUnavailableError(...))
        return Success(value=analysis)

    match await fetch_analysis(idea):
        case Success(value=analysis):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
