"""Coaching chat value objects.

Roadmap context is supplied by the caller; roadmap persistence lives outside
this service.
"""

from dataclasses import dataclass
from typing import Literal

ChatRole = Literal["user", "assistant"]


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMessage:
    """One prior message in a coaching conversation."""

    role: ChatRole
    content: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RoadmapContext:
    """Business and progress context the coach uses in every reply.

    Attributes:
        business: What the business does.
        business_type: Business model.
        industry: Industry / vertical.
        target_customer: Target customer description.
        problem_solved: Problem the business solves.
        hours_per_week: Hours available per week.
        budget: Available budget.
        biggest_gap: Self-reported weakness.
        revenue_goal: Twelve-month revenue goal.
        completed_tasks: Completed roadmap tasks.
        total_tasks: Total roadmap tasks.
        current_day: Current plan day (1-based).
        total_days: Plan length in days.
        first_sale_target: First sale target description.
        coaching_style: Preferred coaching style.
    """

    business: str
    business_type: str | None = None
    industry: str | None = None
    target_customer: str | None = None
    problem_solved: str | None = None
    hours_per_week: int | None = None
    budget: str | None = None
    biggest_gap: str | None = None
    revenue_goal: str | None = None
    completed_tasks: int = 0
    total_tasks: int = 0
    current_day: int = 1
    total_days: int = 84
    first_sale_target: str | None = None
    coaching_style: str = "balanced"

    @property
    def progress_pct(self) -> int:
        """Completed share of tasks as a rounded percentage."""
        return progress_percentage(self.completed_tasks, self.total_tasks)

    def to_prompt(self) -> str:
        """Render the context block appended to the coach system prompt."""
        unset = "not specified"
        return "\n".join(
            [
                "USER'S BUSINESS CONTEXT (use this in ALL advice):",
                f"- Business: {self.business}",
                f"- Type: {self.business_type or unset}",
                f"- Industry: {self.industry or unset}",
                f"- Target Customer: {self.target_customer or unset}",
                f"- Problem They Solve: {self.problem_solved or unset}",
                f"- Hours/Week Available: {self.hours_per_week or unset}",
                f"- Budget: {self.budget or unset}",
                f"- Biggest Gap/Weakness: {self.biggest_gap or unset}",
                f"- Revenue Goal: {self.revenue_goal or unset}",
                f"- Roadmap Progress: {self.completed_tasks}/{self.total_tasks} tasks "
                f"({self.progress_pct}% complete)",
                f"- Current Plan Day: {self.current_day} of {self.total_days}",
                f"- First Sale Target: {self.first_sale_target or 'not set'}",
                f"- Coaching Style Preference: {self.coaching_style}",
            ]
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class CoachingRequest:
    """Unit of work for the coaching provider chain."""

    message: str
    context: RoadmapContext | None = None
    history: tuple[ChatMessage, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class CoachingReply:
    """Coach response text."""

    text: str


def progress_percentage(completed: int, total: int) -> int:
    """Rounded completion percentage.

    Args:
        completed: Completed task count.
        total: Total task count.

    Returns:
        int: 0 when total is 0, else round(completed / total * 100).
    """
    if total <= 0:
        return 0
    return int(completed / total * 100 + 0.5)
