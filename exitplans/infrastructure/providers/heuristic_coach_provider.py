"""Deterministic coach replies.

Last provider in the coaching chain. Follows the coach's rules without a
model: lead with one concrete action, tie it to the user's business, end with
one next step.
"""

from exitplans.core.result import Result, Success
from exitplans.domain.errors import ProviderError
from exitplans.domain.value_objects import CoachingReply, CoachingRequest

_TOPIC_ACTIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("price", "pricing", "charge"),
        "Pick one price, put it on a page today, and ask three prospects if they "
        "would pay it this week.",
    ),
    (
        ("customer", "client", "sale", "sell", "lead"),
        "Write down five people who match your target customer and message two of "
        "them before you close this chat.",
    ),
    (
        ("market", "marketing", "audience", "post", "content"),
        "Publish one short post that names the problem you solve, in the words your "
        "customer would use.",
    ),
    (
        ("stuck", "overwhelm", "scared", "afraid", "motivation"),
        "Shrink today's goal to one 30-minute task and finish it before you plan "
        "anything else.",
    ),
)

_DEFAULT_ACTION = (
    "Pick the single task that gets you closer to a paying customer and block "
    "45 minutes for it today."
)


def choose_action(message: str) -> str:
    """Pick the concrete action matching the message topic."""
    lowered = message.lower()
    for keywords, action in _TOPIC_ACTIONS:
        if any(keyword in lowered for keyword in keywords):
            return action
    return _DEFAULT_ACTION


class HeuristicCoachProvider:
    """Rule-based coaching provider (always available, unbounded)."""

    @property
    def name(self) -> str:
        return "heuristic"

    @property
    def available(self) -> bool:
        return True

    @property
    def timeout_seconds(self) -> float | None:
        return None

    async def attempt(
        self, work: CoachingRequest
    ) -> Result[CoachingReply, ProviderError]:
        """Compose a reply from the message topic and roadmap context."""
        lines = [choose_action(work.message)]

        context = work.context
        if context is None:
            lines.append(
                "Tell me what you're building and who it's for, and I'll make the "
                "next step specific to your business."
            )
            next_step = "Next step: reply with one sentence describing your business."
        else:
            lines.append(
                f"For {context.business}, you're on day {context.current_day} of "
                f"{context.total_days} with {context.progress_pct}% of your roadmap done."
            )
            if context.biggest_gap:
                lines.append(
                    f"You flagged {context.biggest_gap} as your biggest gap, so keep "
                    "today's work small and finished rather than big and perfect."
                )
            next_step = "Next step: open today's roadmap task and mark it done once it ships."

        lines.append(next_step)
        return Success(value=CoachingReply(text="\n\n".join(lines)))
