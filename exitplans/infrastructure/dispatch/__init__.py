"""Fire-and-forget outbound dispatch."""

from exitplans.infrastructure.dispatch.http_dispatcher import HttpDispatcher

__all__ = ["HttpDispatcher"]
