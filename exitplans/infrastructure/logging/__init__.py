"""Logging adapters.

Usage:
    from exitplans.infrastructure.logging import ConsoleAdapter
"""

from exitplans.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
