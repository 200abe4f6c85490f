"""Core enums package.

Usage:
    from exitplans.core.enums import Environment, ErrorCode
"""

from exitplans.core.enums.environment import Environment
from exitplans.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
