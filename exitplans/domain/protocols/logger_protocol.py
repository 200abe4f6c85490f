"""LoggerProtocol definition for structured logging.

Standardizes structured logging while staying backend-agnostic. Every call is
a short event message plus key-value context; no secrets (API keys, webhook
tokens) in either.

Log Levels:
    - DEBUG: Provider payload shapes, cache hits
    - INFO: Jobs created/updated, provider successes, dispatches sent
    - WARNING: Degrade-open admission, provider failures, ignored duplicates
    - ERROR: Chain exhaustion, secondary write failures, dispatch failures
    - CRITICAL: Reserved for failures affecting every request

Usage:
    from exitplans.core.container import get_logger

    logger = get_logger()
    logger.info("Job created", job_id=job.id, job_type=job.type.value)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("Provider attempt failed", provider="gemini")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations may enrich logs with timestamp, level and trace id.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event message (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event message (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context included in every later call.

        Returns:
            New logger instance with bound context.

        Example:
            job_logger = logger.bind(job_id=job.id)
            job_logger.info("Job updated", status="COMPLETED")
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind().

        Args:
            **context: Context included in every later call.

        Returns:
            New logger instance with bound context.
        """
        ...
