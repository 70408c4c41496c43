"""LoggerProtocol definition for structured logging.

The dispatch core reports everything it does not return to the caller
(async handler failures, unmatched commands, pass completion) through this
port. Implementations MUST emit structured logs (message + key-value context).

Log Levels:
    - DEBUG: Routing and pass progress (command_unhandled, async_pass_completed)
    - INFO: Startup wiring (dispatch_configured)
    - WARNING: Contained failures (async_event_handler_failed, command_failed)
    - ERROR: Failures surfaced to the caller
    - CRITICAL: Unused by the core; available to applications

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("dispatch_configured", sync_handlers=2, async_handlers=1)

    scoped = logger.bind(command_type="AddItemToCart")
    scoped.debug("command_dispatched", event_count=1)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Snake_case event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Example:
            engine_logger = logger.bind(component="event_fanout_engine")
            engine_logger.debug("async_pass_completed", failures=0)
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
