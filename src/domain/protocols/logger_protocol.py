"""Structured logging port.

Every line is a snake_case event name plus keyword context, e.g.

    logger.info("application_submitted", project_id=str(project.id))

Levels in use: info for state changes (project_created, notification_sent),
warning for retried version conflicts, error for failed event handlers and
unhandled request exceptions. Never pass bearer tokens as context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure; `error` adds error_type and error_message fields."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a child logger that adds `context` to every line."""
        ...
