"""structlog adapter for LoggerProtocol, writing to stdout.

JSON lines in testing/ci/production, coloured key-value lines in
development. The request trace id bound by TraceMiddleware is merged into
every line through structlog.contextvars.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _configure(use_json: bool, level: str) -> None:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger (structural LoggerProtocol implementation).

    Args:
        use_json: JSON output when True, human-readable otherwise.
        level: Minimum level name (DEBUG, INFO, ...).
        logger: Pre-bound structlog logger; used by bind().
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        level: str = "INFO",
        logger: Any | None = None,
    ) -> None:
        if logger is None:
            _configure(use_json, level)
            logger = structlog.get_logger()
        self._logger = logger

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose lines all carry `context`."""
        return ConsoleAdapter(logger=self._logger.bind(**context))
