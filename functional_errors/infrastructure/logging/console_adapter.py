"""Console logging adapter built on structlog.

The adapter wraps a named structlog logger. Construction never configures
structlog; by default records are forwarded to stdlib logging
(``ConsoleAdapter.for_stdlib``) so the host application decides what is shown.
Applications that want the library to render its own records call
``configure_structlog()`` (or set ``FUNCTIONAL_ERRORS_CONFIGURE_LOGGING=true``):
- Development: human-readable console renderer with colors
- Testing/CI: JSON renderer for machine parsing
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_structlog(*, use_json: bool = False, level: str = "WARNING") -> None:
    """Configure structlog for console output.

    Args:
        use_json (bool): JSON output when True (CI/testing), human-readable when False (dev).
        level (str): Minimum level name to emit (e.g. "DEBUG", "WARNING").
    """
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level.upper()]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


class ConsoleAdapter:
    """Structured logger used throughout the library.

    Args:
        name (str): Logger name bound to every record.
        logger (Any): Pre-built structlog logger; defaults to
            ``structlog.get_logger(name)``.
    """

    def __init__(self, name: str, *, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(name)

    @classmethod
    def for_stdlib(cls, name: str) -> ConsoleAdapter:
        """Build an adapter that forwards records to ``logging.getLogger(name)``.

        Records below the stdlib logger's effective level are dropped before
        rendering, so an application that never configures logging sees
        nothing below WARNING.

        Args:
            name (str): Stdlib logger name.

        Returns:
            ConsoleAdapter: Adapter writing through stdlib logging.
        """
        logger = structlog.wrap_logger(
            logging.getLogger(name),
            wrapper_class=structlog.stdlib.BoundLogger,
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.processors.KeyValueRenderer(key_order=["event"]),
            ],
        )
        return cls(name, logger=logger)

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message.

        Args:
            message (str): Message text.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (BaseException | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details."""
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
