"""Composition root for library-wide singletons.

Usage:
    from functional_errors.core.container import get_logger

    logger = get_logger()
    logger.debug("Causal chain truncated", max_depth=10)
"""

from functools import lru_cache

from functional_errors.core.config import get_settings
from functional_errors.core.constants import LOGGER_NAME
from functional_errors.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_structlog,
)


@lru_cache
def get_logger() -> ConsoleAdapter:
    """Return the library-scoped logger singleton.

    Adapter selection is centralized here:
    - configure_logging enabled: structlog configured for console or JSON
      output at ``log_level``
    - otherwise: records forwarded to the stdlib ``functional_errors``
      logger, leaving handlers and levels to the host application

    Returns:
        ConsoleAdapter: Logger bound to the library name.
    """
    settings = get_settings()
    if settings.configure_logging:
        configure_structlog(use_json=settings.log_json, level=settings.log_level)
        return ConsoleAdapter(LOGGER_NAME)
    return ConsoleAdapter.for_stdlib(LOGGER_NAME)
