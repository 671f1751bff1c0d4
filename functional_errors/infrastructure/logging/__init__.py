"""Logging adapters.

Usage:
    from functional_errors.infrastructure.logging import ConsoleAdapter
"""

from functional_errors.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_structlog,
)

__all__ = ["ConsoleAdapter", "configure_structlog"]
