"""Centralized constants for internal implementation details.

These are fixed defaults, NOT environment-specific configuration. For values
that can be overridden per process, use `functional_errors/core/config.py`.

Example:
    >>> from functional_errors.core.constants import CAUSED_BY_SEPARATOR
    >>> CAUSED_BY_SEPARATOR.join(["OuterFailure: a", "InnerFailure: b"])
    'OuterFailure: a\\nCaused by: InnerFailure: b'
"""

# =============================================================================
# Causal Chain Limits
# =============================================================================

MAX_CHAIN_LENGTH: int = 999
"""Default maximum number of causes collected from a causal chain."""


# =============================================================================
# Rendering
# =============================================================================

CAUSED_BY_SEPARATOR: str = "\nCaused by: "
"""Separator placed between rendered entries of a causal chain."""


# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME: str = "functional_errors"
"""Name of the structlog logger used by the library."""
