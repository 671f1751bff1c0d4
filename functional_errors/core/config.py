"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loaded from
environment variables prefixed with ``FUNCTIONAL_ERRORS_``. Every setting has
a default, so the library works without any environment at all.

Architecture:
- Flat Settings structure (no nesting)
- Values read lazily through the cached get_settings()
- Type validation via Pydantic

Usage:
    from functional_errors.core.config import get_settings

    settings = get_settings()
    depth = settings.max_chain_length

    # Override per process:
    #   FUNCTIONAL_ERRORS_MAX_CHAIN_LENGTH=50
    #   FUNCTIONAL_ERRORS_STOP_AT_FIRST_EXCEPTION=false
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from functional_errors.core.constants import CAUSED_BY_SEPARATOR, MAX_CHAIN_LENGTH

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (FUNCTIONAL_ERRORS_*)
        2. Default values

    Returns:
        Settings: Library configuration loaded from environment.
    """

    # Causal chain traversal
    max_chain_length: int = Field(
        default=MAX_CHAIN_LENGTH,
        ge=0,
        description="Default maximum number of causes collected from a chain",
    )
    stop_at_first_exception: bool = Field(
        default=True,
        description=(
            "Stop chain traversal at the first exception cause instead of "
            "following the exception's own nested causes"
        ),
    )

    # Rendering
    chain_separator: str = Field(
        default=CAUSED_BY_SEPARATOR,
        description="Separator between rendered entries of a causal chain",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render library logs as JSON instead of console output",
    )
    configure_logging: bool = Field(
        default=False,
        description="Let the library configure structlog on first logger use",
    )

    model_config = SettingsConfigDict(
        env_prefix="FUNCTIONAL_ERRORS_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name in any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so the environment is read only once per process. Call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
