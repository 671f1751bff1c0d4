"""Pytest configuration.

Settings and the logger are process-wide singletons cached with lru_cache.
The autouse fixture below clears them around every test so environment
overrides made by one test never leak into another.
"""

import pytest

from functional_errors.core.config import get_settings
from functional_errors.core.container import get_logger


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and logger before and after each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
