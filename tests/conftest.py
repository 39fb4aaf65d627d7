"""Shared fixtures."""

import pytest

from fieldcheck.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
