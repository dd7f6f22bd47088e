"""Shared fixtures for the mp-option test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from mp_option.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Reload settings from the (possibly monkeypatched) environment per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
