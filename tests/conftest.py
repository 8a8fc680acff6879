"""Pytest configuration shared by the date code test suites."""

from __future__ import annotations

from typing import Generator

import pytest

from date_code_hub.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Ensure each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
