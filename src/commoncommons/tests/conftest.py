"""Shared fixtures for commoncommons tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from commoncommons.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Re-read settings from the (possibly monkeypatched) environment per test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
