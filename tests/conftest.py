"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from legible.core.settings import load_settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fresh_settings() -> Iterator[None]:
    """Rebuild cached settings around each test so env tweaks never leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
