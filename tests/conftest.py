# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest

from xerror.config.settings import get_runtime_settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop XERROR_* overrides and the cached Settings around every test."""
    for key in list(os.environ):
        if key.startswith("XERROR_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    get_runtime_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_runtime_settings.cache_clear()
