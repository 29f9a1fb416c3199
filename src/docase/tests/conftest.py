"""Shared fixtures for docase tests."""

import pytest

from docase import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate each test from DOCASE_* variables and the cached settings."""
    import os
    for key in [k for k in os.environ if k.startswith("DOCASE_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
