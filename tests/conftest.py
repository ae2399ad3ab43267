"""Pytest configuration shared by all tests."""

import pytest

from color_engine.core.config import PROTECTION_ENV_VAR


@pytest.fixture(autouse=True)
def clean_protection_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the caller's COLOR_ENGINE_PROTECTION."""
    monkeypatch.delenv(PROTECTION_ENV_VAR, raising=False)


@pytest.fixture
def protection_env(monkeypatch: pytest.MonkeyPatch):
    """Set the protection level through the environment."""
    def _set(value: str) -> None:
        monkeypatch.setenv(PROTECTION_ENV_VAR, value)
    return _set
