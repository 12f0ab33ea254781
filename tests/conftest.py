"""
Pytest configuration for a2ui tests

Every test starts from a clean environment and a fresh protocol config.
"""
import pytest

from a2ui.config import reset_config

A2UI_ENV_VARS = [
    "A2UI_PROTOCOL_VERSION",
    "A2UI_ENSURE_ASCII",
    "A2UI_WARN_DUPLICATE_IDS",
]


@pytest.fixture(autouse=True)
def clean_protocol_config(monkeypatch):
    """Clear A2UI_* variables and the cached config around each test"""
    for name in A2UI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
