"""Shared test configuration."""

import pytest

from patternkit.config.manager import reset_config_manager
from patternkit.infrastructure.patterns import reset_singletons


@pytest.fixture(autouse=True)
def clean_global_state():
    """Give every test a fresh singleton registry and configuration manager."""
    reset_singletons()
    reset_config_manager()
    yield
    reset_singletons()
    reset_config_manager()


@pytest.fixture
def config_env(monkeypatch):
    """Remove PATTERNKIT_* variables so tests start from built-in defaults."""
    for name in (
        "PATTERNKIT_CONFIG_FILE",
        "PATTERNKIT_LOG_LEVEL",
        "PATTERNKIT_LOG_DESTINATION",
        "PATTERNKIT_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
