"""Shared fixtures for the application test suite."""

import pytest
import structlog

from infrastructure.configuration import Settings
from infrastructure.configuration.infrastructure import LogFileSettings
from infrastructure.services.providers import get_settings
from infrastructure.services.registry import registry


@pytest.fixture(autouse=True)
def reset_shared_services():
    """Give every test an unconfigured registry and a fresh settings cache."""
    registry.reset()
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    yield
    registry.reset()
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def app_settings(tmp_path):
    """Settings writing the application log under tmp_path."""
    return Settings(
        log_file=LogFileSettings(LOG_FILE_PATH=tmp_path / "logs" / "app.log")
    )
