"""Fixtures for infrastructure.logging tests."""

from datetime import datetime
from unittest.mock import MagicMock, Mock

import pytest

from infrastructure.configuration import Settings
from infrastructure.errors.reporter import ErrorReporter
from infrastructure.logging.service import LogService

FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15)


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = ""
    settings.GIT_SHA = "abc123"
    settings.is_production = False
    return settings


@pytest.fixture
def log_file(tmp_path):
    """Log destination inside a directory that does not exist yet."""
    return tmp_path / "logs" / "app.log"


@pytest.fixture
def session_source():
    """Session source without a user."""
    source = MagicMock()
    source.get.return_value = None
    return source


@pytest.fixture
def error_reporter():
    """ErrorReporter double."""
    return MagicMock(spec=ErrorReporter)


@pytest.fixture
def log_service(session_source, error_reporter, log_file):
    """LogService writing to a temporary file with a fixed clock."""
    return LogService(
        session_source=session_source,
        error_reporter=error_reporter,
        log_file_path=log_file,
        clock=lambda: FIXED_NOW,
    )
