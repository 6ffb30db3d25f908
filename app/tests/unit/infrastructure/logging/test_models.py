"""Unit tests for infrastructure.logging.models module."""

from datetime import datetime

import pytest

from infrastructure.logging.models import LogEntry, LogLevel


@pytest.mark.unit
class TestLogLevel:
    """Test suite for LogLevel."""

    def test_normalize_enum(self):
        assert LogLevel.normalize(LogLevel.WARNING) == "warning"

    def test_normalize_custom_string(self):
        assert LogLevel.normalize("debug") == "debug"


@pytest.mark.unit
class TestLogEntry:
    """Test suite for LogEntry serialization."""

    def test_format_matches_documented_layout(self):
        entry = LogEntry(
            timestamp=datetime(2024, 1, 2, 3, 4, 5),
            module="SessionService",
            function="start",
            user="System",
            level="info",
            message="session.start_success",
        )

        assert entry.format() == (
            "[2024-01-02 03:04:05] [SessionService] [start] [System] [info] "
            "session.start_success\n"
        )

    def test_format_keeps_entry_on_one_line(self):
        entry = LogEntry(
            timestamp=datetime(2024, 1, 2, 3, 4, 5),
            module="m",
            function="f",
            user="u",
            level="error",
            message="first\nsecond",
        )

        line = entry.format()

        assert line.count("\n") == 1
        assert line.endswith("first second\n")

    def test_entry_is_immutable(self):
        entry = LogEntry(datetime(2024, 1, 1), "m", "f", "u", "info", "msg")
        with pytest.raises(AttributeError):
            entry.message = "changed"
