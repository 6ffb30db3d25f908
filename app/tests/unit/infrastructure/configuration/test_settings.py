"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- Section settings defaults and environment overrides
- Settings aggregation and flat key lookup
- Integration with Pydantic BaseSettings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.configuration import (
    ErrorHandlingSettings,
    LocalizationSettings,
    LogFileSettings,
    SessionSettings,
    Settings,
)
from infrastructure.configuration.base import InfrastructureSettings
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestSectionSettings:
    """Test suite for the per-service settings sections."""

    def test_session_defaults(self):
        session = SessionSettings()

        assert session.SESSION_TIMEOUT == 1800
        assert session.SESSION_COOKIE_NAME == "session_id"
        assert session.SESSION_COOKIE_SAMESITE == "lax"

    def test_session_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("SESSION_TIMEOUT", "60")

        assert SessionSettings().SESSION_TIMEOUT == 60

    def test_session_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("SESSION_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            SessionSettings()

    def test_localization_defaults(self):
        localization = LocalizationSettings()

        assert localization.DEFAULT_LOCALE == "en"
        assert localization.AVAILABLE_LOCALES == ["en", "es", "fr"]
        assert localization.TRANSLATIONS_PATH.name == "locales"
        assert (localization.TRANSLATIONS_PATH / "en.json").is_file()

    def test_available_locales_from_env(self, monkeypatch):
        monkeypatch.setenv("AVAILABLE_LOCALES", '["en", "de"]')

        assert LocalizationSettings().AVAILABLE_LOCALES == ["en", "de"]

    def test_log_file_defaults(self):
        log_file = LogFileSettings()

        assert log_file.LOG_FILE_PATH == Path("logs/app.log")
        assert log_file.LOG_DIR_MODE == 0o755

    def test_log_dir_mode_accepts_octal_string(self, monkeypatch):
        monkeypatch.setenv("LOG_DIR_MODE", "0o700")

        assert LogFileSettings().LOG_DIR_MODE == 0o700

    def test_error_handling_defaults(self):
        errors = ErrorHandlingSettings()

        assert errors.DISPLAY_ERRORS is False
        assert errors.GENERIC_ERROR_MESSAGE

    def test_display_errors_from_env(self, monkeypatch):
        monkeypatch.setenv("DISPLAY_ERRORS", "true")

        assert ErrorHandlingSettings().DISPLAY_ERRORS is True

    def test_sections_share_base(self):
        for section in (
            SessionSettings,
            LocalizationSettings,
            LogFileSettings,
            ErrorHandlingSettings,
        ):
            assert issubclass(section, InfrastructureSettings)


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_initializes_all_sections(self):
        settings = Settings()

        assert isinstance(settings.session, SessionSettings)
        assert isinstance(settings.localization, LocalizationSettings)
        assert isinstance(settings.log_file, LogFileSettings)
        assert isinstance(settings.error_handling, ErrorHandlingSettings)

    def test_settings_accepts_section_override(self):
        settings = Settings(session=SessionSettings(SESSION_TIMEOUT=60))

        assert settings.session.SESSION_TIMEOUT == 60

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_get_flat_keys(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SESSION_TIMEOUT", "900")
        monkeypatch.setenv("DEFAULT_LOCALE", "fr")
        monkeypatch.setenv("LOG_FILE_PATH", str(tmp_path / "app.log"))

        settings = Settings()

        assert settings.get("session.timeout") == 900
        assert settings.get("localization.default_locale") == "fr"
        assert settings.get("logFilePath") == tmp_path / "app.log"
        assert settings.get("logDirMode") == 0o755
        assert settings.get("error_handling.display_errors") is False

    def test_get_unknown_key_returns_default(self):
        assert Settings().get("unknown.key", "fallback") == "fallback"
        assert Settings().get("unknown.key") is None


@pytest.mark.unit
class TestGetSettings:
    """Test suite for the cached settings provider."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()

        assert get_settings() is get_settings()

        get_settings.cache_clear()
