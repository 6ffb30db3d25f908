"""Application configuration settings - main aggregator."""

from typing import Any, Dict, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    ErrorHandlingSettings,
    LocalizationSettings,
    LogFileSettings,
    SessionSettings,
)

# Flat configuration keys understood by Settings.get(), mapped to
# (settings section, attribute).
SETTINGS_KEYS: Dict[str, Tuple[str, str]] = {
    "session.timeout": ("session", "SESSION_TIMEOUT"),
    "session.cookie_name": ("session", "SESSION_COOKIE_NAME"),
    "session.cookie_samesite": ("session", "SESSION_COOKIE_SAMESITE"),
    "localization.default_locale": ("localization", "DEFAULT_LOCALE"),
    "localization.translations_path": ("localization", "TRANSLATIONS_PATH"),
    "localization.available_locales": ("localization", "AVAILABLE_LOCALES"),
    "logFilePath": ("log_file", "LOG_FILE_PATH"),
    "logDirMode": ("log_file", "LOG_DIR_MODE"),
    "error_handling.display_errors": ("error_handling", "DISPLAY_ERRORS"),
    "error_handling.generic_message": ("error_handling", "GENERIC_ERROR_MESSAGE"),
}


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates the settings of every shared request service into a single
    configuration object:

    - **session**: timeout and cookie transport
    - **localization**: default locale and translation files
    - **log_file**: durable log destination
    - **error_handling**: error detail display

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Diagnostic logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        timeout = settings.session.SESSION_TIMEOUT
        timeout = settings.get("session.timeout", 1800)

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Infrastructure settings
    session: SessionSettings
    localization: LocalizationSettings
    log_file: LogFileSettings
    error_handling: ErrorHandlingSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a setting by its flat configuration key.

        Args:
            key: Flat key such as "session.timeout" or "logFilePath".
            default: Value returned when the key is unknown or unset.

        Returns:
            The configured value, or default.
        """
        location = SETTINGS_KEYS.get(key)
        if location is None:
            return default
        section, attribute = location
        value = getattr(getattr(self, section), attribute, None)
        return default if value is None else value

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "session": SessionSettings,
            "localization": LocalizationSettings,
            "log_file": LogFileSettings,
            "error_handling": ErrorHandlingSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
