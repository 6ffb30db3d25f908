"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the shared
request services using Pydantic BaseSettings with concern-based organization.

Exports:
    Settings: Main settings class (aggregator)
    SessionSettings, LocalizationSettings, LogFileSettings,
    ErrorHandlingSettings: Per-concern settings classes (for testing/overrides)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    timeout = settings.get("session.timeout", 1800)
    default_locale = settings.localization.DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.settings import SETTINGS_KEYS, Settings
from infrastructure.configuration.infrastructure import (
    ErrorHandlingSettings,
    LocalizationSettings,
    LogFileSettings,
    SessionSettings,
)

__all__ = [
    "Settings",
    "SETTINGS_KEYS",
    "SessionSettings",
    "LocalizationSettings",
    "LogFileSettings",
    "ErrorHandlingSettings",
]
