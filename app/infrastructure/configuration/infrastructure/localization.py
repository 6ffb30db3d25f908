"""Localization infrastructure settings."""

from pathlib import Path
from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings

# This file is at .../app/infrastructure/configuration/infrastructure/localization.py
DEFAULT_TRANSLATIONS_PATH = Path(__file__).resolve().parents[3] / "locales"


class LocalizationSettings(InfrastructureSettings):
    """Locale resolution and translation file configuration.

    Environment Variables:
        DEFAULT_LOCALE: Locale used when neither the session nor the client
            expresses a preference (default: en)
        TRANSLATIONS_PATH: Directory holding one <locale>.json file per locale
        AVAILABLE_LOCALES: JSON list of locales the application ships

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default_locale = settings.localization.DEFAULT_LOCALE
        translations = settings.localization.TRANSLATIONS_PATH
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    TRANSLATIONS_PATH: Path = Field(
        default=DEFAULT_TRANSLATIONS_PATH, alias="TRANSLATIONS_PATH"
    )
    AVAILABLE_LOCALES: List[str] = Field(
        default_factory=lambda: ["en", "es", "fr"], alias="AVAILABLE_LOCALES"
    )
