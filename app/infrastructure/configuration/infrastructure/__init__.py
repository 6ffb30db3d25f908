"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.errors import ErrorHandlingSettings
from infrastructure.configuration.infrastructure.localization import (
    LocalizationSettings,
)
from infrastructure.configuration.infrastructure.log_file import LogFileSettings
from infrastructure.configuration.infrastructure.session import SessionSettings

__all__ = [
    "ErrorHandlingSettings",
    "LocalizationSettings",
    "LogFileSettings",
    "SessionSettings",
]
