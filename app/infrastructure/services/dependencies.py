"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the shared request services.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.errors.reporter import ErrorReporter
from infrastructure.i18n.service import LocaleService
from infrastructure.logging.service import LogService
from infrastructure.sessions.service import SessionService
from infrastructure.services.providers import (
    get_settings,
    get_log_service,
    get_error_reporter,
    get_session_service,
    get_locale_service,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Process-wide services
LogServiceDep = Annotated[LogService, Depends(get_log_service)]
ErrorReporterDep = Annotated[ErrorReporter, Depends(get_error_reporter)]

# Request-scoped services
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
LocaleServiceDep = Annotated[LocaleService, Depends(get_locale_service)]

__all__ = [
    "SettingsDep",
    "LogServiceDep",
    "ErrorReporterDep",
    "SessionServiceDep",
    "LocaleServiceDep",
]
