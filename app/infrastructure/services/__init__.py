"""
Dependency injection services.

Provides the service registry, provider functions, and type aliases for
FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LogServiceDep,
    ErrorReporterDep,
    SessionServiceDep,
    LocaleServiceDep,
)
from infrastructure.services.exceptions import (
    ServiceAlreadyConfiguredError,
    ServiceConfigurationError,
    ServiceNotConfiguredError,
)
from infrastructure.services.providers import (
    configure_services,
    create_session_service,
    get_settings,
    get_log_service,
    get_error_reporter,
    get_session_store,
    get_translation_loader,
    get_session_service,
    get_locale_service,
)
from infrastructure.services.registry import (
    ServiceGraph,
    ServiceRegistry,
    create_services,
    registry,
)

__all__ = [
    "SettingsDep",
    "LogServiceDep",
    "ErrorReporterDep",
    "SessionServiceDep",
    "LocaleServiceDep",
    "ServiceConfigurationError",
    "ServiceNotConfiguredError",
    "ServiceAlreadyConfiguredError",
    "configure_services",
    "create_session_service",
    "get_settings",
    "get_log_service",
    "get_error_reporter",
    "get_session_store",
    "get_translation_loader",
    "get_session_service",
    "get_locale_service",
    "ServiceGraph",
    "ServiceRegistry",
    "create_services",
    "registry",
]
