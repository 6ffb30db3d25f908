"""Infrastructure modules for the shared request services.

Centralized infrastructure components:
- configuration: Settings management (Settings, per-concern settings)
- logging: Diagnostic logging and the durable application log (LogService)
- errors: Centralized error handling (ErrorReporter)
- sessions: Session lifecycle (SessionService, SessionMiddleware)
- i18n: Locale resolution and translations (LocaleService)
- operations: Operation results and status codes
- services: Service registry and dependency injection (get_settings, configure_services)
"""

# Observability
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Dependency Injection Services
from infrastructure.services import (
    SettingsDep,
    configure_services,
    get_settings,
)

__all__ = [
    # Observability
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Dependency Injection Services
    "SettingsDep",
    "configure_services",
    "get_settings",
]
