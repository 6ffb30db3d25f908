"""Structured logging infrastructure.

This package provides the two logging channels of the application:

* diagnostic logging through structlog (``configure_logging``,
  ``get_module_logger``, request context binding, processors), and
* the durable application log (``LogService``), one formatted line per
  entry appended to a file.

Public API:
    - configure_logging(): Initialize diagnostic logging
    - get_logger() / get_module_logger(): Diagnostic logger instances
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id() / set_correlation_id() / clear_request_context()
    - LogService, LogEntry, LogLevel: Durable application log

Example:
    from infrastructure.logging import LogService

    log_service = LogService(session_source, error_reporter, "logs/app.log")
    log_service.log("session.start_success", "info", {"module": "SessionService"})
"""

# Core logging setup
from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

# Request context binding
from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
    set_correlation_id,
    clear_request_context,
)

# Log formatters/processors
from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    redact_mapping,
    truncate_large_values,
    add_environment_info,
    SENSITIVE_PATTERNS,
)

# Durable application log
from infrastructure.logging.models import LogEntry, LogLevel
from infrastructure.logging.service import LogService, SessionSource

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_request_context",
    "get_correlation_id",
    "set_correlation_id",
    "clear_request_context",
    # Formatters
    "add_app_info",
    "mask_sensitive_data",
    "redact_mapping",
    "truncate_large_values",
    "add_environment_info",
    "SENSITIVE_PATTERNS",
    # Application log
    "LogEntry",
    "LogLevel",
    "LogService",
    "SessionSource",
]
