"""Diagnostic logging setup.

Two channels exist in this application. The durable, line-oriented log is
written by ``LogService``; everything else (wiring events, cache hits, and the
failures the durable log cannot record about itself) goes through structlog
as configured here.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translation_loader_created", translations_dir="app/locales")
"""

import inspect
import logging
import sys
from typing import Iterable, Optional, TYPE_CHECKING

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "app-services"
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _shared_processors(settings: "Settings") -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        add_environment_info(settings.PREFIX or "production"),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for diagnostic events.

    Under pytest every event is dropped so test output stays readable. In
    production events are rendered as JSON, otherwise for the console.

    Args:
        settings: Settings instance. Loaded from the environment when omitted.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        structlog.configure(
            processors=[structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
        return structlog.stdlib.get_logger()

    if settings is None:
        from infrastructure.configuration import Settings

        settings = Settings()

    production = settings.is_production if is_production is None else is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if production
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*_shared_processors(settings), renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def caller_module_name(skip: Iterable[str] = (), depth: int = 1) -> Optional[str]:
    """Name the module that called into the current function.

    Args:
        skip: Module name prefixes to walk past (e.g. internal packages).
        depth: Frames to step back before checking, 1 being the caller of
            the function that calls this helper.

    Returns:
        Dotted module name, or None when the stack cannot be inspected.
    """
    prefixes = tuple(skip)
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        while frame is not None:
            name = frame.f_globals.get("__name__")
            if name and not (prefixes and name.startswith(prefixes)):
                return name
            frame = frame.f_back
        return None
    finally:
        del frame


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a name, or to the calling module.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Logger with a logger_name in its context
    """
    return logger.bind(logger_name=name or caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Example:
        # In infrastructure/sessions/service.py
        logger = get_module_logger()
        # context: {"component": "service",
        #           "module_path": "infrastructure.sessions.service"}
    """
    module_path = caller_module_name()
    if module_path is None:
        return logger.bind(component="unknown")
    return logger.bind(component=module_path.rsplit(".", 1)[-1], module_path=module_path)
