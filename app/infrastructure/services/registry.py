"""Process-wide registry of the shared request services.

The LogService, ErrorReporter, session store and translation loader are built
once per process and reused by every request. Configuration is explicit:
using a service before configure() raises, configuring twice raises unless
replace=True is passed, and reset() drops the services.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from infrastructure.configuration import Settings
from infrastructure.errors.reporter import ErrorReporter, ResponseSink
from infrastructure.i18n.factory import create_translation_loader
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.logging.service import LogService, SessionSource
from infrastructure.logging.setup import get_module_logger
from infrastructure.services.exceptions import (
    ServiceAlreadyConfiguredError,
    ServiceNotConfiguredError,
)
from infrastructure.sessions.context import CurrentSessionProxy
from infrastructure.sessions.store import InMemorySessionStore, SessionStore

logger = get_module_logger()


@dataclass(frozen=True)
class ServiceGraph:
    """The wired set of process-wide services."""

    settings: Settings
    log_service: LogService
    error_reporter: ErrorReporter
    session_store: SessionStore
    translation_loader: TranslationLoader


def create_services(
    settings: Settings,
    *,
    session_source: Optional[SessionSource] = None,
    error_reporter: Optional[ErrorReporter] = None,
    log_file_path: Optional[Union[str, Path]] = None,
    session_store: Optional[SessionStore] = None,
    translation_loader: Optional[TranslationLoader] = None,
    response_sink: Optional[ResponseSink] = None,
) -> ServiceGraph:
    """Build and wire the process-wide services.

    The ErrorReporter and LogService depend on each other; the reporter is
    built first and given the LogService afterwards.

    Args:
        settings: Application settings.
        session_source: Where the LogService reads the user from
            (default: the current request's session).
        error_reporter: Pre-built reporter (default: built from settings).
        log_file_path: Log destination (default: settings "logFilePath").
        session_store: Session transport (default: in-memory store).
        translation_loader: Translation source (default: JSON files under
            settings "localization.translations_path").
        response_sink: Receives error notices for the user.

    Returns:
        ServiceGraph with every service wired.
    """
    if error_reporter is None:
        error_reporter = ErrorReporter(
            display_errors=settings.get("error_handling.display_errors", False),
            generic_message=settings.get(
                "error_handling.generic_message",
                "An unexpected error occurred. Please try again later.",
            ),
            response_sink=response_sink,
        )

    log_service = LogService(
        session_source=session_source or CurrentSessionProxy(),
        error_reporter=error_reporter,
        log_file_path=log_file_path or settings.get("logFilePath", "logs/app.log"),
        dir_mode=settings.get("logDirMode", 0o755),
    )
    error_reporter.attach_log_service(lambda: log_service)

    if translation_loader is None:
        translation_loader = create_translation_loader(
            settings.get("localization.translations_path")
        )

    return ServiceGraph(
        settings=settings,
        log_service=log_service,
        error_reporter=error_reporter,
        session_store=session_store or InMemorySessionStore(),
        translation_loader=translation_loader,
    )


class ServiceRegistry:
    """Holds exactly one ServiceGraph per process unless explicitly replaced.

    Safe to configure and read from multiple threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._services: Optional[ServiceGraph] = None

    @property
    def is_configured(self) -> bool:
        return self._services is not None

    def configure(
        self, settings: Settings, *, replace: bool = False, **overrides
    ) -> ServiceGraph:
        """Build the services once.

        Args:
            settings: Application settings.
            replace: Swap out an existing configuration instead of failing.
            **overrides: Passed to create_services().

        Returns:
            The configured ServiceGraph.

        Raises:
            ServiceAlreadyConfiguredError: If already configured and replace is False.
        """
        with self._lock:
            if self._services is not None and not replace:
                raise ServiceAlreadyConfiguredError(
                    "Services are already configured; pass replace=True to reconfigure"
                )
            self._services = create_services(settings, **overrides)
            logger.info(
                "services_configured",
                replaced=replace,
                log_file_path=str(self._services.log_service.log_file_path),
            )
            return self._services

    def reset(self) -> None:
        """Drop the configured services."""
        with self._lock:
            self._services = None

    @property
    def services(self) -> ServiceGraph:
        """The configured ServiceGraph.

        Raises:
            ServiceNotConfiguredError: If configure() has not been called.
        """
        services = self._services
        if services is None:
            raise ServiceNotConfiguredError(
                "Shared services used before configure() was called"
            )
        return services

    @property
    def log_service(self) -> LogService:
        return self.services.log_service

    @property
    def error_reporter(self) -> ErrorReporter:
        return self.services.error_reporter

    @property
    def session_store(self) -> SessionStore:
        return self.services.session_store

    @property
    def translation_loader(self) -> TranslationLoader:
        return self.services.translation_loader


registry = ServiceRegistry()
