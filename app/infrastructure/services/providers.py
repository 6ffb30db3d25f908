"""
Factory functions for dependency injection.

Provides the application-scoped settings singleton, access to the
process-wide services held by the registry, and per-request session and
locale services.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.errors.reporter import ErrorReporter
from infrastructure.i18n.factory import create_locale_service
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.service import LocaleService
from infrastructure.logging.service import LogService
from infrastructure.services.registry import ServiceGraph, registry
from infrastructure.sessions.service import SessionService
from infrastructure.sessions.store import SessionStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def configure_services(
    settings: Optional[Settings] = None, *, replace: bool = False, **overrides
) -> ServiceGraph:
    """
    Configure the process-wide services once at startup.

    Args:
        settings: Settings to build from (default: get_settings()).
        replace: Replace an existing configuration instead of failing.
        **overrides: Pre-built collaborators (log_file_path, session_store,
            session_source, error_reporter, translation_loader, response_sink).

    Returns:
        ServiceGraph: The configured services.

    Raises:
        ServiceAlreadyConfiguredError: If already configured and replace is False.
    """
    return registry.configure(settings or get_settings(), replace=replace, **overrides)


def get_log_service() -> LogService:
    """
    Get the process-wide LogService.

    Raises:
        ServiceNotConfiguredError: If configure_services() has not been called.
    """
    return registry.log_service


def get_error_reporter() -> ErrorReporter:
    """
    Get the process-wide ErrorReporter.

    Raises:
        ServiceNotConfiguredError: If configure_services() has not been called.
    """
    return registry.error_reporter


def get_session_store() -> SessionStore:
    return registry.session_store


def get_translation_loader() -> TranslationLoader:
    return registry.translation_loader


def create_session_service(
    session_id: Optional[str] = None, secure: bool = False
) -> SessionService:
    """
    Create an unstarted SessionService for one client.

    Args:
        session_id: Identifier presented by the client, if any.
        secure: Whether the request arrived over TLS.

    Returns:
        SessionService: Session wired to the shared store, log and reporter.
    """
    services = registry.services
    settings = services.settings
    return SessionService(
        services.session_store,
        session_id,
        timeout=settings.get("session.timeout", 1800),
        secure=secure,
        log_service=services.log_service,
        error_reporter=services.error_reporter,
        cookie_name=settings.get("session.cookie_name", "session_id"),
        same_site=settings.get("session.cookie_samesite", "lax"),
    )


def get_session_service(request: Request) -> SessionService:
    """
    Get the started session of the current request.

    Reuses the session started by SessionMiddleware; without the middleware
    a session is started from the request cookie.

    Usage:
        @router.get("/profile")
        def profile(session: SessionServiceDep):
            return {"user": session.get("user_id")}
    """
    session = getattr(request.state, "session", None)
    if session is None:
        settings = registry.services.settings
        session = create_session_service(
            request.cookies.get(settings.get("session.cookie_name", "session_id")),
            secure=request.url.scheme == "https",
        )
        session.start()
        request.state.session = session
    return session


def get_locale_service(request: Request) -> LocaleService:
    """
    Get a LocaleService with the request locale resolved and translations loaded.

    Usage:
        @router.get("/welcome")
        def welcome(locale: LocaleServiceDep):
            return {"message": locale.translate("page.welcome")}
    """
    services = registry.services
    locale_service = create_locale_service(
        services.settings,
        session=get_session_service(request),
        loader=services.translation_loader,
        log_service=services.log_service,
        error_reporter=services.error_reporter,
        client_hint=request.headers.get("accept-language"),
    )
    locale_service.resolve_locale()
    locale_service.load_translations()
    return locale_service
