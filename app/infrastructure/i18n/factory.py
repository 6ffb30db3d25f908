"""Factory functions for creating i18n components.

Provides convenience functions for building translation loaders and
per-request locale services from application settings.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

import structlog
from infrastructure.i18n.loader import JSONTranslationLoader, TranslationLoader
from infrastructure.i18n.service import LocaleService

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.errors.reporter import ErrorReporter
    from infrastructure.logging.service import LogService
    from infrastructure.sessions.service import SessionService

logger = structlog.get_logger()


def create_translation_loader(
    translations_dir: Path | None = None,
    use_cache: bool = True,
) -> TranslationLoader:
    """Create the process-wide JSON translation loader.

    If no translations_dir is provided, uses the locales directory shipped
    with the application.

    Args:
        translations_dir: Directory of <locale>.json files (default: app/locales)
        use_cache: Whether parsed tables are cached (default: True)

    Returns:
        TranslationLoader: Configured loader instance
    """
    if translations_dir is None:
        # This file is at .../app/infrastructure/i18n/factory.py
        app_root = Path(__file__).resolve().parents[2]
        translations_dir = app_root / "locales"

    loader = JSONTranslationLoader(translations_dir=translations_dir, use_cache=use_cache)
    logger.info(
        "translation_loader_created",
        translations_dir=str(translations_dir),
        available_locales=loader.available_locales(),
    )
    return loader


def create_locale_service(
    settings: "Settings",
    session: Optional["SessionService"],
    loader: TranslationLoader,
    log_service: Optional["LogService"] = None,
    error_reporter: Optional["ErrorReporter"] = None,
    client_hint: Optional[str] = None,
) -> LocaleService:
    """Create a LocaleService for one request.

    Args:
        settings: Application settings (default locale).
        session: The request's session.
        loader: Shared translation loader.
        log_service: Application log.
        error_reporter: Error sink.
        client_hint: Client language hint (e.g. Accept-Language value).

    Returns:
        LocaleService: Unresolved locale service
    """
    return LocaleService(
        session=session,
        loader=loader,
        log_service=log_service,
        error_reporter=error_reporter,
        default_locale=settings.get("localization.default_locale", "en"),
        client_hint=client_hint,
    )
