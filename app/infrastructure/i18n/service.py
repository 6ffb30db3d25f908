"""Locale resolution and translation service.

A LocaleService resolves the active locale for one request, loads the
translation table for it, and translates keys with the key itself as the
visible fallback. It never raises for missing or broken translations.
"""

from typing import Any, Optional, TYPE_CHECKING

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    LocaleResolution,
    LocaleSource,
    LocaleState,
    TranslationTable,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging.models import LogLevel
from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.errors.reporter import ErrorReporter
    from infrastructure.logging.service import LogService
    from infrastructure.sessions.service import SessionService


class LocaleService:
    """Resolves the request locale and serves translations for it.

    Usage:
        locale_service = LocaleService(
            session=session,
            loader=JSONTranslationLoader("app/locales"),
            log_service=log_service,
            error_reporter=error_reporter,
            default_locale="en",
            client_hint=request.headers.get("accept-language"),
        )
        locale_service.resolve_locale()
        locale_service.load_translations()
        title = locale_service.translate("page.title")
    """

    def __init__(
        self,
        session: Optional["SessionService"],
        loader: TranslationLoader,
        log_service: Optional["LogService"] = None,
        error_reporter: Optional["ErrorReporter"] = None,
        default_locale: str = "en",
        client_hint: Optional[str] = None,
    ):
        """Initialize the locale service.

        Args:
            session: Session holding the user's preferred locale.
            loader: Source of translation tables.
            log_service: Receives info and warning entries.
            error_reporter: Receives load failures.
            default_locale: Locale used when nothing else applies.
            client_hint: Client language hint (e.g. Accept-Language value).
        """
        self._session = session
        self._loader = loader
        self._log_service = log_service
        self._error_reporter = error_reporter
        self._resolver = LocaleResolver(default_locale)
        self._client_hint = client_hint
        self._locale: Optional[str] = None
        self._table: TranslationTable = TranslationTable.empty(default_locale)
        self._state = LocaleState.UNINITIALIZED

    @property
    def locale(self) -> Optional[str]:
        """The active locale, or None before resolution."""
        return self._locale

    @property
    def state(self) -> LocaleState:
        return self._state

    @property
    def table(self) -> TranslationTable:
        return self._table

    def resolve_locale(
        self,
        default_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
        persist: bool = False,
    ) -> LocaleResolution:
        """Resolve the active locale: session preference, client hint, default.

        Args:
            default_locale: Overrides the configured default for this call.
            accept_language: Overrides the client hint given at construction.
            persist: Store the resolved locale as the session preference.

        Returns:
            LocaleResolution naming the locale and its source.
        """
        preferred = (
            self._session.get_user_preferred_locale() if self._session else None
        )
        hint = accept_language if accept_language is not None else self._client_hint
        resolution = self._resolver.resolve(preferred, hint, default_locale)

        self._activate(resolution.locale)
        self._log(
            "locale.resolved",
            LogLevel.INFO,
            "resolve_locale",
            locale=resolution.locale,
            source=resolution.source.value,
        )

        if (
            persist
            and self._session is not None
            and resolution.source != LocaleSource.SESSION
        ):
            self._session.set_user_preferred_locale(resolution.locale)
        return resolution

    def set_locale(self, locale: Optional[str] = None) -> str:
        """Switch to an explicit locale, or re-resolve when none is given.

        The new locale serves raw keys until load_translations() is called.

        Args:
            locale: Locale code to activate.

        Returns:
            The active locale.
        """
        if not locale:
            return self.resolve_locale().locale

        self._activate(locale)
        self._log(
            "locale.set_locale",
            LogLevel.INFO,
            "set_locale",
            locale=locale,
            source=LocaleSource.EXPLICIT.value,
        )
        return locale

    def load_translations(self) -> OperationResult:
        """Load the translation table for the active locale.

        Resolves the locale first if that has not happened yet. A missing or
        malformed file is reported through the ErrorReporter and leaves an
        empty table in place.

        Returns:
            The loader's OperationResult.
        """
        if self._locale is None:
            self.resolve_locale()
        locale = self._locale or self._resolver.default_locale

        result = self._loader.load(locale)
        if not result.is_success:
            self._table = TranslationTable.empty(locale)
            self._state = LocaleState.LOAD_FAILED
            if self._error_reporter is not None:
                self._error_reporter.handle_error(
                    result.error_code or "locale.translations_load_error",
                    {
                        "module": "LocaleService",
                        "function": "load_translations",
                        "locale": locale,
                        "path": str(self._loader.path_for(locale)),
                        "message": result.message,
                    },
                )
            return result

        self._table = result.data
        self._state = LocaleState.TRANSLATIONS_LOADED
        self._log(
            "locale.translations_loaded",
            LogLevel.INFO,
            "load_translations",
            locale=locale,
            count=len(self._table),
        )
        return result

    def translate(self, key: str) -> str:
        """Translate a key, falling back to the key itself.

        Args:
            key: Translation key.

        Returns:
            The localized string, or key when it has no translation.
        """
        message = self._table.get(key)
        if message is None:
            self._log(
                "locale.translation_not_found",
                LogLevel.WARNING,
                "translate",
                key=key,
                locale=self._locale,
            )
            return key
        return message

    def has_translation(self, key: str) -> bool:
        return self._table.has(key)

    def _activate(self, locale: str) -> None:
        if locale == self._locale:
            return
        self._locale = locale
        self._table = TranslationTable.empty(locale)
        self._state = LocaleState.LOCALE_RESOLVED

    def _log(self, message: str, level: LogLevel, function: str, **extra: Any) -> None:
        if self._log_service is None:
            return
        context = {"module": "LocaleService", "function": function, **extra}
        self._log_service.log(message, level, context)
