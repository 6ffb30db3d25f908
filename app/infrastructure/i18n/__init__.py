"""i18n system - locale resolution and translation tables.

Resolves the active locale for a request (session preference, client hint,
default), loads the flat JSON translation table for it, and translates keys
with a visible fallback to the key itself.

Main components:
- models: LocaleState, LocaleSource, LocaleResolution, TranslationTable
- loader: TranslationLoader and JSONTranslationLoader
- resolvers: LocaleResolver and locale_from_hint
- service: LocaleService
- factory: create_translation_loader, create_locale_service
"""

from infrastructure.i18n.factory import (
    create_locale_service,
    create_translation_loader,
)
from infrastructure.i18n.loader import (
    TRANSLATIONS_LOAD_ERROR,
    TRANSLATIONS_NOT_FOUND,
    JSONTranslationLoader,
    TranslationLoader,
)
from infrastructure.i18n.models import (
    LocaleResolution,
    LocaleSource,
    LocaleState,
    TranslationTable,
)
from infrastructure.i18n.resolvers import LocaleResolver, locale_from_hint
from infrastructure.i18n.service import LocaleService

__all__ = [
    "LocaleResolution",
    "LocaleSource",
    "LocaleState",
    "TranslationTable",
    "TranslationLoader",
    "JSONTranslationLoader",
    "TRANSLATIONS_NOT_FOUND",
    "TRANSLATIONS_LOAD_ERROR",
    "LocaleResolver",
    "locale_from_hint",
    "LocaleService",
    "create_translation_loader",
    "create_locale_service",
]
