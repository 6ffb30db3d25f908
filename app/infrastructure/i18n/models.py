"""Translation models for the i18n system.

Defines the data structures for locale resolution and translation tables.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class LocaleState(str, Enum):
    """Lifecycle of a LocaleService.

    UNINITIALIZED -> LOCALE_RESOLVED -> TRANSLATIONS_LOADED. LOAD_FAILED is
    reached when the translation table could not be loaded; the service then
    keeps serving raw keys.
    """

    UNINITIALIZED = "uninitialized"
    LOCALE_RESOLVED = "locale_resolved"
    TRANSLATIONS_LOADED = "translations_loaded"
    LOAD_FAILED = "load_failed"


class LocaleSource(str, Enum):
    """Where a resolved locale came from."""

    SESSION = "session"
    CLIENT_HINT = "client_hint"
    DEFAULT = "default"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of resolving the active locale.

    Attributes:
        locale: Short locale code (e.g. "en", "fr_FR").
        source: Which step of the precedence chain supplied it.
    """

    locale: str
    source: LocaleSource


@dataclass(frozen=True)
class TranslationTable:
    """Key to localized string mapping for exactly one locale.

    Frozen so a table can be swapped in as a whole while lookups proceed.

    Attributes:
        locale: Locale the table belongs to.
        messages: Flat key -> localized string mapping.
        source: File the table was loaded from, if any.
        loaded_at: Timestamp (ISO 8601) when the table was loaded.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)
    source: Optional[str] = None
    loaded_at: Optional[str] = None

    @classmethod
    def empty(cls, locale: str) -> "TranslationTable":
        return cls(locale=locale)

    def get(self, key: str) -> Optional[str]:
        """Return the localized string, or None when absent or empty."""
        message = self.messages.get(key)
        return message or None

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self.messages)
