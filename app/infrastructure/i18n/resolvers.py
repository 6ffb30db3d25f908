"""Locale resolution logic for determining the user's preferred language.

The active locale comes from the first source that yields one:

1. the locale stored in the user's session
2. the client's language hint (e.g. an Accept-Language header), of which only
   the first two characters are used
3. the default locale
"""

from typing import Optional

import structlog
from infrastructure.i18n.models import LocaleResolution, LocaleSource

logger = structlog.get_logger().bind(component="i18n.resolver")

HINT_LENGTH = 2


def locale_from_hint(accept_language: Optional[str]) -> Optional[str]:
    """Extract a locale code from a client language hint.

    Args:
        accept_language: Raw hint such as "de-DE,de;q=0.9".

    Returns:
        The first two characters, lowercased ("de"), or None when the hint is
        missing or does not start with two letters (e.g. "*").
    """
    if not accept_language:
        return None
    code = accept_language.strip()[:HINT_LENGTH]
    if len(code) != HINT_LENGTH or not code.isalpha():
        return None
    return code.lower()


class LocaleResolver:
    """Applies the session -> client hint -> default precedence chain.

    Locales are not validated against the available locales; an unknown code
    simply finds no translation file.
    """

    def __init__(self, default_locale: str = "en"):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def resolve(
        self,
        preferred_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
        default_locale: Optional[str] = None,
    ) -> LocaleResolution:
        """Resolve the active locale.

        Args:
            preferred_locale: Locale stored in the user's session.
            accept_language: Client language hint.
            default_locale: Overrides the resolver's default for this call.

        Returns:
            LocaleResolution naming the locale and its source.
        """
        if preferred_locale:
            resolution = LocaleResolution(preferred_locale, LocaleSource.SESSION)
        else:
            hinted = locale_from_hint(accept_language)
            if hinted:
                resolution = LocaleResolution(hinted, LocaleSource.CLIENT_HINT)
            else:
                resolution = LocaleResolution(
                    default_locale or self.default_locale, LocaleSource.DEFAULT
                )

        self.log.debug(
            "resolved_locale",
            locale=resolution.locale,
            source=resolution.source.value,
        )
        return resolution
