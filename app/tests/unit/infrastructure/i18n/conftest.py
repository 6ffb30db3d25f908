"""Feature-level fixtures for i18n system tests.

Provides translation directories, loaders and locale services for locale
resolution and translation scenarios.
"""

import json
from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import JSONTranslationLoader, LocaleService


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample JSON translation files.

    Returns a directory structure like:
    - en.json
    - fr.json
    - es.json
    """
    translations = {
        "en": {"page.welcome": "Welcome", "page.empty": "", "cart.items": "Items"},
        "fr": {"page.welcome": "Bienvenue", "cart.items": "Articles"},
        "es": {"page.welcome": "Bienvenido"},
    }
    for locale, messages in translations.items():
        with open(tmp_path / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(messages, f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def json_loader(temp_translations_dir):
    """Create JSONTranslationLoader for temporary translations directory."""
    return JSONTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def json_loader_with_cache(temp_translations_dir):
    """Create JSONTranslationLoader with caching enabled."""
    return JSONTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def mock_session():
    """Session double without a preferred locale."""
    session = MagicMock()
    session.get_user_preferred_locale.return_value = None
    return session


@pytest.fixture
def log_service():
    return MagicMock()


@pytest.fixture
def error_reporter():
    return MagicMock()


@pytest.fixture
def make_locale_service(mock_session, json_loader, log_service, error_reporter):
    """Factory for LocaleService instances over the temporary translations."""

    def _make(client_hint=None, session=mock_session, loader=json_loader, **kwargs):
        return LocaleService(
            session=session,
            loader=loader,
            log_service=log_service,
            error_reporter=error_reporter,
            client_hint=client_hint,
            **kwargs,
        )

    return _make


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_fr": "fr-FR",
        "with_quality": "es-ES,es;q=0.9,en;q=0.8",
        "uppercase": "DE-de",
        "wildcard": "*;q=0.8",
        "single_char": "e",
    }
