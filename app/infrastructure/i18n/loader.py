"""Translation loading interface and implementations.

Defines the contract for loading translation tables and provides the JSON
loader: one flat ``<locale>.json`` file per locale in a translations
directory.
"""

import json
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Tuple, Union

from infrastructure.i18n.models import TranslationTable
from infrastructure.logging.setup import get_module_logger
from infrastructure.operations import OperationResult

logger = get_module_logger()

TRANSLATIONS_NOT_FOUND = "locale.translations_not_found"
TRANSLATIONS_LOAD_ERROR = "locale.translations_load_error"


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must not raise for a missing or malformed source; those
    outcomes are returned as OperationResult values.
    """

    @abstractmethod
    def load(self, locale: str) -> OperationResult:
        """Load the translation table for a locale.

        Args:
            locale: Locale code to load.

        Returns:
            OperationResult whose data is a TranslationTable on success, with
            NOT_FOUND, MALFORMED_DATA or TRANSPORT_FAILURE status otherwise.
        """
        pass

    @abstractmethod
    def path_for(self, locale: str) -> Path:
        """Return the source file for a locale."""
        pass

    @abstractmethod
    def available_locales(self) -> List[str]:
        """List locales that have a translation source."""
        pass


class JSONTranslationLoader(TranslationLoader):
    """Loader for flat JSON translation files.

    Parsed tables are cached per file and invalidated when the file changes,
    so one loader can be shared by every request in the process.

    Attributes:
        translations_dir: Directory containing ``<locale>.json`` files.
        use_cache: Whether parsed tables are cached in memory.
    """

    def __init__(self, translations_dir: Union[str, Path], use_cache: bool = True):
        """Initialize JSON translation loader.

        Args:
            translations_dir: Directory with JSON translation files.
            use_cache: Whether to cache parsed tables in memory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self._cache: Dict[Path, Tuple[float, TranslationTable]] = {}
        self._lock = threading.Lock()

        if not self.translations_dir.is_dir():
            logger.warning(
                "translations_directory_missing",
                translations_dir=str(self.translations_dir),
            )

    def path_for(self, locale: str) -> Path:
        return self.translations_dir / f"{locale}.json"

    def load(self, locale: str) -> OperationResult:
        path = self.path_for(locale)

        if not _is_safe_locale(locale) or not path.is_file():
            return OperationResult.not_found(
                f"Translation file not found: {path}",
                error_code=TRANSLATIONS_NOT_FOUND,
            )

        try:
            mtime = path.stat().st_mtime
        except OSError as e:
            return OperationResult.transport_failure(
                f"Failed to read {path}: {e}", error_code=TRANSLATIONS_LOAD_ERROR
            )

        if self.use_cache:
            with self._lock:
                cached = self._cache.get(path)
            if cached is not None and cached[0] == mtime:
                logger.debug("loaded_from_cache", locale=locale)
                return OperationResult.success(data=cached[1])

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            return OperationResult.malformed(
                f"Failed to parse {path}: {e}", error_code=TRANSLATIONS_LOAD_ERROR
            )
        except OSError as e:
            return OperationResult.transport_failure(
                f"Failed to read {path}: {e}", error_code=TRANSLATIONS_LOAD_ERROR
            )

        if not _is_flat_string_mapping(data):
            logger.error("invalid_translation_format", file=str(path), expected="dict")
            return OperationResult.malformed(
                f"Translation file {path} is not a flat key to string mapping",
                error_code=TRANSLATIONS_LOAD_ERROR,
            )

        table = TranslationTable(
            locale=locale,
            messages=dict(data),
            source=str(path),
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

        if self.use_cache:
            with self._lock:
                self._cache[path] = (mtime, table)

        logger.info("loaded_translations", locale=locale, message_count=len(table))
        return OperationResult.success(data=table)

    def available_locales(self) -> List[str]:
        if not self.translations_dir.is_dir():
            return []
        return sorted(path.stem for path in self.translations_dir.glob("*.json"))

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        with self._lock:
            self._cache.clear()
        logger.info("cleared_translation_cache")


def _is_safe_locale(locale: str) -> bool:
    return bool(locale) and not any(sep in locale for sep in ("/", "\\", ".."))


def _is_flat_string_mapping(data: object) -> bool:
    return isinstance(data, dict) and all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    )
