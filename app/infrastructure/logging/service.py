"""Durable application log service.

Formats LogEntry lines and appends them to the configured log file. Every call
opens, appends, and closes the file on its own, so a failed write is detected
and reported for that call alone.

Usage:
    from infrastructure.services import get_log_service

    log_service = get_log_service()
    log_service.log("user.login", "info", {"module": "auth", "function": "login"})
"""

import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, Union, TYPE_CHECKING

from infrastructure.logging.formatters import redact_mapping
from infrastructure.logging.models import (
    DEFAULT_FUNCTION,
    DEFAULT_USER,
    UNKNOWN_MODULE,
    LogEntry,
    LogLevel,
)
from infrastructure.logging.setup import caller_module_name, get_module_logger

if TYPE_CHECKING:
    from infrastructure.errors.reporter import ErrorReporter

logger = get_module_logger()

USER_ID_KEY = "user_id"

# Frames from these packages are skipped when guessing the calling component.
_INTERNAL_MODULES = ("infrastructure.logging", "infrastructure.errors")


class SessionSource(Protocol):
    """Read-only view of session state used to identify the current user."""

    def get(self, key: str, default: Any = None) -> Any: ...


class LogService:
    """Appends structured entries to the application log file.

    The service never raises: directory, open, and write failures are
    reported to the ErrorReporter and signalled with a False return value.

    Attributes:
        log_file_path: File entries are appended to.
        dir_mode: Permission bits for directories created on demand.
    """

    def __init__(
        self,
        session_source: Optional[SessionSource],
        error_reporter: Optional["ErrorReporter"],
        log_file_path: Union[str, Path],
        dir_mode: int = 0o755,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the log service.

        Args:
            session_source: Object exposing get("user_id"), usually the
                current-session proxy.
            error_reporter: Receives I/O failures.
            log_file_path: Destination file.
            dir_mode: Mode used when creating missing directories.
            clock: Timestamp source.
        """
        self._session_source = session_source
        self._error_reporter = error_reporter
        self.log_file_path = Path(log_file_path)
        self.dir_mode = dir_mode
        self._clock = clock
        self._write_lock = threading.Lock()
        self._local = threading.local()

    def log(
        self,
        message: str,
        level: Union[LogLevel, str] = LogLevel.INFO,
        context: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Record a message with a level and optional context.

        Args:
            message: Message or message key.
            level: Severity level.
            context: Optional "module" and "function" overrides plus extra
                fields forwarded to the diagnostic log.

        Returns:
            True if the entry was appended, False otherwise.
        """
        context = dict(context or {})
        entry = self.build_entry(message, level, context)

        extras = {
            key: value
            for key, value in context.items()
            if key not in ("module", "function")
        }
        logger.debug(
            "log_entry",
            entry_module=entry.module,
            entry_function=entry.function,
            entry_level=entry.level,
            entry_message=entry.message,
            context=redact_mapping(extras),
        )

        return self._append(entry.format())

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(message, LogLevel.INFO, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(message, LogLevel.WARNING, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(message, LogLevel.ERROR, context)

    def build_entry(
        self,
        message: str,
        level: Union[LogLevel, str],
        context: Dict[str, Any],
    ) -> LogEntry:
        """Build the LogEntry for a call without writing it."""
        return LogEntry(
            timestamp=self._clock(),
            module=str(context.get("module") or _calling_module()),
            function=str(context.get("function") or DEFAULT_FUNCTION),
            user=self._current_user(),
            level=LogLevel.normalize(level),
            message=str(message),
        )

    def _current_user(self) -> str:
        if self._session_source is None:
            return DEFAULT_USER
        try:
            user = self._session_source.get(USER_ID_KEY)
        except Exception as exc:  # pylint: disable=broad-except
            # A broken session must not stop the entry from being written
            logger.warning("session_user_lookup_failed", error=str(exc))
            return DEFAULT_USER
        return DEFAULT_USER if user is None or user == "" else str(user)

    def _append(self, line: str) -> bool:
        path = self.log_file_path
        try:
            path.parent.mkdir(mode=self.dir_mode, parents=True, exist_ok=True)
        except OSError as exc:
            self._report_failure("logger.error_create_directory", exc)
            return False

        failure = None
        with self._write_lock:
            try:
                handle = open(path, "a", encoding="utf-8")
            except OSError as exc:
                failure = ("logger.error_open_file", exc)
            else:
                try:
                    handle.write(line)
                    handle.flush()
                except OSError as exc:
                    failure = ("logger.error_write_file", exc)
                finally:
                    try:
                        handle.close()
                    except OSError as exc:
                        logger.warning(
                            "log_file_close_failed", path=str(path), error=str(exc)
                        )

        # The reporter logs through this service again, so report outside the lock
        if failure is not None:
            self._report_failure(*failure)
            return False
        return True

    def _report_failure(self, message_key: str, error: OSError) -> None:
        """Hand an I/O failure to the ErrorReporter.

        The reporter logs through this service again; a failure raised while
        already reporting goes to the diagnostic log only.
        """
        details = {
            "module": "LogService",
            "function": "log",
            "path": str(self.log_file_path),
            "error": str(error),
        }
        if self._error_reporter is None or getattr(self._local, "reporting", False):
            logger.error(message_key, **details)
            return

        self._local.reporting = True
        try:
            self._error_reporter.handle_error(message_key, details)
        finally:
            self._local.reporting = False


def _calling_module() -> str:
    """Name the first module on the stack outside the logging internals."""
    module_name = caller_module_name(skip=_INTERNAL_MODULES)
    return module_name.rsplit(".", 1)[-1] if module_name else UNKNOWN_MODULE
