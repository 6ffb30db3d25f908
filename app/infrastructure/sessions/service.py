"""Session lifecycle service.

A SessionService owns the state of exactly one client session for the
duration of a request: it starts (or restarts after a timeout) the session,
regenerates its identifier, and exposes plain entries, flash messages, auth
data and the preferred locale.
"""

import secrets
import time
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from infrastructure.logging.models import LogLevel
from infrastructure.logging.setup import get_module_logger
from infrastructure.sessions.models import (
    AUTH_DATA_KEY,
    PREFERRED_LOCALE_KEY,
    SessionCookiePolicy,
    SessionRecord,
)
from infrastructure.sessions.store import SessionStore

if TYPE_CHECKING:
    from infrastructure.errors.reporter import ErrorReporter
    from infrastructure.logging.service import LogService

logger = get_module_logger()

DEFAULT_SESSION_TIMEOUT = 1800


def generate_session_id() -> str:
    return secrets.token_urlsafe(32)


class SessionService:
    """Per-client session state with timeout and identifier regeneration.

    Operations on a session that was never started, failed to start, or was
    destroyed behave as if the session were empty.

    Usage:
        session = SessionService(store, request.cookies.get("session_id"),
                                 log_service=log_service, error_reporter=reporter)
        session.start()
        session.set("user_id", "user-42")
        session.set_flash("notice", "Profile saved")
    """

    def __init__(
        self,
        store: SessionStore,
        session_id: Optional[str] = None,
        *,
        timeout: int = DEFAULT_SESSION_TIMEOUT,
        secure: bool = False,
        log_service: Optional["LogService"] = None,
        error_reporter: Optional["ErrorReporter"] = None,
        cookie_name: str = "session_id",
        same_site: str = "lax",
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = generate_session_id,
    ):
        """Initialize the session service.

        Args:
            store: Session transport shared by all clients.
            session_id: Identifier presented by the client, if any.
            timeout: Idle seconds after which the session is invalidated.
            secure: Whether the request arrived over TLS.
            log_service: Receives lifecycle log entries.
            error_reporter: Receives transport failures.
            cookie_name: Name of the cookie carrying the identifier.
            same_site: SameSite attribute of the cookie.
            clock: Epoch seconds source.
            id_factory: Generates fresh session identifiers.
        """
        self._store = store
        self._session_id = session_id
        self.timeout = timeout
        self._secure = secure
        self._log_service = log_service
        self._error_reporter = error_reporter
        self._cookie_name = cookie_name
        self._same_site = same_site
        self._clock = clock
        self._id_factory = id_factory
        self._record: Optional[SessionRecord] = None
        self._started = False

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def last_activity(self) -> Optional[float]:
        return self._record.last_activity if self._record else None

    @property
    def cookie_policy(self) -> SessionCookiePolicy:
        return SessionCookiePolicy(
            name=self._cookie_name,
            http_only=True,
            secure=self._secure,
            use_only_cookies=True,
            same_site=self._same_site,
        )

    def start(self) -> bool:
        """Start the session if it is not already active.

        Loads the client's record, discards it first if it has been idle
        longer than the timeout, refreshes the activity timestamp, and moves
        the record to a newly generated identifier. Transport failures are
        reported, never raised.

        Returns:
            True if the session is active, False if starting failed.
        """
        if self._started:
            return True

        try:
            now = self._clock()
            timed_out = False
            record = self._store.load(self._session_id) if self._session_id else None

            if record is not None and record.is_expired(now, self.timeout):
                self._store.delete(self._session_id)
                record = None
                timed_out = True

            if record is None:
                record = SessionRecord(created_at=now, last_activity=now)
            record.last_activity = now

            new_session_id = self._id_factory()
            if self._session_id:
                self._store.delete(self._session_id)
            self._store.save(new_session_id, record)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("session_start_failed", error=str(exc))
            self._record = None
            self._session_id = None
            if self._error_reporter is not None:
                self._error_reporter.handle_exception(exc)
            return False

        self._session_id = new_session_id
        self._record = record
        self._started = True

        if timed_out:
            self._log("session.timeout", LogLevel.WARNING, "start")
        else:
            self._log("session.start_success", LogLevel.INFO, "start")
        return True

    def destroy_session(self) -> None:
        """Clear all session state and forget the identifier."""
        if self._session_id:
            try:
                self._store.delete(self._session_id)
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("session_destroy_failed", error=str(exc))
                if self._error_reporter is not None:
                    self._error_reporter.handle_exception(exc)
        self._record = None
        self._session_id = None
        self._started = False

    def get(self, key: str, default: Any = None) -> Any:
        """Read a session entry.

        Returns:
            The stored value, or default when the key or session is absent.
        """
        record = self._active_record()
        if record is None:
            return default
        return record.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Write a session entry. Ignored when the session is not active."""
        record = self._active_record()
        if record is None:
            return
        record.data[key] = value
        self._persist()

    def has(self, key: str) -> bool:
        record = self._active_record()
        return record is not None and key in record.data

    def remove(self, key: str) -> None:
        record = self._active_record()
        if record is None or key not in record.data:
            return
        del record.data[key]
        self._persist()

    def all(self) -> Dict[str, Any]:
        """Return a copy of every session entry."""
        record = self._active_record()
        return dict(record.data) if record else {}

    def set_flash(self, key: str, message: Any) -> None:
        """Store a message that can be read exactly once."""
        record = self._active_record()
        if record is None:
            return
        record.flash[key] = message
        self._persist()

    def get_flash(self, key: str) -> Any:
        """Read and remove a flash message.

        Returns:
            The message, or None if there is none.
        """
        record = self._active_record()
        if record is None or key not in record.flash:
            return None
        message = record.flash.pop(key)
        self._persist()
        return message

    def has_flash(self, key: str) -> bool:
        """Check for a flash message without consuming it."""
        record = self._active_record()
        return record is not None and key in record.flash

    def set_user_auth_data(self, data: Any) -> None:
        self.set(AUTH_DATA_KEY, data)

    def get_user_auth_data(self) -> Any:
        return self.get(AUTH_DATA_KEY)

    def set_user_preferred_locale(self, locale: str) -> None:
        """Store the user's preferred locale code (e.g. "fr_FR")."""
        self.set(PREFERRED_LOCALE_KEY, locale)
        self._log(
            "session.set_preferred_locale",
            LogLevel.INFO,
            "set_user_preferred_locale",
            locale=locale,
        )

    def get_user_preferred_locale(self) -> Optional[str]:
        """Return the user's preferred locale, or None if not set."""
        locale = self.get(PREFERRED_LOCALE_KEY)
        if not locale:
            self._log(
                "session.get_preferred_locale_missing",
                LogLevel.WARNING,
                "get_user_preferred_locale",
            )
            return None
        self._log(
            "session.get_preferred_locale",
            LogLevel.INFO,
            "get_user_preferred_locale",
            locale=locale,
        )
        return locale

    def _active_record(self) -> Optional[SessionRecord]:
        """Return the record after enforcing the timeout and refreshing activity."""
        if not self._started or self._record is None:
            return None

        now = self._clock()
        if self._record.is_expired(now, self.timeout):
            self._restart_expired()
            if self._record is None:
                return None
        else:
            self._record.last_activity = now
        return self._record

    def _restart_expired(self) -> None:
        # The stored copy is never fresher than the in-memory one, so start()
        # sees the same expiry, discards the record and logs the timeout.
        self._record = None
        self._started = False
        self.start()

    def _persist(self) -> None:
        if self._record is None or not self._session_id:
            return
        try:
            self._store.save(self._session_id, self._record)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("session_persist_failed", error=str(exc))
            if self._error_reporter is not None:
                self._error_reporter.handle_exception(exc)

    def _log(self, message: str, level: LogLevel, function: str, **extra: Any) -> None:
        if self._log_service is None:
            return
        context = {"module": "SessionService", "function": function, **extra}
        self._log_service.log(message, level, context)
