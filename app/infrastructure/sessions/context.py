"""Request-scoped access to the active session.

The session of the request being served is bound to a context variable, so
process-wide services (such as the LogService) can read it without a global
session object. Each request, thread, or task sees only its own session.

Usage:
    with bind_session(session):
        handle_request()

    current_session()  # the bound SessionService, or None
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.sessions.service import SessionService

_current_session: ContextVar[Optional["SessionService"]] = ContextVar(
    "current_session", default=None
)


@contextmanager
def bind_session(session: "SessionService") -> Generator["SessionService", None, None]:
    """Make session the current session for the duration of the block."""
    token = _current_session.set(session)
    try:
        yield session
    finally:
        _current_session.reset(token)


def current_session() -> Optional["SessionService"]:
    """Return the session bound to the current context, if any."""
    return _current_session.get()


class CurrentSessionProxy:
    """Read-only view that always delegates to the current session.

    Given to the LogService as its session source: the service is created
    once per process, the session it reads changes with every request.
    """

    def get(self, key: str, default: Any = None) -> Any:
        session = current_session()
        if session is None:
            return default
        return session.get(key, default)
