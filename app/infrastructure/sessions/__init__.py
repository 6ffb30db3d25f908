"""Session lifecycle management.

Exports:
    SessionService: Per-client session state (start, timeout, flash, locale)
    SessionStore / InMemorySessionStore: Session transport
    SessionRecord / SessionCookiePolicy: Session models
    bind_session / current_session / CurrentSessionProxy: Request scoping
    SessionMiddleware: Cookie transport for Starlette/FastAPI applications
"""

from infrastructure.sessions.context import (
    CurrentSessionProxy,
    bind_session,
    current_session,
)
from infrastructure.sessions.middleware import SessionMiddleware
from infrastructure.sessions.models import (
    AUTH_DATA_KEY,
    PREFERRED_LOCALE_KEY,
    USER_ID_KEY,
    SessionCookiePolicy,
    SessionRecord,
)
from infrastructure.sessions.service import SessionService, generate_session_id
from infrastructure.sessions.store import InMemorySessionStore, SessionStore

__all__ = [
    "AUTH_DATA_KEY",
    "PREFERRED_LOCALE_KEY",
    "USER_ID_KEY",
    "CurrentSessionProxy",
    "InMemorySessionStore",
    "SessionCookiePolicy",
    "SessionMiddleware",
    "SessionRecord",
    "SessionService",
    "SessionStore",
    "bind_session",
    "current_session",
    "generate_session_id",
]
