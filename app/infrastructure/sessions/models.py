"""Session state models."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict

PREFERRED_LOCALE_KEY = "preferred_locale"
AUTH_DATA_KEY = "auth_data"
USER_ID_KEY = "user_id"


@dataclass
class SessionRecord:
    """Persisted state of one client session.

    Attributes:
        data: Key-value session entries (including auth data and preferred locale).
        flash: One-time-read messages keyed by name.
        created_at: Epoch seconds when the session was first created.
        last_activity: Epoch seconds of the last successful start or access.
    """

    created_at: float
    last_activity: float
    data: Dict[str, Any] = field(default_factory=dict)
    flash: Dict[str, Any] = field(default_factory=dict)

    def is_expired(self, now: float, timeout: int) -> bool:
        """Check whether the session has been idle longer than timeout seconds."""
        return now - self.last_activity > timeout

    def copy(self) -> "SessionRecord":
        """Deep copy so stored and in-flight state never share mutable values."""
        return copy.deepcopy(self)


@dataclass(frozen=True)
class SessionCookiePolicy:
    """Transport attributes of the session cookie.

    Attributes:
        name: Cookie name.
        http_only: Hide the cookie from client-side scripts.
        secure: Only send over TLS.
        use_only_cookies: Never accept the identifier from URLs or forms.
        same_site: SameSite attribute ("lax", "strict" or "none").
    """

    name: str = "session_id"
    http_only: bool = True
    secure: bool = False
    use_only_cookies: bool = True
    same_site: str = "lax"
