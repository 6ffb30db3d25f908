"""Session store interface and in-memory implementation."""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from infrastructure.sessions.models import SessionRecord


class SessionStore(ABC):
    """Abstract base class for session store implementations.

    The store is the opaque per-client key-value transport provided by the
    host environment. Implementations must be safe to call concurrently from
    multiple in-flight requests.
    """

    @abstractmethod
    def load(self, session_id: str) -> Optional[SessionRecord]:
        """Get the record stored under a session identifier.

        Args:
            session_id: Identifier presented by the client.

        Returns:
            A copy of the stored record, or None if not found.
        """
        pass

    @abstractmethod
    def save(self, session_id: str, record: SessionRecord) -> None:
        """Store a record under a session identifier.

        Args:
            session_id: Identifier to store the record under.
            record: Session state to persist.
        """
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        """Remove a record. Unknown identifiers are ignored."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every record (for testing)."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dict with store statistics (implementation-specific).
        """
        pass


class InMemorySessionStore(SessionStore):
    """Process-local session store guarded by a lock.

    Records are copied on the way in and out, so each client's state stays
    isolated from every other in-flight request.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[str, SessionRecord] = {}

    def load(self, session_id: str) -> Optional[SessionRecord]:
        with self._lock:
            record = self._records.get(session_id)
            return record.copy() if record is not None else None

    def save(self, session_id: str, record: SessionRecord) -> None:
        with self._lock:
            self._records[session_id] = record.copy()

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._records.pop(session_id, None)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {"backend": "memory", "sessions": len(self._records)}
