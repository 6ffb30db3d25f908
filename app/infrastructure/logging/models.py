"""Log entry models for the durable application log."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_USER = "System"
DEFAULT_FUNCTION = "global"
UNKNOWN_MODULE = "unknown"


class LogLevel(str, Enum):
    """Severity levels understood by the LogService.

    Other level strings are accepted and written verbatim.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def normalize(cls, level: Union["LogLevel", str]) -> str:
        """Return the string written to the log for a level."""
        if isinstance(level, LogLevel):
            return level.value
        return str(level)


@dataclass(frozen=True)
class LogEntry:
    """One immutable line of the application log.

    Attributes:
        timestamp: Time the entry was produced.
        module: Component that produced the entry.
        function: Function within the component, "global" when unknown.
        user: Session user identifier, "System" when no session user exists.
        level: Severity level string.
        message: Message or message key.
    """

    timestamp: datetime
    module: str
    function: str
    user: str
    level: str
    message: str

    def format(self) -> str:
        """Serialize as a single newline-terminated line.

        Line breaks inside fields are flattened so one entry is always one line.

        Returns:
            "[YYYY-MM-DD HH:MM:SS] [module] [function] [user] [level] message\\n"
        """
        fields = [
            self.timestamp.strftime(LOG_TIMESTAMP_FORMAT),
            self.module,
            self.function,
            self.user,
            self.level,
        ]
        prefix = " ".join(f"[{_single_line(value)}]" for value in fields)
        return f"{prefix} {_single_line(self.message)}\n"


def _single_line(value: str) -> str:
    return " ".join(str(value).splitlines())
