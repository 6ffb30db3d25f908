"""Error notice models."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class ErrorNotice:
    """User-facing outcome of a reported error.

    Attributes:
        message_key: Key the error was reported under (e.g. "exception.unhandled").
        message: Text shown to the user, detailed or generic.
        detailed: True when details were surfaced (display_errors enabled).
        context: Context surfaced with the notice; empty when details are hidden.
    """

    message_key: str
    message: str
    detailed: bool = False
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"error": self.message_key, "message": self.message}
        if self.detailed:
            data["context"] = self.context
        return data
