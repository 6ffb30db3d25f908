"""Result values for resolve and load operations.

Expected failures (a translation file that is missing or malformed, a store
that cannot be reached) are returned as an OperationResult rather than
raised, so the caller decides whether to report them.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of an operation.

    Attributes:
        status: High-level outcome.
        message: Human-friendly description for logs and troubleshooting.
        data: Payload on success (e.g. a TranslationTable).
        error_code: Message key describing a failure, such as
            "locale.translations_not_found".
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with the given status."""
        return cls(status=status, message=message, data=data, error_code=error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def malformed(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """The resource exists but its content could not be used."""
        return cls.error(OperationStatus.MALFORMED_DATA, message, error_code)

    @classmethod
    def transport_failure(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """The underlying file or store could not be read or written."""
        return cls.error(OperationStatus.TRANSPORT_FAILURE, message, error_code)
