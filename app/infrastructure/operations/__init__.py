"""Operation result types and status enums.

This module contains standardized result types for the shared services,
used in place of exceptions for expected failures such as a missing or
malformed translation file.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
