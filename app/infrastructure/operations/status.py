"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of the shared
services so callers can react to expected failures without exceptions.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSPORT_FAILURE: Session store, log file or directory could not be used
        NOT_FOUND: Resource not found (e.g. missing translation file)
        MALFORMED_DATA: Resource exists but could not be parsed
    """

    SUCCESS = "success"
    TRANSPORT_FAILURE = "transport_failure"
    NOT_FOUND = "not_found"
    MALFORMED_DATA = "malformed_data"
