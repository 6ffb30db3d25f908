"""Centralized error handling.

Exports:
    ErrorReporter: Logs errors and builds user-facing notices
    ErrorNotice: Detailed or generic message handed to the response channel
    exception_context: Normalizes an exception into reporting context
"""

from infrastructure.errors.models import ErrorNotice
from infrastructure.errors.reporter import (
    UNHANDLED_EXCEPTION_KEY,
    ErrorReporter,
    exception_context,
)

__all__ = [
    "ErrorNotice",
    "ErrorReporter",
    "UNHANDLED_EXCEPTION_KEY",
    "exception_context",
]
