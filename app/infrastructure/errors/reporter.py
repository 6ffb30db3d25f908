"""Centralized error and exception handling.

The ErrorReporter is the terminal sink for failures raised or reported by the
other shared services. It logs the failure through the LogService, then hands
a detailed or generic ErrorNotice to the response channel depending on the
display-errors setting.
"""

import sys
import threading
import traceback
from types import TracebackType
from typing import Any, Callable, Dict, Optional, Type, TYPE_CHECKING

from infrastructure.errors.models import ErrorNotice
from infrastructure.logging.formatters import redact_mapping
from infrastructure.logging.models import LogLevel
from infrastructure.logging.setup import get_module_logger

if TYPE_CHECKING:
    from infrastructure.logging.service import LogService

logger = get_module_logger()

UNHANDLED_EXCEPTION_KEY = "exception.unhandled"
DEFAULT_GENERIC_MESSAGE = "An unexpected error occurred. Please try again later."

LogServiceProvider = Callable[[], "LogService"]
ResponseSink = Callable[[ErrorNotice], None]


class ErrorReporter:
    """Logs errors and decides how much of them reaches the user.

    The reporter holds no state of its own. The LogService is looked up
    through a provider on every report, which lets the two services be wired
    to each other after construction.

    Usage:
        reporter = ErrorReporter(display_errors=False, log_service_provider=get_log_service)
        reporter.handle_error("payment.declined", {"order_id": "A-1"})

        try:
            risky()
        except Exception as exc:
            reporter.handle_exception(exc)
    """

    def __init__(
        self,
        display_errors: bool = False,
        generic_message: str = DEFAULT_GENERIC_MESSAGE,
        log_service_provider: Optional[LogServiceProvider] = None,
        response_sink: Optional[ResponseSink] = None,
    ):
        """Initialize the reporter.

        Args:
            display_errors: Surface detailed messages instead of a generic one.
            generic_message: Message shown when details are hidden.
            log_service_provider: Callable returning the LogService.
            response_sink: Receives every ErrorNotice (e.g. a flash writer).
        """
        self.display_errors = display_errors
        self.generic_message = generic_message
        self._log_service_provider = log_service_provider
        self._response_sink = response_sink
        self._local = threading.local()
        self._previous_excepthook: Optional[Callable[..., Any]] = None
        self._previous_threading_excepthook: Optional[Callable[..., Any]] = None

    def attach_log_service(self, provider: LogServiceProvider) -> None:
        """Wire the LogService provider after construction."""
        self._log_service_provider = provider

    def handle_error(
        self, message_key: str, context: Optional[Dict[str, Any]] = None
    ) -> ErrorNotice:
        """Log an error and build the notice shown to the user.

        Args:
            message_key: Key describing the error (e.g. "locale.translations_not_found").
            context: Extra details about the failure.

        Returns:
            ErrorNotice with a detailed or generic message.
        """
        context = dict(context or {})
        self._log(message_key, context)

        notice = self._build_notice(message_key, context)
        self._emit(notice)
        return notice

    def handle_exception(self, exception: BaseException) -> ErrorNotice:
        """Normalize an exception and report it as "exception.unhandled".

        Args:
            exception: Exception raised by surrounding code.

        Returns:
            ErrorNotice with a detailed or generic message.
        """
        return self.handle_error(UNHANDLED_EXCEPTION_KEY, exception_context(exception))

    def install(self) -> None:
        """Register the reporter for uncaught exceptions in all threads."""
        if self._previous_excepthook is None:
            self._previous_excepthook = sys.excepthook
            self._previous_threading_excepthook = threading.excepthook
        sys.excepthook = self._excepthook
        threading.excepthook = self._threading_excepthook

    def uninstall(self) -> None:
        """Restore the hooks replaced by install()."""
        if self._previous_excepthook is not None:
            sys.excepthook = self._previous_excepthook
            threading.excepthook = self._previous_threading_excepthook
            self._previous_excepthook = None
            self._previous_threading_excepthook = None

    def _excepthook(
        self,
        exc_type: Type[BaseException],
        exc_value: BaseException,
        exc_traceback: Optional[TracebackType],
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt) and self._previous_excepthook:
            self._previous_excepthook(exc_type, exc_value, exc_traceback)
            return
        self.handle_exception(exc_value)

    def _threading_excepthook(self, args: "threading.ExceptHookArgs") -> None:
        if args.exc_value is not None:
            self.handle_exception(args.exc_value)

    def _log(self, message_key: str, context: Dict[str, Any]) -> None:
        """Write the error through the LogService.

        Failures while logging are dropped to the diagnostic log; the reporter
        is the last stop and has nowhere else to send them.
        """
        if self._log_service_provider is None or getattr(
            self._local, "logging", False
        ):
            logger.error(message_key, context=redact_mapping(context))
            return

        self._local.logging = True
        try:
            self._log_service_provider().log(message_key, LogLevel.ERROR, context)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning(
                "error_report_log_failed",
                message_key=message_key,
                error=str(exc),
            )
        finally:
            self._local.logging = False

    def _build_notice(self, message_key: str, context: Dict[str, Any]) -> ErrorNotice:
        if not self.display_errors:
            return ErrorNotice(message_key=message_key, message=self.generic_message)

        detail = context.get("message")
        message = f"{message_key}: {detail}" if detail else message_key
        public_context = {
            key: value
            for key, value in redact_mapping(context).items()
            if key not in ("module", "function")
        }
        return ErrorNotice(
            message_key=message_key,
            message=message,
            detailed=True,
            context=public_context,
        )

    def _emit(self, notice: ErrorNotice) -> None:
        if self._response_sink is None:
            return
        try:
            self._response_sink(notice)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning(
                "error_notice_delivery_failed",
                message_key=notice.message_key,
                error=str(exc),
            )


def exception_context(exception: BaseException) -> Dict[str, Any]:
    """Build the reporting context for an exception.

    Returns:
        Dict with exceptionClass, message, file, line and trace. File and line
        point at the innermost frame; both are None for an exception that was
        never raised.
    """
    exc_type = type(exception)
    module = exc_type.__module__
    class_name = (
        exc_type.__qualname__
        if module == "builtins"
        else f"{module}.{exc_type.__qualname__}"
    )

    frames = traceback.extract_tb(exception.__traceback__)
    innermost = frames[-1] if frames else None

    return {
        "exceptionClass": class_name,
        "message": str(exception),
        "file": innermost.filename if innermost else None,
        "line": innermost.lineno if innermost else None,
        "trace": "".join(
            traceback.format_exception(exc_type, exception, exception.__traceback__)
        ),
    }
