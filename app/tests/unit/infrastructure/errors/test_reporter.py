"""Unit tests for infrastructure.errors.reporter module.

Tests cover:
- handle_error logging and notice building
- display_errors detailed vs generic messages
- handle_exception normalization
- Response sink delivery and failure isolation
- Process-wide exception hooks
"""

import sys
import threading
from unittest.mock import MagicMock

import pytest

from infrastructure.errors.models import ErrorNotice
from infrastructure.errors.reporter import (
    UNHANDLED_EXCEPTION_KEY,
    ErrorReporter,
    exception_context,
)
from infrastructure.logging.models import LogLevel


@pytest.fixture
def log_service():
    return MagicMock()


@pytest.fixture
def reporter(log_service):
    return ErrorReporter(
        display_errors=False,
        generic_message="Something went wrong.",
        log_service_provider=lambda: log_service,
    )


def _raise(exc):
    try:
        raise exc
    except Exception as caught:  # pylint: disable=broad-except
        return caught


@pytest.mark.unit
class TestHandleError:
    """Test suite for ErrorReporter.handle_error."""

    def test_logs_at_error_level(self, reporter, log_service):
        reporter.handle_error("locale.translations_not_found", {"locale": "de"})

        log_service.log.assert_called_once_with(
            "locale.translations_not_found",
            LogLevel.ERROR,
            {"locale": "de"},
        )

    def test_generic_notice_when_display_disabled(self, reporter):
        notice = reporter.handle_error("db.failed", {"message": "secret detail"})

        assert notice == ErrorNotice(
            message_key="db.failed", message="Something went wrong."
        )
        assert "secret" not in str(notice.to_dict())

    def test_detailed_notice_when_display_enabled(self, log_service):
        reporter = ErrorReporter(
            display_errors=True, log_service_provider=lambda: log_service
        )

        notice = reporter.handle_error(
            "db.failed",
            {
                "module": "Repo",
                "function": "save",
                "message": "timeout",
                "password": "hunter2",
            },
        )

        assert notice.detailed is True
        assert notice.message == "db.failed: timeout"
        assert notice.context == {"message": "timeout", "password": "***REDACTED***"}
        assert notice.to_dict()["context"]["message"] == "timeout"

    def test_detailed_notice_without_message(self, log_service):
        reporter = ErrorReporter(
            display_errors=True, log_service_provider=lambda: log_service
        )

        assert reporter.handle_error("db.failed").message == "db.failed"

    def test_without_log_service(self):
        reporter = ErrorReporter()

        notice = reporter.handle_error("x.failed")

        assert notice.message_key == "x.failed"

    def test_log_failure_does_not_propagate(self, reporter, log_service):
        log_service.log.side_effect = RuntimeError("log down")

        notice = reporter.handle_error("x.failed")

        assert notice.message_key == "x.failed"

    def test_reentrant_report_not_logged_again(self, reporter, log_service):
        """A LogService that reports back to the reporter is called once."""
        log_service.log.side_effect = lambda *args: reporter.handle_error("nested")

        reporter.handle_error("outer")

        assert log_service.log.call_count == 1

    def test_attach_log_service(self, log_service):
        reporter = ErrorReporter()
        reporter.attach_log_service(lambda: log_service)

        reporter.handle_error("late.wired")

        log_service.log.assert_called_once()


@pytest.mark.unit
class TestResponseSink:
    """Test suite for notice delivery."""

    def test_sink_receives_notice(self, log_service):
        sink = MagicMock()
        reporter = ErrorReporter(
            log_service_provider=lambda: log_service, response_sink=sink
        )

        notice = reporter.handle_error("x.failed")

        sink.assert_called_once_with(notice)

    def test_sink_failure_does_not_propagate(self, log_service):
        sink = MagicMock(side_effect=RuntimeError("sink down"))
        reporter = ErrorReporter(
            log_service_provider=lambda: log_service, response_sink=sink
        )

        assert reporter.handle_error("x.failed").message_key == "x.failed"


@pytest.mark.unit
class TestHandleException:
    """Test suite for exception normalization."""

    def test_reports_under_unhandled_key(self, reporter, log_service):
        exc = _raise(ValueError("bad value"))

        notice = reporter.handle_exception(exc)

        assert notice.message_key == UNHANDLED_EXCEPTION_KEY
        key, level, context = log_service.log.call_args[0]
        assert key == UNHANDLED_EXCEPTION_KEY
        assert level == LogLevel.ERROR
        assert context["exceptionClass"] == "ValueError"
        assert context["message"] == "bad value"

    def test_exception_context_fields(self):
        exc = _raise(KeyError("missing"))

        context = exception_context(exc)

        assert context["exceptionClass"] == "KeyError"
        assert context["file"].endswith("test_reporter.py")
        assert isinstance(context["line"], int)
        assert "KeyError" in context["trace"]

    def test_exception_context_qualifies_non_builtin(self):
        class LocalError(Exception):
            pass

        context = exception_context(_raise(LocalError("x")))

        assert context["exceptionClass"].startswith(LocalError.__module__ + ".")

    def test_exception_context_never_raised(self):
        context = exception_context(RuntimeError("not raised"))

        assert context["file"] is None
        assert context["line"] is None


@pytest.mark.unit
class TestExceptionHooks:
    """Test suite for install/uninstall."""

    def test_install_and_uninstall_restore_hooks(self, reporter):
        original_hook = sys.excepthook
        original_threading_hook = threading.excepthook

        reporter.install()
        try:
            assert sys.excepthook != original_hook
            assert threading.excepthook != original_threading_hook
        finally:
            reporter.uninstall()

        assert sys.excepthook == original_hook
        assert threading.excepthook == original_threading_hook

    def test_uncaught_thread_exception_reported(self, reporter, log_service):
        def fail():
            raise RuntimeError("thread failure")

        reporter.install()
        try:
            thread = threading.Thread(target=fail)
            thread.start()
            thread.join()
        finally:
            reporter.uninstall()

        key, _, context = log_service.log.call_args[0]
        assert key == UNHANDLED_EXCEPTION_KEY
        assert context["message"] == "thread failure"

    def test_keyboard_interrupt_passed_to_previous_hook(self, reporter, log_service):
        previous = MagicMock()
        original = sys.excepthook
        sys.excepthook = previous
        try:
            reporter.install()
            sys.excepthook(KeyboardInterrupt, KeyboardInterrupt(), None)
            reporter.uninstall()
        finally:
            sys.excepthook = original

        previous.assert_called_once()
        log_service.log.assert_not_called()
