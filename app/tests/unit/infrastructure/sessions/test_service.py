"""Unit tests for infrastructure.sessions.service module.

Tests cover:
- start() idempotency and identifier regeneration
- Inactivity timeout on start and on access
- Entries, flash messages, auth data and preferred locale
- Transport failures reported instead of raised
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.logging.models import LogLevel
from infrastructure.sessions.models import SessionRecord
from infrastructure.sessions.service import SessionService, generate_session_id


def _logged_messages(log_service):
    return [call.args[0] for call in log_service.log.call_args_list]


@pytest.mark.unit
class TestSessionStart:
    """Test suite for SessionService.start."""

    def test_start_new_session(self, make_session, store, log_service):
        session = make_session()

        assert session.start() is True

        assert session.is_started
        assert session.session_id == "sid-1"
        assert store.load("sid-1") is not None
        log_service.log.assert_called_once_with(
            "session.start_success",
            LogLevel.INFO,
            {"module": "SessionService", "function": "start"},
        )

    def test_start_is_idempotent(self, session, log_service):
        assert session.start() is True

        assert session.session_id == "sid-1"
        assert _logged_messages(log_service) == ["session.start_success"]

    def test_start_regenerates_identifier(self, session, make_session, store):
        session.set("user_id", "user-1")

        resumed = make_session("sid-1")
        resumed.start()

        assert resumed.session_id == "sid-2"
        assert store.load("sid-1") is None
        assert resumed.get("user_id") == "user-1"

    def test_start_sets_last_activity(self, session, clock):
        assert session.last_activity == clock.now

    def test_start_with_unknown_identifier_creates_session(self, make_session):
        session = make_session("forged-id")

        assert session.start() is True
        assert session.all() == {}
        assert session.session_id == "sid-1"

    def test_start_failure_is_reported(self, error_reporter, clock):
        store = MagicMock()
        store.load.side_effect = ConnectionError("store unavailable")
        session = SessionService(
            store, "sid-9", error_reporter=error_reporter, clock=clock
        )

        assert session.start() is False

        assert not session.is_started
        assert session.session_id is None
        error_reporter.handle_exception.assert_called_once()
        assert session.get("user_id", "fallback") == "fallback"

    def test_default_identifier_generator(self):
        first, second = generate_session_id(), generate_session_id()

        assert first != second
        assert len(first) >= 32


@pytest.mark.unit
class TestSessionTimeout:
    """Test suite for inactivity timeout."""

    def test_expired_session_discarded_on_start(
        self, session, make_session, clock, log_service
    ):
        session.set("user_id", "user-1")
        clock.advance(1801)

        resumed = make_session(session.session_id)
        resumed.start()

        assert resumed.get("user_id") is None
        assert "session.timeout" in _logged_messages(log_service)

    def test_session_within_timeout_survives(self, session, make_session, clock):
        session.set("user_id", "user-1")
        clock.advance(1800)

        resumed = make_session(session.session_id)
        resumed.start()

        assert resumed.get("user_id") == "user-1"

    def test_expired_session_discarded_on_access(self, session, clock, log_service):
        session.set("user_id", "user-1")
        clock.advance(1801)

        assert session.get("user_id") is None
        assert session.is_started
        assert session.session_id == "sid-2"
        assert _logged_messages(log_service).count("session.timeout") == 1

    def test_timeout_log_level(self, session, make_session, clock, log_service):
        clock.advance(5000)
        make_session(session.session_id).start()

        last_call = log_service.log.call_args
        assert last_call.args[0] == "session.timeout"
        assert last_call.args[1] == LogLevel.WARNING

    def test_reads_refresh_activity(self, session, clock):
        clock.advance(1000)
        session.get("anything")
        clock.advance(1000)

        assert session.get("anything", "default") == "default"
        assert session.session_id == "sid-1"


@pytest.mark.unit
class TestSessionEntries:
    """Test suite for entry access."""

    def test_set_get_has_remove(self, session, store):
        session.set("cart", ["a"])

        assert session.has("cart")
        assert session.get("cart") == ["a"]
        assert store.load(session.session_id).data["cart"] == ["a"]

        session.remove("cart")

        assert not session.has("cart")
        assert session.get("cart", "none") == "none"

    def test_all_returns_copy(self, session):
        session.set("a", 1)

        entries = session.all()
        entries["b"] = 2

        assert session.all() == {"a": 1}

    def test_operations_before_start_are_empty(self, make_session):
        session = make_session()

        session.set("a", 1)

        assert session.get("a") is None
        assert session.all() == {}
        assert not session.has("a")

    def test_destroy_session(self, session, store):
        session.set("a", 1)
        old_id = session.session_id

        session.destroy_session()

        assert session.session_id is None
        assert not session.is_started
        assert store.load(old_id) is None
        assert session.get("a") is None

    def test_persist_failure_is_reported(self, error_reporter, clock):
        store = MagicMock()
        store.load.return_value = None
        session = SessionService(store, error_reporter=error_reporter, clock=clock)
        session.start()
        store.save.side_effect = OSError("write failed")

        session.set("a", 1)

        error_reporter.handle_exception.assert_called_once()


@pytest.mark.unit
class TestFlashMessages:
    """Test suite for one-time flash messages."""

    def test_flash_read_once(self, session):
        session.set_flash("notice", "Saved")

        assert session.has_flash("notice")
        assert session.get_flash("notice") == "Saved"
        assert session.get_flash("notice") is None
        assert not session.has_flash("notice")

    def test_flash_survives_until_read(self, session, make_session):
        session.set_flash("notice", "Saved")

        resumed = make_session(session.session_id)
        resumed.start()

        assert resumed.get_flash("notice") == "Saved"

    def test_consumed_flash_is_persisted(self, session, store):
        session.set_flash("notice", "Saved")
        session.get_flash("notice")

        assert store.load(session.session_id).flash == {}

    def test_missing_flash(self, session):
        assert session.get_flash("nothing") is None


@pytest.mark.unit
class TestUserData:
    """Test suite for auth data and preferred locale."""

    def test_auth_data(self, session):
        session.set_user_auth_data({"user_id": "u1", "roles": ["admin"]})

        assert session.get_user_auth_data() == {"user_id": "u1", "roles": ["admin"]}

    def test_preferred_locale(self, session, log_service):
        session.set_user_preferred_locale("fr_FR")

        assert session.get_user_preferred_locale() == "fr_FR"
        messages = _logged_messages(log_service)
        assert "session.set_preferred_locale" in messages
        assert "session.get_preferred_locale" in messages

    def test_missing_preferred_locale_logs_warning(self, session, log_service):
        assert session.get_user_preferred_locale() is None

        last_call = log_service.log.call_args
        assert last_call.args[0] == "session.get_preferred_locale_missing"
        assert last_call.args[1] == LogLevel.WARNING


@pytest.mark.unit
class TestCookiePolicy:
    """Test suite for cookie attributes."""

    def test_cookie_policy(self, make_session):
        policy = make_session(secure=True, same_site="strict").cookie_policy

        assert policy.http_only is True
        assert policy.use_only_cookies is True
        assert policy.secure is True
        assert policy.same_site == "strict"
        assert policy.name == "session_id"

    def test_record_expiry_boundary(self):
        record = SessionRecord(created_at=0.0, last_activity=0.0)
        assert record.is_expired(1801.0, 1800)
