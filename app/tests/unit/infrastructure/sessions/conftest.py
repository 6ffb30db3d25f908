"""Fixtures for infrastructure.sessions tests."""

import itertools
from unittest.mock import MagicMock

import pytest

from infrastructure.sessions.service import SessionService
from infrastructure.sessions.store import InMemorySessionStore


class FakeClock:
    """Manually advanced epoch clock."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def log_service():
    return MagicMock()


@pytest.fixture
def error_reporter():
    return MagicMock()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"sid-{next(counter)}"


@pytest.fixture
def make_session(store, log_service, error_reporter, clock, id_factory):
    """Factory for SessionService instances sharing one store and clock."""

    def _make(session_id=None, **kwargs):
        options = {
            "timeout": 1800,
            "log_service": log_service,
            "error_reporter": error_reporter,
            "clock": clock,
            "id_factory": id_factory,
        }
        options.update(kwargs)
        return SessionService(store, session_id, **options)

    return _make


@pytest.fixture
def session(make_session):
    """A started session."""
    service = make_session()
    service.start()
    return service
