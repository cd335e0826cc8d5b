"""
Tests for session state persistence.

Run: python3 -m pytest tests/test_session_service.py -v
"""

import asyncio
from types import SimpleNamespace

import pytest

from src.clients.redis_client import RedisClient
from src.model.enums import AppView
from src.model.state import AppState, QuizState
from src.services.session_service import ADMIN_FLAG_KEY, SessionService, SessionStore


@pytest.fixture
def store(settings):
    # No redis_url: the store falls back to process memory
    return SessionStore(RedisClient(settings))


class TestSessionStore:
    """Tests for SessionStore without Redis."""

    def test_round_trip(self, store):
        """Test a saved state loads back equal."""
        state = AppState(
            page=AppView.ASSESSMENT_VIEW,
            selected_assessment_id="a1",
            quiz=QuizState(assessment_id="a1", answers={"q1": "A"}),
        )

        async def scenario():
            await store.save("sid-1", state)
            return await store.load("sid-1")

        assert asyncio.run(scenario()) == state

    def test_unknown_session(self, store):
        """Test an unknown session id loads nothing."""
        assert asyncio.run(store.load("nobody")) is None

    def test_delete(self, store):
        """Test deleting a session forgets its state."""
        async def scenario():
            await store.save("sid-1", AppState())
            await store.delete("sid-1")
            return await store.load("sid-1")

        assert asyncio.run(scenario()) is None


class TestSessionService:
    """Tests for binding cookie sessions to stored state."""

    def test_new_session_gets_id_and_default_state(self, store):
        """Test a fresh cookie session starts at Home."""
        request = SimpleNamespace(session={})
        session = SessionService(request, store)

        state = asyncio.run(session.load())

        assert state == AppState()
        assert request.session["sid"]

    def test_admin_flag_written_to_cookie(self, store):
        """Test admin mode is persisted as the adminLoggedIn flag."""
        request = SimpleNamespace(session={})
        session = SessionService(request, store)

        asyncio.run(session.save(AppState(admin_mode=True)))
        assert request.session[ADMIN_FLAG_KEY] is True

        asyncio.run(session.save(AppState(admin_mode=False)))
        assert ADMIN_FLAG_KEY not in request.session

    def test_cookie_flag_is_authoritative(self, store):
        """Test a session whose cookie lost the flag is not an admin."""
        request = SimpleNamespace(session={})
        session = SessionService(request, store)
        asyncio.run(session.save(AppState(admin_mode=True)))

        request.session.pop(ADMIN_FLAG_KEY)

        assert asyncio.run(session.load()).admin_mode is False
