"""
Per-visitor session state.

The signed session cookie carries only a random session id and the
adminLoggedIn flag; the AppState record itself is stored in Redis under that id.
"""
import logging
import uuid
from typing import Dict, Optional

from fastapi import Request
from pydantic import ValidationError

from src.clients.redis_client import RedisClient
from src.model.state import AppState

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "sid"
ADMIN_FLAG_KEY = "adminLoggedIn"


class SessionStore:
    """AppState persistence keyed by session id, falling back to process memory"""

    def __init__(self, redis_client: RedisClient):
        self._redis = redis_client
        self._local: Dict[str, str] = {}
        self._warned = False

    def _use_local(self) -> bool:
        if self._redis.is_available():
            return False
        if not self._warned:
            logger.warning("Redis unavailable, session state kept in process memory")
            self._warned = True
        return True

    async def load(self, session_id: str) -> Optional[AppState]:
        if self._use_local():
            payload = self._local.get(session_id)
        else:
            payload = await self._redis.get_session_state(session_id)
        if payload is None:
            return None

        try:
            return AppState.model_validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable state for session {session_id}: {e}")
            return None

    async def save(self, session_id: str, state: AppState):
        payload = state.model_dump_json()
        if self._use_local() or not await self._redis.set_session_state(session_id, payload):
            self._local[session_id] = payload

    async def delete(self, session_id: str):
        self._local.pop(session_id, None)
        await self._redis.delete_session_state(session_id)


class SessionService:
    """
    Binds one request's cookie session to its stored AppState.

    Example:
        state = await session.load()
        state = navigation_service.go_home(state)
        await session.save(state)
    """

    def __init__(self, request: Request, store: SessionStore):
        self._session = request.session
        self._store = store

    @property
    def session_id(self) -> str:
        if SESSION_ID_KEY not in self._session:
            self._session[SESSION_ID_KEY] = uuid.uuid4().hex
        return self._session[SESSION_ID_KEY]

    async def load(self) -> AppState:
        state = await self._store.load(self.session_id) or AppState()
        # The cookie flag is authoritative for admin mode
        admin_mode = bool(self._session.get(ADMIN_FLAG_KEY, False))
        if state.admin_mode != admin_mode:
            state = state.model_copy(update={"admin_mode": admin_mode})
        return state

    async def save(self, state: AppState):
        if state.admin_mode:
            self._session[ADMIN_FLAG_KEY] = True
        else:
            self._session.pop(ADMIN_FLAG_KEY, None)
        await self._store.save(self.session_id, state)
