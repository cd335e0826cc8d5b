"""
Redis client for per-session application state.

Features:
    - Session state stored as JSON with TTL (Time To Live)
    - Degrades to "unavailable" instead of failing when Redis is not configured
"""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.config import Settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Redis client for session state"""

    def __init__(self, settings: Settings):
        self._redis_url = settings.redis_url
        self._session_ttl = settings.session_ttl_seconds
        self._client: Optional[Redis] = None

    async def connect(self):
        """Establish Redis connection"""
        if not self._redis_url:
            logger.warning("Redis URL not configured, session state kept in process memory")
            return

        try:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True
            )
            # Test connection
            await self._client.ping()
            logger.info("Redis connection established successfully")
        except (RedisError, OSError) as e:
            logger.error(f"Failed to connect to Redis: {e}")
            self._client = None

    async def disconnect(self):
        """Close Redis connection"""
        if self._client:
            await self._client.aclose()
            logger.info("Redis connection closed")

    def is_available(self) -> bool:
        """Check if Redis is available"""
        return self._client is not None

    # =============================
    #   Session state
    # =============================
    def _session_key(self, session_id: str) -> str:
        """Generate state key for session_id"""
        return f"session:state:{session_id}"

    async def set_session_state(self, session_id: str, payload: str) -> bool:
        """
        Store a session's serialized state, refreshing its TTL.

        Returns:
            True if stored, False if Redis is unavailable or the write failed
        """
        if not self.is_available():
            return False

        try:
            await self._client.setex(self._session_key(session_id), self._session_ttl, payload)
            logger.debug(f"Stored state for session {session_id}")
            return True
        except RedisError as e:
            logger.error(f"Failed to store session state: {e}")
            return False

    async def get_session_state(self, session_id: str) -> Optional[str]:
        """
        Get a session's serialized state.

        Returns:
            JSON string or None if not found or Redis is unavailable
        """
        if not self.is_available():
            return None

        try:
            return await self._client.get(self._session_key(session_id))
        except RedisError as e:
            logger.error(f"Failed to get session state: {e}")
            return None

    async def delete_session_state(self, session_id: str):
        if not self.is_available():
            return

        try:
            await self._client.delete(self._session_key(session_id))
            logger.debug(f"Deleted state for session {session_id}")
        except RedisError as e:
            logger.error(f"Failed to delete session state: {e}")

    async def ping(self) -> bool:
        """Ping Redis server to check connectivity"""
        if not self.is_available():
            return False
        try:
            return await self._client.ping()
        except RedisError:
            return False
