import logging
from functools import lru_cache

from fastapi import Depends, Request

from src.clients.redis_client import RedisClient
from src.config import get_settings
from src.repositories.content_repo import AssessmentRepository, BlogRepository, CourseRepository
from src.services.admin_gate_service import AdminGateService
from src.services.backend_service import BackendService
from src.services.crud_gateway import CrudGateway
from src.services.live_sync import LiveCollectionSync
from src.services.session_service import SessionService, SessionStore
from src.services.view_service import ViewService

logger = logging.getLogger(__name__)

# =============================
#   Redis Client (Singleton)
# =============================
_redis_client_instance = None


async def get_redis_client() -> RedisClient:
    """
    Get singleton RedisClient instance.
    Connection is established on first call and reused.
    """
    global _redis_client_instance

    if _redis_client_instance is None:
        settings = get_settings()
        _redis_client_instance = RedisClient(settings)
        await _redis_client_instance.connect()
        logger.info("RedisClient singleton created")

    return _redis_client_instance


# =============================
#   Session State
# =============================
_session_store_instance = None


async def get_session_store(
        redis_client: RedisClient = Depends(get_redis_client),
) -> SessionStore:
    global _session_store_instance

    if _session_store_instance is None:
        _session_store_instance = SessionStore(redis_client)
    return _session_store_instance


async def get_session_service(
        request: Request,
        store: SessionStore = Depends(get_session_store),
) -> SessionService:
    """Per-request: bound to the caller's cookie session."""
    return SessionService(request, store)


# =============================
#   Backend (Singletons)
# =============================
@lru_cache()
def get_live_sync() -> LiveCollectionSync:
    settings = get_settings()
    return LiveCollectionSync(health_interval=settings.sync_health_interval_seconds)


@lru_cache()
def get_backend_service() -> BackendService:
    """
    Get singleton BackendService. Started once from the app lifespan; the
    live sync it feeds is the same instance the views read from.
    """
    return BackendService(get_settings(), get_live_sync())


@lru_cache()
def get_admin_gate() -> AdminGateService:
    return AdminGateService(get_settings().admin_secret_code)


# =============================
#   Per-Request Services
# =============================
def get_view_service(
        sync: LiveCollectionSync = Depends(get_live_sync),
        backend: BackendService = Depends(get_backend_service),
) -> ViewService:
    return ViewService(sync, backend)


def get_crud_gateway(
        backend: BackendService = Depends(get_backend_service),
) -> CrudGateway:
    """
    Repositories are bound to the current client, which only exists once the
    backend has started; before that this raises BackendUnavailableException.
    """
    client = backend.require_client()
    return CrudGateway(
        course_repository=CourseRepository(client),
        assessment_repository=AssessmentRepository(client),
        blog_repository=BlogRepository(client),
    )
