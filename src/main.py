import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from src.api.v1.router import api_router
from src.clients.redis_client import RedisClient
from src.config import get_settings
from src.dependencies.services import get_backend_service, get_redis_client
from src.schemas.generic import HealthResponse
from src.services.backend_service import BackendService
from src.utils.exception_handlers import register_exception_handlers
from src.utils.log import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator:
    """Lifecycle events"""
    # STARTUP
    logger.info(f"🚀 Starting {settings.app_name} v{settings.app_version}")

    redis_client = await get_redis_client()
    if redis_client.is_available() and not await redis_client.ping():
        logger.warning("Redis client ping failed")

    backend = get_backend_service()
    await backend.start()

    yield

    # SHUTDOWN
    logger.info(f"🛑 Shutting down {settings.app_name}")
    await backend.stop()
    await redis_client.disconnect()


# Create app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Learning Hub: courses, assessments and blog with live Firestore sync",
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url="/redoc" if settings.environment == "development" else None,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed browser-session cookie; no max_age, so it ends with the browser session
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=None,
)

# Register global exception handlers
register_exception_handlers(app)


# Health check
@app.get("/health", response_model=HealthResponse)
async def health_check(
        backend: BackendService = Depends(get_backend_service),
        redis_client: RedisClient = Depends(get_redis_client),
):
    if backend.blocking_error is not None:
        backend_status = "error"
    elif backend.ready:
        backend_status = "connected"
    else:
        backend_status = "connecting"

    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        backend=backend_status,
        session_store="redis" if redis_client.is_available() else "memory",
    )


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
    }


# Include routers
app.include_router(api_router, prefix="/api/v1")
