from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "learning-hub"
    app_version: str = "1.0.0"
    app_host: str = "127.0.0.1"
    app_port: int = 8000
    environment: str = "development"
    cors_origins: List[str] = ["*"]

    # Firebase / Firestore
    firebase_project_id: Optional[str] = None
    firebase_app_id: Optional[str] = None
    firebase_credentials_file: Optional[str] = None
    firestore_emulator_host: Optional[str] = None

    # Live sync
    sync_health_interval_seconds: float = 5.0

    # Redis (session state)
    redis_url: Optional[str] = None
    session_ttl_seconds: int = 86400

    # Browser session cookie
    session_secret_key: str = "change-me"
    session_cookie_name: str = "learning_hub_session"

    # Admin gate
    admin_secret_code: str = "123"

    # Logging
    log_level: str = "DEBUG"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
