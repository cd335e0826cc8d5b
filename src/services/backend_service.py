"""
Backend startup sequence: configuration, identity, client, listeners.

Configuration and authentication failures are fatal for the process: they are
kept as a blocking notification and every page render reports them until the
service is restarted with working settings.
"""

import asyncio
import logging
from typing import Callable, Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from src.clients.firestore_client import FirestoreClient
from src.config import Settings
from src.model.state import Notification
from src.services.auth_service import AuthService, BackendIdentity
from src.services.live_sync import LiveCollectionSync
from src.utils.exceptions import (
    AuthenticationException,
    BackendUnavailableException,
    ConfigurationException,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Settings, BackendIdentity], FirestoreClient]


class BackendService:
    def __init__(
            self,
            settings: Settings,
            sync: LiveCollectionSync,
            auth_service: Optional[AuthService] = None,
            client_factory: ClientFactory = FirestoreClient,
    ):
        self._settings = settings
        self._sync = sync
        self._auth_service = auth_service or AuthService(settings)
        self._client_factory = client_factory
        self.client: Optional[FirestoreClient] = None
        self.identity: Optional[BackendIdentity] = None
        self.blocking_error: Optional[Notification] = None

    @property
    def ready(self) -> bool:
        return self.client is not None

    async def start(self):
        try:
            self._auth_service.validate_config()
        except ConfigurationException as e:
            logger.error(e.message)
            self.blocking_error = Notification.error(e.message, title="Config Error", blocking=True)
            return

        try:
            self.identity = await asyncio.to_thread(self._auth_service.acquire_identity)
        except AuthenticationException as e:
            logger.error(f"Firebase auth error: {e.message}")
            self.blocking_error = Notification.error(e.message, title="Auth Error", blocking=True)
            return
        logger.info(f"Firebase user signed in: {self.identity.uid}")

        try:
            self.client = self._client_factory(self._settings, self.identity)
        except (GoogleAPIError, GoogleAuthError, ValueError) as e:
            logger.error(f"Firebase initialization failed: {e}")
            self.blocking_error = Notification.error(
                f"Failed to initialize application: {e}", title="Init Error", blocking=True
            )
            return

        self._sync.attach(self.client)

    async def stop(self):
        await self._sync.close()
        if self.client is not None:
            self.client.close()
            self.client = None

    def replace_client(self, client: FirestoreClient):
        """Swap the backend handle; listeners are torn down and re-attached."""
        old_client, self.client = self.client, client
        self._sync.rebind(client)
        if old_client is not None:
            old_client.close()

    def require_available(self) -> None:
        if self.blocking_error is not None:
            raise BackendUnavailableException(self.blocking_error.message, title=self.blocking_error.title)

    def require_client(self) -> FirestoreClient:
        self.require_available()
        if self.client is None:
            raise BackendUnavailableException("Connecting to Learning Hub...")
        return self.client
