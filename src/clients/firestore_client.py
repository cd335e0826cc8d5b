"""
Firestore client for the courses, assessments and blogs collections.

Collections live under artifacts/{app_id}/public/data/{name}. The underlying
google-cloud-firestore client is synchronous: writes are pushed to worker
threads, and snapshot listeners call back on the library's own threads.
"""

import asyncio
import logging
import os
from typing import Callable, Dict, List, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore

from src.config import Settings
from src.services.auth_service import BackendIdentity
from src.utils.exceptions import BackendWriteException

logger = logging.getLogger(__name__)

RawDocument = Tuple[str, Dict]
SnapshotCallback = Callable[[List[RawDocument]], None]


class CollectionWatch:
    """Handle for one snapshot listener"""

    def __init__(self, collection: str, watch):
        self.collection = collection
        self._watch = watch

    @property
    def is_active(self) -> bool:
        return bool(getattr(self._watch, "is_active", True))

    def unsubscribe(self):
        self._watch.unsubscribe()
        logger.info(f"Detached listener from {self.collection}")


class FirestoreClient:
    """Firestore access for the content collections"""

    def __init__(self, settings: Settings, identity: BackendIdentity):
        if settings.firestore_emulator_host:
            os.environ.setdefault("FIRESTORE_EMULATOR_HOST", settings.firestore_emulator_host)

        self._app_id = settings.firebase_app_id
        self._client = firestore.Client(
            project=settings.firebase_project_id,
            credentials=identity.credentials,
        )
        logger.info(f"Firestore client ready for project {settings.firebase_project_id} as {identity.uid}")

    def collection(self, name: str):
        return self._client.collection("artifacts", self._app_id, "public", "data", name)

    # =============================
    #   Writes
    # =============================
    async def add(self, name: str, data: Dict) -> str:
        """Create a document; returns the generated id."""
        try:
            _, doc_ref = await asyncio.to_thread(self.collection(name).add, data)
        except (GoogleAPIError, GoogleAuthError) as e:
            raise BackendWriteException(str(e))
        return doc_ref.id

    async def set(self, name: str, doc_id: str, data: Dict) -> None:
        """Replace a whole document."""
        try:
            await asyncio.to_thread(self.collection(name).document(doc_id).set, data)
        except (GoogleAPIError, GoogleAuthError) as e:
            raise BackendWriteException(str(e))

    async def delete(self, name: str, doc_id: str) -> None:
        try:
            await asyncio.to_thread(self.collection(name).document(doc_id).delete)
        except (GoogleAPIError, GoogleAuthError) as e:
            raise BackendWriteException(str(e))

    # =============================
    #   Listeners
    # =============================
    def watch(self, name: str, on_snapshot: SnapshotCallback) -> CollectionWatch:
        """
        Listen to a whole collection. on_snapshot receives the full list of
        (id, data) pairs on every change, on a library thread.
        """
        def _callback(docs, changes, read_time):
            on_snapshot([(doc.id, doc.to_dict()) for doc in docs])

        logger.info(f"Attaching listener to: artifacts/{self._app_id}/public/data/{name}")
        return CollectionWatch(name, self.collection(name).on_snapshot(_callback))

    def close(self):
        self._client.close()
        logger.info("Firestore client closed")
