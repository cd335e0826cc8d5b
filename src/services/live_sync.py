"""
Live collection sync.

Mirrors the courses, assessments and blogs collections into local lists. Each
snapshot replaces its list wholesale. Snapshots arrive on Firestore library
threads and are handed to the event loop, so lists only ever change on the loop
thread, one event at a time.

A listener that stops is reported as a subscription error for its collection;
the list keeps its last snapshot until a new one arrives.
"""

import asyncio
import logging
from functools import partial
from typing import Dict, List, Optional, Type

from google.api_core.exceptions import GoogleAPIError
from pydantic import ValidationError

from src.clients.firestore_client import CollectionWatch, FirestoreClient, RawDocument
from src.model.content import Assessment, Blog, Course, Document
from src.model.state import Notification
from src.repositories.content_repo import AssessmentRepository, BlogRepository, CourseRepository
from src.utils.exceptions import SubscriptionException

logger = logging.getLogger(__name__)

COLLECTION_MODELS: Dict[str, Type[Document]] = {
    CourseRepository.COLLECTION: Course,
    AssessmentRepository.COLLECTION: Assessment,
    BlogRepository.COLLECTION: Blog,
}


class LiveCollectionSync:
    """Local mirror of the three content collections"""

    def __init__(self, health_interval: float = 5.0):
        self._health_interval = health_interval
        self._lists: Dict[str, List[Document]] = {name: [] for name in COLLECTION_MODELS}
        self._watches: Dict[str, CollectionWatch] = {}
        self._errors: Dict[str, SubscriptionException] = {}
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._monitor_task: Optional[asyncio.Task] = None

    # =============================
    #   Lifecycle
    # =============================
    def attach(self, client: FirestoreClient):
        """Attach one listener per collection. Must run on the event loop."""
        self._loop = asyncio.get_running_loop()
        for name in COLLECTION_MODELS:
            try:
                self._watches[name] = client.watch(name, partial(self._on_snapshot, name))
            except GoogleAPIError as e:
                self.report_error(name, str(e))
        self._monitor_task = self._loop.create_task(self._monitor())
        logger.info("Auth ready. Firestore listeners attached")

    def detach(self) -> Optional[asyncio.Task]:
        """Remove every listener and cancel the health monitor, returning its task."""
        logger.info("Cleaning up Firestore listeners...")
        task, self._monitor_task = self._monitor_task, None
        if task is not None:
            task.cancel()
        for watch in self._watches.values():
            watch.unsubscribe()
        self._watches.clear()
        return task

    async def close(self):
        """Detach and wait for the health monitor to finish."""
        task = self.detach()
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            logger.debug("Listener health monitor stopped")

    def rebind(self, client: FirestoreClient):
        """Tear down every listener and re-attach against a replacement client."""
        self.detach()
        self._errors.clear()
        self.attach(client)

    # =============================
    #   Snapshots
    # =============================
    def _on_snapshot(self, name: str, docs: List[RawDocument]):
        # Called on a Firestore thread
        try:
            self._loop.call_soon_threadsafe(self.apply_snapshot, name, docs)
        except RuntimeError:
            logger.debug(f"Dropped {name} snapshot after the event loop closed")

    def apply_snapshot(self, name: str, docs: List[RawDocument]):
        """Replace the local list for one collection with a full snapshot."""
        model = COLLECTION_MODELS[name]
        items = []
        for doc_id, data in docs:
            try:
                items.append(model.from_document(doc_id, data))
            except ValidationError as e:
                logger.warning(f"Skipping malformed {name} document {doc_id}: {e}")

        self._lists[name] = items
        self._errors.pop(name, None)
        logger.debug(f"Firestore data loaded for {name}: {len(items)} items")

    def report_error(self, name: str, message: str):
        self._errors[name] = SubscriptionException(name, message)
        logger.error(f"Firestore error on {name}: {message}")

    def check_listeners(self):
        for name, watch in self._watches.items():
            if not watch.is_active and name not in self._errors:
                self.report_error(name, "The live listener stopped unexpectedly.")

    async def _monitor(self):
        try:
            while True:
                await asyncio.sleep(self._health_interval)
                self.check_listeners()
        except asyncio.CancelledError:
            logger.debug("Listener health monitor cancelled")
            raise

    # =============================
    #   Reads
    # =============================
    @property
    def courses(self) -> List[Course]:
        return list(self._lists[CourseRepository.COLLECTION])

    @property
    def assessments(self) -> List[Assessment]:
        return list(self._lists[AssessmentRepository.COLLECTION])

    @property
    def blogs(self) -> List[Blog]:
        return list(self._lists[BlogRepository.COLLECTION])

    def find_course(self, course_id: Optional[str]) -> Optional[Course]:
        return next((c for c in self._lists[CourseRepository.COLLECTION] if c.id == course_id), None)

    def find_assessment(self, assessment_id: Optional[str]) -> Optional[Assessment]:
        return next(
            (a for a in self._lists[AssessmentRepository.COLLECTION] if a.id == assessment_id), None
        )

    def find_blog(self, blog_id: Optional[str]) -> Optional[Blog]:
        return next((b for b in self._lists[BlogRepository.COLLECTION] if b.id == blog_id), None)

    def alerts(self) -> List[Notification]:
        return [
            Notification.error(f"Failed to load {name}. {error.message}", title="Data Error")
            for name, error in self._errors.items()
        ]
