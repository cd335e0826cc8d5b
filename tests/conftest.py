"""
Shared fixtures: settings, a connected backend and a pre-loaded live mirror.
"""

import pytest

from src.config import Settings
from src.model.content import Assessment, Blog, Course
from src.services.backend_service import BackendService
from src.services.live_sync import LiveCollectionSync
from tests.fakes import ASSESSMENT_DOCS, BLOG_DOCS, COURSE_DOCS, FakeFirestoreClient


@pytest.fixture
def settings():
    return Settings(
        firebase_project_id="demo-project",
        firebase_app_id="demo-app",
        firebase_credentials_file=None,
        firestore_emulator_host=None,
        redis_url=None,
        admin_secret_code="123",
    )


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def sync():
    """Live sync pre-loaded with the sample documents."""
    live = LiveCollectionSync(health_interval=60)
    live.apply_snapshot("courses", COURSE_DOCS)
    live.apply_snapshot("assessments", ASSESSMENT_DOCS)
    live.apply_snapshot("blogs", BLOG_DOCS)
    return live


@pytest.fixture
def backend(settings, sync, fake_client):
    """A backend that has already connected."""
    service = BackendService(settings, sync)
    service.client = fake_client
    return service


@pytest.fixture
def course(sync) -> Course:
    return sync.find_course("c1")


@pytest.fixture
def assessment(sync) -> Assessment:
    return sync.find_assessment("a1")


@pytest.fixture
def blog(sync) -> Blog:
    return sync.find_blog("b1")
