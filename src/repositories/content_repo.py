"""
Content repositories - one per collection
"""

from src.clients.firestore_client import FirestoreClient
from src.model.content import Assessment, Blog, Course
from src.repositories.base_repo import BaseRepository


class CourseRepository(BaseRepository[Course]):
    COLLECTION = "courses"

    def __init__(self, client: FirestoreClient):
        super().__init__(Course, self.COLLECTION, "Course", client)


class AssessmentRepository(BaseRepository[Assessment]):
    COLLECTION = "assessments"

    def __init__(self, client: FirestoreClient):
        super().__init__(Assessment, self.COLLECTION, "Assessment", client)


class BlogRepository(BaseRepository[Blog]):
    COLLECTION = "blogs"

    def __init__(self, client: FirestoreClient):
        super().__init__(Blog, self.COLLECTION, "Blog post", client)
