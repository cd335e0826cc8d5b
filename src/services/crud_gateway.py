"""
CRUD gateway - commits drafts and deletes documents.

Every backend call is caught here and turned into a session notification;
failures are never retried and never propagate further. A draft is only
cleared once its write succeeded, so a failed save can be retried as is.
"""

import logging
from typing import Awaitable, Callable, Tuple

from src.model.content import Document
from src.model.state import AppState, Notification
from src.repositories.base_repo import BaseRepository
from src.repositories.content_repo import AssessmentRepository, BlogRepository, CourseRepository
from src.services import assessment_editor, blog_editor, course_editor
from src.utils.exceptions import BackendWriteException, BadRequestException

logger = logging.getLogger(__name__)

_VERB_FORMS = {
    "create": ("creating", "created!"),
    "update": ("updating", "updated!"),
    "delete": ("deleting", "deleted."),
}


class CrudGateway:
    """
    Create/update/delete per entity type.

    Example:
        state = await gateway.commit_course(state)
    """

    def __init__(
            self,
            course_repository: CourseRepository,
            assessment_repository: AssessmentRepository,
            blog_repository: BlogRepository,
    ):
        self._courses = course_repository
        self._assessments = assessment_repository
        self._blogs = blog_repository

    async def _write(
            self,
            state: AppState,
            repository: BaseRepository,
            verb: str,
            call: Callable[[], Awaitable[object]],
    ) -> Tuple[AppState, bool]:
        try:
            await call()
        except BackendWriteException as e:
            logger.error(f"Error {_VERB_FORMS[verb][0]} {repository.label.lower()}: {e.message}")
            notification = Notification.error(
                f"Failed to {verb} {repository.label.lower()}: {e.message}"
            )
            return state.model_copy(update={"notification": notification}), False

        message = f"{repository.label} {_VERB_FORMS[verb][1]}"
        logger.info(message)
        notification = Notification.success(message)
        return state.model_copy(update={"notification": notification}), True

    async def _save(self, state: AppState, repository: BaseRepository, draft: Document):
        if draft.id:
            return await self._write(state, repository, "update", lambda: repository.replace(draft))
        return await self._write(state, repository, "create", lambda: repository.create(draft))

    # =============================
    #   Commits
    # =============================
    async def commit_course(self, state: AppState) -> AppState:
        if state.course_editor is None:
            raise BadRequestException("No course is being edited")

        draft = course_editor.prepare_commit(state.course_editor)
        state, saved = await self._save(state, self._courses, draft)
        return state.model_copy(update={"course_editor": None}) if saved else state

    async def commit_assessment(self, state: AppState) -> AppState:
        if state.assessment_editor is None:
            raise BadRequestException("No assessment is being edited")

        draft = assessment_editor.prepare_commit(state.assessment_editor)
        state, saved = await self._save(state, self._assessments, draft)
        return state.model_copy(update={"assessment_editor": None}) if saved else state

    async def commit_blog(self, state: AppState) -> AppState:
        if state.blog_editor is None:
            raise BadRequestException("No blog post is being edited")

        draft = blog_editor.prepare_commit(state.blog_editor)
        state, saved = await self._save(state, self._blogs, draft)
        return state.model_copy(update={"blog_editor": None}) if saved else state

    # =============================
    #   Deletes
    # =============================
    async def delete_course(self, state: AppState, course_id: str) -> AppState:
        state, _ = await self._write(state, self._courses, "delete", lambda: self._courses.delete(course_id))
        return state

    async def delete_assessment(self, state: AppState, assessment_id: str) -> AppState:
        state, _ = await self._write(
            state, self._assessments, "delete", lambda: self._assessments.delete(assessment_id)
        )
        return state

    async def delete_blog(self, state: AppState, blog_id: str) -> AppState:
        state, _ = await self._write(state, self._blogs, "delete", lambda: self._blogs.delete(blog_id))
        return state
