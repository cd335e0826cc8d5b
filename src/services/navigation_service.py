"""
Navigation state machine.

Every transition is a pure function (AppState, payload) -> AppState. Selections
are stored as ids and resolved against the live mirror when a page is rendered,
so a selection invalidated by a remote delete shows up as a missing entity there.
"""
import logging
from typing import Optional, Sequence

from src.model.content import Assessment, Blog, Course, Lesson
from src.model.enums import AdminView, AppView
from src.model.state import AppState, Notification, QuizState

logger = logging.getLogger(__name__)

_CLEARED_SELECTIONS = {
    "selected_course_id": None,
    "selected_lesson_id": None,
    "selected_assessment_id": None,
    "selected_blog_id": None,
}

_CLEARED_EDITORS = {
    "course_editor": None,
    "assessment_editor": None,
    "blog_editor": None,
}


def navigate(state: AppState, page: AppView, **changes) -> AppState:
    """
    Move to page, applying changes. Drafts only live inside the admin panel and
    quiz progress only inside the assessment view; leaving either drops them.
    """
    updates = dict(changes)
    updates["page"] = page
    if page != AppView.ADMIN_PANEL:
        updates.update(_CLEARED_EDITORS)
    if page != AppView.ASSESSMENT_VIEW:
        updates["quiz"] = None
    return state.model_copy(update=updates)


def go_home(state: AppState) -> AppState:
    return navigate(state, AppView.HOME, **_CLEARED_SELECTIONS)


def go_to_blog_home(state: AppState) -> AppState:
    return navigate(state, AppView.BLOG_HOME, selected_blog_id=None)


def go_to_assessment_home(state: AppState) -> AppState:
    return navigate(state, AppView.ASSESSMENT_HOME, selected_assessment_id=None)


def select_course(state: AppState, course: Course) -> AppState:
    return navigate(state, AppView.COURSE_DETAIL, selected_course_id=course.id)


def select_lesson(state: AppState, course: Course, lesson: Lesson) -> AppState:
    return navigate(
        state,
        AppView.ARTICLE_VIEW,
        selected_course_id=course.id,
        selected_lesson_id=lesson.id,
    )


def start_assessment(
        state: AppState, assessment_id: str, assessments: Sequence[Assessment]
) -> AppState:
    """Open an assessment by id; a miss keeps the page and raises a notification."""
    assessment = next((a for a in assessments if a.id == assessment_id), None)
    if assessment is None:
        logger.warning(f"Assessment not found: {assessment_id}")
        return state.model_copy(
            update={"notification": Notification.error("Assessment not found!")}
        )

    return navigate(
        state,
        AppView.ASSESSMENT_VIEW,
        selected_assessment_id=assessment.id,
        quiz=QuizState(assessment_id=assessment.id),
    )


def back_to_course(state: AppState, course: Optional[Course]) -> AppState:
    """Return to a course; a missing course (deleted meanwhile) falls back to Home."""
    if course is None:
        return go_home(state)

    return navigate(
        state,
        AppView.COURSE_DETAIL,
        selected_course_id=course.id,
        selected_lesson_id=None,
        selected_assessment_id=None,
    )


def select_blog(state: AppState, blog: Blog) -> AppState:
    return navigate(state, AppView.BLOG_ARTICLE, selected_blog_id=blog.id)


def open_admin_panel(state: AppState, admin_view: Optional[AdminView] = None, **editors) -> AppState:
    """Enter the admin panel, optionally on a given sub-view with an open editor."""
    updates = dict(_CLEARED_EDITORS)
    updates.update(editors)
    if admin_view is not None:
        updates["admin_view"] = admin_view
    return navigate(state, AppView.ADMIN_PANEL, **updates)


def switch_admin_view(state: AppState, admin_view: AdminView) -> AppState:
    """Switching sub-view discards any open draft."""
    return open_admin_panel(state, admin_view)


def dismiss_notification(state: AppState) -> AppState:
    return state.model_copy(update={"notification": None})
