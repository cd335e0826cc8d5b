"""
Presentation views: resolves a session's selections against the live mirror
and builds the page payload.

A selection that no longer resolves (deleted remotely, or never existed) sends
the visitor to the nearest list page instead of rendering an empty view.
"""
import logging
from typing import Tuple

from src.model.content import Assessment
from src.model.enums import AppView, IconVariant
from src.model.state import AppState
from src.schemas.views import (
    AdminPanelPage,
    ArticlePage,
    AssessmentCard,
    AssessmentHomePage,
    AssessmentPage,
    BlogArticlePage,
    BlogHomePage,
    CourseCard,
    CourseChoice,
    CourseDetailPage,
    HomePage,
    LoadingPage,
    PageView,
    QuizResult,
)
from src.services import navigation_service as navigation
from src.services import quiz_session_service as quiz_session
from src.services.backend_service import BackendService
from src.services.live_sync import LiveCollectionSync

logger = logging.getLogger(__name__)


class ViewService:
    def __init__(self, sync: LiveCollectionSync, backend: BackendService):
        self._sync = sync
        self._backend = backend

    # =============================
    #   Guard
    # =============================
    def guard(self, state: AppState) -> AppState:
        """Redirect away from pages whose selection no longer resolves."""
        page = state.page

        if page == AppView.ADMIN_PANEL and not state.admin_mode:
            return navigation.go_home(state)

        if page in (AppView.COURSE_DETAIL, AppView.ARTICLE_VIEW):
            course = self._sync.find_course(state.selected_course_id)
            if course is None:
                logger.info(f"Selected course {state.selected_course_id} is gone, showing Home")
                return navigation.go_home(state)
            if page == AppView.ARTICLE_VIEW and course.find_lesson(state.selected_lesson_id) is None:
                logger.info(f"Selected lesson {state.selected_lesson_id} is gone, showing Home")
                return navigation.go_home(state)

        if page == AppView.ASSESSMENT_VIEW:
            assessment = self._sync.find_assessment(state.selected_assessment_id)
            if assessment is None or state.quiz is None:
                return navigation.go_to_assessment_home(state)
            quiz = quiz_session.clamp(state.quiz, assessment)
            if quiz is not state.quiz:
                return state.model_copy(update={"quiz": quiz})

        if page == AppView.BLOG_ARTICLE and self._sync.find_blog(state.selected_blog_id) is None:
            return navigation.go_to_blog_home(state)

        return state

    # =============================
    #   Render
    # =============================
    def render(self, state: AppState) -> Tuple[AppState, PageView]:
        """Guard the state and build its page; returns the state to persist."""
        self._backend.require_available()

        if not self._backend.ready:
            return state, PageView(
                admin_mode=state.admin_mode,
                notification=state.notification,
                content=LoadingPage(),
            )

        state = self.guard(state)
        view = PageView(
            page=state.page,
            admin_mode=state.admin_mode,
            notification=state.notification,
            alerts=self._sync.alerts(),
            content=self._content(state),
        )
        return state, view

    def _content(self, state: AppState):
        page = state.page
        if page == AppView.COURSE_DETAIL:
            return self._course_detail(state)
        if page == AppView.ARTICLE_VIEW:
            return self._article(state)
        if page == AppView.ASSESSMENT_HOME:
            return AssessmentHomePage(assessments=self._assessment_cards())
        if page == AppView.ASSESSMENT_VIEW:
            return self._assessment(state)
        if page == AppView.BLOG_HOME:
            return BlogHomePage(blogs=self._sync.blogs)
        if page == AppView.BLOG_ARTICLE:
            return BlogArticlePage(blog=self._sync.find_blog(state.selected_blog_id))
        if page == AppView.ADMIN_PANEL:
            return self._admin_panel(state)
        return self._home(state)

    def _home(self, state: AppState) -> HomePage:
        courses = [c for c in self._sync.courses if c.is_published or state.admin_mode]
        return HomePage(
            heading="All Courses" if state.admin_mode else "Top Picks",
            courses=[
                CourseCard(
                    course=course,
                    icon=IconVariant.resolve(course.icon_name),
                    section_count=len(course.sections),
                    lesson_count=course.total_lessons,
                )
                for course in courses
            ],
        )

    def _course_detail(self, state: AppState) -> CourseDetailPage:
        course = self._sync.find_course(state.selected_course_id)
        return CourseDetailPage(
            course=course,
            icon=IconVariant.resolve(course.icon_name),
            total_lessons=course.total_lessons,
            is_published=course.is_published,
            assessments=[a for a in self._sync.assessments if a.course_id == course.id],
        )

    def _article(self, state: AppState) -> ArticlePage:
        course = self._sync.find_course(state.selected_course_id)
        lesson = course.find_lesson(state.selected_lesson_id)
        return ArticlePage(
            course_id=course.id,
            course_title=course.title,
            lesson=lesson,
            external_url=lesson.content if lesson.type.is_external() else None,
        )

    def _assessment_card(self, assessment: Assessment) -> AssessmentCard:
        course = self._sync.find_course(assessment.course_id)
        return AssessmentCard(
            assessment=assessment,
            course_title=course.title if course else "N/A",
            question_count=len(assessment.questions),
        )

    def _assessment_cards(self):
        return [self._assessment_card(a) for a in self._sync.assessments]

    def _assessment(self, state: AppState) -> AssessmentPage:
        assessment = self._sync.find_assessment(state.selected_assessment_id)
        quiz = state.quiz
        total = len(assessment.questions)
        page = AssessmentPage(
            assessment_id=assessment.id,
            title=assessment.title,
            course_id=assessment.course_id,
            total=total,
        )
        if total == 0:
            return page

        question = quiz_session.current_question(quiz, assessment)
        page.current_index = quiz.current_index
        page.question = question
        page.selected_answer = quiz.answers.get(question.id)
        page.is_first = quiz.current_index == 0
        page.is_last = quiz.current_index == total - 1
        if quiz.submitted:
            page.result = QuizResult(
                score=quiz.score,
                total=total,
                percentage=round(quiz.score / total * 100),
                passed=quiz_session.is_passed(quiz.score, total),
            )
        return page

    def _admin_panel(self, state: AppState) -> AdminPanelPage:
        return AdminPanelPage(
            admin_view=state.admin_view,
            courses=self._sync.courses,
            assessments=self._assessment_cards(),
            blogs=self._sync.blogs,
            course_editor=state.course_editor,
            assessment_editor=state.assessment_editor,
            blog_editor=state.blog_editor,
            course_choices=[
                CourseChoice(id=c.id, title=c.title) for c in self._sync.courses if c.id
            ],
        )
