from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from src.model.content import Assessment, Blog, Course, Lesson, Question
from src.model.enums import AdminView, AppView, IconVariant
from src.model.state import (
    AssessmentEditorState,
    BlogEditorState,
    CourseEditorState,
    Notification,
)


# =============================
#   Cards
# =============================
class CourseCard(BaseModel):
    """Course as shown in a list"""
    course: Course
    icon: IconVariant
    section_count: int
    lesson_count: int


class AssessmentCard(BaseModel):
    assessment: Assessment
    course_title: str
    question_count: int


class CourseChoice(BaseModel):
    """Option for the assessment course picker"""
    id: str
    title: str


# =============================
#   Pages
# =============================
class LoadingPage(BaseModel):
    kind: Literal["loading"] = "loading"
    message: str = "Connecting to Learning Hub..."


class HomePage(BaseModel):
    kind: Literal["home"] = "home"
    heading: str
    courses: List[CourseCard]


class CourseDetailPage(BaseModel):
    kind: Literal["course_detail"] = "course_detail"
    course: Course
    icon: IconVariant
    total_lessons: int
    is_published: bool
    assessments: List[Assessment]


class ArticlePage(BaseModel):
    kind: Literal["article"] = "article"
    course_id: str
    course_title: str
    lesson: Lesson
    external_url: Optional[str] = None


class AssessmentHomePage(BaseModel):
    kind: Literal["assessment_home"] = "assessment_home"
    assessments: List[AssessmentCard]


class QuizResult(BaseModel):
    score: int
    total: int
    percentage: int
    passed: bool


class AssessmentPage(BaseModel):
    """
    Quiz view for one assessment.

    question is None for an assessment without questions; result is set once
    the quiz has been submitted.
    """
    kind: Literal["assessment"] = "assessment"
    assessment_id: str
    title: str
    course_id: Optional[str] = None
    total: int
    current_index: int = 0
    question: Optional[Question] = None
    selected_answer: Optional[str] = None
    is_first: bool = True
    is_last: bool = True
    result: Optional[QuizResult] = None


class BlogHomePage(BaseModel):
    kind: Literal["blog_home"] = "blog_home"
    blogs: List[Blog]


class BlogArticlePage(BaseModel):
    kind: Literal["blog_article"] = "blog_article"
    blog: Blog


class AdminPanelPage(BaseModel):
    kind: Literal["admin_panel"] = "admin_panel"
    admin_view: AdminView
    courses: List[Course] = Field(default_factory=list)
    assessments: List[AssessmentCard] = Field(default_factory=list)
    blogs: List[Blog] = Field(default_factory=list)
    course_editor: Optional[CourseEditorState] = None
    assessment_editor: Optional[AssessmentEditorState] = None
    blog_editor: Optional[BlogEditorState] = None
    course_choices: List[CourseChoice] = Field(default_factory=list)


PageContent = Annotated[
    Union[
        LoadingPage,
        HomePage,
        CourseDetailPage,
        ArticlePage,
        AssessmentHomePage,
        AssessmentPage,
        BlogHomePage,
        BlogArticlePage,
        AdminPanelPage,
    ],
    Field(discriminator="kind"),
]


class PageView(BaseModel):
    """Everything the client needs to draw the current page"""
    page: Optional[AppView] = None
    admin_mode: bool = False
    notification: Optional[Notification] = None
    alerts: List[Notification] = Field(default_factory=list)
    content: PageContent
