"""
Per-session application state.

One AppState record per visitor session holds what a single-page client
would keep in component state: the active page, the selected entities, the admin
flag, the admin draft buffers and quiz progress. Transitions in the services
package are pure functions over these records.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.model.content import Assessment, Blog, Course
from src.model.enums import AdminView, AppView, LessonType, NotificationType

QUESTION_OPTION_SLOTS = 4


class Notification(BaseModel):
    """A modal message shown to the visitor until dismissed"""
    title: str
    message: str
    type: NotificationType = NotificationType.INFO
    blocking: bool = False

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(title="Success", message=message, type=NotificationType.SUCCESS)

    @classmethod
    def error(cls, message: str, title: str = "Error", blocking: bool = False) -> "Notification":
        return cls(title=title, message=message, type=NotificationType.ERROR, blocking=blocking)


# =============================
#   Course editor
# =============================
class SectionTitleEdit(BaseModel):
    section_id: str
    title: str = ""


class LessonForm(BaseModel):
    """Add/edit lesson sub-form; lesson_id set means edit mode"""
    section_id: str
    lesson_id: Optional[str] = None
    title: str = ""
    content: str = ""
    type: LessonType = LessonType.RICH_TEXT

    @property
    def is_edit(self) -> bool:
        return self.lesson_id is not None


class CourseEditorState(BaseModel):
    draft: Course
    new_section_title: str = ""
    section_edit: Optional[SectionTitleEdit] = None
    lesson_form: Optional[LessonForm] = None


# =============================
#   Assessment editor
# =============================
class QuestionForm(BaseModel):
    text: str = ""
    options: List[str] = Field(default_factory=lambda: ["", "", ""])
    answer: str = ""


class AssessmentEditorState(BaseModel):
    draft: Assessment
    question_form: Optional[QuestionForm] = None


# =============================
#   Blog editor
# =============================
class BlogEditorState(BaseModel):
    draft: Blog


# =============================
#   Quiz progress
# =============================
class QuizState(BaseModel):
    assessment_id: str
    current_index: int = 0
    answers: Dict[str, str] = Field(default_factory=dict)
    submitted: bool = False
    score: int = 0


# =============================
#   Application state
# =============================
class AppState(BaseModel):
    page: AppView = AppView.HOME

    selected_course_id: Optional[str] = None
    selected_lesson_id: Optional[str] = None
    selected_assessment_id: Optional[str] = None
    selected_blog_id: Optional[str] = None

    admin_mode: bool = False
    admin_view: AdminView = AdminView.COURSES

    course_editor: Optional[CourseEditorState] = None
    assessment_editor: Optional[AssessmentEditorState] = None
    blog_editor: Optional[BlogEditorState] = None

    quiz: Optional[QuizState] = None

    notification: Optional[Notification] = None
