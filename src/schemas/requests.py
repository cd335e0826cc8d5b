from typing import Optional

from pydantic import BaseModel, Field

from src.model.enums import AdminView, LessonType


# =============================
#   Navigation / Quiz
# =============================
class BackToCourseRequest(BaseModel):
    course_id: Optional[str] = Field(
        None, description="Course to return to; defaults to the selected course"
    )


class AnswerRequest(BaseModel):
    option: str = Field(..., description="Chosen option text for the current question")


# =============================
#   Admin gate
# =============================
class AdminLoginRequest(BaseModel):
    code: str = Field(..., description="Admin secret code")


class AdminViewRequest(BaseModel):
    admin_view: AdminView = Field(..., description="Admin sub-view to switch to")


# =============================
#   Course editor
# =============================
class CourseFieldsRequest(BaseModel):
    """Partial update of the course draft; only fields that are sent are applied"""

    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None
    icon_name: Optional[str] = None
    icon_color: Optional[str] = None
    is_published: Optional[bool] = None


class TitleRequest(BaseModel):
    title: str = Field("", description="Section title")


class NewSectionRequest(BaseModel):
    title: Optional[str] = Field(
        None, description="Section title; defaults to the pending new-section title"
    )


class LessonFormRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = Field(
        None, description="Rich-text HTML, or the document URL for external lessons"
    )
    type: Optional[LessonType] = None


# =============================
#   Assessment editor
# =============================
class AssessmentFieldsRequest(BaseModel):
    title: Optional[str] = None
    course_id: Optional[str] = None
    type: Optional[str] = None


class QuestionFormRequest(BaseModel):
    text: Optional[str] = None
    answer: Optional[str] = None


class OptionRequest(BaseModel):
    index: int = Field(..., ge=0, description="Option slot, 0-based")
    value: str = ""


# =============================
#   Blog editor
# =============================
class BlogFieldsRequest(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = Field(None, description="ISO calendar date (YYYY-MM-DD)")
    content: Optional[str] = None


class TagsRequest(BaseModel):
    text: str = Field("", description="Comma-separated tags")
