"""
Content documents exchanged with the courses, assessments and blogs collections.

Attributes are snake_case; documents are read and written with the camelCase
keys the collections already use (iconName, isPublished, courseId, ...).
"""
from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from src.model.enums import LessonType
from src.utils.exceptions import ValidationException


def _none_to_list(value):
    return [] if value is None else value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Document(CamelModel):
    """Top-level document; the id is assigned by the backend on create."""

    id: Optional[str] = None

    def to_document(self) -> dict:
        """Serialize for a whole-document write. The id is never stored in the body."""
        return self.model_dump(by_alias=True, exclude={"id"}, mode="json")

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[dict]):
        payload = dict(data or {})
        payload["id"] = doc_id
        return cls.model_validate(payload)

    def with_fields(self, **fields):
        """Copy with some attributes replaced, validated the same way as a stored document."""
        try:
            return type(self).model_validate({**self.model_dump(), **fields})
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ValidationException(f"Invalid value for {field}: {error['msg']}")


# =============================
#   Courses
# =============================
class Lesson(CamelModel):
    id: str
    title: str = ""
    type: LessonType = LessonType.RICH_TEXT
    content: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, value):
        if value in (t.value for t in LessonType) or isinstance(value, LessonType):
            return value
        return LessonType.RICH_TEXT


class Section(CamelModel):
    id: str
    title: str = ""
    lessons: Annotated[List[Lesson], BeforeValidator(_none_to_list)] = Field(default_factory=list)


class Course(Document):
    title: str = ""
    description: str = ""
    duration: str = "0h 0m"
    level: str = "Basic"
    icon_name: str = "Zap"
    icon_color: str = "text-gray-500"
    is_published: bool = False
    sections: Annotated[List[Section], BeforeValidator(_none_to_list)] = Field(default_factory=list)

    @property
    def total_lessons(self) -> int:
        return sum(len(section.lessons) for section in self.sections)

    def find_lesson(self, lesson_id: str) -> Optional[Lesson]:
        for section in self.sections:
            for lesson in section.lessons:
                if lesson.id == lesson_id:
                    return lesson
        return None


# =============================
#   Assessments
# =============================
class Question(CamelModel):
    id: str
    text: str = ""
    options: List[str] = Field(default_factory=list)
    answer: str = ""

    @field_validator("options", mode="before")
    @classmethod
    def _clean_options(cls, value):
        return [option for option in _none_to_list(value) if option is not None]


class Assessment(Document):
    title: str = ""
    course_id: Optional[str] = None
    type: str = "Quiz"
    questions: Annotated[List[Question], BeforeValidator(_none_to_list)] = Field(default_factory=list)


# =============================
#   Blogs
# =============================
class Blog(Document):
    title: str = ""
    author: str = "Admin"
    date: str = Field(default_factory=lambda: date.today().isoformat())
    content: str = "<p></p>"
    tags: Annotated[List[str], BeforeValidator(_none_to_list)] = Field(default_factory=list)
