"""
Course draft editor.

The draft is a deep copy of the course being edited (or an empty template for a
new one). Section and lesson edits only touch the draft; nothing reaches the
backend until the draft is committed as one whole-document write.

Every function takes a CourseEditorState and returns a new one. Validation
failures raise before anything is changed.
"""
from typing import Optional

from src.model.content import Course, Lesson, Section
from src.model.enums import LessonType
from src.model.state import CourseEditorState, LessonForm, SectionTitleEdit
from src.utils.exceptions import ResourceNotFoundException, ValidationException
from src.utils.id_utils import generate_local_id

EDITABLE_FIELDS = (
    "title",
    "description",
    "duration",
    "level",
    "icon_name",
    "icon_color",
    "is_published",
)


def _copy(editor: CourseEditorState) -> CourseEditorState:
    return editor.model_copy(deep=True)


def _find_section(draft: Course, section_id: str) -> Section:
    for section in draft.sections:
        if section.id == section_id:
            return section
    raise ResourceNotFoundException(f"Section not found: {section_id}")


def start_create() -> CourseEditorState:
    return CourseEditorState(draft=Course())


def start_edit(course: Course) -> CourseEditorState:
    return CourseEditorState(draft=course.model_copy(deep=True))


def update_fields(editor: CourseEditorState, **fields) -> CourseEditorState:
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationException(f"Unknown course fields: {', '.join(sorted(unknown))}")

    return editor.model_copy(update={"draft": editor.draft.with_fields(**fields)})


# =============================
#   Sections
# =============================
def set_new_section_title(editor: CourseEditorState, title: str) -> CourseEditorState:
    return editor.model_copy(update={"new_section_title": title})


def add_section(editor: CourseEditorState, title: Optional[str] = None) -> CourseEditorState:
    title = editor.new_section_title if title is None else title
    if not title:
        raise ValidationException("Section title is required.")

    editor = _copy(editor)
    editor.draft.sections.append(Section(id=generate_local_id("s"), title=title))
    editor.new_section_title = ""
    return editor


def begin_section_rename(editor: CourseEditorState, section_id: str) -> CourseEditorState:
    section = _find_section(editor.draft, section_id)
    return editor.model_copy(
        update={"section_edit": SectionTitleEdit(section_id=section.id, title=section.title)}
    )


def set_section_rename_title(editor: CourseEditorState, title: str) -> CourseEditorState:
    if editor.section_edit is None:
        raise ValidationException("No section is being renamed.")
    return editor.model_copy(
        update={"section_edit": editor.section_edit.model_copy(update={"title": title})}
    )


def commit_section_rename(editor: CourseEditorState) -> CourseEditorState:
    if editor.section_edit is None:
        raise ValidationException("No section is being renamed.")

    editor = _copy(editor)
    section = _find_section(editor.draft, editor.section_edit.section_id)
    section.title = editor.section_edit.title
    editor.section_edit = None
    return editor


def cancel_section_rename(editor: CourseEditorState) -> CourseEditorState:
    return editor.model_copy(update={"section_edit": None})


def delete_section(editor: CourseEditorState, section_id: str) -> CourseEditorState:
    """Remove a section and, with it, all of its lessons."""
    _find_section(editor.draft, section_id)

    editor = _copy(editor)
    editor.draft.sections = [s for s in editor.draft.sections if s.id != section_id]
    if editor.section_edit and editor.section_edit.section_id == section_id:
        editor.section_edit = None
    if editor.lesson_form and editor.lesson_form.section_id == section_id:
        editor.lesson_form = None
    return editor


# =============================
#   Lessons
# =============================
def open_lesson_form(editor: CourseEditorState, section_id: str) -> CourseEditorState:
    """Open the lesson sub-form in add mode for one section."""
    _find_section(editor.draft, section_id)
    return editor.model_copy(update={"lesson_form": LessonForm(section_id=section_id)})


def open_lesson_edit_form(
        editor: CourseEditorState, section_id: str, lesson_id: str
) -> CourseEditorState:
    """Open the lesson sub-form in edit mode, pre-filled from the lesson."""
    section = _find_section(editor.draft, section_id)
    lesson = next((item for item in section.lessons if item.id == lesson_id), None)
    if lesson is None:
        raise ResourceNotFoundException(f"Lesson not found: {lesson_id}")

    form = LessonForm(
        section_id=section_id,
        lesson_id=lesson.id,
        title=lesson.title,
        content=lesson.content,
        type=lesson.type,
    )
    return editor.model_copy(update={"lesson_form": form})


def update_lesson_form(
        editor: CourseEditorState,
        title: Optional[str] = None,
        content: Optional[str] = None,
        type: Optional[LessonType] = None,
) -> CourseEditorState:
    if editor.lesson_form is None:
        raise ValidationException("No lesson form is open.")

    changes = {
        key: value
        for key, value in (("title", title), ("content", content), ("type", type))
        if value is not None
    }
    return editor.model_copy(
        update={"lesson_form": editor.lesson_form.model_copy(update=changes)}
    )


def save_lesson(editor: CourseEditorState) -> CourseEditorState:
    """
    Apply the lesson sub-form to the draft.

    In edit mode the matching lesson's title, content and type are replaced; in
    add mode a new lesson is appended to the section. Title and content (the URL
    for external documents) are both required.
    """
    form = editor.lesson_form
    if form is None:
        raise ValidationException("No lesson form is open.")
    if not form.title or not form.content:
        raise ValidationException("Lesson title and content/URL are required.")

    editor = _copy(editor)
    section = _find_section(editor.draft, form.section_id)

    if form.is_edit:
        lesson = next((item for item in section.lessons if item.id == form.lesson_id), None)
        if lesson is None:
            raise ResourceNotFoundException(f"Lesson not found: {form.lesson_id}")
        lesson.title = form.title
        lesson.content = form.content
        lesson.type = form.type
    else:
        section.lessons.append(
            Lesson(
                id=generate_local_id("l"),
                title=form.title,
                content=form.content,
                type=form.type,
            )
        )

    editor.lesson_form = None
    return editor


def cancel_lesson_form(editor: CourseEditorState) -> CourseEditorState:
    return editor.model_copy(update={"lesson_form": None})


def delete_lesson(editor: CourseEditorState, section_id: str, lesson_id: str) -> CourseEditorState:
    editor = _copy(editor)
    section = _find_section(editor.draft, section_id)
    section.lessons = [item for item in section.lessons if item.id != lesson_id]
    if editor.lesson_form and editor.lesson_form.lesson_id == lesson_id:
        editor.lesson_form = None
    return editor


def prepare_commit(editor: CourseEditorState) -> Course:
    """The document to persist: update when it has an id, create otherwise."""
    return editor.draft.model_copy(deep=True)
