"""
Tests for the course draft editor.

Run: python3 -m pytest tests/test_course_editor.py -v
"""

import pytest

from src.model.enums import LessonType
from src.services import course_editor
from src.utils.exceptions import ResourceNotFoundException, ValidationException


@pytest.fixture
def editor(course):
    return course_editor.start_edit(course)


class TestDraftLifecycle:
    """Tests for starting drafts and editing fields."""

    def test_start_create_defaults(self):
        """Test a new course draft carries the documented defaults."""
        draft = course_editor.start_create().draft

        assert draft.id is None
        assert draft.duration == "0h 0m"
        assert draft.level == "Basic"
        assert draft.icon_name == "Zap"
        assert draft.icon_color == "text-gray-500"
        assert draft.is_published is False
        assert draft.sections == []

    def test_draft_is_isolated_from_source(self, course, editor):
        """Test edits to the draft never reach the mirrored course."""
        editor = course_editor.update_fields(editor, title="Changed")
        editor = course_editor.add_section(editor, "New Section")

        assert course.title == "Python Basics"
        assert len(course.sections) == 1
        assert editor.draft.title == "Changed"

    def test_update_unknown_field_rejected(self, editor):
        """Test only editable fields can be set."""
        with pytest.raises(ValidationException):
            course_editor.update_fields(editor, sections=[])

    def test_update_invalid_value_rejected(self, editor):
        """Test a value of the wrong type is refused and the draft kept."""
        with pytest.raises(ValidationException, match="Invalid value"):
            course_editor.update_fields(editor, title=None)
        assert editor.draft.title == "Python Basics"

    def test_prepare_commit_returns_copy(self, editor):
        """Test the commit payload is detached from the editor."""
        payload = course_editor.prepare_commit(editor)
        payload.title = "Other"

        assert editor.draft.title == "Python Basics"
        assert payload.id == "c1"


class TestSections:
    """Tests for section operations."""

    def test_add_section_uses_pending_title(self):
        """Test add_section falls back to the new-section title and clears it."""
        editor = course_editor.set_new_section_title(course_editor.start_create(), "Basics")

        editor = course_editor.add_section(editor)

        assert [s.title for s in editor.draft.sections] == ["Basics"]
        assert editor.draft.sections[0].id.startswith("s_")
        assert editor.draft.sections[0].lessons == []
        assert editor.new_section_title == ""

    def test_add_section_requires_title(self):
        """Test an empty title is rejected."""
        with pytest.raises(ValidationException, match="Section title is required."):
            course_editor.add_section(course_editor.start_create(), "")

    def test_section_ids_are_unique(self):
        """Test two sections added back to back get different ids."""
        editor = course_editor.start_create()
        editor = course_editor.add_section(editor, "One")
        editor = course_editor.add_section(editor, "Two")

        ids = [s.id for s in editor.draft.sections]
        assert len(set(ids)) == 2

    def test_rename_section(self, editor):
        """Test the rename sub-form updates the section title on commit."""
        editor = course_editor.begin_section_rename(editor, "s_1")
        assert editor.section_edit.title == "Getting Started"

        editor = course_editor.set_section_rename_title(editor, "Welcome")
        editor = course_editor.commit_section_rename(editor)

        assert editor.draft.sections[0].title == "Welcome"
        assert editor.section_edit is None

    def test_cancel_rename_keeps_title(self, editor):
        """Test cancelling leaves the section untouched."""
        editor = course_editor.begin_section_rename(editor, "s_1")
        editor = course_editor.set_section_rename_title(editor, "Welcome")
        editor = course_editor.cancel_section_rename(editor)

        assert editor.draft.sections[0].title == "Getting Started"

    def test_rename_unknown_section(self, editor):
        """Test renaming a missing section fails."""
        with pytest.raises(ResourceNotFoundException):
            course_editor.begin_section_rename(editor, "s_missing")

    def test_delete_section_cascades(self, editor):
        """Test deleting a section removes its lessons and open sub-forms."""
        editor = course_editor.open_lesson_edit_form(editor, "s_1", "l_1")

        editor = course_editor.delete_section(editor, "s_1")

        assert editor.draft.sections == []
        assert editor.draft.total_lessons == 0
        assert editor.lesson_form is None


class TestLessons:
    """Tests for the lesson sub-form."""

    def test_add_lesson(self):
        """Test the add-lesson flow appends an Intro lesson."""
        editor = course_editor.add_section(course_editor.start_create(), "S1")
        section_id = editor.draft.sections[0].id

        editor = course_editor.open_lesson_form(editor, section_id)
        editor = course_editor.update_lesson_form(editor, title="Intro", content="<p>Hi</p>")
        editor = course_editor.save_lesson(editor)

        lessons = editor.draft.sections[0].lessons
        assert [lesson.title for lesson in lessons] == ["Intro"]
        assert lessons[0].type == LessonType.RICH_TEXT
        assert lessons[0].id.startswith("l_")
        assert editor.lesson_form is None

    def test_lesson_requires_title_and_content(self, editor):
        """Test an incomplete lesson is rejected and the draft unchanged."""
        editor = course_editor.open_lesson_form(editor, "s_1")
        editor = course_editor.update_lesson_form(editor, title="Only title")

        with pytest.raises(ValidationException, match="Lesson title and content/URL are required."):
            course_editor.save_lesson(editor)
        assert editor.draft.total_lessons == 2

    def test_edit_lesson(self, editor):
        """Test edit mode replaces title, content and type in place."""
        editor = course_editor.open_lesson_edit_form(editor, "s_1", "l_1")
        assert editor.lesson_form.is_edit
        assert editor.lesson_form.title == "Intro"

        editor = course_editor.update_lesson_form(
            editor,
            content="https://example.com/intro.pdf",
            type=LessonType.EXTERNAL_DOC,
        )
        editor = course_editor.save_lesson(editor)

        lesson = editor.draft.find_lesson("l_1")
        assert lesson.title == "Intro"
        assert lesson.type == LessonType.EXTERNAL_DOC
        assert editor.draft.total_lessons == 2

    def test_cancel_lesson_form(self, editor):
        """Test cancelling the lesson form discards its fields."""
        editor = course_editor.open_lesson_form(editor, "s_1")
        editor = course_editor.update_lesson_form(editor, title="Draft", content="<p>x</p>")

        editor = course_editor.cancel_lesson_form(editor)

        assert editor.lesson_form is None
        assert editor.draft.total_lessons == 2

    def test_delete_lesson(self, editor):
        """Test deleting a lesson leaves the rest of the section."""
        editor = course_editor.delete_lesson(editor, "s_1", "l_1")

        assert [lesson.id for lesson in editor.draft.sections[0].lessons] == ["l_2"]

    def test_update_without_form(self, editor):
        """Test lesson form updates need an open form."""
        with pytest.raises(ValidationException):
            course_editor.update_lesson_form(editor, title="x")
