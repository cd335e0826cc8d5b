"""
Tests for the assessment draft editor and its question form.

Run: python3 -m pytest tests/test_assessment_editor.py -v
"""

import pytest

from src.model.content import Question
from src.services import assessment_editor
from src.utils.exceptions import ValidationException


def _fill(editor, text, answer, *options):
    editor = assessment_editor.open_question_form(editor)
    editor = assessment_editor.update_question_form(editor, text=text, answer=answer)
    for index, value in enumerate(options):
        editor = assessment_editor.set_option(editor, index, value)
    return editor


class TestDraft:
    """Tests for starting drafts."""

    def test_start_create_links_first_course(self, sync):
        """Test a new assessment defaults to the first course."""
        draft = assessment_editor.start_create(sync.courses).draft

        assert draft.course_id == "c1"
        assert draft.type == "Quiz"
        assert draft.questions == []

    def test_start_create_without_courses(self):
        """Test the course id stays empty when there are no courses."""
        assert assessment_editor.start_create([]).draft.course_id is None

    def test_update_fields(self, assessment):
        """Test title and course can be changed on the draft only."""
        editor = assessment_editor.start_edit(assessment)

        editor = assessment_editor.update_fields(editor, title="Renamed", course_id="c2")

        assert editor.draft.title == "Renamed"
        assert editor.draft.course_id == "c2"
        assert assessment.title == "Python Quiz"

    def test_null_title_rejected(self, assessment):
        """Test a null title is refused while a null course is allowed."""
        editor = assessment_editor.start_edit(assessment)

        with pytest.raises(ValidationException, match="Invalid value"):
            assessment_editor.update_fields(editor, title=None)

        editor = assessment_editor.update_fields(editor, course_id=None)
        assert editor.draft.course_id is None
        assert editor.draft.title == "Python Quiz"


class TestQuestionForm:
    """Tests for add_question validation."""

    def test_form_starts_with_three_slots(self, assessment):
        """Test the question form opens with three empty options."""
        editor = assessment_editor.open_question_form(assessment_editor.start_edit(assessment))

        assert editor.question_form.options == ["", "", ""]

    def test_fourth_slot_can_be_added(self, assessment):
        """Test writing past the last slot adds a fourth, but not a fifth."""
        editor = _fill(assessment_editor.start_edit(assessment), "Q", "A", "A", "B", "C", "D")

        assert editor.question_form.options == ["A", "B", "C", "D"]
        with pytest.raises(ValidationException):
            assessment_editor.set_option(editor, 4, "E")

    def test_add_question_drops_blank_options(self, assessment):
        """Test the stored question keeps only filled options."""
        editor = _fill(assessment_editor.start_edit(assessment), "Capital?", "Paris", "Paris", "  ", "Rome")

        editor = assessment_editor.add_question(editor)

        question = editor.draft.questions[-1]
        assert question.options == ["Paris", "Rome"]
        assert question.answer == "Paris"
        assert question.id.startswith("q_")
        assert editor.question_form is None

    def test_text_and_answer_required(self, assessment):
        """Test the first validation message."""
        editor = _fill(assessment_editor.start_edit(assessment), "", "A", "A", "B")

        with pytest.raises(ValidationException, match="Question text and answer are required."):
            assessment_editor.add_question(editor)

    def test_two_options_required(self, assessment):
        """Test whitespace-only options do not count."""
        editor = _fill(assessment_editor.start_edit(assessment), "Q", "A", "A", " ", "")

        with pytest.raises(ValidationException, match="Please provide at least two options."):
            assessment_editor.add_question(editor)

    def test_answer_must_match_option(self, assessment):
        """Test the answer is compared exactly and case-sensitively."""
        editor = _fill(assessment_editor.start_edit(assessment), "Q", "a", "A", "B")

        with pytest.raises(ValidationException, match="The correct answer must match one of the provided options."):
            assessment_editor.add_question(editor)

    def test_failed_validation_leaves_draft(self, assessment):
        """Test a rejected question does not reach the draft."""
        editor = _fill(assessment_editor.start_edit(assessment), "Q", "Z", "A", "B")

        with pytest.raises(ValidationException):
            assessment_editor.add_question(editor)
        assert len(editor.draft.questions) == 2

    def test_cancel_question_form(self, assessment):
        """Test cancelling the question form leaves the questions alone."""
        editor = _fill(assessment_editor.start_edit(assessment), "Q", "A", "A", "B")

        editor = assessment_editor.cancel_question_form(editor)

        assert editor.question_form is None
        assert [q.id for q in editor.draft.questions] == ["q1", "q2"]

    def test_delete_question(self, assessment):
        """Test deleting a question by id."""
        editor = assessment_editor.delete_question(assessment_editor.start_edit(assessment), "q1")

        assert [q.id for q in editor.draft.questions] == ["q2"]

    def test_prepare_commit_recleans_options(self, assessment):
        """Test blank options are dropped from every question on commit."""
        editor = assessment_editor.start_edit(assessment)
        editor.draft.questions.append(Question(id="q3", text="T", options=["X", "", " ", "Y"], answer="X"))

        payload = assessment_editor.prepare_commit(editor)

        assert payload.questions[-1].options == ["X", "Y"]
