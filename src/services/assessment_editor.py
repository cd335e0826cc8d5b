"""
Assessment draft editor with the add-question sub-form.
"""
from typing import List, Optional, Sequence

from src.model.content import Assessment, Course, Question
from src.model.state import QUESTION_OPTION_SLOTS, AssessmentEditorState, QuestionForm
from src.utils.exceptions import ValidationException
from src.utils.id_utils import generate_local_id

EDITABLE_FIELDS = ("title", "course_id", "type")


def _copy(editor: AssessmentEditorState) -> AssessmentEditorState:
    return editor.model_copy(deep=True)


def filled_options(options: Sequence[str]) -> List[str]:
    """Drop blank option slots (empty or whitespace only)."""
    return [option for option in options if option and option.strip() != ""]


def start_create(courses: Sequence[Course]) -> AssessmentEditorState:
    """New assessment template, attached to the first course when there is one."""
    course_id = courses[0].id if courses else None
    return AssessmentEditorState(draft=Assessment(course_id=course_id))


def start_edit(assessment: Assessment) -> AssessmentEditorState:
    return AssessmentEditorState(draft=assessment.model_copy(deep=True))


def update_fields(editor: AssessmentEditorState, **fields) -> AssessmentEditorState:
    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationException(f"Unknown assessment fields: {', '.join(sorted(unknown))}")

    return editor.model_copy(update={"draft": editor.draft.with_fields(**fields)})


# =============================
#   Question form
# =============================
def open_question_form(editor: AssessmentEditorState) -> AssessmentEditorState:
    return editor.model_copy(update={"question_form": QuestionForm()})


def cancel_question_form(editor: AssessmentEditorState) -> AssessmentEditorState:
    return editor.model_copy(update={"question_form": None})


def update_question_form(
        editor: AssessmentEditorState,
        text: Optional[str] = None,
        answer: Optional[str] = None,
) -> AssessmentEditorState:
    if editor.question_form is None:
        raise ValidationException("No question form is open.")

    changes = {key: value for key, value in (("text", text), ("answer", answer)) if value is not None}
    return editor.model_copy(
        update={"question_form": editor.question_form.model_copy(update=changes)}
    )


def set_option(editor: AssessmentEditorState, index: int, value: str) -> AssessmentEditorState:
    """Write one option slot; writing just past the last slot adds a slot (up to 4)."""
    form = editor.question_form
    if form is None:
        raise ValidationException("No question form is open.")
    if index < 0 or index >= QUESTION_OPTION_SLOTS or index > len(form.options):
        raise ValidationException(f"Option slot {index} is out of range.")

    options = list(form.options)
    if index == len(options):
        options.append(value)
    else:
        options[index] = value
    return editor.model_copy(update={"question_form": form.model_copy(update={"options": options})})


def add_question(editor: AssessmentEditorState) -> AssessmentEditorState:
    """
    Validate the question form and append the question to the draft.

    Checks run in order and the first failure aborts:
    text and answer present, at least two non-blank options, and the answer
    matching one of those options exactly (case-sensitive).
    """
    form = editor.question_form
    if form is None:
        raise ValidationException("No question form is open.")

    if not form.text or not form.answer:
        raise ValidationException("Question text and answer are required.")

    options = filled_options(form.options)
    if len(options) < 2:
        raise ValidationException("Please provide at least two options.")

    if form.answer not in options:
        raise ValidationException("The correct answer must match one of the provided options.")

    editor = _copy(editor)
    editor.draft.questions.append(
        Question(
            id=generate_local_id("q"),
            text=form.text,
            options=options,
            answer=form.answer,
        )
    )
    editor.question_form = None
    return editor


def delete_question(editor: AssessmentEditorState, question_id: str) -> AssessmentEditorState:
    editor = _copy(editor)
    editor.draft.questions = [q for q in editor.draft.questions if q.id != question_id]
    return editor


def prepare_commit(editor: AssessmentEditorState) -> Assessment:
    """The document to persist, with blank options dropped from every question."""
    draft = editor.draft.model_copy(deep=True)
    for question in draft.questions:
        question.options = filled_options(question.options)
    return draft
