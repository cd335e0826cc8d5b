"""
Quiz-taking flow for one assessment.

InProgress(current_index, answers) -> Submitted(score). Answers are keyed by
question id and scored by exact match against the question's answer; there is
no partial credit.
"""
import logging
from typing import Dict, Optional, Sequence

from src.model.content import Assessment, Question
from src.model.state import QuizState
from src.utils.exceptions import ValidationException

logger = logging.getLogger(__name__)

QUIZ_PASS_RATIO = 0.7


def calculate_score(questions: Sequence[Question], answers: Dict[str, str]) -> int:
    return sum(1 for q in questions if answers.get(q.id) == q.answer)


def is_passed(score: int, total: int) -> bool:
    return total > 0 and score / total >= QUIZ_PASS_RATIO


def clamp(quiz: QuizState, assessment: Assessment) -> QuizState:
    """Keep the index valid if the question list changed remotely."""
    last = max(len(assessment.questions) - 1, 0)
    index = min(max(quiz.current_index, 0), last)
    if index == quiz.current_index:
        return quiz
    return quiz.model_copy(update={"current_index": index})


def current_question(quiz: QuizState, assessment: Assessment) -> Optional[Question]:
    if not assessment.questions:
        return None
    return assessment.questions[clamp(quiz, assessment).current_index]


def has_current_answer(quiz: QuizState, assessment: Assessment) -> bool:
    question = current_question(quiz, assessment)
    return question is not None and question.id in quiz.answers


def select_answer(quiz: QuizState, assessment: Assessment, option: str) -> QuizState:
    """Record or overwrite the answer to the current question; ignored once submitted."""
    if quiz.submitted:
        return quiz

    question = current_question(quiz, assessment)
    if question is None:
        raise ValidationException("This assessment has no questions yet.")
    if option not in question.options:
        raise ValidationException("The selected answer is not one of the options.")

    answers = dict(quiz.answers)
    answers[question.id] = option
    return clamp(quiz, assessment).model_copy(update={"answers": answers})


def _require_answer(quiz: QuizState, assessment: Assessment) -> None:
    if not assessment.questions:
        raise ValidationException("This assessment has no questions yet.")
    if not has_current_answer(quiz, assessment):
        raise ValidationException("Please select an answer before continuing.")


def next_question(quiz: QuizState, assessment: Assessment) -> QuizState:
    if quiz.submitted:
        return quiz
    _require_answer(quiz, assessment)

    quiz = clamp(quiz, assessment)
    index = min(quiz.current_index + 1, len(assessment.questions) - 1)
    return quiz.model_copy(update={"current_index": index})


def previous_question(quiz: QuizState, assessment: Assessment) -> QuizState:
    if quiz.submitted:
        return quiz

    quiz = clamp(quiz, assessment)
    return quiz.model_copy(update={"current_index": max(quiz.current_index - 1, 0)})


def submit(quiz: QuizState, assessment: Assessment) -> QuizState:
    if quiz.submitted:
        return quiz
    _require_answer(quiz, assessment)
    quiz = clamp(quiz, assessment)
    if quiz.current_index != len(assessment.questions) - 1:
        raise ValidationException("Answer every question before submitting.")

    score = calculate_score(assessment.questions, quiz.answers)
    logger.info(
        f"Assessment {assessment.id} submitted: {score}/{len(assessment.questions)}"
    )
    return quiz.model_copy(update={"submitted": True, "score": score})
