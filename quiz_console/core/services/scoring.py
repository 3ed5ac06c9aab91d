"""Scoring of quiz attempts: answer accumulation, percentages and grades."""

from __future__ import annotations

from datetime import datetime

from quiz_console.constants.quiz_constants import (
    FAILING_GRADE,
    FAILING_MESSAGE,
    GRADE_THRESHOLDS,
)
from quiz_console.core.errors import SessionFinalizedError
from quiz_console.core.models import Question, QuestionResult, QuizResult


def new_session(player_name: str, category: str) -> QuizResult:
    """Start an empty result for ``player_name`` taking a ``category`` quiz."""
    return QuizResult(player_name=player_name, category=category)


def record_answer(result: QuizResult, question: Question, selected_index: int) -> QuestionResult:
    """Score ``selected_index`` against ``question`` and append it to ``result``.

    The index is not range checked; anything other than the correct index is
    simply recorded as a wrong answer.
    """
    is_correct = question.is_correct(selected_index)
    question_result = QuestionResult(
        question_text=question.text,
        selected_answer=question.option_text(selected_index),
        correct_answer=question.correct_answer_text,
        is_correct=is_correct,
        points_earned=question.points if is_correct else 0,
        max_points=question.points,
    )
    result.append(question_result)
    return question_result


def finalize(
    result: QuizResult,
    elapsed_seconds: int,
    completion_timestamp: datetime | None = None,
) -> QuizResult:
    """Stamp timing information on ``result`` and freeze it."""
    if result.finalized:
        raise SessionFinalizedError("Quiz result has already been finalized.")
    result.elapsed_seconds = max(0, int(elapsed_seconds))
    result.completion_timestamp = completion_timestamp or datetime.now()
    result.finalized = True
    return result


def percentage(result: QuizResult) -> float:
    if result.max_possible_score == 0:
        return 0.0
    return 100.0 * result.total_score / result.max_possible_score


def grade_for_percentage(value: float) -> str:
    for threshold, letter, _ in GRADE_THRESHOLDS:
        if value >= threshold:
            return letter
    return FAILING_GRADE


def performance_message_for_percentage(value: float) -> str:
    for threshold, _, message in GRADE_THRESHOLDS:
        if value >= threshold:
            return message
    return FAILING_MESSAGE


def grade(result: QuizResult) -> str:
    return grade_for_percentage(percentage(result))


def performance_message(result: QuizResult) -> str:
    return performance_message_for_percentage(percentage(result))


class ScoringEngine:
    """Object facade over the scoring functions, used by QuizManager."""

    def new_session(self, player_name: str, category: str) -> QuizResult:
        return new_session(player_name, category)

    def record_answer(self, result: QuizResult, question: Question, selected_index: int) -> QuestionResult:
        return record_answer(result, question, selected_index)

    def finalize(
        self,
        result: QuizResult,
        elapsed_seconds: int,
        completion_timestamp: datetime | None = None,
    ) -> QuizResult:
        return finalize(result, elapsed_seconds, completion_timestamp)

    def percentage(self, result: QuizResult) -> float:
        return percentage(result)

    def grade(self, result: QuizResult) -> str:
        return grade(result)

    def performance_message(self, result: QuizResult) -> str:
        return performance_message(result)
