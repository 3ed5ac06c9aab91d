"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Sequence

from quiz_console.constants.quiz_constants import (
    DEFAULT_PLAYER_NAME,
    DEFAULT_QUESTION_POINTS,
    INVALID_ANSWER_TEXT,
)
from quiz_console.core.errors import InvalidQuestionError, SessionFinalizedError


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with two or more options."""

    text: str
    options: Sequence[str]
    correct_index: int
    category: str
    points: int = DEFAULT_QUESTION_POINTS

    def __post_init__(self) -> None:
        # Store options as a tuple so callers cannot mutate them in place.
        # A bare string is kept whole so it fails validation instead of
        # being split into one option per character.
        if not isinstance(self.options, str):
            object.__setattr__(self, "options", tuple(self.options))

    def is_valid(self) -> bool:
        return (
            isinstance(self.text, str)
            and bool(self.text.strip())
            and isinstance(self.options, tuple)
            and len(self.options) >= 2
            and all(isinstance(option, str) for option in self.options)
            and _is_plain_int(self.correct_index)
            and 0 <= self.correct_index < len(self.options)
            and isinstance(self.category, str)
            and bool(self.category.strip())
            and _is_plain_int(self.points)
            and self.points > 0
        )

    def is_correct(self, answer_index: int) -> bool:
        return answer_index == self.correct_index

    def option_text(self, index: int) -> str:
        """Return the option at ``index`` or a placeholder when out of range."""
        if 0 <= index < len(self.options):
            return self.options[index]
        return INVALID_ANSWER_TEXT

    @property
    def correct_answer_text(self) -> str:
        return self.option_text(self.correct_index)

    def with_changes(self, **changes: Any) -> "Question":
        """Return a copy with ``changes`` applied, rejecting invalid results."""
        updated = replace(self, **changes)
        if not updated.is_valid():
            raise InvalidQuestionError(f"Changing {sorted(changes)} leaves the question invalid.")
        return updated


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Outcome of one answered question, snapshotted at answer time."""

    question_text: str
    selected_answer: str
    correct_answer: str
    is_correct: bool
    points_earned: int
    max_points: int


@dataclass(slots=True)
class QuizResult:
    """Running record of a quiz attempt; frozen once finalized."""

    player_name: str
    category: str
    question_results: list[QuestionResult] = field(default_factory=list)
    total_questions: int = 0
    correct_answers: int = 0
    total_score: int = 0
    max_possible_score: int = 0
    completion_timestamp: datetime = field(default_factory=datetime.now)
    elapsed_seconds: int = 0
    finalized: bool = False

    def __post_init__(self) -> None:
        cleaned = (self.player_name or "").strip()
        self.player_name = cleaned or DEFAULT_PLAYER_NAME

    def append(self, question_result: QuestionResult) -> None:
        """Add one answer and update every running total together."""
        if self.finalized:
            raise SessionFinalizedError("Cannot record answers on a finalized quiz result.")
        self.question_results.append(question_result)
        self.total_questions += 1
        self.max_possible_score += question_result.max_points
        if question_result.is_correct:
            self.correct_answers += 1
            self.total_score += question_result.points_earned

    @property
    def wrong_answers(self) -> int:
        return self.total_questions - self.correct_answers


def _is_plain_int(value: object) -> bool:
    # bool is an int subclass; True must not count as 1.
    return isinstance(value, int) and not isinstance(value, bool)
