"""Exception hierarchy for the quiz domain."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz domain errors."""


class InvalidQuestionError(QuizError):
    """Raised when a question change would leave it in an invalid state."""


class QuestionImportError(QuizError):
    """Raised when a question file cannot be parsed."""


class SessionFinalizedError(QuizError):
    """Raised when a finished quiz result is mutated."""
