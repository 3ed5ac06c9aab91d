"""Rich console front end for the quiz."""

from .app import QuizConsoleApp
from .renderers import render_question

__all__ = [
    "QuizConsoleApp",
    "render_question",
]
