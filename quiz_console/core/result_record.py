"""Serializable record of a finished quiz result.

The record mirrors the shape a future history file would use. Nothing in the
application writes it to disk; the history view prints it as JSON on request.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, TypeAdapter

from quiz_console.core.models import QuizResult


class QuestionResultRecord(BaseModel):
    question_text: str
    selected_answer: str
    correct_answer: str
    correct: bool
    points_earned: int
    max_points: int


class QuizResultRecord(BaseModel):
    player_name: str
    category: str
    completion_timestamp: datetime
    elapsed_seconds: int
    total_score: int
    max_possible_score: int
    question_results: list[QuestionResultRecord]


def to_record(result: QuizResult) -> QuizResultRecord:
    return QuizResultRecord(
        player_name=result.player_name,
        category=result.category,
        completion_timestamp=result.completion_timestamp,
        elapsed_seconds=result.elapsed_seconds,
        total_score=result.total_score,
        max_possible_score=result.max_possible_score,
        question_results=[
            QuestionResultRecord(
                question_text=entry.question_text,
                selected_answer=entry.selected_answer,
                correct_answer=entry.correct_answer,
                correct=entry.is_correct,
                points_earned=entry.points_earned,
                max_points=entry.max_points,
            )
            for entry in result.question_results
        ],
    )


_HISTORY_ADAPTER = TypeAdapter(list[QuizResultRecord])


def history_to_json(results: Iterable[QuizResult], indent: int | None = 2) -> str:
    """Serialize ``results`` as a JSON array of result records."""
    records = [to_record(result) for result in results]
    return _HISTORY_ADAPTER.dump_json(records, indent=indent).decode("utf-8")
