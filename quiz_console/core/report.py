"""Plain-text rendering of finished quiz results."""

from __future__ import annotations

from quiz_console.constants.quiz_constants import (
    QUESTION_PREVIEW_LIMIT,
    REPORT_TIMESTAMP_FORMAT,
    REPORT_WIDTH,
)
from quiz_console.core.models import QuizResult
from quiz_console.core.services.scoring import grade, percentage, performance_message


def format_elapsed(seconds: int) -> str:
    """Format a duration as ``m:ss``."""
    minutes, remaining = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{remaining:02d}"


def question_preview(text: str, limit: int = QUESTION_PREVIEW_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def detailed_report(result: QuizResult) -> str:
    """Build the full report for ``result``.

    The output depends only on the fields of ``result``, so rendering the same
    result twice yields the same text.
    """
    heavy_rule = "=" * REPORT_WIDTH
    light_rule = "-" * REPORT_WIDTH
    lines = [
        heavy_rule,
        "QUIZ RESULT REPORT".center(REPORT_WIDTH).rstrip(),
        heavy_rule,
        f"Player Name: {result.player_name}",
        f"Category: {result.category}",
        f"Completion Time: {result.completion_timestamp.strftime(REPORT_TIMESTAMP_FORMAT)}",
        f"Time Taken: {format_elapsed(result.elapsed_seconds)}",
        light_rule,
        "SCORE SUMMARY:",
        f"Total Questions: {result.total_questions}",
        f"Correct Answers: {result.correct_answers}",
        f"Wrong Answers: {result.wrong_answers}",
        f"Score: {result.total_score}/{result.max_possible_score}",
        f"Percentage: {percentage(result):.1f}%",
        f"Grade: {grade(result)}",
        f"Performance: {performance_message(result)}",
        light_rule,
        "QUESTION-BY-QUESTION BREAKDOWN:",
    ]

    for number, entry in enumerate(result.question_results, start=1):
        verdict = "✓ CORRECT" if entry.is_correct else "✗ WRONG"
        lines.append(f"Q{number}: {verdict} ({entry.points_earned}/{entry.max_points} points)")
        lines.append(f"    Question: {question_preview(entry.question_text)}")
        lines.append(f"    Your Answer: {entry.selected_answer}")
        if not entry.is_correct:
            lines.append(f"    Correct Answer: {entry.correct_answer}")
        lines.append("")

    lines.append(heavy_rule)
    return "\n".join(lines) + "\n"
