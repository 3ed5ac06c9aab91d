"""Unit tests for the plain-text result report."""

from datetime import datetime

import pytest

from quiz_console.core.models import Question
from quiz_console.core.report import detailed_report, format_elapsed, question_preview
from quiz_console.core.services import scoring

LONG_TEXT = "In a right triangle, what is the relationship between the sides?"


@pytest.fixture
def finished_result(science_question):
    result = scoring.new_session("Ada", "Mixed")
    scoring.record_answer(result, science_question, 2)
    scoring.record_answer(result, Question(LONG_TEXT, ["a + b = c", "a² + b² = c²"], 1, "Mathematics", 15), 0)
    return scoring.finalize(result, 125, datetime(2024, 5, 1, 9, 5, 3))


class TestFormatting:
    """Helpers used by the report."""

    @pytest.mark.parametrize(("seconds", "expected"), [(0, "0:00"), (59, "0:59"), (125, "2:05"), (3600, "60:00")])
    def test_format_elapsed(self, seconds, expected):
        assert format_elapsed(seconds) == expected

    def test_short_preview_is_unchanged(self):
        assert question_preview("Short?") == "Short?"

    def test_long_preview_is_truncated(self):
        preview = question_preview(LONG_TEXT)
        assert len(preview) == 50
        assert preview.endswith("...")
        assert preview == LONG_TEXT[:47] + "..."


class TestDetailedReport:
    """Structure of the detailed report."""

    def test_header_and_summary(self, finished_result):
        report = detailed_report(finished_result)

        assert "QUIZ RESULT REPORT" in report
        assert "Player Name: Ada" in report
        assert "Category: Mixed" in report
        assert "Completion Time: 2024-05-01 09:05:03" in report
        assert "Time Taken: 2:05" in report
        assert "Score: 10/25" in report
        assert "Wrong Answers: 1" in report
        assert "Percentage: 40.0%" in report
        assert "Grade: F" in report
        assert "Performance: Poor performance. Please review the material." in report

    def test_breakdown(self, finished_result):
        report = detailed_report(finished_result)

        assert "Q1: ✓ CORRECT (10/10 points)" in report
        assert "Q2: ✗ WRONG (0/15 points)" in report
        assert f"    Question: {LONG_TEXT[:47]}..." in report
        assert "    Your Answer: a + b = c" in report
        assert "    Correct Answer: a² + b² = c²" in report
        # Only the wrong answer shows a correct-answer line.
        assert report.count("Correct Answer:") == 1

    def test_report_is_deterministic(self, finished_result):
        assert detailed_report(finished_result) == detailed_report(finished_result)
