"""Unit tests for the Question and QuizResult models."""

import pytest

from quiz_console.core.errors import InvalidQuestionError, SessionFinalizedError
from quiz_console.core.models import Question, QuestionResult, QuizResult


class TestQuestionValidity:
    """Question.is_valid mirrors the bank's acceptance rules."""

    def test_valid_question(self, science_question):
        assert science_question.is_valid()

    @pytest.mark.parametrize(
        "changes",
        [
            {"text": "   "},
            {"options": ["Only one"]},
            {"correct_index": 4},
            {"correct_index": -1},
            {"category": ""},
            {"points": 0},
            {"points": -5},
            {"points": True},
            {"correct_index": False},
            {"options": "ab"},
            {"options": ["a", 2]},
        ],
    )
    def test_invalid_questions(self, science_question, changes):
        fields = {
            "text": science_question.text,
            "options": science_question.options,
            "correct_index": science_question.correct_index,
            "category": science_question.category,
            "points": science_question.points,
        }
        fields.update(changes)
        assert not Question(**fields).is_valid()

    def test_default_points(self):
        question = Question("Q?", ["a", "b"], 0, "Cat")
        assert question.points == 10


class TestQuestionBehaviour:
    """Answer helpers and immutability."""

    def test_options_are_copied_into_a_tuple(self):
        options = ["a", "b"]
        question = Question("Q?", options, 1, "Cat")
        options.append("c")
        assert question.options == ("a", "b")

    def test_correct_answer_text(self, science_question):
        assert science_question.correct_answer_text == "Au"
        assert science_question.is_correct(2)
        assert not science_question.is_correct(1)

    def test_option_text_out_of_range(self, science_question):
        assert science_question.option_text(7) == "Invalid answer index"
        assert science_question.option_text(-1) == "Invalid answer index"

    def test_with_changes_returns_new_question(self, science_question):
        updated = science_question.with_changes(points=15)
        assert updated.points == 15
        assert science_question.points == 10

    def test_with_changes_rejects_invalid_state(self, science_question):
        with pytest.raises(InvalidQuestionError):
            science_question.with_changes(correct_index=9)


class TestQuizResult:
    """Running totals on QuizResult."""

    def test_blank_player_name_defaults_to_anonymous(self):
        assert QuizResult(player_name="   ", category="Science").player_name == "Anonymous"

    def test_player_name_is_trimmed(self):
        assert QuizResult(player_name="  Ada ", category="Science").player_name == "Ada"

    def test_append_updates_totals(self):
        result = QuizResult(player_name="Ada", category="Science")
        result.append(QuestionResult("Q1", "a", "a", True, 10, 10))
        result.append(QuestionResult("Q2", "b", "c", False, 0, 5))

        assert result.total_questions == 2
        assert result.correct_answers == 1
        assert result.wrong_answers == 1
        assert result.total_score == 10
        assert result.max_possible_score == 15

    def test_append_after_finalize_raises(self):
        result = QuizResult(player_name="Ada", category="Science", finalized=True)
        with pytest.raises(SessionFinalizedError):
            result.append(QuestionResult("Q1", "a", "a", True, 10, 10))


class TestQuestionInputTypes:
    """Loose input types are not coerced into valid questions."""

    def test_string_options_are_not_split(self):
        question = Question("Q?", "ab", 0, "Cat")
        assert question.options == "ab"
        assert not question.is_valid()

    def test_bool_points_are_rejected(self):
        assert not Question("Q?", ["a", "b"], 0, "Cat", points=True).is_valid()
