"""Unit tests for the serializable result record."""

from datetime import datetime
import json

from quiz_console.core.result_record import QuizResultRecord, history_to_json, to_record
from quiz_console.core.services import scoring


def test_record_mirrors_result(science_question):
    result = scoring.new_session("Ada", "Science")
    scoring.record_answer(result, science_question, 1)
    scoring.finalize(result, 42, datetime(2024, 5, 1, 9, 0, 0))

    record = to_record(result)

    assert record.player_name == "Ada"
    assert record.elapsed_seconds == 42
    assert record.total_score == 0
    assert record.max_possible_score == 10
    entry = record.question_results[0]
    assert entry.selected_answer == "Gd"
    assert entry.correct_answer == "Au"
    assert entry.correct is False


def test_record_json_uses_iso_timestamp(science_question):
    result = scoring.new_session("Ada", "Science")
    scoring.record_answer(result, science_question, 2)
    scoring.finalize(result, 5, datetime(2024, 5, 1, 9, 0, 0))

    payload = json.loads(to_record(result).model_dump_json())

    assert payload["completion_timestamp"] == "2024-05-01T09:00:00"
    assert payload["question_results"][0]["points_earned"] == 10
    assert QuizResultRecord.model_validate(payload) == to_record(result)


def test_history_to_json_keeps_order(science_question):
    results = []
    for player, answer in (("Ada", 2), ("[/]", 0)):
        result = scoring.new_session(player, "Science")
        scoring.record_answer(result, science_question, answer)
        results.append(scoring.finalize(result, 5, datetime(2024, 5, 1, 9, 0, 0)))

    payload = json.loads(history_to_json(results))

    assert [entry["player_name"] for entry in payload] == ["Ada", "[/]"]
    assert [entry["total_score"] for entry in payload] == [10, 0]


def test_empty_history_is_an_empty_array():
    assert json.loads(history_to_json([])) == []
