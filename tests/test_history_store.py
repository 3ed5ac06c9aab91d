"""Unit tests for HistoryStore aggregates."""

from quiz_console.core.models import Question
from quiz_console.core.services import scoring
from quiz_console.core.services.history_store import HistoryStore


def _result(player: str, category: str, correct: int, total: int):
    """Build a finalized result with ``correct`` of ``total`` one-point answers."""
    result = scoring.new_session(player, category)
    question = Question("Q?", ["right", "wrong"], 0, category, 1)
    for idx in range(total):
        scoring.record_answer(result, question, 0 if idx < correct else 1)
    return scoring.finalize(result, 30)


class TestHistoryStore:
    """Ordering, best result and averages."""

    def test_empty_store(self):
        store = HistoryStore()
        assert store.all() == ()
        assert store.is_empty()
        assert store.last() is None
        assert store.best() is None
        assert store.average_percentage() == 0.0
        assert store.by_category() == {}
        assert store.category_summaries() == []

    def test_append_preserves_order(self):
        store = HistoryStore()
        first = _result("Ada", "Science", 1, 2)
        second = _result("Bob", "Science", 2, 2)
        store.append(first)
        store.append(second)

        assert store.all() == (first, second)
        assert len(store) == 2
        assert store.last() is second

    def test_best_prefers_first_of_ties(self):
        store = HistoryStore()
        low = _result("Ada", "Science", 6, 10)
        first_high = _result("Bob", "Science", 9, 10)
        second_high = _result("Cy", "Mathematics", 9, 10)
        for result in (low, first_high, second_high):
            store.append(result)

        assert store.best() is first_high

    def test_average_percentage(self):
        store = HistoryStore()
        store.append(_result("Ada", "Science", 1, 2))
        store.append(_result("Bob", "Science", 2, 2))

        assert store.average_percentage() == 75.0

    def test_by_category(self):
        store = HistoryStore()
        a = _result("Ada", "Science", 1, 2)
        b = _result("Bob", "Mixed", 2, 2)
        c = _result("Cy", "Science", 0, 2)
        for result in (a, b, c):
            store.append(result)

        grouped = store.by_category()
        assert list(grouped) == ["Science", "Mixed"]
        assert grouped["Science"] == [a, c]

        summaries = {summary.category: summary for summary in store.category_summaries()}
        assert summaries["Science"].attempts == 2
        assert summaries["Science"].average_percentage == 25.0
        assert summaries["Mixed"].average_percentage == 100.0
