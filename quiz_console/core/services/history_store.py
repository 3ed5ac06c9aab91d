"""Service for keeping finished quiz results and their statistics."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock

from quiz_console.core.models import QuizResult
from quiz_console.core.services.scoring import percentage


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Aggregate performance for one category."""

    category: str
    attempts: int
    average_percentage: float


class HistoryStore:
    """Append-only log of finished quiz results for the running session."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._results: list[QuizResult] = []

    def append(self, result: QuizResult) -> None:
        with self._lock:
            self._results.append(result)

    def all(self) -> tuple[QuizResult, ...]:
        with self._lock:
            return tuple(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def is_empty(self) -> bool:
        return len(self) == 0

    def last(self) -> QuizResult | None:
        with self._lock:
            return self._results[-1] if self._results else None

    def average_percentage(self) -> float:
        with self._lock:
            return _mean_percentage(self._results)

    def best(self) -> QuizResult | None:
        """Return the highest scoring result; the earliest one wins a tie."""
        with self._lock:
            best_result: QuizResult | None = None
            best_value = 0.0
            for result in self._results:
                value = percentage(result)
                if best_result is None or value > best_value:
                    best_result, best_value = result, value
            return best_result

    def by_category(self) -> dict[str, list[QuizResult]]:
        with self._lock:
            grouped: dict[str, list[QuizResult]] = {}
            for result in self._results:
                grouped.setdefault(result.category, []).append(result)
            return grouped

    def category_summaries(self) -> list[CategorySummary]:
        return [
            CategorySummary(
                category=category,
                attempts=len(results),
                average_percentage=_mean_percentage(results),
            )
            for category, results in self.by_category().items()
        ]


def _mean_percentage(results: list[QuizResult]) -> float:
    if not results:
        return 0.0
    return sum(percentage(result) for result in results) / len(results)
