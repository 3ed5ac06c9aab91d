"""Service for storing questions and assembling quizzes from them."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from threading import Lock
from typing import Iterable

from quiz_console.constants.quiz_constants import DIFFICULTY_BANDS, MIXED_CATEGORY
from quiz_console.core.models import Question

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BankStatistics:
    """Snapshot of question counts in the bank."""

    total_questions: int
    category_count: int
    questions_per_category: dict[str, int]


class QuestionBank:
    """Owns every question and a per-category index derived from them.

    The canonical list is the only source of truth; the category index is
    rebuilt from it whenever a question is added. Invalid questions are
    dropped without raising, so callers that need to know should check the
    return value of :meth:`add` or compare :meth:`total_count` before and after.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._lock = Lock()
        self._questions: list[Question] = []
        self._by_category: dict[str, list[Question]] = {}
        self._rng = rng or random.Random()

    def add(self, question: Question) -> bool:
        if not question.is_valid():
            logger.debug("Discarding invalid question: %r", question)
            return False
        with self._lock:
            self._questions.append(question)
            self._rebuild_index()
        return True

    def add_all(self, questions: Iterable[Question]) -> int:
        return sum(1 for question in questions if self.add(question))

    def categories(self) -> set[str]:
        with self._lock:
            return set(self._by_category)

    def questions_in(self, category: str) -> list[Question]:
        """Return a copy of the questions in ``category`` (empty if unknown)."""
        with self._lock:
            return list(self._by_category.get(category, []))

    def all_questions(self) -> list[Question]:
        with self._lock:
            return list(self._questions)

    def total_count(self) -> int:
        with self._lock:
            return len(self._questions)

    def category_count(self) -> int:
        with self._lock:
            return len(self._by_category)

    def pool_size(self, category: str) -> int:
        """Number of questions a quiz in ``category`` can draw from."""
        with self._lock:
            return len(self._pool(category))

    def sample(self, category: str, count: int, rng: random.Random | None = None) -> list[Question]:
        """Draw up to ``count`` distinct questions in random order.

        ``category`` may be the Mixed sentinel to draw from the whole bank.
        An empty pool or a non-positive count yields an empty list.
        """
        if count <= 0:
            return []
        source = rng or self._rng
        with self._lock:
            pool = list(self._pool(category))
        if not pool:
            return []
        source.shuffle(pool)
        return pool[: min(count, len(pool))]

    def search(self, keyword: str) -> list[Question]:
        """Case-insensitive match on question text or category name.

        An empty keyword matches every question; callers are expected to
        reject blank input before searching.
        """
        needle = keyword.lower()
        with self._lock:
            return [
                question
                for question in self._questions
                if needle in question.text.lower() or needle in question.category.lower()
            ]

    def by_difficulty(self, tier: str) -> list[Question]:
        band = DIFFICULTY_BANDS.get(tier.lower())
        if band is None:
            return []
        low, high = band
        with self._lock:
            return [question for question in self._questions if low <= question.points <= high]

    def is_valid_quiz_config(self, category: str, count: int) -> bool:
        with self._lock:
            if category != MIXED_CATEGORY and category not in self._by_category:
                return False
            return 0 < count <= len(self._pool(category))

    def statistics(self) -> BankStatistics:
        with self._lock:
            return BankStatistics(
                total_questions=len(self._questions),
                category_count=len(self._by_category),
                questions_per_category={
                    category: len(questions) for category, questions in self._by_category.items()
                },
            )

    def _pool(self, category: str) -> list[Question]:
        if category == MIXED_CATEGORY:
            return self._questions
        return self._by_category.get(category, [])

    def _rebuild_index(self) -> None:
        index: dict[str, list[Question]] = {}
        for question in self._questions:
            index.setdefault(question.category, []).append(question)
        self._by_category = index
