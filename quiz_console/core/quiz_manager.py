"""Business logic shared by the console front end: bank, scoring and history."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import random
from threading import Lock

from quiz_console.constants.quiz_constants import MIXED_CATEGORY
from quiz_console.core.models import Question, QuestionResult, QuizResult
from quiz_console.core.question_importer import load_default_questions, load_questions_from_file
from quiz_console.core.result_record import history_to_json
from quiz_console.core.services.history_store import CategorySummary, HistoryStore
from quiz_console.core.services.question_bank import BankStatistics, QuestionBank
from quiz_console.core.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade for quiz services: QuestionBank, ScoringEngine and HistoryStore."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._lock = Lock()

        # Services
        self._bank = QuestionBank(rng=rng)
        self._scoring = ScoringEngine()
        self._history = HistoryStore()

    # --- Question Bank Delegation ---

    def load_default_questions(self) -> int:
        return self._load(load_default_questions().questions)

    def load_questions_from_file(self, file_path: Path) -> int:
        return self._load(load_questions_from_file(file_path).questions)

    def add_question(self, question: Question) -> bool:
        with self._lock:
            return self._bank.add(question)

    def get_categories(self) -> list[str]:
        """Known categories, sorted for stable menus (Mixed excluded)."""
        with self._lock:
            return sorted(self._bank.categories())

    def get_questions_in(self, category: str) -> list[Question]:
        with self._lock:
            return self._bank.questions_in(category)

    def get_total_questions(self) -> int:
        with self._lock:
            return self._bank.total_count()

    def get_pool_size(self, category: str) -> int:
        with self._lock:
            return self._bank.pool_size(category)

    def search_questions(self, keyword: str) -> list[Question]:
        with self._lock:
            return self._bank.search(keyword)

    def get_questions_by_difficulty(self, tier: str) -> list[Question]:
        with self._lock:
            return self._bank.by_difficulty(tier)

    def is_valid_quiz_config(self, category: str, count: int) -> bool:
        with self._lock:
            return self._bank.is_valid_quiz_config(category, count)

    def create_quiz(self, category: str, count: int) -> list[Question]:
        with self._lock:
            return self._bank.sample(category, count)

    def create_mixed_quiz(self, count: int) -> list[Question]:
        return self.create_quiz(MIXED_CATEGORY, count)

    def get_bank_statistics(self) -> BankStatistics:
        with self._lock:
            return self._bank.statistics()

    # --- Scoring Delegation ---

    def start_session(self, player_name: str, category: str) -> QuizResult:
        with self._lock:
            return self._scoring.new_session(player_name, category)

    def submit_answer(self, result: QuizResult, question: Question, selected_index: int) -> QuestionResult:
        with self._lock:
            return self._scoring.record_answer(result, question, selected_index)

    def finish_session(
        self,
        result: QuizResult,
        elapsed_seconds: int,
        completion_timestamp: datetime | None = None,
    ) -> QuizResult:
        """Finalize ``result`` and add it to the session history."""
        with self._lock:
            self._scoring.finalize(result, elapsed_seconds, completion_timestamp)
            self._history.append(result)
            logger.info(
                "Quiz finished: player=%s category=%s score=%d/%d",
                result.player_name,
                result.category,
                result.total_score,
                result.max_possible_score,
            )
            return result

    # --- History Delegation ---

    def get_history(self) -> tuple[QuizResult, ...]:
        with self._lock:
            return self._history.all()

    def get_history_json(self) -> str:
        with self._lock:
            return history_to_json(self._history.all())

    def get_last_result(self) -> QuizResult | None:
        with self._lock:
            return self._history.last()

    def get_average_percentage(self) -> float:
        with self._lock:
            return self._history.average_percentage()

    def get_best_result(self) -> QuizResult | None:
        with self._lock:
            return self._history.best()

    def get_category_summaries(self) -> list[CategorySummary]:
        with self._lock:
            return self._history.category_summaries()

    def _load(self, questions: list[Question]) -> int:
        with self._lock:
            accepted = self._bank.add_all(questions)
            logger.info(
                "Loaded %d questions across %d categories.",
                self._bank.total_count(),
                self._bank.category_count(),
            )
            if accepted < len(questions):
                logger.warning("Skipped %d invalid questions.", len(questions) - accepted)
            return accepted
