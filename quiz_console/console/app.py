"""Interactive menu loop that drives the quiz through QuizManager."""

from __future__ import annotations

from datetime import datetime
import time
from typing import Callable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.rule import Rule

from quiz_console.constants.about import APP_ABOUT_TEXT, APP_NAME, HELP_TEXT
from quiz_console.constants.quiz_constants import MIXED_CATEGORY, PRACTICE_QUESTION_COUNT
from quiz_console.core.models import Question
from quiz_console.core.quiz_manager import QuizManager
from quiz_console.core.report import detailed_report
from quiz_console.core.services.scoring import grade, percentage
from quiz_console.console.renderers import (
    option_letter,
    render_bank_statistics,
    render_history,
    render_performance,
    render_question,
    render_result_summary,
    render_search_results,
)

_MENU_ITEMS = (
    ("1", "🎮 Start New Quiz"),
    ("2", "📊 View Quiz History"),
    ("3", "📈 View Statistics"),
    ("4", "🔍 Search Questions"),
    ("5", "💡 Practice Mode"),
    ("6", "❓ Help"),
    ("7", "🚪 Exit"),
)
_EXIT_CHOICE = "7"


class QuizConsoleApp:
    """Menu-driven console front end; holds no quiz state of its own."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        console: Console | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._manager = quiz_manager
        self._console = console or Console()
        self._clock = clock
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.start_quiz,
            "2": self.show_history,
            "3": self.show_statistics,
            "4": self.search_questions,
            "5": self.practice_mode,
            "6": self.show_help,
        }

    def run(self) -> None:
        self._show_welcome()
        while True:
            self._show_menu()
            choice = Prompt.ask(
                "[cyan]Enter your choice[/cyan]",
                choices=[key for key, _ in _MENU_ITEMS],
                console=self._console,
            )
            if choice == _EXIT_CHOICE:
                break
            self._actions[choice]()
            Prompt.ask("\nPress Enter to continue", default="", show_default=False, console=self._console)
        self._show_goodbye()

    # --- Menu actions ---

    def start_quiz(self) -> None:
        self._console.print(Rule("START NEW QUIZ"))
        player_name = Prompt.ask("Enter your name", default="", show_default=False, console=self._console)
        category = self._select_category()
        available = self._manager.get_pool_size(category)
        if available == 0:
            self._console.print("[red]No questions available for the selected category![/red]")
            return

        self._console.print(f"Available questions in {escape(category)}: {available}")
        count = self._ask_int(f"How many questions do you want? (1-{available})", 1, available)
        questions = self._manager.create_quiz(category, count)
        if not questions:
            self._console.print("[red]No questions available for the selected category![/red]")
            return
        self._conduct_quiz(player_name, category, questions)

    def show_history(self) -> None:
        self._console.print(Rule("QUIZ HISTORY"))
        history = self._manager.get_history()
        if not history:
            self._console.print("No quiz history available. Take a quiz first!")
            return
        self._console.print(render_history(history, self._manager.get_average_percentage()))
        if Confirm.ask("Show the history as JSON?", default=False, console=self._console):
            self._console.print_json(self._manager.get_history_json())

    def show_statistics(self) -> None:
        self._console.print(Rule("QUIZ STATISTICS"))
        self._console.print(render_bank_statistics(self._manager.get_bank_statistics()))
        history = self._manager.get_history()
        if history:
            self._console.print(
                render_performance(
                    len(history),
                    self._manager.get_best_result(),
                    self._manager.get_category_summaries(),
                )
            )

    def search_questions(self) -> None:
        self._console.print(Rule("SEARCH QUESTIONS"))
        keyword = Prompt.ask("Enter search keyword", default="", show_default=False, console=self._console).strip()
        if not keyword:
            self._console.print("[yellow]Please enter a valid keyword![/yellow]")
            return
        results = self._manager.search_questions(keyword)
        if not results:
            self._console.print(f"No questions found matching: {escape(keyword)}")
            return
        self._console.print(render_search_results(keyword, results))

    def practice_mode(self) -> None:
        self._console.print(Rule("PRACTICE MODE"))
        category = self._select_category()
        questions = self._manager.create_quiz(category, PRACTICE_QUESTION_COUNT)
        if not questions:
            self._console.print("[red]No questions available for practice![/red]")
            return

        self._console.print(f"Practicing with {len(questions)} questions from {escape(category)}")
        for number, question in enumerate(questions, start=1):
            self._console.print(render_question(question, number, len(questions)))
            Prompt.ask("Press Enter to see the answer", default="", show_default=False, console=self._console)
            self._console.print(f"[green]✅ Correct Answer: {escape(question.correct_answer_text)}[/green]")
            self._console.print(f"Points: {question.points}\n")

    def show_help(self) -> None:
        categories = ", ".join(self._manager.get_categories())
        self._console.print(
            Panel(
                f"{HELP_TEXT}\n\nAvailable Categories: {escape(categories)}",
                title="🎯 HELP & INSTRUCTIONS",
                box=box.ROUNDED,
            )
        )

    # --- Quiz flow ---

    def _conduct_quiz(self, player_name: str, category: str, questions: list[Question]) -> None:
        result = self._manager.start_session(player_name, category)
        self._console.print(
            Panel(
                f"Player: {escape(result.player_name)}\nQuestions: {len(questions)}",
                title=f"🎯 QUIZ STARTED - {escape(category.upper())}",
                box=box.DOUBLE,
            )
        )
        started_at = self._clock()
        for number, question in enumerate(questions, start=1):
            self._console.print(render_question(question, number, len(questions)))
            selected_index = self._ask_option(question)
            feedback = self._manager.submit_answer(result, question, selected_index)
            if feedback.is_correct:
                self._console.print(f"[green]✅ Correct! +{feedback.points_earned} points[/green]")
            else:
                self._console.print(f"[red]❌ Wrong! The correct answer was: {escape(feedback.correct_answer)}[/red]")

        elapsed = int(self._clock() - started_at)
        self._manager.finish_session(result, elapsed, datetime.now())
        self._console.print(render_result_summary(result))
        if Confirm.ask("Would you like to see a detailed report?", default=False, console=self._console):
            self._console.print(detailed_report(result), markup=False, highlight=False)

    def _select_category(self) -> str:
        categories = self._manager.get_categories() + [MIXED_CATEGORY]
        self._console.print("\nAvailable Categories:")
        for idx, category in enumerate(categories, start=1):
            self._console.print(f"{idx}. {escape(category)} ({self._manager.get_pool_size(category)} questions)")
        choice = self._ask_int(f"Select category (1-{len(categories)})", 1, len(categories))
        return categories[choice - 1]

    def _ask_option(self, question: Question) -> int:
        last_letter = option_letter(len(question.options) - 1)
        while True:
            answer = Prompt.ask(f"Your answer (A-{last_letter})", console=self._console).strip().upper()
            if len(answer) == 1 and "A" <= answer <= last_letter:
                return ord(answer) - ord("A")
            self._console.print(f"[yellow]Please enter a letter between A and {last_letter}![/yellow]")

    def _ask_int(self, prompt: str, low: int, high: int) -> int:
        while True:
            value = IntPrompt.ask(prompt, console=self._console)
            if low <= value <= high:
                return value
            self._console.print(f"[yellow]Please enter a number between {low} and {high}![/yellow]")

    # --- Banners ---

    def _show_welcome(self) -> None:
        categories = ", ".join(self._manager.get_categories())
        self._console.print(
            Panel(
                f"{APP_ABOUT_TEXT}\n\nAvailable categories: {escape(categories)}\n"
                f"Total questions available: {self._manager.get_total_questions()}",
                title=f"🎯 WELCOME TO {APP_NAME.upper()} 🎯",
                box=box.DOUBLE,
            )
        )

    def _show_menu(self) -> None:
        self._console.print(Rule("MAIN MENU"))
        for key, label in _MENU_ITEMS:
            self._console.print(f"{key}. {label}")

    def _show_goodbye(self) -> None:
        lines = ["Keep learning and improving your knowledge!"]
        last = self._manager.get_last_result()
        if last is not None:
            lines.append(f"Your last score: {percentage(last):.1f}% ({grade(last)})")
        self._console.print(
            Panel("\n".join(lines), title="🎓 THANK YOU FOR PLAYING! 🎓", box=box.DOUBLE)
        )
