"""Rich renderables for questions, results, history and statistics."""

from __future__ import annotations

from rich import box
from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quiz_console.core.models import Question, QuizResult
from quiz_console.core.report import format_elapsed
from quiz_console.core.services.history_store import CategorySummary
from quiz_console.core.services.question_bank import BankStatistics
from quiz_console.core.services.scoring import grade, percentage, performance_message


def option_letter(index: int) -> str:
    return chr(ord("A") + index)


def render_question(question: Question, number: int, total: int) -> Panel:
    """Render a question with lettered options.

    Args:
        question: The question to show; its text is printed verbatim
        number: 1-indexed position of the question in the quiz
        total: Number of questions in the quiz

    Returns:
        Panel ready for ``Console.print``
    """
    options = Text()
    for idx, option in enumerate(question.options):
        options.append(f"{option_letter(idx)}) ", style="bold cyan")
        options.append(f"{option}\n")
    return Panel(
        Group(Text(question.text), Text(""), options),
        title=f"Question {number} of {total}",
        subtitle=f"Points: {question.points}",
        box=box.ROUNDED,
    )


def render_result_summary(result: QuizResult) -> Panel:
    table = Table(box=None, show_header=False, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Player", Text(result.player_name))
    table.add_row("Category", Text(result.category))
    table.add_row("Score", f"{result.total_score}/{result.max_possible_score}")
    table.add_row("Percentage", f"{percentage(result):.1f}%")
    table.add_row("Grade", grade(result))
    table.add_row("Correct Answers", f"{result.correct_answers}/{result.total_questions}")
    table.add_row("Time Taken", format_elapsed(result.elapsed_seconds))
    return Panel(
        Group(table, Text(""), Text(performance_message(result), style="italic")),
        title="🎉 QUIZ COMPLETED! 🎉",
        box=box.DOUBLE,
    )


def render_history(results: tuple[QuizResult, ...], average: float) -> Group:
    table = Table(title="Quiz History", box=box.SIMPLE_HEAVY)
    table.add_column("Player", max_width=14, no_wrap=True)
    table.add_column("Category")
    table.add_column("Score", justify="right")
    table.add_column("Percentage", justify="right")
    table.add_column("Grade", justify="center")
    table.add_column("Date")
    for result in results:
        table.add_row(
            Text(result.player_name),
            Text(result.category),
            f"{result.total_score}/{result.max_possible_score}",
            f"{percentage(result):.1f}%",
            grade(result),
            result.completion_timestamp.strftime("%Y-%m-%d %H:%M:%S"),
        )
    footer = Text(f"Total quizzes taken: {len(results)}\nAverage Performance: {average:.1f}%")
    return Group(table, footer)


def render_bank_statistics(stats: BankStatistics) -> Table:
    table = Table(
        title=f"Question Bank: {stats.total_questions} questions in {stats.category_count} categories",
        box=box.ROUNDED,
    )
    table.add_column("Category")
    table.add_column("Questions", justify="right")
    for category, count in stats.questions_per_category.items():
        table.add_row(Text(category), str(count))
    return table


def render_performance(
    attempts: int,
    best: QuizResult | None,
    summaries: list[CategorySummary],
) -> Group:
    lines = [Text(f"Total Quizzes Taken: {attempts}")]
    if best is not None:
        lines.append(
            Text(
                f"Best Performance: {percentage(best):.1f}% by {best.player_name} in {best.category}"
            )
        )
    table = Table(title="Performance by Category", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Average", justify="right")
    table.add_column("Attempts", justify="right")
    for summary in summaries:
        table.add_row(Text(summary.category), f"{summary.average_percentage:.1f}%", str(summary.attempts))
    return Group(*lines, table)


def render_search_results(keyword: str, questions: list[Question]) -> Table:
    table = Table(
        title=f"Found {len(questions)} question(s) matching '{escape(keyword)}'",
        box=box.ROUNDED,
        show_lines=True,
    )
    table.add_column("#", justify="right")
    table.add_column("Category")
    table.add_column("Question")
    table.add_column("Answer")
    table.add_column("Points", justify="right")
    for idx, question in enumerate(questions, start=1):
        table.add_row(
            str(idx),
            Text(question.category),
            Text(question.text),
            Text(question.correct_answer_text),
            str(question.points),
        )
    return table
