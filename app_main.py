"""Application entry point for the quiz console."""

from __future__ import annotations

import logging
from pathlib import Path
import random
from typing import Optional

import typer
from rich.console import Console

from quiz_console.console import QuizConsoleApp
from quiz_console.constants.about import APP_NAME, APP_VERSION
from quiz_console.core.errors import QuizError
from quiz_console.core.quiz_manager import QuizManager
from quiz_console.utils.logging_config import configure_logging

app = typer.Typer(help=f"{APP_NAME} {APP_VERSION}: multiple-choice quizzes in the terminal.")


@app.command()
def main(
    questions: Optional[Path] = typer.Option(
        None, "--questions", "-q", help="Question file to load instead of the bundled bank."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible question order."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Load the question bank and start the interactive menu."""
    logger = configure_logging(logging.DEBUG if verbose else logging.WARNING)
    console = Console()

    quiz_manager = QuizManager(rng=random.Random(seed) if seed is not None else None)
    try:
        if questions is not None:
            quiz_manager.load_questions_from_file(questions)
        else:
            quiz_manager.load_default_questions()
    except QuizError as exc:
        logger.error("Could not load questions: %s", exc)
        console.print(f"[red]Could not load questions: {exc}[/red]")
        raise typer.Exit(1) from exc

    QuizConsoleApp(quiz_manager=quiz_manager, console=console).run()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
