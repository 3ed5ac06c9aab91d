"""Utilities for importing questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    CATEGORY: Category name   (optional; carries over to later blocks)
    POINTS: integer           (optional; defaults to 10)
    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    ...                       (at least two options, consecutive from A)
    CORRECT: letter of the correct option

Example:

    CATEGORY: Science
    POINTS: 10
    Q: What is the chemical symbol for gold?
    A: Go
    B: Gd
    C: Au
    D: Ag
    CORRECT: C

A block holding only a CATEGORY line switches the category for the blocks
that follow it. The importer checks structure only; whether a parsed question
is acceptable (positive points and so on) is decided by the question bank.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from string import ascii_uppercase

from quiz_console.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from quiz_console.core.errors import QuestionImportError
from quiz_console.core.models import Question

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS_PATH = Path(__file__).resolve().parent.parent / "data" / "default_questions.txt"


@dataclass(slots=True)
class ImportedQuestions:
    """Container for imported questions and where they came from."""

    source_path: Path
    questions: list[Question]


def load_questions_from_file(file_path: Path) -> ImportedQuestions:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise QuestionImportError(f"Could not read question file '{file_path}'.") from exc
    questions = parse_questions(text)
    if not questions:
        raise QuestionImportError("Question file did not contain any questions.")
    logger.debug("Parsed %d questions from %s", len(questions), file_path)
    return ImportedQuestions(source_path=file_path, questions=questions)


def load_default_questions() -> ImportedQuestions:
    return load_questions_from_file(DEFAULT_QUESTIONS_PATH)


def parse_questions(text: str) -> list[Question]:
    questions: list[Question] = []
    category: str | None = None
    for block in _split_blocks(text):
        category, question = _parse_block(block, category)
        if question is not None:
            questions.append(question)
    return questions


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---" or not stripped:
            if current_block:
                blocks.append("\n".join(current_block))
                current_block = []
            continue
        current_block.append(raw_line)
    if current_block:
        blocks.append("\n".join(current_block))
    return blocks


def _parse_block(block: str, category: str | None) -> tuple[str | None, Question | None]:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    points = DEFAULT_QUESTION_POINTS
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        upper = line.upper()

        if upper.startswith("CATEGORY:"):
            category = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if upper.startswith("POINTS:"):
            raw_value = line.split(":", 1)[1].strip()
            try:
                points = int(raw_value)
            except ValueError as exc:
                raise QuestionImportError(f"POINTS must be an integer, got '{raw_value}'.") from exc
            current_section = None
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if len(line) >= 2 and line[0].upper() in ascii_uppercase and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionImportError(f"Encountered text outside of a known section: '{line}'.")

    if not question_lines and not options and correct_letter is None:
        # Header block that only switches category.
        return category, None

    if not question_lines:
        raise QuestionImportError("Question text missing (Q: ...)")
    if category is None:
        raise QuestionImportError("Question defined before any CATEGORY line.")

    letters = ascii_uppercase[: len(options)]
    if len(options) < 2 or set(options) != set(letters):
        raise QuestionImportError("Each question needs at least two options lettered consecutively from A.")
    if correct_letter is None:
        raise QuestionImportError("CORRECT line missing.")
    if correct_letter not in options:
        raise QuestionImportError(f"CORRECT must be one of {', '.join(letters)}.")

    question = Question(
        text="\n".join(question_lines).strip(),
        options=[options[letter].strip() for letter in letters],
        correct_index=letters.index(correct_letter),
        category=category,
        points=points,
    )
    return category, question
