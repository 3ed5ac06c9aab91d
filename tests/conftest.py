"""Shared fixtures for the quiz console tests."""

from __future__ import annotations

import random

import pytest

from quiz_console.core.models import Question
from quiz_console.core.services.question_bank import QuestionBank


@pytest.fixture
def science_question() -> Question:
    return Question(
        text="What is the chemical symbol for gold?",
        options=["Go", "Gd", "Au", "Ag"],
        correct_index=2,
        category="Science",
        points=10,
    )


@pytest.fixture
def mixed_questions() -> list[Question]:
    return [
        Question("Which keyword is used to create a class?", ["class", "new"], 0, "Java Programming", 10),
        Question("What does JVM stand for?", ["Java Virtual Machine", "Java Visual Manager"], 0, "Java Programming", 15),
        Question("What is the capital of France?", ["London", "Paris", "Madrid"], 1, "General Knowledge", 5),
        Question("Which planet is known as the Red Planet?", ["Venus", "Mars"], 1, "General Knowledge", 5),
        Question("What is the smallest unit of matter?", ["Molecule", "Atom"], 1, "Science", 10),
        Question("What is the result of 2^3 x 3^2?", ["36", "54", "72"], 2, "Mathematics", 20),
    ]


@pytest.fixture
def bank(mixed_questions: list[Question]) -> QuestionBank:
    question_bank = QuestionBank(rng=random.Random(1234))
    question_bank.add_all(mixed_questions)
    return question_bank
