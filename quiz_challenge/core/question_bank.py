"""The fixed question bank and its validation.

The bank is static configuration: an ordered tuple of questions handed to the
controller at construction and never mutated afterwards.
"""

from __future__ import annotations

from typing import Iterable

from quiz_challenge.constants.quiz_constants import OPTIONS_PER_QUESTION
from quiz_challenge.core.models import Question


class QuestionBankError(ValueError):
    """Raised when a question bank is malformed."""


DEFAULT_QUESTION_BANK: tuple[Question, ...] = (
    Question(
        prompt="Which is the largest flower in the world?",
        options=("Sunflower", "Rafflesia", "Orchid", "Hibiscus"),
        correct_answer="Rafflesia",
    ),
    Question(
        prompt="Which language runs in the browser?",
        options=("Java", "C", "Python", "JavaScript"),
        correct_answer="JavaScript",
    ),
    Question(
        prompt="What does CSS stand for?",
        options=(
            "Creative Style Sheets",
            "Cascading Style Sheets",
            "Computer Style Sheets",
            "Colorful Style Sheets",
        ),
        correct_answer="Cascading Style Sheets",
    ),
    Question(
        prompt="What is the capital of South Korea?",
        options=("Riyadh", "Seoul", "Tokyo", "Madrid"),
        correct_answer="Seoul",
    ),
    Question(
        prompt="What is 22/11?",
        options=("2", "8", "12", "0"),
        correct_answer="2",
    ),
    Question(
        prompt="Which planet is known as the Red Planet?",
        options=("Earth", "Mars", "Jupiter", "Venus"),
        correct_answer="Mars",
    ),
    Question(
        prompt="What is the largest ocean on Earth?",
        options=("Atlantic Ocean", "Indian Ocean", "Arctic Ocean", "Pacific Ocean"),
        correct_answer="Pacific Ocean",
    ),
    Question(
        prompt="Who wrote 'Oliver Twist'?",
        options=("Charles Dickens", "William Shakespeare", "Jane Austen", "Mark Twain"),
        correct_answer="Charles Dickens",
    ),
    Question(
        prompt="What is the chemical formula of Sodium Chloride?",
        options=("O2", "CO2", "H2O", "NaCl"),
        correct_answer="NaCl",
    ),
    Question(
        prompt="How many bones are there in a human adult?",
        options=("200", "206", "204", "250"),
        correct_answer="206",
    ),
)


def validate_question_bank(questions: Iterable[Question]) -> tuple[Question, ...]:
    """Check every question and return the bank as an immutable tuple."""
    bank = tuple(questions)
    if not bank:
        raise QuestionBankError("Question bank must contain at least one question.")
    for index, question in enumerate(bank):
        _validate_question(index, question)
    return bank


def _validate_question(index: int, question: Question) -> None:
    number = index + 1
    if not question.prompt.strip():
        raise QuestionBankError(f"Question {number}: prompt must not be empty.")
    if len(question.options) != OPTIONS_PER_QUESTION:
        raise QuestionBankError(
            f"Question {number}: expected {OPTIONS_PER_QUESTION} options, got {len(question.options)}."
        )
    if any(not option.strip() for option in question.options):
        raise QuestionBankError(f"Question {number}: option text cannot be empty.")
    if len(set(question.options)) != len(question.options):
        raise QuestionBankError(f"Question {number}: options must be distinct.")
    if question.correct_answer not in question.options:
        raise QuestionBankError(
            f"Question {number}: correct answer {question.correct_answer!r} is not one of the options."
        )
