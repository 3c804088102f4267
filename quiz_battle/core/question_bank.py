"""Immutable question bank handed to the quiz controller at startup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from quiz_battle.constants.quiz_constants import OPTIONS_PER_QUESTION
from quiz_battle.core.errors import QuestionBankError
from quiz_battle.core.models import Question


class QuestionBank:
    """Validated, read-only collection of quiz questions."""

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = tuple(self._prepare_question(q) for q in questions)
        if not prepared:
            raise QuestionBankError("Question bank must contain at least one question.")

        seen_ids: set[int] = set()
        for question in prepared:
            if question.id in seen_ids:
                raise QuestionBankError(f"Duplicate question id {question.id}.")
            seen_ids.add(question.id)

        self._questions = prepared

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def ids(self) -> set[int]:
        return {question.id for question in self._questions}

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __repr__(self) -> str:
        return f"QuestionBank({len(self._questions)} questions)"

    def _prepare_question(self, question: Question) -> Question:
        """Validate and normalize a question before storage."""
        options = self._validate_options(question.options)

        cleaned_prompt = question.prompt.strip()
        if not cleaned_prompt:
            raise QuestionBankError(f"Question {question.id} has an empty prompt.")

        correct_answer = question.correct_answer.strip()
        if correct_answer not in options:
            raise QuestionBankError(
                f"Correct answer '{correct_answer}' of question {question.id} is not one of its options."
            )

        return Question(
            id=question.id,
            prompt=cleaned_prompt,
            options=options,
            correct_answer=correct_answer,
        )

    @staticmethod
    def _validate_options(options: Iterable[str]) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) != OPTIONS_PER_QUESTION:
            raise QuestionBankError(f"Each question must have exactly {OPTIONS_PER_QUESTION} options.")
        if any(not option for option in cleaned):
            raise QuestionBankError("Option text cannot be empty.")
        if len(set(cleaned)) != len(cleaned):
            raise QuestionBankError("Options within a question must be distinct.")
        return cleaned


_DEFAULT_QUESTIONS: tuple[tuple[str, tuple[str, str, str, str], str], ...] = (
    (
        "Which IC is used for the AND gate in TTL logic?",
        ("7400", "7408", "7432", "7486"),
        "7408",
    ),
    (
        "Which TTL gate outputs high only when both inputs are low?",
        ("NAND", "NOR", "XOR", "OR"),
        "NOR",
    ),
    (
        "What does the 7400 IC represent?",
        ("AND Gate", "OR Gate", "NAND Gate", "XOR Gate"),
        "NAND Gate",
    ),
    (
        "Which component is essential for error detection in digital circuits?",
        ("XOR Gate", "AND Gate", "NOR Gate", "NOT Gate"),
        "XOR Gate",
    ),
    (
        "Which logic gate is the backbone of flip-flops and memory circuits?",
        ("AND", "NAND", "OR", "NOR"),
        "NAND",
    ),
    (
        "What is the main application of the full-adder?",
        ("Subtraction", "Multiplication", "Division", "Binary Addition"),
        "Binary Addition",
    ),
    (
        "How many XOR gates are needed to build a full-adder using TTL?",
        ("1", "2", "3", "4"),
        "2",
    ),
    (
        "In TTL circuits, what is the role of BJTs?",
        ("To filter noise", "To amplify power", "To switch signals", "To stabilize voltage"),
        "To switch signals",
    ),
    (
        "What is the main function of TTL logic in digital circuits?",
        ("Signal amplification", "Signal generation", "Logic switching", "Signal filtering"),
        "Logic switching",
    ),
    (
        "Which combination of gates is used to form the carry-out in a full-adder using TTL?",
        (
            "2 AND gates and 1 XOR gate",
            "2 OR gates and 1 AND gate",
            "2 XOR gates and 1 OR gate",
            "3 AND gates and 1 OR gate",
        ),
        "3 AND gates and 1 OR gate",
    ),
    (
        "What is the output of a full-adder when A = 1, B = 1, and Cin = 1?",
        ("Sum = 0, Carry = 0", "Sum = 1, Carry = 0", "Sum = 0, Carry = 1", "Sum = 1, Carry = 1"),
        "Sum = 1, Carry = 1",
    ),
    (
        "How does TTL differ from CMOS technology?",
        (
            "Uses diodes instead of BJTs",
            "Consumes more power but switches faster",
            "Uses MOSFETs instead of BJTs",
            "Consumes less power and switches slower",
        ),
        "Consumes more power but switches faster",
    ),
    (
        "What is the main characteristic of the 7408 IC in TTL circuits?",
        ("It is a NOT gate IC", "It is an AND gate IC", "It is an OR gate IC", "It is a XOR gate IC"),
        "It is an AND gate IC",
    ),
    (
        "How many gates are typically used to build a full-adder circuit?",
        ("3 gates", "4 gates", "5 gates", "6 gates"),
        "6 gates",
    ),
    (
        "How does a full-adder handle the carry from previous additions?",
        (
            "Uses the sum output",
            "Uses a dedicated carry-in input",
            "Ignores the carry",
            "Generates a random output",
        ),
        "Uses a dedicated carry-in input",
    ),
)


def default_question_bank() -> QuestionBank:
    """Return the built-in TTL logic question bank."""
    return QuestionBank(
        Question(id=index, prompt=prompt, options=options, correct_answer=correct)
        for index, (prompt, options, correct) in enumerate(_DEFAULT_QUESTIONS, start=1)
    )
