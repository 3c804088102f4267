"""Utilities for importing a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

Example:

    Q: Which TTL gate outputs high only when both inputs are low?
    A: NAND
    B: NOR
    C: XOR
    D: OR
    CORRECT: B

Questions are numbered 1..N in file order; those numbers become the
question ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quiz_battle.core.errors import QuestionBankError, QuizError
from quiz_battle.core.models import Question
from quiz_battle.core.question_bank import QuestionBank


class QuizImportError(QuizError):
    """Raised when a question bank file cannot be parsed."""


@dataclass(slots=True)
class _ParsedBlock:
    prompt: str
    options: tuple[str, ...]
    correct_answer: str


_OPTION_ORDER = ["A", "B", "C", "D"]


def load_question_bank(file_path: Path) -> QuestionBank:
    text = file_path.read_text(encoding="utf-8")
    blocks = _parse_quiz_text(text)
    if not blocks:
        raise QuizImportError("Question file did not contain any questions.")

    questions = [
        Question(id=index, prompt=block.prompt, options=block.options, correct_answer=block.correct_answer)
        for index, block in enumerate(blocks, start=1)
    ]
    try:
        return QuestionBank(questions)
    except QuestionBankError as exc:
        raise QuizImportError(str(exc)) from exc


def _parse_quiz_text(text: str) -> list[_ParsedBlock]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> _ParsedBlock:
    prompt_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            prompt_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            prompt_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    if not prompt_lines:
        raise QuizImportError("Question text missing (Q: ...)")
    if len(options) != len(_OPTION_ORDER):
        raise QuizImportError("Each question must define exactly four options (A-D).")

    option_list = tuple(options[letter].strip() for letter in _OPTION_ORDER)
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError("Each question needs a CORRECT: line.")
    if correct_letter not in _OPTION_ORDER:
        raise QuizImportError("CORRECT must be one of A, B, C, or D.")

    prompt = "\n".join(prompt_lines).strip()
    if not prompt:
        raise QuizImportError("Question text cannot be empty.")

    return _ParsedBlock(
        prompt=prompt,
        options=option_list,
        correct_answer=option_list[_OPTION_ORDER.index(correct_letter)],
    )
