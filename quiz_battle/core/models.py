"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Stage(Enum):
    """Stage of a quiz session; drives which controller operations are valid."""

    REGISTRATION = "registration"
    IN_PROGRESS = "quiz"
    FINISHED = "results"


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: int
    prompt: str
    options: tuple[str, ...]
    correct_answer: str

    def is_correct(self, answer: str | None) -> bool:
        return answer is not None and answer == self.correct_answer


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """One ranked row as returned by the leaderboard service."""

    name: str
    score: int


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Read-only view of the controller state handed to the display layer."""

    stage: Stage
    player_name: str
    current_question: Question | None
    question_number: int
    total_questions: int
    selected_answer: str | None
    answer_revealed: bool
    score: int
    leaderboard: tuple[LeaderboardEntry, ...]
    busy: bool
    last_error: str | None
    reveal_answers: bool = True

    @property
    def is_last_question(self) -> bool:
        return self.total_questions > 0 and self.question_number == self.total_questions
