"""Service holding the mutable state of one quiz attempt."""

from __future__ import annotations

from quiz_battle.core.models import Question, Stage


class GameSession:
    """Tracks stage, question order, answer selection and score for a single player."""

    def __init__(self) -> None:
        self._stage: Stage = Stage.REGISTRATION
        self._player_name: str = ""
        self._question_order: list[Question] = []
        self._current_index: int = 0
        self._selected_answer: str | None = None
        self._answer_revealed: bool = False
        self._scored_current: bool = False
        self._score: int = 0
        self._last_error: str | None = None

    def reset(self, question_order: list[Question]) -> None:
        """Start a fresh attempt in the registration stage with a new question order."""
        if not question_order:
            raise ValueError("A session needs at least one question.")
        self._stage = Stage.REGISTRATION
        self._question_order = list(question_order)
        self._current_index = 0
        self._score = 0
        self._last_error = None
        self.reset_question_state()

    def reset_question_state(self) -> None:
        self._selected_answer = None
        self._answer_revealed = False
        self._scored_current = False

    # --- Stage ---

    def get_stage(self) -> Stage:
        return self._stage

    def begin(self) -> None:
        self._stage = Stage.IN_PROGRESS

    def mark_finished(self) -> None:
        self._stage = Stage.FINISHED

    # --- Player ---

    def get_player_name(self) -> str:
        return self._player_name

    def set_player_name(self, name: str) -> None:
        self._player_name = name

    # --- Questions ---

    def get_question_order(self) -> list[Question]:
        return list(self._question_order)

    def get_question_count(self) -> int:
        return len(self._question_order)

    def get_current_index(self) -> int:
        return self._current_index

    def get_current_question(self) -> Question | None:
        if not self._question_order:
            return None
        return self._question_order[self._current_index]

    def is_last_question(self) -> bool:
        return self._current_index == len(self._question_order) - 1

    def move_to_next_question(self) -> Question:
        if self.is_last_question():
            raise IndexError("Already at the last question.")
        self._current_index += 1
        self.reset_question_state()
        return self._question_order[self._current_index]

    # --- Answers and scoring ---

    def get_selected_answer(self) -> str | None:
        return self._selected_answer

    def select_answer(self, option: str) -> None:
        self._selected_answer = option

    def is_answer_revealed(self) -> bool:
        return self._answer_revealed

    def reveal_answer(self) -> None:
        self._answer_revealed = True

    def is_current_scored(self) -> bool:
        return self._scored_current

    def score_current_question(self) -> bool:
        """Score the current question once. Returns True if a point was awarded."""
        if self._scored_current:
            return False
        self._scored_current = True
        question = self.get_current_question()
        if question is not None and question.is_correct(self._selected_answer):
            self._score += 1
            return True
        return False

    def pending_point(self) -> int:
        """Point the current question would still add if it were scored now."""
        if self._scored_current:
            return 0
        question = self.get_current_question()
        return 1 if question is not None and question.is_correct(self._selected_answer) else 0

    def get_score(self) -> int:
        return self._score

    # --- Errors ---

    def get_last_error(self) -> str | None:
        return self._last_error

    def set_last_error(self, message: str | None) -> None:
        self._last_error = message
