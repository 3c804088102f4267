"""Pure mapping from a controller snapshot to what each screen shows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_battle.constants.ui_constants import (
    CHECK_ANSWER_BUTTON,
    FINISH_QUIZ_BUTTON,
    LEADERBOARD_EMPTY,
    NEXT_QUESTION_BUTTON,
    QUESTION_HEADING_TEMPLATE,
    REGISTRATION_HEADING,
    SCORE_TEMPLATE,
)
from quiz_battle.core.models import QuizSnapshot, Stage


class OptionStatus(Enum):
    """How an option is highlighted once the answer has been checked."""

    NEUTRAL = auto()
    CORRECT = auto()
    WRONG = auto()


@dataclass(frozen=True, slots=True)
class OptionView:
    text: str
    selected: bool
    status: OptionStatus


@dataclass(frozen=True, slots=True)
class RegistrationView:
    heading: str
    player_name: str
    error: str | None
    busy: bool
    stage: Stage = Stage.REGISTRATION


@dataclass(frozen=True, slots=True)
class QuestionView:
    heading: str
    question_id: int
    prompt: str
    options: tuple[OptionView, ...]
    options_enabled: bool
    action_label: str
    can_advance: bool
    error: str | None
    busy: bool
    stage: Stage = Stage.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class ResultsView:
    score_text: str
    leaderboard_rows: tuple[str, ...]
    empty_message: str | None
    loading: bool
    error: str | None
    stage: Stage = Stage.FINISHED


DisplayModel = RegistrationView | QuestionView | ResultsView


def build_display_model(snapshot: QuizSnapshot) -> DisplayModel:
    """Return the view model for the stage the snapshot is in."""
    if snapshot.stage == Stage.REGISTRATION:
        return RegistrationView(
            heading=REGISTRATION_HEADING,
            player_name=snapshot.player_name,
            error=snapshot.last_error,
            busy=snapshot.busy,
        )
    if snapshot.stage == Stage.IN_PROGRESS:
        return _build_question_view(snapshot)
    return _build_results_view(snapshot)


def _build_question_view(snapshot: QuizSnapshot) -> QuestionView:
    question = snapshot.current_question
    if question is None:
        raise ValueError("A snapshot in the quiz stage must carry the current question.")

    revealed = snapshot.answer_revealed
    options = tuple(
        OptionView(
            text=option,
            selected=option == snapshot.selected_answer,
            status=_option_status(option, question.correct_answer, snapshot.selected_answer, revealed),
        )
        for option in question.options
    )

    if not revealed and snapshot.selected_answer is None:
        can_advance = False
    else:
        can_advance = not snapshot.busy

    return QuestionView(
        heading=QUESTION_HEADING_TEMPLATE.format(
            number=snapshot.question_number, total=snapshot.total_questions
        ),
        question_id=question.id,
        prompt=question.prompt,
        options=options,
        options_enabled=not revealed and not snapshot.busy,
        action_label=_action_label(snapshot),
        can_advance=can_advance,
        error=snapshot.last_error,
        busy=snapshot.busy,
    )


def _option_status(option: str, correct: str, selected: str | None, revealed: bool) -> OptionStatus:
    if not revealed:
        return OptionStatus.NEUTRAL
    if option == correct:
        return OptionStatus.CORRECT
    if option == selected:
        return OptionStatus.WRONG
    return OptionStatus.NEUTRAL


def _action_label(snapshot: QuizSnapshot) -> str:
    if snapshot.reveal_answers and not snapshot.answer_revealed:
        return CHECK_ANSWER_BUTTON
    return FINISH_QUIZ_BUTTON if snapshot.is_last_question else NEXT_QUESTION_BUTTON


def _build_results_view(snapshot: QuizSnapshot) -> ResultsView:
    rows = tuple(f"{entry.name}: {entry.score}" for entry in snapshot.leaderboard)
    return ResultsView(
        score_text=SCORE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_questions),
        leaderboard_rows=rows,
        empty_message=None if rows else LEADERBOARD_EMPTY,
        loading=snapshot.busy,
        error=snapshot.last_error,
    )
