"""Tests for the snapshot to view-model mapping."""

import pytest

from quiz_battle.constants.ui_constants import (
    CHECK_ANSWER_BUTTON,
    FINISH_QUIZ_BUTTON,
    LEADERBOARD_EMPTY,
    NEXT_QUESTION_BUTTON,
    REGISTRATION_HEADING,
)
from quiz_battle.core.display_model import (
    OptionStatus,
    QuestionView,
    RegistrationView,
    ResultsView,
    build_display_model,
)
from quiz_battle.core.models import LeaderboardEntry, Question, QuizSnapshot, Stage

QUESTION = Question(
    id=7,
    prompt="Which planet is known as the Red Planet?",
    options=("Venus", "Mars", "Jupiter", "Saturn"),
    correct_answer="Mars",
)


def snapshot(**overrides):
    fields = {
        "stage": Stage.IN_PROGRESS,
        "player_name": "Grace",
        "current_question": QUESTION,
        "question_number": 1,
        "total_questions": 3,
        "selected_answer": None,
        "answer_revealed": False,
        "score": 0,
        "leaderboard": (),
        "busy": False,
        "last_error": None,
    }
    fields.update(overrides)
    return QuizSnapshot(**fields)


def test_registration_view():
    view = build_display_model(
        snapshot(stage=Stage.REGISTRATION, current_question=None, last_error="oops", busy=True)
    )
    assert isinstance(view, RegistrationView)
    assert view.stage == Stage.REGISTRATION
    assert view.heading == REGISTRATION_HEADING
    assert view.player_name == "Grace"
    assert view.error == "oops"
    assert view.busy is True


def test_question_before_selection():
    view = build_display_model(snapshot())
    assert isinstance(view, QuestionView)
    assert view.heading == "Question 1 of 3"
    assert view.action_label == CHECK_ANSWER_BUTTON
    assert view.can_advance is False
    assert view.options_enabled is True
    assert [o.text for o in view.options] == ["Venus", "Mars", "Jupiter", "Saturn"]
    assert {o.status for o in view.options} == {OptionStatus.NEUTRAL}


def test_question_with_selection_can_be_checked():
    view = build_display_model(snapshot(selected_answer="Venus"))
    assert view.can_advance is True
    assert [o.selected for o in view.options] == [True, False, False, False]
    assert {o.status for o in view.options} == {OptionStatus.NEUTRAL}


def test_revealed_wrong_answer_highlights_both():
    view = build_display_model(snapshot(selected_answer="Venus", answer_revealed=True))
    statuses = {o.text: o.status for o in view.options}
    assert statuses == {
        "Venus": OptionStatus.WRONG,
        "Mars": OptionStatus.CORRECT,
        "Jupiter": OptionStatus.NEUTRAL,
        "Saturn": OptionStatus.NEUTRAL,
    }
    assert view.options_enabled is False
    assert view.action_label == NEXT_QUESTION_BUTTON
    assert view.can_advance is True


def test_revealed_without_selection_can_still_advance():
    view = build_display_model(snapshot(answer_revealed=True))
    assert view.can_advance is True


def test_last_question_offers_finish():
    view = build_display_model(snapshot(question_number=3, selected_answer="Mars", answer_revealed=True))
    assert view.action_label == FINISH_QUIZ_BUTTON


@pytest.mark.parametrize("number, label", [(1, NEXT_QUESTION_BUTTON), (3, FINISH_QUIZ_BUTTON)])
def test_single_step_mode_skips_check_label(number, label):
    view = build_display_model(snapshot(question_number=number, reveal_answers=False))
    assert view.action_label == label


def test_busy_blocks_advancing():
    view = build_display_model(snapshot(selected_answer="Mars", answer_revealed=True, busy=True, question_number=3))
    assert view.can_advance is False
    assert view.busy is True


def test_question_stage_needs_question():
    with pytest.raises(ValueError):
        build_display_model(snapshot(current_question=None))


def test_results_view_lists_board():
    board = (LeaderboardEntry("Ada", 3), LeaderboardEntry("Grace", 2))
    view = build_display_model(
        snapshot(stage=Stage.FINISHED, current_question=None, question_number=3, score=2, leaderboard=board)
    )
    assert isinstance(view, ResultsView)
    assert view.score_text == "Your score: 2 out of 3"
    assert view.leaderboard_rows == ("Ada: 3", "Grace: 2")
    assert view.empty_message is None
    assert view.loading is False


def test_results_view_empty_board_with_error():
    view = build_display_model(
        snapshot(
            stage=Stage.FINISHED,
            current_question=None,
            score=1,
            last_error="Failed to update leaderboard. Your score: 1",
        )
    )
    assert view.leaderboard_rows == ()
    assert view.empty_message == LEADERBOARD_EMPTY
    assert view.error.endswith("1")
