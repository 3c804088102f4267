"""Quiz session state machine shared between the UI and the leaderboard service."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
import itertools
import logging
import random
from threading import Lock, Thread

from quiz_battle.constants.quiz_constants import (
    FETCH_FAILED_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    SUBMIT_FAILED_TEMPLATE,
)
from quiz_battle.core.errors import (
    InvalidStateError,
    RemoteFetchError,
    RemoteSubmitError,
    ValidationError,
)
from quiz_battle.core.models import LeaderboardEntry, Question, QuizSnapshot, Stage
from quiz_battle.core.question_bank import QuestionBank
from quiz_battle.core.services.game_session import GameSession
from quiz_battle.core.services.leaderboard_client import LeaderboardService
from quiz_battle.core.shuffle import shuffle_questions

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None]], None]


def run_in_background(job: Callable[[], None]) -> None:
    """Run a leaderboard request on a daemon thread."""
    thread = Thread(target=job, name="LeaderboardRequest", daemon=True)
    thread.start()


class QuizController:
    """Drives one player through registration, the quiz, and the results.

    ``advance()`` works in one of two modes fixed at construction. With
    ``reveal_answers=True`` (the default) every question takes two calls:
    the first reveals and scores the selected answer, the second moves on.
    With ``reveal_answers=False`` a single call scores and moves on.

    Leaderboard requests run through ``dispatch`` outside the lock. Each
    request remembers the session generation it was issued for; responses
    that arrive after ``initialize()``/``restart()`` started a newer session
    are dropped, as is a fetch that resolves after the session's own score
    submission already replaced the leaderboard.

    ``advance()`` is a no-op outside the quiz stage and while the final
    score is being submitted. The other operations raise
    ``InvalidStateError`` when called in the wrong stage.
    """

    def __init__(
        self,
        question_bank: QuestionBank,
        leaderboard: LeaderboardService,
        *,
        reveal_answers: bool = True,
        rng: random.Random | None = None,
        dispatch: Dispatcher | None = None,
    ) -> None:
        self._lock = Lock()
        self._bank = question_bank
        self._leaderboard_service = leaderboard
        self._reveal_answers = reveal_answers
        self._rng = rng or random.Random()
        self._dispatch = dispatch or run_in_background

        self._session = GameSession()
        self._leaderboard: tuple[LeaderboardEntry, ...] = ()
        self._generation: int = 0
        self._request_ids = itertools.count(1)
        self._pending_requests: set[int] = set()
        self._latest_leaderboard_request: int | None = None
        self._submission_request: int | None = None

        self._reset_session()

    @property
    def reveal_answers(self) -> bool:
        return self._reveal_answers

    # --- Session lifecycle ---

    def initialize(self) -> None:
        """Shuffle a fresh session and request the current leaderboard."""
        with self._lock:
            generation, request_id = self._prepare_new_session()
        self._dispatch(partial(self._fetch_leaderboard, generation, request_id))

    def restart(self) -> None:
        """Play again: clear the player and start over from registration."""
        with self._lock:
            if self._session.get_stage() != Stage.FINISHED:
                raise InvalidStateError("The quiz can only be restarted once it is finished.")
            self._session.set_player_name("")
            generation, request_id = self._prepare_new_session()
        logger.info("Restarting quiz (session %d)", generation)
        self._dispatch(partial(self._fetch_leaderboard, generation, request_id))

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._rng.seed(seed)

    # --- Player actions ---

    def set_player_name(self, candidate: str) -> None:
        with self._lock:
            self._require_stage(Stage.REGISTRATION, "set the player name")
            self._session.set_player_name(candidate)

    def start_quiz(self) -> None:
        with self._lock:
            self._require_stage(Stage.REGISTRATION, "start the quiz")
            if not self._session.get_player_name().strip():
                self._session.set_last_error(NAME_REQUIRED_MESSAGE)
                raise ValidationError(NAME_REQUIRED_MESSAGE)
            self._session.begin()
            self._session.set_last_error(None)
            name = self._session.get_player_name()
        logger.info("Player %r started the quiz", name)

    def select_answer(self, option: str) -> None:
        with self._lock:
            self._require_stage(Stage.IN_PROGRESS, "select an answer")
            if self._submission_request is not None:
                raise InvalidStateError("The quiz is already being submitted.")
            if self._reveal_answers and self._session.is_answer_revealed():
                raise InvalidStateError("The answer to this question has already been checked.")
            question = self._session.get_current_question()
            if question is None or option not in question.options:
                raise ValidationError(f"'{option}' is not an option for the current question.")
            self._session.select_answer(option)

    def advance(self) -> None:
        """Check the current answer, or move to the next question, or finish."""
        with self._lock:
            stage = self._session.get_stage()
            if stage != Stage.IN_PROGRESS:
                logger.debug("advance() ignored in stage %s", stage.name)
                return
            if self._submission_request is not None:
                logger.debug("advance() ignored while the final score is being submitted")
                return

            if self._reveal_answers and not self._session.is_answer_revealed():
                self._session.reveal_answer()
                self._session.score_current_question()
                return

            if not self._session.is_last_question():
                self._session.score_current_question()
                self._session.move_to_next_question()
                return

            generation, request_id, name, final_score = self._begin_submission()

        logger.info("Quiz finished by %r with score %d; submitting", name, final_score)
        self._dispatch(partial(self._submit_score, generation, request_id, name, final_score))

    # --- Display boundary ---

    def get_snapshot(self) -> QuizSnapshot:
        with self._lock:
            session = self._session
            stage = session.get_stage()
            return QuizSnapshot(
                stage=stage,
                player_name=session.get_player_name(),
                current_question=session.get_current_question() if stage == Stage.IN_PROGRESS else None,
                question_number=session.get_current_index() + 1,
                total_questions=session.get_question_count(),
                selected_answer=session.get_selected_answer(),
                answer_revealed=session.is_answer_revealed(),
                score=session.get_score(),
                leaderboard=self._leaderboard,
                busy=bool(self._pending_requests),
                last_error=session.get_last_error(),
                reveal_answers=self._reveal_answers,
            )

    def get_question_order(self) -> list[Question]:
        with self._lock:
            return self._session.get_question_order()

    def get_stage(self) -> Stage:
        with self._lock:
            return self._session.get_stage()

    def is_busy(self) -> bool:
        with self._lock:
            return bool(self._pending_requests)

    # --- Internals (callers hold the lock unless noted) ---

    def _reset_session(self) -> None:
        self._generation += 1
        self._pending_requests.clear()
        self._latest_leaderboard_request = None
        self._submission_request = None
        self._session.reset(shuffle_questions(self._bank, self._rng))

    def _prepare_new_session(self) -> tuple[int, int]:
        self._reset_session()
        request_id = self._register_request()
        return self._generation, request_id

    def _register_request(self) -> int:
        request_id = next(self._request_ids)
        self._pending_requests.add(request_id)
        self._latest_leaderboard_request = request_id
        return request_id

    def _begin_submission(self) -> tuple[int, int, str, int]:
        final_score = self._session.get_score() + self._session.pending_point()
        self._session.score_current_question()
        request_id = self._register_request()
        self._submission_request = request_id
        return self._generation, request_id, self._session.get_player_name(), final_score

    def _require_stage(self, stage: Stage, action: str) -> None:
        current = self._session.get_stage()
        if current != stage:
            raise InvalidStateError(f"Cannot {action} while the session is in stage {current.name}.")

    def _fetch_leaderboard(self, generation: int, request_id: int) -> None:
        # Runs on the dispatcher, without the lock.
        entries: list[LeaderboardEntry] | None = None
        try:
            entries = self._leaderboard_service.fetch_top_scores()
        except RemoteFetchError as exc:
            logger.error("Error fetching leaderboard: %s", exc)
        finally:
            with self._lock:
                self._pending_requests.discard(request_id)
                if generation != self._generation or request_id != self._latest_leaderboard_request:
                    logger.info("Discarding stale leaderboard response (request %d)", request_id)
                elif entries is None:
                    self._session.set_last_error(FETCH_FAILED_MESSAGE)
                else:
                    self._leaderboard = tuple(entries)
                    if self._session.get_last_error() == FETCH_FAILED_MESSAGE:
                        self._session.set_last_error(None)

    def _submit_score(self, generation: int, request_id: int, name: str, final_score: int) -> None:
        # Runs on the dispatcher, without the lock.
        entries: list[LeaderboardEntry] | None = None
        try:
            entries = self._leaderboard_service.submit_score(name, final_score)
        except RemoteSubmitError as exc:
            logger.error("Error updating leaderboard: %s", exc)
        finally:
            with self._lock:
                self._pending_requests.discard(request_id)
                if generation != self._generation:
                    logger.info("Discarding submission result of an earlier session (request %d)", request_id)
                else:
                    self._submission_request = None
                    if entries is None:
                        self._session.set_last_error(SUBMIT_FAILED_TEMPLATE.format(score=final_score))
                    else:
                        self._leaderboard = tuple(entries)
                        self._session.set_last_error(None)
                    self._session.mark_finished()
