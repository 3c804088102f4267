"""Shared fixtures: a small question bank, a scripted leaderboard and dispatchers."""

from __future__ import annotations

from collections.abc import Callable
import random

import pytest

from quiz_battle.core.errors import RemoteFetchError, RemoteSubmitError
from quiz_battle.core.models import LeaderboardEntry, Question
from quiz_battle.core.question_bank import QuestionBank
from quiz_battle.core.quiz_controller import QuizController


class FakeLeaderboard:
    """In-memory leaderboard service with switchable failures."""

    def __init__(self, entries: list[LeaderboardEntry] | None = None) -> None:
        self.entries: list[LeaderboardEntry] = list(entries or [])
        self.fail_fetch = False
        self.fail_submit = False
        self.fetch_calls = 0
        self.submissions: list[dict[str, object]] = []

    def fetch_top_scores(self) -> list[LeaderboardEntry]:
        self.fetch_calls += 1
        if self.fail_fetch:
            raise RemoteFetchError("HTTP error! status: 500")
        return list(self.entries)

    def submit_score(self, name: str, score: int) -> list[LeaderboardEntry]:
        self.submissions.append({"name": name, "score": score})
        if self.fail_submit:
            raise RemoteSubmitError("HTTP error! status: 500")
        self.entries.append(LeaderboardEntry(name=name, score=score))
        self.entries.sort(key=lambda e: -e.score)
        return list(self.entries)


class DeferredDispatcher:
    """Queues jobs so a test decides when each remote call completes."""

    def __init__(self) -> None:
        self.jobs: list[Callable[[], None]] = []

    def __call__(self, job: Callable[[], None]) -> None:
        self.jobs.append(job)

    def run_next(self) -> None:
        self.jobs.pop(0)()

    def run_all(self) -> None:
        while self.jobs:
            self.run_next()


def run_inline(job: Callable[[], None]) -> None:
    job()


@pytest.fixture
def capitals_bank() -> QuestionBank:
    return QuestionBank(
        [
            Question(
                id=1,
                prompt="What is the capital of France?",
                options=("London", "Berlin", "Paris", "Madrid"),
                correct_answer="Paris",
            ),
            Question(
                id=2,
                prompt="Which planet is known as the Red Planet?",
                options=("Venus", "Mars", "Jupiter", "Saturn"),
                correct_answer="Mars",
            ),
            Question(
                id=3,
                prompt="Who painted the Mona Lisa?",
                options=("Vincent van Gogh", "Pablo Picasso", "Leonardo da Vinci", "Michelangelo"),
                correct_answer="Leonardo da Vinci",
            ),
        ]
    )


@pytest.fixture
def leaderboard() -> FakeLeaderboard:
    return FakeLeaderboard([LeaderboardEntry(name="Ada", score=3), LeaderboardEntry(name="Linus", score=1)])


@pytest.fixture
def make_controller(capitals_bank, leaderboard):
    """Factory for controllers over the capitals bank, seeded and dispatching inline by default."""

    def factory(**kwargs) -> QuizController:
        kwargs.setdefault("rng", random.Random(1234))
        kwargs.setdefault("dispatch", run_inline)
        return QuizController(kwargs.pop("bank", capitals_bank), kwargs.pop("service", leaderboard), **kwargs)

    return factory


@pytest.fixture
def deferred() -> DeferredDispatcher:
    return DeferredDispatcher()
