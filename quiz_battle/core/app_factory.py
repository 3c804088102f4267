"""Builds the controller and its collaborators from an ``AppConfig``."""

from __future__ import annotations

import logging
import random

from quiz_battle.core.question_bank import QuestionBank, default_question_bank
from quiz_battle.core.quiz_controller import Dispatcher, QuizController
from quiz_battle.core.quiz_importer import load_question_bank
from quiz_battle.core.services.leaderboard_client import HttpLeaderboardClient, LeaderboardService
from quiz_battle.core.services.local_leaderboard import LocalLeaderboardStore
from quiz_battle.server.leaderboard_server import local_api_url, start_leaderboard_server
from quiz_battle.utils.app_config import AppConfig

logger = logging.getLogger(__name__)


def build_question_bank(config: AppConfig) -> QuestionBank:
    """Load the configured question file, or fall back to the built-in bank."""
    if config.questions_file is None:
        return default_question_bank()
    bank = load_question_bank(config.questions_file)
    logger.info("Loaded %d questions from %s", len(bank), config.questions_file)
    return bank


def build_leaderboard_service(config: AppConfig, *, start_server: bool = True) -> LeaderboardService:
    """Pick the leaderboard backend the configuration asks for.

    The bundled server takes precedence; otherwise a configured file selects
    the local-only store; otherwise the remote HTTP service is used.
    """
    if config.serve_local_leaderboard:
        if start_server:
            store = LocalLeaderboardStore(config.local_leaderboard_file)
            start_leaderboard_server(store, host=config.local_host, port=config.local_port)
        url = local_api_url(config.local_host, config.local_port)
        logger.info("Using bundled leaderboard server at %s", url)
        return HttpLeaderboardClient(url, timeout=config.request_timeout_seconds)

    if config.leaderboard_file is not None:
        logger.info("Using local leaderboard file %s", config.leaderboard_file)
        return LocalLeaderboardStore(config.leaderboard_file)

    logger.info("Using remote leaderboard at %s", config.api_url)
    return HttpLeaderboardClient(config.api_url, timeout=config.request_timeout_seconds)


def build_controller(
    config: AppConfig,
    leaderboard: LeaderboardService,
    question_bank: QuestionBank | None = None,
    dispatch: Dispatcher | None = None,
) -> QuizController:
    bank = question_bank if question_bank is not None else build_question_bank(config)
    return QuizController(
        bank,
        leaderboard,
        reveal_answers=config.reveal_answers,
        rng=random.Random(config.shuffle_seed),
        dispatch=dispatch,
    )
