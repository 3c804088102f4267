"""Tests for reading configuration from the environment."""

import logging
from pathlib import Path

from quiz_battle.constants.network_constants import DEFAULT_API_URL, DEFAULT_HOST, DEFAULT_PORT
from quiz_battle.styling.color_palette import Theme
from quiz_battle.utils.app_config import AppConfig


def test_defaults_from_empty_environment():
    config = AppConfig.from_env({})
    assert config == AppConfig()
    assert config.api_url == DEFAULT_API_URL
    assert config.request_timeout_seconds is None
    assert config.leaderboard_file is None
    assert config.serve_local_leaderboard is False
    assert config.local_host == DEFAULT_HOST
    assert config.local_port == DEFAULT_PORT
    assert config.reveal_answers is True
    assert config.log_level == "INFO"


def test_values_from_environment(tmp_path):
    env = {
        "QUIZ_BATTLE_API_URL": "http://localhost:9000/api",
        "QUIZ_BATTLE_TIMEOUT_SECONDS": "2.5",
        "QUIZ_BATTLE_LEADERBOARD_FILE": str(tmp_path / "board.json"),
        "QUIZ_BATTLE_LOCAL_SERVER": "yes",
        "QUIZ_BATTLE_HOST": "0.0.0.0",
        "QUIZ_BATTLE_PORT": "9001",
        "QUIZ_BATTLE_QUESTIONS_FILE": str(tmp_path / "q.txt"),
        "QUIZ_BATTLE_SHUFFLE_SEED": "42",
        "QUIZ_BATTLE_REVEAL_ANSWERS": "0",
        "QUIZ_BATTLE_LOG_LEVEL": "debug",
    }
    config = AppConfig.from_env(env)
    assert config.api_url == "http://localhost:9000/api"
    assert config.request_timeout_seconds == 2.5
    assert config.leaderboard_file == tmp_path / "board.json"
    assert config.local_leaderboard_file == tmp_path / "board.json"
    assert config.serve_local_leaderboard is True
    assert config.local_host == "0.0.0.0"
    assert config.local_port == 9001
    assert config.questions_file == tmp_path / "q.txt"
    assert config.shuffle_seed == 42
    assert config.reveal_answers is False
    assert config.log_level == "DEBUG"


def test_invalid_values_fall_back_with_warning(caplog):
    env = {
        "QUIZ_BATTLE_TIMEOUT_SECONDS": "soon",
        "QUIZ_BATTLE_PORT": "99999",
        "QUIZ_BATTLE_SHUFFLE_SEED": "abc",
        "QUIZ_BATTLE_REVEAL_ANSWERS": "maybe",
    }
    with caplog.at_level(logging.WARNING, logger="quiz_battle.utils.app_config"):
        config = AppConfig.from_env(env)

    assert config.request_timeout_seconds is None
    assert config.local_port == DEFAULT_PORT
    assert config.shuffle_seed is None
    assert config.reveal_answers is True
    assert len(caplog.records) == 4


def test_non_positive_timeout_ignored():
    assert AppConfig.from_env({"QUIZ_BATTLE_TIMEOUT_SECONDS": "0"}).request_timeout_seconds is None


def test_local_file_defaults_to_working_directory():
    assert AppConfig().local_leaderboard_file == Path.cwd() / "leaderboard.json"


def test_theme_from_environment():
    assert AppConfig.from_env({}).theme == Theme.LIGHT
    assert AppConfig.from_env({"QUIZ_BATTLE_THEME": "Dark"}).theme == Theme.DARK


def test_unknown_theme_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="quiz_battle.utils.app_config"):
        config = AppConfig.from_env({"QUIZ_BATTLE_THEME": "neon"})
    assert config.theme == Theme.LIGHT
    assert "neon" in caplog.text
