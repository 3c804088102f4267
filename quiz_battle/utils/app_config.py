"""Runtime configuration read from ``QUIZ_BATTLE_*`` environment variables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
import os
from pathlib import Path

from quiz_battle.constants.network_constants import (
    DEFAULT_API_URL,
    DEFAULT_HOST,
    DEFAULT_LEADERBOARD_FILE,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from quiz_battle.styling.color_palette import Theme

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings the entry point needs to wire the application together."""

    api_url: str = DEFAULT_API_URL
    request_timeout_seconds: float | None = DEFAULT_REQUEST_TIMEOUT_SECONDS
    leaderboard_file: Path | None = None
    serve_local_leaderboard: bool = False
    local_host: str = DEFAULT_HOST
    local_port: int = DEFAULT_PORT
    questions_file: Path | None = None
    shuffle_seed: int | None = None
    reveal_answers: bool = True
    log_level: str = "INFO"
    theme: Theme = Theme.LIGHT

    @property
    def local_leaderboard_file(self) -> Path:
        """File backing the bundled server, also used when none is configured."""
        return self.leaderboard_file or Path.cwd() / DEFAULT_LEADERBOARD_FILE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ

        timeout = _parse_float(env, "QUIZ_BATTLE_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS)
        if timeout is not None and timeout <= 0:
            logger.warning("Ignoring non-positive QUIZ_BATTLE_TIMEOUT_SECONDS=%s", timeout)
            timeout = DEFAULT_REQUEST_TIMEOUT_SECONDS

        port = _parse_int(env, "QUIZ_BATTLE_PORT", DEFAULT_PORT)
        if port is None or not 0 < port < 65536:
            logger.warning("Ignoring out-of-range QUIZ_BATTLE_PORT=%s", port)
            port = DEFAULT_PORT

        return cls(
            api_url=env.get("QUIZ_BATTLE_API_URL", "").strip() or DEFAULT_API_URL,
            request_timeout_seconds=timeout,
            leaderboard_file=_parse_path(env, "QUIZ_BATTLE_LEADERBOARD_FILE"),
            serve_local_leaderboard=_parse_bool(env, "QUIZ_BATTLE_LOCAL_SERVER", False),
            local_host=env.get("QUIZ_BATTLE_HOST", "").strip() or DEFAULT_HOST,
            local_port=port,
            questions_file=_parse_path(env, "QUIZ_BATTLE_QUESTIONS_FILE"),
            shuffle_seed=_parse_int(env, "QUIZ_BATTLE_SHUFFLE_SEED", None),
            reveal_answers=_parse_bool(env, "QUIZ_BATTLE_REVEAL_ANSWERS", True),
            log_level=env.get("QUIZ_BATTLE_LOG_LEVEL", "").strip().upper() or "INFO",
            theme=_parse_theme(env, "QUIZ_BATTLE_THEME", Theme.LIGHT),
        )


def _parse_int(env: Mapping[str, str], key: str, default: int | None) -> int | None:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid integer %s=%r", key, raw)
        return default


def _parse_float(env: Mapping[str, str], key: str, default: float | None) -> float | None:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid number %s=%r", key, raw)
        return default


def _parse_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logger.warning("Ignoring invalid flag %s=%r", key, raw)
    return default


def _parse_path(env: Mapping[str, str], key: str) -> Path | None:
    raw = env.get(key, "").strip()
    return Path(raw).expanduser() if raw else None


def _parse_theme(env: Mapping[str, str], key: str, default: Theme) -> Theme:
    raw = env.get(key, "").strip().upper()
    if not raw:
        return default
    try:
        return Theme[raw]
    except KeyError:
        logger.warning("Ignoring unknown theme %s=%r", key, raw.lower())
        return default
