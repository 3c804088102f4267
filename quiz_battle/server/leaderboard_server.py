"""FastAPI server exposing a local leaderboard with the remote service's interface."""

from __future__ import annotations

import logging
from threading import Thread
import time

from fastapi import Depends, FastAPI, HTTPException
import uvicorn

from quiz_battle.constants.network_constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    LEADERBOARD_PATH,
    SERVER_STARTUP_WAIT_SECONDS,
)
from quiz_battle.core.errors import RemoteFetchError, RemoteSubmitError
from quiz_battle.core.models import LeaderboardEntry
from quiz_battle.core.services.leaderboard_schemas import LeaderboardEntryPayload, ScoreSubmission
from quiz_battle.core.services.local_leaderboard import LocalLeaderboardStore
from quiz_battle.utils.app_config import AppConfig
from quiz_battle.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def _get_store_dependency(store: LocalLeaderboardStore):
    def dependency() -> LocalLeaderboardStore:
        return store

    return dependency


def _to_payloads(entries: list[LeaderboardEntry]) -> list[LeaderboardEntryPayload]:
    return [LeaderboardEntryPayload(name=entry.name, score=entry.score) for entry in entries]


def create_leaderboard_app(store: LocalLeaderboardStore) -> FastAPI:
    """Create a FastAPI application wired to the provided leaderboard store."""
    app = FastAPI(title="Quiz Battle Leaderboard", version="0.1.0")
    store_dep = _get_store_dependency(store)

    @app.get(f"{API_PREFIX}{LEADERBOARD_PATH}")
    def get_leaderboard(
        leaderboard: LocalLeaderboardStore = Depends(store_dep),
    ) -> list[LeaderboardEntryPayload]:
        try:
            return _to_payloads(leaderboard.fetch_top_scores())
        except RemoteFetchError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    @app.post(f"{API_PREFIX}{LEADERBOARD_PATH}")
    def submit_score(
        payload: ScoreSubmission,
        leaderboard: LocalLeaderboardStore = Depends(store_dep),
    ) -> list[LeaderboardEntryPayload]:
        try:
            entries = leaderboard.submit_score(payload.name, payload.score)
        except RemoteSubmitError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        logger.info("Recorded score %d for %r", payload.score, payload.name)
        return _to_payloads(entries)

    return app


def local_api_url(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> str:
    """Base URL a leaderboard client should use to reach this server."""
    client_host = "127.0.0.1" if host in ("0.0.0.0", "") else host
    return f"http://{client_host}:{port}{API_PREFIX}"


def start_leaderboard_server(
    store: LocalLeaderboardStore,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    wait_seconds: float = SERVER_STARTUP_WAIT_SECONDS,
) -> Thread:
    """Start the FastAPI server in a background daemon thread.

    Blocks for up to ``wait_seconds`` until uvicorn reports it is accepting
    connections, so the first leaderboard fetch does not race the startup.
    """
    app = create_leaderboard_app(store)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="LeaderboardServer", daemon=True)
    thread.start()

    deadline = time.monotonic() + wait_seconds
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        logger.warning("Leaderboard server on %s:%d did not report startup in time", host, port)
    return thread


def serve() -> None:
    """Run the leaderboard server in the foreground using ``QUIZ_BATTLE_*`` settings."""
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    store = LocalLeaderboardStore(config.local_leaderboard_file)
    logger.info("Serving leaderboard from %s on %s:%d", store.file_path, config.local_host, config.local_port)
    uvicorn.run(create_leaderboard_app(store), host=config.local_host, port=config.local_port, log_level="info")


if __name__ == "__main__":
    serve()
