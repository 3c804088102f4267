"""Clients for the remote leaderboard service."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import ValidationError as PayloadValidationError
import requests

from quiz_battle.constants.network_constants import LEADERBOARD_PATH
from quiz_battle.core.errors import RemoteFetchError, RemoteSubmitError
from quiz_battle.core.models import LeaderboardEntry
from quiz_battle.core.services.leaderboard_schemas import LeaderboardEntryPayload

logger = logging.getLogger(__name__)


class LeaderboardService(Protocol):
    """The two operations the quiz controller needs from a leaderboard."""

    def fetch_top_scores(self) -> list[LeaderboardEntry]:
        ...

    def submit_score(self, name: str, score: int) -> list[LeaderboardEntry]:
        ...


def parse_leaderboard(data: Any) -> list[LeaderboardEntry]:
    """Validate a decoded JSON leaderboard array and convert it to entries."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}.")
    return [LeaderboardEntryPayload.model_validate(item).to_entry() for item in data]


class HttpLeaderboardClient:
    """Talks to ``{base_url}/leaderboard`` over HTTP with requests."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def leaderboard_url(self) -> str:
        return f"{self.base_url}{LEADERBOARD_PATH}"

    def fetch_top_scores(self) -> list[LeaderboardEntry]:
        try:
            resp = self._session.get(self.leaderboard_url, timeout=self.timeout)
            resp.raise_for_status()
            return parse_leaderboard(resp.json())
        except (requests.RequestException, ValueError, PayloadValidationError) as exc:
            logger.warning("Error fetching leaderboard from %s: %s", self.leaderboard_url, exc)
            raise RemoteFetchError(f"Could not fetch leaderboard: {exc}") from exc

    def submit_score(self, name: str, score: int) -> list[LeaderboardEntry]:
        payload = {"name": name, "score": score}
        try:
            resp = self._session.post(self.leaderboard_url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            return parse_leaderboard(resp.json())
        except (requests.RequestException, ValueError, PayloadValidationError) as exc:
            logger.warning("Error updating leaderboard at %s: %s", self.leaderboard_url, exc)
            raise RemoteSubmitError(f"Could not submit score {score}: {exc}") from exc
