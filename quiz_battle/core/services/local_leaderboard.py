"""Leaderboard kept in a local JSON file.

Used both for the offline, local-only mode of the app and as the storage
behind the bundled leaderboard server. The file holds a JSON array of
``{"name": ..., "score": ...}`` objects already ranked by score.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock

from quiz_battle.constants.network_constants import LEADERBOARD_SIZE_LIMIT
from quiz_battle.core.errors import RemoteFetchError, RemoteSubmitError
from quiz_battle.core.models import LeaderboardEntry
from quiz_battle.core.services.leaderboard_client import parse_leaderboard

logger = logging.getLogger(__name__)


class LocalLeaderboardStore:
    """Ranks and persists the top scores in a JSON file."""

    def __init__(self, file_path: Path, limit: int = LEADERBOARD_SIZE_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("Leaderboard limit must be a positive integer.")
        self.file_path = file_path
        self.limit = limit
        self._lock = Lock()

    def fetch_top_scores(self) -> list[LeaderboardEntry]:
        with self._lock:
            try:
                return self._read()
            except (OSError, ValueError) as exc:
                logger.warning("Unable to read leaderboard file %s: %s", self.file_path, exc)
                raise RemoteFetchError(f"Could not read leaderboard file: {exc}") from exc

    def submit_score(self, name: str, score: int) -> list[LeaderboardEntry]:
        with self._lock:
            try:
                entries = self._read()
                entries.append(LeaderboardEntry(name=name, score=score))
                # sorted() is stable, so earlier entries keep their place on ties
                ranked = sorted(entries, key=lambda e: -e.score)[: self.limit]
                self._write(ranked)
                return ranked
            except (OSError, ValueError) as exc:
                logger.warning("Unable to update leaderboard file %s: %s", self.file_path, exc)
                raise RemoteSubmitError(f"Could not save score {score}: {exc}") from exc

    def clear(self) -> None:
        """Remove every stored score."""
        with self._lock:
            self._write([])

    def _read(self) -> list[LeaderboardEntry]:
        if not self.file_path.exists():
            return []
        text = self.file_path.read_text(encoding="utf-8")
        if not text.strip():
            return []
        return parse_leaderboard(json.loads(text))

    def _write(self, entries: list[LeaderboardEntry]) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        document = json.dumps([{"name": e.name, "score": e.score} for e in entries], indent=2)
        self.file_path.write_text(document + "\n", encoding="utf-8")
