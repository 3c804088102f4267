"""Wire schemas shared by the leaderboard client and the bundled server."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from quiz_battle.core.models import LeaderboardEntry


class LeaderboardEntryPayload(BaseModel):
    """One ``{name, score}`` object of a leaderboard response."""

    name: str
    score: int

    def to_entry(self) -> LeaderboardEntry:
        return LeaderboardEntry(name=self.name, score=self.score)


class ScoreSubmission(BaseModel):
    """Payload schema for submitted scores."""

    name: str
    score: int = Field(ge=0)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped
