"""Pydantic schemas for playing history."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class HistorySaveRequest(BaseModel):
    user_id: int | None = Field(default=None, alias="userId", ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)
    game_type: str | None = Field(default=None, alias="gameType")
    score: int | None = Field(default=None, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)

    model_config = ConfigDict(populate_by_name=True)

    @property
    def has_score(self) -> bool:
        """True when the body carried a ``score`` key, even as 0 or null."""
        return "score" in self.model_fields_set


class HistorySaveResponse(BaseModel):
    message: str
    history_id: int = Field(..., alias="historyId")

    model_config = ConfigDict(populate_by_name=True)


class HistoryEntryRead(BaseModel):
    id: int
    user_id: int
    game_type: str
    score: int | None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)
