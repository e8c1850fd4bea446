"""Database model for finished games."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamehub.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlayingHistory(Base):
    """One recorded game result for a player."""

    __tablename__ = "playing_history"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    game_type: Mapped[str] = mapped_column(String, nullable=False)
    score: Mapped[int | None] = mapped_column(Integer)
    # Python-side default keeps sub-second precision for ordering
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.current_timestamp()
    )

    user: Mapped["User"] = relationship("User", back_populates="history")
