"""Service layer for playing history persistence."""
from __future__ import annotations

import logging
import re

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.core.errors import InternalError, ValidationError
from gamehub.models.history import PlayingHistory
from gamehub.schemas.history import SQLITE_INT_MAX, SQLITE_INT_MIN, HistorySaveRequest

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"-?[0-9]+")


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    return "foreign key constraint failed" in str(exc.orig).lower()


async def save_history(session: AsyncSession, data: HistorySaveRequest) -> PlayingHistory:
    # score may legitimately be 0 or null, only its absence is rejected
    if not data.user_id or not data.game_type or not data.has_score:
        raise ValidationError("Missing playing history data (userId, gameType, score).")

    entry = PlayingHistory(user_id=data.user_id, game_type=data.game_type, score=data.score)
    session.add(entry)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if _is_foreign_key_violation(exc):
            raise ValidationError("Unknown user.") from exc
        logger.error("Save history DB error: %s", exc.orig)
        raise InternalError("Error saving playing history.") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Save history DB error: %s", exc)
        raise InternalError("Error saving playing history.") from exc
    return entry


async def list_history(session: AsyncSession, user_id: str) -> list[PlayingHistory]:
    """Return a user's games, most recent first; unknown ids give an empty list."""

    if not _NUMERIC_ID.fullmatch(user_id):
        return []
    numeric_id = int(user_id)
    # no stored row can carry an id outside SQLite's INTEGER range
    if not SQLITE_INT_MIN <= numeric_id <= SQLITE_INT_MAX:
        return []

    try:
        result = await session.execute(
            select(PlayingHistory)
            .where(PlayingHistory.user_id == numeric_id)
            .order_by(PlayingHistory.timestamp.desc(), PlayingHistory.id.desc())
        )
    except SQLAlchemyError as exc:
        logger.error("Get history DB error: %s", exc)
        raise InternalError("Error retrieving playing history.") from exc
    return list(result.scalars().all())
