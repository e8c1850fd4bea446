"""Create-if-absent table bootstrap run at startup."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from gamehub.db.base import Base
import gamehub.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> list[str]:
    """Create each table independently and return the names that are ready.

    A table that cannot be created is logged and skipped; requests touching it
    fail on their own later.
    """

    ready: list[str] = []
    for table in Base.metadata.sorted_tables:
        try:
            async with engine.begin() as conn:
                await conn.run_sync(table.create, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.error("Error creating %s table: %s", table.name, exc)
            continue
        logger.info("%s table ready.", table.name)
        ready.append(table.name)
    return ready
