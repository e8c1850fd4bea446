from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from gamehub.core.config import Settings
from gamehub.db.bootstrap import create_tables
from gamehub.db.session import build_engine


class _UnwritableEngine:
    """Engine stand-in whose transactions never open."""

    def begin(self):
        return self._refuse()

    @asynccontextmanager
    async def _refuse(self):
        raise OperationalError("CREATE TABLE", {}, Exception("attempt to write a readonly database"))
        yield


def _table_names(settings: Settings) -> list[str]:
    async def _inspect():
        engine = build_engine(settings)
        try:
            async with engine.connect() as conn:
                return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        finally:
            await engine.dispose()

    return asyncio.run(_inspect())


def test_create_tables_is_idempotent(db_path):
    settings = Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{db_path}")

    async def _run_twice():
        engine = build_engine(settings)
        try:
            first = await create_tables(engine)
            second = await create_tables(engine)
        finally:
            await engine.dispose()
        return first, second

    first, second = asyncio.run(_run_twice())

    assert first == second == ["users", "playing_history"]
    assert sorted(_table_names(settings)) == ["playing_history", "users"]


def test_create_tables_logs_failures_and_continues(caplog):
    with caplog.at_level(logging.ERROR, logger="gamehub.db.bootstrap"):
        ready = asyncio.run(create_tables(_UnwritableEngine()))

    assert ready == []
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Error creating users table") for message in messages)
    assert any(message.startswith("Error creating playing_history table") for message in messages)


def test_app_starts_and_creates_tables(client, db_path):
    settings = Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{db_path}")

    assert sorted(_table_names(settings)) == ["playing_history", "users"]
