"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db.session import get_session


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a session from the storage handle the application was built with."""
    async with get_session(request.app.state.session_factory) as session:
        yield session
