"""Playing history endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.core.dependencies import get_db
from gamehub.schemas.history import HistoryEntryRead, HistorySaveRequest, HistorySaveResponse
from gamehub.services import history as history_service

router = APIRouter(prefix="/history", tags=["history"])


@router.post("/save", response_model=HistorySaveResponse, status_code=status.HTTP_201_CREATED)
async def save_history(
    payload: HistorySaveRequest,
    session: AsyncSession = Depends(get_db),
) -> HistorySaveResponse:
    entry = await history_service.save_history(session, payload)
    return HistorySaveResponse(message="Playing history saved successfully!", history_id=entry.id)


@router.get("/{user_id}", response_model=list[HistoryEntryRead])
async def list_history(user_id: str, session: AsyncSession = Depends(get_db)) -> list[HistoryEntryRead]:
    """List a user's games, most recent first."""
    entries = await history_service.list_history(session, user_id)
    return [HistoryEntryRead.model_validate(entry) for entry in entries]
