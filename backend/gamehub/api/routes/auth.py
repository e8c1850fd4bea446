"""Signup and login endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.core.dependencies import get_db
from gamehub.models.user import User
from gamehub.schemas.auth import AccountResponse, CredentialsRequest
from gamehub.services.users import authenticate_user, create_user

router = APIRouter(tags=["auth"])


def _account_response(user: User, message: str) -> AccountResponse:
    return AccountResponse(
        message=message,
        user_id=user.id,
        username=user.username,
        profile_pic=user.profile_pic_url,
    )


@router.post("/signup", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: CredentialsRequest, session: AsyncSession = Depends(get_db)) -> AccountResponse:
    user = await create_user(session, payload.username, payload.password)
    return _account_response(user, "User registered successfully!")


@router.post("/login", response_model=AccountResponse)
async def login(payload: CredentialsRequest, session: AsyncSession = Depends(get_db)) -> AccountResponse:
    user = await authenticate_user(session, payload.username, payload.password)
    return _account_response(user, "Login successful!")
