"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    # Presence is checked by the service so the caller gets one clear message
    username: str | None = None
    password: str | None = None


class AccountResponse(BaseModel):
    message: str
    user_id: int = Field(..., alias="userId")
    username: str
    profile_pic: str = Field(..., alias="profilePic")

    model_config = ConfigDict(populate_by_name=True)
