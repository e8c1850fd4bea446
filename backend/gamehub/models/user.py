"""Database model for registered players."""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamehub.db.base import Base

DEFAULT_PROFILE_PIC = "/images/default-profile.png"


class User(Base):
    """Player account with hashed password and profile picture path."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    profile_pic_url: Mapped[str] = mapped_column(
        String, default=DEFAULT_PROFILE_PIC, server_default=DEFAULT_PROFILE_PIC
    )

    history: Mapped[list["PlayingHistory"]] = relationship(
        "PlayingHistory", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
