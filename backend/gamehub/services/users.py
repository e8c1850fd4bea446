"""User service functions for signup and authentication."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.core.errors import AuthError, ConflictError, InternalError, ValidationError
from gamehub.core.security import PasswordHasher
from gamehub.models.user import DEFAULT_PROFILE_PIC, User

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Username and password are required."
INVALID_CREDENTIALS = "Invalid username or password."


def _require_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    if not username or not password:
        raise ValidationError(MISSING_CREDENTIALS)
    return username, password


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "unique constraint failed" in message or "duplicate key" in message


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(session: AsyncSession, username: str | None, password: str | None) -> User:
    """Insert a new user; a taken username surfaces as ``ConflictError``."""

    username, password = _require_credentials(username, password)
    try:
        password_hash = PasswordHasher.hash(password)
    except Exception as exc:
        logger.exception("Password hashing error")
        raise InternalError("Internal server error during signup.") from exc

    user = User(username=username, password_hash=password_hash, profile_pic_url=DEFAULT_PROFILE_PIC)
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if is_unique_violation(exc):
            raise ConflictError("Username already exists.") from exc
        logger.error("Signup DB error: %s", exc.orig)
        raise InternalError("Error creating user.") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Signup DB error: %s", exc)
        raise InternalError("Error creating user.") from exc
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate_user(session: AsyncSession, username: str | None, password: str | None) -> User:
    """Return the user whose credentials match or raise ``AuthError``.

    Unknown usernames and wrong passwords produce the same error so callers
    cannot tell which check failed.
    """

    username, password = _require_credentials(username, password)
    try:
        user = await get_user_by_username(session, username)
    except SQLAlchemyError as exc:
        logger.error("Login DB error: %s", exc)
        raise InternalError("Internal server error.") from exc

    if not user:
        PasswordHasher.dummy_verify()
        raise AuthError(INVALID_CREDENTIALS)

    try:
        matches = PasswordHasher.verify(password, user.password_hash)
    except ValueError as exc:
        logger.error("Stored password hash for user id=%s is unreadable: %s", user.id, exc)
        raise InternalError("Internal server error.") from exc
    if not matches:
        raise AuthError(INVALID_CREDENTIALS)
    return user
