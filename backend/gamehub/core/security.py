"""Security helpers for password hashing."""
from __future__ import annotations

from passlib.context import CryptContext

_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the time of a real verification when there is no hash to check."""
        _password_context.dummy_verify()
