"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=_REPO_ROOT / ".env",
        env_file_encoding="utf-8",
        env_prefix="GAMEHUB_",
        extra="ignore",
    )

    app_name: str = "Game Hub"

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.db"
    sqlite_foreign_keys: bool = False  # SQLite leaves FK enforcement off unless asked

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    static_dir: Path | None = _REPO_ROOT / "static"
    # NoDecode lets _split_origins see the raw comma-separated env value
    allowed_origins: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
