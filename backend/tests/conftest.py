from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from gamehub.core.config import Settings
from gamehub.main import create_app


def make_settings(db_path: Path, **overrides) -> Settings:
    values = {"database_url": f"sqlite+aiosqlite:///{db_path}", "static_dir": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "gamehub-test.db"


@pytest.fixture
def client(db_path: Path):
    with TestClient(create_app(make_settings(db_path))) as test_client:
        yield test_client


@pytest.fixture
def drop_table(db_path: Path):
    """Drop a table behind the running app's back."""

    def _drop(name: str) -> None:
        engine = create_engine(f"sqlite:///{db_path}")
        with engine.begin() as conn:
            conn.exec_driver_sql(f"DROP TABLE {name}")
        engine.dispose()

    return _drop


def signup(client: TestClient, username: str = "alice", password: str = "pw1"):
    return client.post("/api/signup", json={"username": username, "password": password})
