from __future__ import annotations

from fastapi.testclient import TestClient

from gamehub.core.config import Settings
from gamehub.main import create_app

from .conftest import make_settings, signup


def test_static_files_are_served_behind_the_api(tmp_path, db_path):
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>Game Hub</h1>", encoding="utf-8")

    with TestClient(create_app(make_settings(db_path, static_dir=static_dir))) as client:
        root = client.get("/")
        assert root.status_code == 200
        assert "<h1>Game Hub</h1>" in root.text

        assert client.get("/index.html").status_code == 200
        assert client.get("/missing.css").status_code == 404

        assert signup(client).status_code == 201
        listed = client.get("/api/history/1")
        assert listed.status_code == 200
        assert listed.json() == []


def test_missing_static_dir_is_not_mounted(tmp_path, db_path):
    app = create_app(make_settings(db_path, static_dir=tmp_path / "nowhere"))

    assert "static" not in {getattr(route, "name", None) for route in app.routes}


def test_allowed_origins_from_environment_reach_cors(monkeypatch, db_path):
    monkeypatch.setenv("GAMEHUB_ALLOWED_ORIGINS", "http://play.test,http://other.test")
    settings = Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{db_path}", static_dir=None)

    with TestClient(create_app(settings)) as client:
        allowed = client.options(
            "/api/signup",
            headers={"Origin": "http://play.test", "Access-Control-Request-Method": "POST"},
        )
        assert allowed.status_code == 200
        assert allowed.headers["access-control-allow-origin"] == "http://play.test"

        refused = client.options(
            "/api/signup",
            headers={"Origin": "http://evil.test", "Access-Control-Request-Method": "POST"},
        )
        assert refused.status_code == 400
        assert "access-control-allow-origin" not in refused.headers
