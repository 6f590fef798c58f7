import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from eduassess.core.config import Settings
from eduassess.main import create_app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "running" in response.json()["status"]


def test_health_endpoints(client):
    assert client.get("/health/live").json() == {"status": "ok"}
    # the two default categories are seeded at startup
    assert client.get("/health/db").json() == {"status": "ok", "categories": 2}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_settings_defaults(settings):
    assert settings.PORT == 5000
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 24 * 60
    assert settings.ALGORITHM == "HS256"


def test_settings_require_database_and_secret(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no .env file here
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings()


def test_seeding_can_be_disabled():
    settings = Settings(
        DATABASE_URL="sqlite:///:memory:",
        SECRET_KEY="test-secret-key",
        SEED_CATEGORIES=False,
        LOG_LEVEL="WARNING",
    )
    with TestClient(create_app(settings)) as client:
        admin = client.post(
            "/api/auth/register",
            json={"username": "A", "email": "a@school.edu", "password": "secret123", "role": "admin"},
        ).json()
        response = client.get(
            "/api/dashboard/categories", headers={"Authorization": f"Bearer {admin['token']}"}
        )

    assert response.json() == []
