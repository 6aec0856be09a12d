# tests/test_health.py

from unittest.mock import patch

from fastapi.testclient import TestClient

from main import create_app


def test_health_app(client: TestClient):
    response = client.get("/health/app")

    assert response.status_code == 200
    assert response.json() == {"service": "PropFlow API", "status": "ok"}


def test_health_db_not_configured(client: TestClient):
    with patch("routers.health.ping_supabase", return_value={"service": "Supabase", "status": "not_configured"}):
        response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json()["status"] == "not_configured"


def test_health_db_error(client: TestClient):
    with patch("routers.health.ping_supabase", side_effect=RuntimeError("boom")):
        response = client.get("/health/db")

    assert response.json() == {"service": "Supabase", "status": "error", "error": "boom"}


def test_app_starts_without_overrides(resolver):
    app = create_app(permission_resolver=resolver)

    with TestClient(app) as test_client:
        response = test_client.get("/health/app")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
