"""Superficie común de la aplicación: raíz, sondas de salud y CORS."""

from beautyshop.core.config import settings
from beautyshop.main import app


async def test_root_welcome(client):
    res = await client.get("/")

    assert res.status_code == 200
    assert res.json() == {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


async def test_liveness(client):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(app.state, "db_manager", None)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_routes_without_database_return_error_body(client, monkeypatch):
    monkeypatch.setattr(app.state, "db_manager", None)

    res = await client.get("/categories")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


async def test_cors_allows_any_origin(client):
    res = await client.get("/categories", headers={"Origin": "https://shop.example.com"})

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
