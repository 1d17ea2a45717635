# tests/test_main.py
"""Tests for the application-level endpoints."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == app.version
    assert body["database"] == "ok"


async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


async def test_metrics(client: AsyncClient) -> None:
    response = await client.get("/metrics")

    assert response.status_code == 200
    body = response.json()
    assert "api_metrics" in body
    assert "system_metrics" in body


def test_routes_are_registered() -> None:
    paths = {route.path for route in app.routes}
    assert {"/api/blogs", "/api/blogs/{blog_id}", "/api/users", "/api/login", "/api/stats"} <= paths


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
