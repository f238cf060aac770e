from dataclasses import replace

import pytest
from httpx import AsyncClient

from lingam.app.api.deps import get_services
from lingam.app.core.security import create_access_token
from lingam.app.main import app


@pytest.mark.asyncio
async def test_token_exchange(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": "admin", "password": "test-admin-password"},
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["token_type"] == "bearer"
    assert "testimonial:moderate" in body["scopes"]

    headers = {"Authorization": f"Bearer {body['access_token']}"}
    assert (await client.get("/api/v1/appointments/", headers=headers)).status_code == 200


@pytest.mark.asyncio
async def test_wrong_password_rejected(client: AsyncClient):
    response = await client.post("/api/v1/auth/token", data={"username": "admin", "password": "guess"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    response = await client.get("/api/v1/customers/", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_missing_scope_forbidden(client: AsyncClient):
    token = create_access_token({"sub": "helper", "role": "helper", "scopes": ["appointment:read"]})
    headers = {"Authorization": f"Bearer {token}"}
    assert (await client.get("/api/v1/appointments/", headers=headers)).status_code == 200
    assert (await client.get("/api/v1/customers/", headers=headers)).status_code == 403


@pytest.mark.asyncio
async def test_store_info_public_read_admin_write(client: AsyncClient, admin_headers: dict):
    info = (await client.get("/api/v1/store-info")).json()
    assert info["name"] == "LINGAM Aabharanam"

    denied = await client.put("/api/v1/store-info", json={**info, "phone": "1"})
    assert denied.status_code == 401

    saved = await client.put("/api/v1/store-info", json={**info, "phone": "1"}, headers=admin_headers)
    assert saved.status_code == 200
    assert (await client.get("/api/v1/store-info")).json()["phone"] == "1"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_ready_checks_the_service_database(client: AsyncClient):
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "ok"


class _UnreachableStorage:
    async def ping(self):
        raise ConnectionError("database is down")


@pytest.mark.asyncio
async def test_ready_reports_unreachable_database(client: AsyncClient, services):
    app.dependency_overrides[get_services] = lambda: replace(services, storage=_UnreachableStorage())

    response = await client.get("/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "not_ready"
    assert "database is down" in body["checks"]["database"]
