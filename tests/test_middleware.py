"""Middleware tests: request ID, CORS, error envelope."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient) -> None:
    """Request ID is auto-generated when not provided."""
    response = await client.get("/health")
    assert "x-request-id" in response.headers
    assert len(response.headers["x-request-id"]) == 36  # UUID format


@pytest.mark.asyncio
async def test_request_id_preserved(client: AsyncClient) -> None:
    """Custom request ID is echoed back in response."""
    response = await client.get("/health", headers={"X-Request-Id": "test-abc-123"})
    assert response.headers["x-request-id"] == "test-abc-123"


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient) -> None:
    response = await client.options(
        "/api/schools/search",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


@pytest.mark.asyncio
async def test_malformed_body_is_400(client: AsyncClient) -> None:
    response = await client.post("/api/schools", json={"name": "No district"})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid request data"
    assert data["errors"]


@pytest.mark.asyncio
@pytest.mark.parametrize("inbound", ["has spaces", "x" * 65, "semi;colon"])
async def test_unsafe_request_id_replaced(client: AsyncClient, inbound: str) -> None:
    response = await client.get("/health", headers={"X-Request-Id": inbound})
    request_id = response.headers["x-request-id"]
    assert request_id != inbound
    assert len(request_id) == 36


@pytest.mark.asyncio
async def test_cors_allows_admin_header(client: AsyncClient) -> None:
    response = await client.options(
        "/api/admin/schools",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "X-Admin-Code",
        },
    )
    assert response.status_code == 200
    assert "x-admin-code" in response.headers["access-control-allow-headers"].lower()
    assert "access-control-allow-credentials" not in response.headers


@pytest.mark.asyncio
async def test_cors_rejects_unknown_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/schools/search",
        headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 400
