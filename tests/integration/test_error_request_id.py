"""Tests for request_id in error responses and ambient response headers."""

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_not_found_includes_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/trpc/nonexistent.procedure")

    assert response.status_code == 404
    data = response.json()
    assert "detail" in data
    assert isinstance(data["request_id"], str)
    assert data["request_id"]


async def test_app_error_includes_code_and_request_id(client: AsyncClient) -> None:
    response = await client.get("/api/trpc/projects.list")

    assert response.status_code == 401
    data = response.json()
    assert data["code"] == "UNAUTHORIZED"
    assert data["request_id"] == response.headers["X-Request-ID"]


async def test_request_id_is_propagated(client: AsyncClient) -> None:
    request_id = "0f8fad5b-d9cb-469f-a165-70867728950e"

    response = await client.get(
        "/api/trpc/system.health", headers={"X-Request-ID": request_id}
    )

    assert response.headers["X-Request-ID"] == request_id


async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Content-Security-Policy" in response.headers
