"""Tests for application assembly: health, middleware and headers."""

from fastapi import status
from httpx import AsyncClient

from bloglist.middleware import REQUEST_ID_HEADER


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "connected"
        assert body["version"] == "1.0.0"


class TestMiddleware:
    async def test_request_id_generated(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.headers[REQUEST_ID_HEADER]

    async def test_request_id_propagated(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={REQUEST_ID_HEADER: "abc-123"})
        assert response.headers[REQUEST_ID_HEADER] == "abc-123"

    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
