"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_request_id_is_echoed_or_generated(client: AsyncClient) -> None:
    """X-Request-ID is forwarded when safe and replaced when not."""
    forwarded = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert forwarded.headers["X-Request-ID"] == "abc-123"
    replaced = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id"})
    assert replaced.headers["X-Request-ID"] != "bad id"
    assert len(replaced.headers["X-Request-ID"]) == 36
