"""Health probes: liveness never consults the database, readiness does."""

from httpx import ASGITransport, AsyncClient


async def test_health_returns_ok(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_health_ok_without_database(records_app):
    """No db_manager bound at all: liveness still answers."""
    async with AsyncClient(
        transport=ASGITransport(app=records_app), base_url="http://test",
    ) as c:
        res = await c.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


async def test_ready_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["ok"] is True


async def test_ready_without_database_returns_503(records_app):
    async with AsyncClient(
        transport=ASGITransport(app=records_app), base_url="http://test",
    ) as c:
        res = await c.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"ok": False, "reason": "database_unavailable"}


async def test_health_available_in_blob_layout(blob_client):
    res = await blob_client.get("/health")
    assert res.json() == {"ok": True}
