"""Health probes — liveness always up, readiness follows the database and its schema."""

import roommates.infrastructure.database as db_module
from roommates.models import Membership


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy", "service": "roommates-api"}


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy", "schema": "healthy"}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_reports_missing_tables(client, test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Membership.__table__.drop)

    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    body = res.json()
    assert body["reason"] == "schema_missing"
    assert body["missing_tables"] == ["memberships"]
