"""Health & Readiness Probes — liveness plus database and schema readiness.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable or any
      roommates table (users, profiles, groups, memberships) is missing
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import roommates.models  # noqa: F401  (registers every table on Base.metadata)
from roommates.db.base import Base
from roommates.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "roommates-api"


def _not_ready(reason: str, **details) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **details},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness_check():
    """Readiness: database reachable and migrations applied."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        return _not_ready("database_unavailable")

    missing = await manager.missing_tables(Base.metadata.tables)
    if missing:
        logger.warning(f"Readiness failed, missing tables: {', '.join(missing)}")
        return _not_ready("schema_missing", missing_tables=missing)

    return {
        "status": "ready",
        "service": SERVICE_NAME,
        "checks": {"database": "healthy", "schema": "healthy"},
    }
