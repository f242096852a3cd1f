"""Liveness and database health endpoints."""

import time

from fastapi import APIRouter

from src.application.dto.responses import DatabaseHealthResponse, HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])

API_VERSION = "1.0.0"

_started = time.monotonic()


def _uptime() -> float:
    return time.monotonic() - _started


async def _probe_database() -> DatabaseHealthResponse:
    from src.infrastructure.storage.sqlite import get_pool

    started = time.monotonic()
    try:
        pool = await get_pool()
        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM schema_migrations")
            await cursor.fetchone()
    except Exception as e:
        return DatabaseHealthResponse(name="sqlite", available=False, error=str(e))

    return DatabaseHealthResponse(
        name="sqlite",
        available=True,
        latency_ms=(time.monotonic() - started) * 1000,
    )


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=API_VERSION, uptime_seconds=_uptime())


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """Round trip to the migrations table; unhealthy when it fails."""
    database = await _probe_database()
    return HealthResponse(
        status="healthy" if database.available else "unhealthy",
        version=API_VERSION,
        uptime_seconds=_uptime(),
        database=database,
    )
