"""
Health Check Endpoints.

- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

import time
from typing import Any

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

from notedesk.backend.core.database import get_session_factory
from notedesk.backend.core.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


async def check_database() -> dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict with status, latency, and optional error message
    """
    started = time.perf_counter()
    try:
        async with get_session_factory()() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {"status": "unhealthy", "error": str(e)}

    return {
        "status": "healthy",
        "latency_ms": int((time.perf_counter() - started) * 1000),
    }


@router.get("/health", summary="Liveness check")
async def health() -> dict[str, str]:
    """Report that the process is up."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def ready() -> dict[str, Any]:
    """Report whether the database can be reached."""
    database = await check_database()
    if database["status"] != "healthy":
        raise HTTPException(
            status_code=503,
            detail={"status": "unhealthy", "checks": {"database": database}},
        )
    return {"status": "healthy", "checks": {"database": database}}
