"""System endpoints for Access Time API."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from access_time.api.v1.dependencies import ClockDep, SessionDep
from access_time.core.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration."""
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "debug": settings.debug,
        },
        "purchase": {
            "precheck_balance": settings.precheck_balance,
        },
    }


@router.get("/clock")
async def get_clock(clock: ClockDep) -> dict[str, int]:
    """Expose the server clock used for start, pause and remaining-time queries."""
    return {"now": clock.now()}


@router.get("/health")
async def get_system_health(db: SessionDep) -> dict[str, object]:
    """Health check including database connectivity."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        db_status = f"unhealthy: {e}"

    return {
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "components": {"database": db_status},
        "version": settings.app_version,
    }
