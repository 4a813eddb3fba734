"""
FastAPI route: service metadata and health probes.

    GET /               — name, version, mounted API groups
    GET /health         — full report (always 200)
    GET /health/live    — process is up
    GET /health/ready   — 503 while the database is unreachable
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from alerthub.app.core.config import settings
from alerthub.app.core.health import HealthStatus, run_health_check

router = APIRouter(tags=["health"])

API_GROUPS = [
    "alerts",
    "safety-guides",
    "emergency-contacts",
    "settings",
    "emergency-actions",
    "reference",
]


@router.get("/", summary="Service information")
async def service_info():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "modules": API_GROUPS,
        "docs": "/docs",
    }


@router.get("/health", summary="Aggregated health report")
async def health():
    return (await run_health_check()).to_dict()


@router.get("/health/live", summary="Liveness probe")
async def live():
    return {"status": "alive"}


@router.get("/health/ready", summary="Readiness probe")
async def ready():
    report = await run_health_check()
    status_code = 503 if report.status is HealthStatus.UNHEALTHY else 200
    return JSONResponse(status_code=status_code, content=report.to_dict())
