"""
Service health report behind /health and /health/ready.

Two probes are run in order:
    • database    — SELECT 1 round-trip; failure makes the service unhealthy
    • alert_data  — counts stored alerts; an empty table only degrades

The overall status is the worst component status.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List

from sqlalchemy import func, select

from alerthub.app.core import database
from alerthub.app.core.config import settings

logger = logging.getLogger(__name__)

_STARTED = time.monotonic()


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


_SEVERITY_ORDER = [HealthStatus.HEALTHY, HealthStatus.DEGRADED, HealthStatus.UNHEALTHY]


@dataclass
class ComponentHealth:
    name: str
    status: HealthStatus = HealthStatus.HEALTHY
    message: str = ""
    latency_ms: float = 0.0
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "latency_ms": round(self.latency_ms, 2),
        }
        if self.message:
            out["message"] = self.message
        if self.details:
            out["details"] = self.details
        return out


@dataclass
class HealthReport:
    components: List[ComponentHealth] = field(default_factory=list)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> HealthStatus:
        return max(
            (c.status for c in self.components),
            key=_SEVERITY_ORDER.index,
            default=HealthStatus.HEALTHY,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "timestamp": self.checked_at.isoformat(),
            "uptime_seconds": round(time.monotonic() - _STARTED, 1),
            "components": [c.to_dict() for c in self.components],
        }


async def _probe(name: str, check: Callable[[ComponentHealth], Awaitable[None]]) -> ComponentHealth:
    comp = ComponentHealth(name=name)
    started = time.perf_counter()
    await check(comp)
    comp.latency_ms = (time.perf_counter() - started) * 1000
    return comp


async def _check_database(comp: ComponentHealth) -> None:
    comp.details["url"] = settings.DATABASE_URL.rsplit("@", 1)[-1]
    try:
        await database.ping_db(database.engine)
    except Exception:
        logger.warning("Database probe failed", exc_info=True)
        comp.status = HealthStatus.UNHEALTHY
        comp.message = "database unreachable"
    else:
        comp.message = "reachable"


async def _check_alert_data(comp: ComponentHealth) -> None:
    from alerthub.app.alerts.models import Alert

    try:
        async with database.async_session_factory() as session:
            count = (await session.execute(select(func.count(Alert.id)))).scalar_one()
    except Exception:
        logger.warning("Alert data probe failed", exc_info=True)
        comp.status = HealthStatus.DEGRADED
        comp.message = "alert data unavailable"
        return

    comp.details["alerts"] = count
    if count == 0:
        comp.status = HealthStatus.DEGRADED
        comp.message = "no alerts stored"


async def run_health_check() -> HealthReport:
    report = HealthReport()
    report.components.append(await _probe("database", _check_database))
    report.components.append(await _probe("alert_data", _check_alert_data))
    return report
