"""
repository.py — Typed CRUD over the alerts table plus the active query.

Every call re-queries the store; nothing is cached between calls. Absence is
signalled with None/False rather than an exception so the API layer decides
how to surface it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.alerts.lifecycle import rank_active_alerts
from alerthub.app.alerts.models import Alert
from alerthub.app.api.schemas import AlertCreate, AlertUpdate
from alerthub.app.core.database import is_storable_id, store_operation

logger = logging.getLogger(__name__)


class AlertRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @store_operation("fetch alerts")
    async def list_all(self) -> List[Alert]:
        """All alerts, newest first."""
        result = await self.session.execute(
            select(Alert).order_by(Alert.timestamp.desc(), Alert.id.desc())
        )
        return list(result.scalars().all())

    @store_operation("fetch active alerts")
    async def list_active(self, now: Optional[datetime] = None) -> List[Alert]:
        """
        Effectively-active alerts, most severe first.

        The flag is filtered in SQL; expiration and ranking are applied in
        memory so the comparison always happens against the current clock.
        """
        result = await self.session.execute(
            select(Alert)
            .where(Alert.is_active.is_(True))
            .order_by(Alert.timestamp.desc(), Alert.id.desc())
        )
        return rank_active_alerts(result.scalars().all(), now)

    @store_operation("fetch alert")
    async def get_by_id(self, alert_id: int) -> Optional[Alert]:
        if not is_storable_id(alert_id):
            return None
        return await self.session.get(Alert, alert_id)

    @store_operation("create alert")
    async def create(self, data: AlertCreate) -> Alert:
        alert = Alert(**data.model_dump())
        self.session.add(alert)
        await self.session.commit()
        await self.session.refresh(alert)
        logger.info(
            "Alert created: %s [%s]", alert.title, alert.severity,
            extra={"alert_id": alert.id, "severity": alert.severity},
        )
        return alert

    @store_operation("update alert")
    async def update(self, alert_id: int, patch: AlertUpdate) -> Optional[Alert]:
        if not is_storable_id(alert_id):
            return None
        alert = await self.session.get(Alert, alert_id)
        if alert is None:
            return None

        changes = patch.changes()
        if not changes:
            return alert

        for name, value in changes.items():
            setattr(alert, name, value)
        await self.session.commit()
        await self.session.refresh(alert)
        logger.info(
            "Alert %s updated: %s", alert_id, sorted(changes),
            extra={"alert_id": alert_id},
        )
        return alert

    @store_operation("delete alert")
    async def delete(self, alert_id: int) -> bool:
        if not is_storable_id(alert_id):
            return False
        result = await self.session.execute(delete(Alert).where(Alert.id == alert_id))
        await self.session.commit()
        removed = (result.rowcount or 0) > 0
        if removed:
            logger.info("Alert %s deleted", alert_id, extra={"alert_id": alert_id})
        return removed
