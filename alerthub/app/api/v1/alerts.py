"""
FastAPI route: hazard alerts.

    GET    /api/alerts           — all alerts, newest first
    GET    /api/alerts/active    — effectively-active alerts, most severe first
    GET    /api/alerts/{id}      — one alert
    POST   /api/alerts           — create
    PATCH  /api/alerts/{id}      — partial update
    DELETE /api/alerts/{id}      — hard delete
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.alerts.repository import AlertRepository
from alerthub.app.api.schemas import AlertCreate, AlertOut, AlertUpdate
from alerthub.app.core.database import get_db
from alerthub.app.core.errors import NotFoundError

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


def get_repository(db: AsyncSession = Depends(get_db)) -> AlertRepository:
    return AlertRepository(db)


@router.get("", response_model=List[AlertOut], summary="List all alerts")
async def list_alerts(repo: AlertRepository = Depends(get_repository)):
    return await repo.list_all()


@router.get(
    "/active",
    response_model=List[AlertOut],
    summary="List active alerts",
    description=(
        "Alerts whose active flag is set and whose expiration, if any, is in "
        "the future — ordered critical, warning, watch, info."
    ),
)
async def list_active_alerts(repo: AlertRepository = Depends(get_repository)):
    return await repo.list_active()


@router.get("/{alert_id}", response_model=AlertOut, summary="Get an alert")
async def get_alert(alert_id: int, repo: AlertRepository = Depends(get_repository)):
    alert = await repo.get_by_id(alert_id)
    if alert is None:
        raise NotFoundError("Alert", id=alert_id)
    return alert


@router.post(
    "",
    response_model=AlertOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create an alert",
)
async def create_alert(
    request: AlertCreate, repo: AlertRepository = Depends(get_repository),
):
    return await repo.create(request)


@router.patch("/{alert_id}", response_model=AlertOut, summary="Update an alert")
async def update_alert(
    alert_id: int,
    request: AlertUpdate,
    repo: AlertRepository = Depends(get_repository),
):
    alert = await repo.update(alert_id, request)
    if alert is None:
        raise NotFoundError("Alert", id=alert_id)
    return alert


@router.delete(
    "/{alert_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an alert",
)
async def delete_alert(alert_id: int, repo: AlertRepository = Depends(get_repository)):
    if not await repo.delete(alert_id):
        raise NotFoundError("Alert", id=alert_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
