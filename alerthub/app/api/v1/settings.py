"""
FastAPI route: user settings singleton.

    GET   /api/settings  — the row, or null before it has ever been written
    PATCH /api/settings  — upsert; no id, the singleton identity is implicit
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.api.schemas import UserSettingsOut, UserSettingsUpdate
from alerthub.app.core.database import get_db
from alerthub.app.preferences.repository import UserSettingsRepository

router = APIRouter(prefix="/api/settings", tags=["settings"])


def get_repository(db: AsyncSession = Depends(get_db)) -> UserSettingsRepository:
    return UserSettingsRepository(db)


@router.get("", response_model=Optional[UserSettingsOut], summary="Get user settings")
async def get_settings(repo: UserSettingsRepository = Depends(get_repository)):
    return await repo.get()


@router.patch("", response_model=UserSettingsOut, summary="Update user settings")
async def update_settings(
    request: UserSettingsUpdate,
    repo: UserSettingsRepository = Depends(get_repository),
):
    return await repo.update(request)
