"""
FastAPI route: safety guides (create and read only).

    GET  /api/safety-guides?category=  — all guides or one exact category
    GET  /api/safety-guides/{id}
    POST /api/safety-guides
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.api.schemas import SafetyGuideCreate, SafetyGuideOut
from alerthub.app.core.database import get_db
from alerthub.app.core.errors import NotFoundError
from alerthub.app.preparedness.repository import SafetyGuideRepository

router = APIRouter(prefix="/api/safety-guides", tags=["safety-guides"])


def get_repository(db: AsyncSession = Depends(get_db)) -> SafetyGuideRepository:
    return SafetyGuideRepository(db)


@router.get("", response_model=List[SafetyGuideOut], summary="List safety guides")
async def list_safety_guides(
    category: Optional[str] = Query(
        None, description="Exact, case-sensitive category filter", examples=["earthquake"],
    ),
    repo: SafetyGuideRepository = Depends(get_repository),
):
    if category:
        return await repo.list_by_category(category)
    return await repo.list_all()


@router.get("/{guide_id}", response_model=SafetyGuideOut, summary="Get a safety guide")
async def get_safety_guide(
    guide_id: int, repo: SafetyGuideRepository = Depends(get_repository),
):
    guide = await repo.get_by_id(guide_id)
    if guide is None:
        raise NotFoundError("Safety guide", id=guide_id)
    return guide


@router.post(
    "",
    response_model=SafetyGuideOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a safety guide",
)
async def create_safety_guide(
    request: SafetyGuideCreate, repo: SafetyGuideRepository = Depends(get_repository),
):
    return await repo.create(request)
