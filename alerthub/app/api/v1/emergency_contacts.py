"""
FastAPI route: emergency contacts (full CRUD).

Listing puts default contacts first, then the rest, each alphabetically.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.api.schemas import (
    EmergencyContactCreate,
    EmergencyContactOut,
    EmergencyContactUpdate,
)
from alerthub.app.core.database import get_db
from alerthub.app.core.errors import NotFoundError
from alerthub.app.preparedness.repository import EmergencyContactRepository

router = APIRouter(prefix="/api/emergency-contacts", tags=["emergency-contacts"])


def get_repository(db: AsyncSession = Depends(get_db)) -> EmergencyContactRepository:
    return EmergencyContactRepository(db)


@router.get("", response_model=List[EmergencyContactOut], summary="List contacts")
async def list_contacts(repo: EmergencyContactRepository = Depends(get_repository)):
    return await repo.list_all()


@router.get("/{contact_id}", response_model=EmergencyContactOut, summary="Get a contact")
async def get_contact(
    contact_id: int, repo: EmergencyContactRepository = Depends(get_repository),
):
    contact = await repo.get_by_id(contact_id)
    if contact is None:
        raise NotFoundError("Emergency contact", id=contact_id)
    return contact


@router.post(
    "",
    response_model=EmergencyContactOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a contact",
)
async def create_contact(
    request: EmergencyContactCreate,
    repo: EmergencyContactRepository = Depends(get_repository),
):
    return await repo.create(request)


@router.patch("/{contact_id}", response_model=EmergencyContactOut, summary="Update a contact")
async def update_contact(
    contact_id: int,
    request: EmergencyContactUpdate,
    repo: EmergencyContactRepository = Depends(get_repository),
):
    contact = await repo.update(contact_id, request)
    if contact is None:
        raise NotFoundError("Emergency contact", id=contact_id)
    return contact


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a contact",
)
async def delete_contact(
    contact_id: int, repo: EmergencyContactRepository = Depends(get_repository),
):
    if not await repo.delete(contact_id):
        raise NotFoundError("Emergency contact", id=contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
