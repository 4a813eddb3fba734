"""
Repositories for safety guides and emergency contacts.

Guides expose create/read only. Contacts follow the same contracts as
alerts: partial update returns None for an unknown id, delete reports
whether a row was removed.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.api.schemas import (
    EmergencyContactCreate,
    EmergencyContactUpdate,
    SafetyGuideCreate,
)
from alerthub.app.core.database import is_storable_id, store_operation
from alerthub.app.preparedness.models import EmergencyContact, SafetyGuide

logger = logging.getLogger(__name__)


class SafetyGuideRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @store_operation("fetch safety guides")
    async def list_all(self) -> List[SafetyGuide]:
        result = await self.session.execute(
            select(SafetyGuide).order_by(SafetyGuide.priority, SafetyGuide.id)
        )
        return list(result.scalars().all())

    @store_operation("fetch safety guides")
    async def list_by_category(self, category: str) -> List[SafetyGuide]:
        """Exact, case-sensitive category match, ascending priority."""
        result = await self.session.execute(
            select(SafetyGuide)
            .where(SafetyGuide.category == category)
            .order_by(SafetyGuide.priority, SafetyGuide.id)
        )
        return list(result.scalars().all())

    @store_operation("fetch safety guide")
    async def get_by_id(self, guide_id: int) -> Optional[SafetyGuide]:
        if not is_storable_id(guide_id):
            return None
        return await self.session.get(SafetyGuide, guide_id)

    @store_operation("create safety guide")
    async def create(self, data: SafetyGuideCreate) -> SafetyGuide:
        guide = SafetyGuide(**data.model_dump())
        self.session.add(guide)
        await self.session.commit()
        await self.session.refresh(guide)
        logger.info(
            "Safety guide created: %s [%s]", guide.title, guide.category,
            extra={"entity": "safety_guide", "entity_id": guide.id},
        )
        return guide


def _contact_sort_key(contact: EmergencyContact):
    # Defaults first, then by name within each group.
    return (not contact.is_default, contact.name.casefold(), contact.name)


class EmergencyContactRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @store_operation("fetch emergency contacts")
    async def list_all(self) -> List[EmergencyContact]:
        result = await self.session.execute(
            select(EmergencyContact).order_by(EmergencyContact.id)
        )
        return sorted(result.scalars().all(), key=_contact_sort_key)

    @store_operation("fetch emergency contact")
    async def get_by_id(self, contact_id: int) -> Optional[EmergencyContact]:
        if not is_storable_id(contact_id):
            return None
        return await self.session.get(EmergencyContact, contact_id)

    @store_operation("create emergency contact")
    async def create(self, data: EmergencyContactCreate) -> EmergencyContact:
        contact = EmergencyContact(**data.model_dump())
        self.session.add(contact)
        await self.session.commit()
        await self.session.refresh(contact)
        logger.info(
            "Emergency contact created: %s", contact.name,
            extra={"entity": "emergency_contact", "entity_id": contact.id},
        )
        return contact

    @store_operation("update emergency contact")
    async def update(
        self, contact_id: int, patch: EmergencyContactUpdate,
    ) -> Optional[EmergencyContact]:
        if not is_storable_id(contact_id):
            return None
        contact = await self.session.get(EmergencyContact, contact_id)
        if contact is None:
            return None

        changes = patch.changes()
        if not changes:
            return contact

        for name, value in changes.items():
            setattr(contact, name, value)
        await self.session.commit()
        await self.session.refresh(contact)
        logger.info(
            "Emergency contact %s updated: %s", contact_id, sorted(changes),
            extra={"entity": "emergency_contact", "entity_id": contact_id},
        )
        return contact

    @store_operation("delete emergency contact")
    async def delete(self, contact_id: int) -> bool:
        if not is_storable_id(contact_id):
            return False
        result = await self.session.execute(
            delete(EmergencyContact).where(EmergencyContact.id == contact_id)
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0
