"""
User settings repository — get and upsert of the singleton row.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.api.schemas import UserSettingsUpdate
from alerthub.app.core.database import store_operation
from alerthub.app.preferences.models import SINGLETON_ID, UserSettings

logger = logging.getLogger(__name__)

# Values a freshly materialised row starts from before the patch is laid over.
DEFAULT_SETTINGS: Dict[str, Any] = {
    "location": None,
    "latitude": None,
    "longitude": None,
    "notifications_enabled": True,
    "dark_mode": False,
    "emergency_contact_id": None,
}


class UserSettingsRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @store_operation("fetch user settings")
    async def get(self) -> Optional[UserSettings]:
        return await self.session.get(UserSettings, SINGLETON_ID)

    @store_operation("update settings")
    async def update(self, patch: UserSettingsUpdate) -> UserSettings:
        """
        Upsert: create the row from defaults + patch when absent, otherwise
        patch it in place. Always returns the full record.
        """
        changes = patch.changes()
        current = await self.session.get(UserSettings, SINGLETON_ID)

        if current is None:
            created = UserSettings(id=SINGLETON_ID, **{**DEFAULT_SETTINGS, **changes})
            self.session.add(created)
            try:
                await self.session.commit()
            except IntegrityError:
                # Another request inserted the row first; patch that one.
                await self.session.rollback()
                logger.warning("Settings row appeared concurrently; patching it")
                current = await self.session.get(UserSettings, SINGLETON_ID)
            else:
                await self.session.refresh(created)
                logger.info(
                    "User settings created: %s", sorted(changes),
                    extra={"entity": "user_settings"},
                )
                return created

        if changes:
            for name, value in changes.items():
                setattr(current, name, value)
            await self.session.commit()
            await self.session.refresh(current)
            logger.info(
                "User settings updated: %s", sorted(changes),
                extra={"entity": "user_settings"},
            )
        return current
