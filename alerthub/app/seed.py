"""
Default dataset for a fresh deployment.

seed_default_data() is an explicit bootstrap step called once from the
application lifespan. It only writes when the alerts table is empty, so it is
safe to run on every start: the first run fills all four tables, later runs
are no-ops.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from alerthub.app.alerts.models import Alert
from alerthub.app.preferences.models import SINGLETON_ID, UserSettings
from alerthub.app.preparedness.models import EmergencyContact, SafetyGuide

logger = logging.getLogger(__name__)

_REGION = "San Francisco Bay Area"
_LAT, _LON = "37.7749", "-122.4194"
_UNSPLASH = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w={}&h={}"


def _default_alerts(now: datetime) -> List[Dict[str, Any]]:
    return [
        {
            "title": "Wildfire Evacuation Order",
            "description": "Immediate evacuation required for zones A-C. "
                           "Follow designated evacuation routes.",
            "severity": "critical",
            "type": "wildfire",
            "expires_at": now + timedelta(hours=24),
            "image_url": _UNSPLASH.format("photo-1504639725590-34d0984388bd", 400, 200),
            "action_url": "/evacuation-routes",
        },
        {
            "title": "Severe Wind Advisory",
            "description": "Wind speeds up to 65 mph expected. "
                           "Secure outdoor items and avoid travel.",
            "severity": "warning",
            "type": "storm",
            "expires_at": now + timedelta(hours=6),
            "image_url": _UNSPLASH.format("photo-1605727216801-e27ce1d0cc28", 400, 200),
            "action_url": "/safety-tips",
        },
        {
            "title": "Flood Watch",
            "description": "Heavy rainfall may cause flooding in low-lying areas. "
                           "Monitor conditions.",
            "severity": "watch",
            "type": "flood",
            "expires_at": now + timedelta(hours=12),
            "image_url": _UNSPLASH.format("photo-1547036967-23d11aacaee0", 400, 200),
            "action_url": "/monitor",
        },
    ]


_DEFAULT_GUIDES: List[Dict[str, Any]] = [
    {
        "title": "Emergency Kit Essentials",
        "description": "72-hour supply checklist",
        "category": "general",
        "content": "Essential items for emergency preparedness including water, food, "
                   "medications, flashlight, radio, batteries, first aid kit, and "
                   "important documents.",
        "image_url": _UNSPLASH.format("photo-1584464491033-06628f3a6b7b", 80, 80),
        "priority": 1,
    },
    {
        "title": "Earthquake Safety",
        "description": "Drop, cover, and hold on",
        "category": "earthquake",
        "content": "During an earthquake: Drop to your hands and knees, take cover under "
                   "a sturdy desk or table, and hold on until shaking stops.",
        "image_url": _UNSPLASH.format("photo-1551601651-2a8555f1a136", 80, 80),
        "priority": 2,
    },
    {
        "title": "Evacuation Planning",
        "description": "Routes and meeting points",
        "category": "general",
        "content": "Plan multiple evacuation routes from your home and workplace. "
                   "Designate meeting points for family members.",
        "image_url": _UNSPLASH.format("photo-1571019613454-1cb2f99b2d8b", 80, 80),
        "priority": 3,
    },
]

_DEFAULT_CONTACTS: List[Dict[str, Any]] = [
    {
        "name": "Emergency Services",
        "phone": "911",
        "type": "emergency",
        "description": "Fire, Police, Medical Emergency",
        "is_default": True,
    },
    {
        "name": "Poison Control",
        "phone": "1-800-222-1222",
        "type": "medical",
        "description": "24/7 poison information and treatment advice",
        "is_default": True,
    },
    {
        "name": "Emergency Contact",
        "phone": "(555) 123-4567",
        "type": "personal",
        "description": "Mom",
        "is_default": False,
    },
]


async def seed_default_data(session: AsyncSession) -> bool:
    """Insert the default dataset if no alert exists yet. Returns True if it seeded."""
    existing = await session.execute(select(Alert.id).limit(1))
    if existing.first() is not None:
        logger.info("Alerts present — skipping default data seed", extra={"seeded": False})
        return False

    now = datetime.now(timezone.utc)
    session.add_all(
        Alert(location=_REGION, latitude=_LAT, longitude=_LON, is_active=True, **fields)
        for fields in _default_alerts(now)
    )
    session.add_all(SafetyGuide(**fields) for fields in _DEFAULT_GUIDES)

    contacts = [EmergencyContact(**fields) for fields in _DEFAULT_CONTACTS]
    session.add_all(contacts)
    await session.flush()

    if await session.get(UserSettings, SINGLETON_ID) is None:
        personal = next(c for c in contacts if c.type == "personal")
        session.add(UserSettings(
            id=SINGLETON_ID,
            location="San Francisco, CA",
            latitude=_LAT,
            longitude=_LON,
            notifications_enabled=True,
            dark_mode=False,
            emergency_contact_id=personal.id,
        ))

    await session.commit()
    logger.info(
        "Seeded default data: %d alerts, %d guides, %d contacts",
        len(_default_alerts(now)), len(_DEFAULT_GUIDES), len(_DEFAULT_CONTACTS),
        extra={"seeded": True},
    )
    return True
