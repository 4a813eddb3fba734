"""
Table: user_settings — at most one row.

The row always lives at primary key 1 (enforced by a check constraint), so a
second insert collides on the key instead of silently creating another
"first row".

emergency_contact_id is a soft reference: it is not a foreign key and is
never checked against emergency_contacts.
"""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, Text

from alerthub.app.core.database import Base

SINGLETON_ID = 1


class UserSettings(Base):
    __tablename__ = "user_settings"
    __table_args__ = (
        CheckConstraint(f"id = {SINGLETON_ID}", name="ck_user_settings_singleton"),
    )

    id = Column(Integer, primary_key=True, autoincrement=False, default=SINGLETON_ID)
    location = Column(Text, nullable=True)
    latitude = Column(Text, nullable=True)
    longitude = Column(Text, nullable=True)
    notifications_enabled = Column(Boolean, nullable=False, default=True)
    dark_mode = Column(Boolean, nullable=False, default=False)
    emergency_contact_id = Column(Integer, nullable=True)
