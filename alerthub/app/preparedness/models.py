"""
Preparedness tables.

safety_guides       — guides are seeded/created and read; never edited or
                      deleted through the API.
emergency_contacts  — user-editable phone book; default contacts list first.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, Text

from alerthub.app.core.database import Base


class SafetyGuide(Base):
    __tablename__ = "safety_guides"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Text, nullable=False, index=True)  # earthquake, fire, flood, general
    content = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    priority = Column(Integer, nullable=False, default=0)  # lower shows first


class EmergencyContact(Base):
    __tablename__ = "emergency_contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    type = Column(Text, nullable=False)  # emergency, medical, personal
    description = Column(Text, nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
