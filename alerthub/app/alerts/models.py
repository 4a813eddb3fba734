"""
models.py — Alert entity and severity vocabulary.

═══════════════════════════════════════════════════════════════════════════
TABLE: alerts
═══════════════════════════════════════════════════════════════════════════

| Column      | Type        | Notes                                          |
|-------------|-------------|------------------------------------------------|
| id          | SERIAL PK   | assigned by the store, immutable               |
| title       | TEXT        | non-empty                                      |
| description | TEXT        | non-empty                                      |
| severity    | TEXT        | critical / warning / watch / info              |
| type        | TEXT        | free-text hazard category (wildfire, flood, …) |
| location    | TEXT        | non-empty label                                |
| latitude    | TEXT NULL   | decimal string                                 |
| longitude   | TEXT NULL   | decimal string                                 |
| is_active   | BOOLEAN     | default true, never flipped by expiration      |
| timestamp   | TIMESTAMPTZ | set once at insert                             |
| expires_at  | TIMESTAMPTZ | optional, evaluated at read time only          |
| image_url   | TEXT NULL   |                                                |
| action_url  | TEXT NULL   |                                                |

Severity is stored as text; the enum below is enforced by request schemas
before anything reaches the table.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, Integer, Text

from alerthub.app.core.database import Base


class Severity(str, Enum):
    """Alert severity, most urgent first."""
    CRITICAL = "critical"
    WARNING  = "warning"
    WATCH    = "watch"
    INFO     = "info"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    severity = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    latitude = Column(Text, nullable=True)
    longitude = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_now)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    image_url = Column(Text, nullable=True)
    action_url = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Alert id={self.id} severity={self.severity} title={self.title!r}>"
