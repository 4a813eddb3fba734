"""
Pydantic request/response schemas for the REST API.

Request DTOs are deliberately separate from the ORM entities: each one runs
its own validation pass and FastAPI turns failures into a 400 with one entry
per offending field. JSON uses camelCase (isActive, expiresAt, …) to match
the web client; snake_case field names are accepted on input as well.

Patch schemas forbid unknown keys, which is how `id` and `timestamp` are
rejected, and refuse an explicit null for columns that cannot be null.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel

from alerthub.app.alerts.lifecycle import as_utc
from alerthub.app.alerts.models import Severity
from alerthub.app.core.database import MAX_ROW_ID

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ContactType(str, Enum):
    EMERGENCY = "emergency"
    MEDICAL   = "medical"
    PERSONAL  = "personal"


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _decimal_string(value: Any) -> Optional[str]:
    """Accept a decimal as str/int/float and keep it as its string form."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("must be a decimal string")
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("must be a decimal string")
    value = value.strip()
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        raise ValueError("must be a decimal string") from None
    if not parsed.is_finite():
        raise ValueError("must be a finite decimal")
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may not be null")
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class PatchModel(CamelModel):
    """Partial update body: only fields the client actually sent count."""
    model_config = ConfigDict(extra="forbid")

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecordModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Alerts
# ---------------------------------------------------------------------------

_ACTIVE_ALIASES = AliasChoices("isActive", "active", "is_active")


class AlertCreate(CamelModel):
    """Body for POST /api/alerts."""
    title: NonEmptyStr = Field(..., examples=["Flood Watch"])
    description: NonEmptyStr = Field(..., examples=["Heavy rainfall may cause flooding."])
    severity: Severity = Field(..., examples=["watch"])
    type: NonEmptyStr = Field(..., examples=["flood"])
    location: NonEmptyStr = Field(..., examples=["San Francisco Bay Area"])
    latitude: Optional[str] = Field(None, examples=["37.7749"])
    longitude: Optional[str] = Field(None, examples=["-122.4194"])
    is_active: bool = Field(
        True, validation_alias=_ACTIVE_ALIASES, serialization_alias="isActive",
    )
    expires_at: Optional[datetime] = None
    image_url: Optional[str] = None
    action_url: Optional[str] = None

    _coords = field_validator("latitude", "longitude", mode="before")(_decimal_string)

    @field_validator("expires_at")
    @classmethod
    def _expires_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class AlertUpdate(PatchModel):
    """Body for PATCH /api/alerts/{id} — any subset of AlertCreate."""
    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    severity: Optional[Severity] = None
    type: Optional[NonEmptyStr] = None
    location: Optional[NonEmptyStr] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    is_active: Optional[bool] = Field(
        None, validation_alias=_ACTIVE_ALIASES, serialization_alias="isActive",
    )
    expires_at: Optional[datetime] = None
    image_url: Optional[str] = None
    action_url: Optional[str] = None

    _coords = field_validator("latitude", "longitude", mode="before")(_decimal_string)
    _required = field_validator(
        "title", "description", "severity", "type", "location", "is_active",
    )(_reject_null)

    @field_validator("expires_at")
    @classmethod
    def _expires_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class AlertOut(RecordModel):
    id: int
    title: str
    description: str
    severity: str
    type: str
    location: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    is_active: bool
    timestamp: datetime
    expires_at: Optional[datetime] = None
    image_url: Optional[str] = None
    action_url: Optional[str] = None

    @field_validator("timestamp", "expires_at")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


# ---------------------------------------------------------------------------
# Safety guides
# ---------------------------------------------------------------------------

class SafetyGuideCreate(CamelModel):
    """Body for POST /api/safety-guides."""
    title: NonEmptyStr = Field(..., examples=["Earthquake Safety"])
    description: NonEmptyStr = Field(..., examples=["Drop, cover, and hold on"])
    category: NonEmptyStr = Field(..., examples=["earthquake"])
    content: NonEmptyStr
    image_url: Optional[str] = None
    priority: int = Field(
        0, ge=-MAX_ROW_ID - 1, le=MAX_ROW_ID, description="Lower value is shown first",
    )


class SafetyGuideOut(RecordModel):
    id: int
    title: str
    description: str
    category: str
    content: str
    image_url: Optional[str] = None
    priority: int


# ---------------------------------------------------------------------------
# Emergency contacts
# ---------------------------------------------------------------------------

class EmergencyContactCreate(CamelModel):
    """Body for POST /api/emergency-contacts."""
    name: NonEmptyStr = Field(..., examples=["Poison Control"])
    phone: NonEmptyStr = Field(..., examples=["1-800-222-1222"])
    type: ContactType = Field(..., examples=["medical"])
    description: Optional[str] = None
    is_default: bool = False


class EmergencyContactUpdate(PatchModel):
    name: Optional[NonEmptyStr] = None
    phone: Optional[NonEmptyStr] = None
    type: Optional[ContactType] = None
    description: Optional[str] = None
    is_default: Optional[bool] = None

    _required = field_validator("name", "phone", "type", "is_default")(_reject_null)


class EmergencyContactOut(RecordModel):
    id: int
    name: str
    phone: str
    type: str
    description: Optional[str] = None
    is_default: bool


# ---------------------------------------------------------------------------
# User settings
# ---------------------------------------------------------------------------

class UserSettingsUpdate(PatchModel):
    """Body for PATCH /api/settings — upserted onto the singleton row."""
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    notifications_enabled: Optional[bool] = None
    dark_mode: Optional[bool] = None
    emergency_contact_id: Optional[int] = Field(None, ge=1, le=MAX_ROW_ID)

    _coords = field_validator("latitude", "longitude", mode="before")(_decimal_string)
    _required = field_validator("notifications_enabled", "dark_mode")(_reject_null)


class UserSettingsOut(RecordModel):
    id: int
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    notifications_enabled: bool
    dark_mode: bool
    emergency_contact_id: Optional[int] = None


# ---------------------------------------------------------------------------
# Emergency actions & reference data
# ---------------------------------------------------------------------------

class IncidentReportRequest(CamelModel):
    """Body for POST /api/emergency/report. Every field is optional."""
    type: Optional[str] = Field(None, examples=["flood"])
    description: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None

    _coords = field_validator("latitude", "longitude", mode="before")(_decimal_string)


class MessageResponse(BaseModel):
    message: str


class SeverityLevelOut(BaseModel):
    severity: str
    rank: int
    tone: str
    action: str
    label: str


class SafetyReferenceOut(CamelModel):
    safety_tips: Dict[str, List[str]]
    emergency_kit_essentials: List[str]
    evacuation_checklist: List[str]
    emergency_numbers: Dict[str, Dict[str, str]]
