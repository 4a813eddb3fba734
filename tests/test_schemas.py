"""
test_schemas.py — Request DTO validation.

Run with:
    pytest tests/test_schemas.py -v
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from alerthub.app.api.schemas import (
    AlertCreate,
    AlertOut,
    AlertUpdate,
    EmergencyContactCreate,
    EmergencyContactUpdate,
    IncidentReportRequest,
    SafetyGuideCreate,
    UserSettingsUpdate,
)
from alerthub.app.core.errors import ValidationError


def _alert_body(**overrides):
    body = {
        "title": "Flood Watch",
        "description": "Heavy rain expected",
        "severity": "watch",
        "type": "flood",
        "location": "X",
    }
    body.update(overrides)
    return body


def _error_fields(exc: PydanticValidationError):
    return {str(err["loc"][0]) for err in exc.errors() if err["loc"]}


class TestAlertCreate:

    def test_minimal_body_gets_defaults(self):
        alert = AlertCreate.model_validate(_alert_body())
        assert alert.is_active is True
        assert alert.expires_at is None
        assert alert.severity == "watch"

    @pytest.mark.parametrize("field", ["title", "description", "severity", "type", "location"])
    def test_required_fields(self, field):
        body = _alert_body()
        del body[field]
        with pytest.raises(PydanticValidationError) as exc:
            AlertCreate.model_validate(body)
        assert field in _error_fields(exc.value)

    def test_blank_title_rejected(self):
        with pytest.raises(PydanticValidationError):
            AlertCreate.model_validate(_alert_body(title="   "))

    def test_unknown_severity_rejected(self):
        with pytest.raises(PydanticValidationError) as exc:
            AlertCreate.model_validate(_alert_body(severity="extreme"))
        assert "severity" in _error_fields(exc.value)

    def test_camel_case_input(self):
        alert = AlertCreate.model_validate(_alert_body(
            isActive=False, expiresAt="2030-01-01T00:00:00Z",
            imageUrl="https://img", actionUrl="/monitor",
        ))
        assert alert.is_active is False
        assert alert.expires_at == datetime(2030, 1, 1, tzinfo=timezone.utc)
        assert alert.image_url == "https://img"
        assert alert.action_url == "/monitor"

    def test_active_alias(self):
        assert AlertCreate.model_validate(_alert_body(active=False)).is_active is False

    def test_naive_expiration_becomes_utc(self):
        alert = AlertCreate.model_validate(_alert_body(expiresAt="2030-01-01T00:00:00"))
        assert alert.expires_at.tzinfo == timezone.utc

    def test_numeric_coordinates_kept_as_strings(self):
        alert = AlertCreate.model_validate(_alert_body(latitude=37.7749, longitude="-122.4194"))
        assert alert.latitude == "37.7749"
        assert alert.longitude == "-122.4194"

    def test_non_decimal_coordinates_rejected(self):
        with pytest.raises(PydanticValidationError) as exc:
            AlertCreate.model_validate(_alert_body(latitude="north"))
        assert "latitude" in _error_fields(exc.value)

    def test_dump_uses_column_names(self):
        dumped = AlertCreate.model_validate(_alert_body()).model_dump()
        assert set(dumped) == {
            "title", "description", "severity", "type", "location", "latitude",
            "longitude", "is_active", "expires_at", "image_url", "action_url",
        }


class TestAlertUpdate:

    def test_empty_patch_has_no_changes(self):
        assert AlertUpdate.model_validate({}).changes() == {}

    def test_only_sent_fields_are_changes(self):
        patch = AlertUpdate.model_validate({"isActive": False, "imageUrl": None})
        assert patch.changes() == {"is_active": False, "image_url": None}

    @pytest.mark.parametrize("field", ["id", "timestamp"])
    def test_immutable_fields_rejected(self, field):
        with pytest.raises(PydanticValidationError) as exc:
            AlertUpdate.model_validate({field: 1})
        assert exc.value.errors()[0]["type"] == "extra_forbidden"

    def test_null_required_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            AlertUpdate.model_validate({"title": None})

    def test_null_optional_field_allowed(self):
        patch = AlertUpdate.model_validate({"expiresAt": None})
        assert patch.changes() == {"expires_at": None}


class TestAlertOut:

    def test_serialises_camel_case(self):
        out = AlertOut.model_validate({
            "id": 1, "title": "t", "description": "d", "severity": "info",
            "type": "storm", "location": "X", "is_active": True,
            "timestamp": datetime(2026, 1, 1), "expires_at": None,
        })
        dumped = out.model_dump(by_alias=True)
        assert dumped["isActive"] is True
        assert "expiresAt" in dumped and "imageUrl" in dumped
        assert dumped["timestamp"].tzinfo == timezone.utc


class TestOtherSchemas:

    def test_guide_priority_defaults_to_zero(self):
        guide = SafetyGuideCreate.model_validate({
            "title": "t", "description": "d", "category": "general", "content": "c",
        })
        assert guide.priority == 0

    def test_guide_requires_content(self):
        with pytest.raises(PydanticValidationError):
            SafetyGuideCreate.model_validate({"title": "t", "description": "d", "category": "c"})

    def test_contact_type_enumerated(self):
        with pytest.raises(PydanticValidationError):
            EmergencyContactCreate.model_validate({"name": "n", "phone": "1", "type": "friend"})

    def test_contact_is_default_alias(self):
        contact = EmergencyContactCreate.model_validate(
            {"name": "n", "phone": "1", "type": "personal", "isDefault": True}
        )
        assert contact.is_default is True
        assert contact.type == "personal"

    def test_contact_patch_rejects_id(self):
        with pytest.raises(PydanticValidationError):
            EmergencyContactUpdate.model_validate({"id": 3})

    def test_settings_patch_rejects_null_flags(self):
        with pytest.raises(PydanticValidationError):
            UserSettingsUpdate.model_validate({"darkMode": None})

    def test_settings_patch_camel_case(self):
        patch = UserSettingsUpdate.model_validate(
            {"notificationsEnabled": False, "emergencyContactId": 99}
        )
        assert patch.changes() == {"notifications_enabled": False, "emergency_contact_id": 99}

    def test_incident_report_all_optional(self):
        assert IncidentReportRequest.model_validate({}).type is None


class TestValidationErrorConversion:

    def test_flattens_pydantic_errors(self):
        with pytest.raises(PydanticValidationError) as exc:
            AlertCreate.model_validate({"severity": "nope"})
        converted = ValidationError.from_pydantic(exc.value.errors(), "Invalid alert data")
        assert converted.status_code == 400
        assert converted.message == "Invalid alert data"
        fields = {e["field"] for e in converted.errors}
        assert {"title", "severity"} <= fields
        assert all(e["message"] for e in converted.errors)

    def test_strips_body_prefix(self):
        converted = ValidationError.from_pydantic([
            {"loc": ("body", "title"), "msg": "Field required", "type": "missing"},
        ])
        assert converted.errors == [
            {"field": "title", "message": "Field required", "type": "missing"},
        ]
