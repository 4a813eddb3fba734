"""
FastAPI route: static preparedness reference data.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter

from alerthub.app.alerts.severity import severity_levels
from alerthub.app.api.schemas import SafetyReferenceOut, SeverityLevelOut
from alerthub.app.preparedness.reference import safety_reference

router = APIRouter(prefix="/api/reference", tags=["reference"])


@router.get(
    "/safety-tips",
    response_model=SafetyReferenceOut,
    summary="Safety tips, kit checklist and emergency numbers",
)
async def get_safety_tips():
    return safety_reference()


@router.get(
    "/severity-levels",
    response_model=List[SeverityLevelOut],
    summary="Severity ranking and display metadata",
)
async def get_severity_levels():
    return [level.to_dict() for level in severity_levels()]
