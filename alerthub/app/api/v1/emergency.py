"""
FastAPI route: one-tap emergency actions.

Both endpoints acknowledge the request and log it; nothing is persisted and
no notification leaves the service.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter

from alerthub.app.api.schemas import IncidentReportRequest, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/emergency", tags=["emergency"])


@router.post("/check-in", response_model=MessageResponse, summary="Send a safety check-in")
async def check_in():
    logger.info("Safety check-in received")
    return MessageResponse(message="Check-in sent successfully")


@router.post("/report", response_model=MessageResponse, summary="Report an incident")
async def report_incident(request: Optional[IncidentReportRequest] = None):
    report = request or IncidentReportRequest()
    logger.info(
        "Incident report received: type=%s location=%s",
        report.type or "unspecified", report.location or "unspecified",
    )
    return MessageResponse(message="Incident reported successfully")
