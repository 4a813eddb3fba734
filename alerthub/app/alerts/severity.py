"""
severity.py — Display metadata derived from an alert's severity.

═══════════════════════════════════════════════════════════════════════════
SEVERITY → PRESENTATION
═══════════════════════════════════════════════════════════════════════════

    Severity    Rank    Tone        Suggested action
    ────────    ────    ─────────   ──────────────────
    critical    0       emergency   evacuation-routes
    warning     1       warning     safety-tips
    watch       2       info        monitor
    info        3       neutral     monitor

The web client colours cards and banners by tone and wires the card's
primary button to the suggested action. Nothing here is stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from alerthub.app.alerts.lifecycle import SEVERITY_RANK
from alerthub.app.alerts.models import Severity


@dataclass(frozen=True)
class SeverityDisplay:
    severity: Severity
    tone: str
    action: str
    label: str

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self.severity.value]

    def to_dict(self) -> Dict[str, object]:
        return {
            "severity": self.severity.value,
            "rank": self.rank,
            "tone": self.tone,
            "action": self.action,
            "label": self.label,
        }


SEVERITY_DISPLAY: Dict[Severity, SeverityDisplay] = {
    Severity.CRITICAL: SeverityDisplay(
        Severity.CRITICAL, tone="emergency", action="evacuation-routes",
        label="View Evacuation Routes",
    ),
    Severity.WARNING: SeverityDisplay(
        Severity.WARNING, tone="warning", action="safety-tips",
        label="Safety Tips",
    ),
    Severity.WATCH: SeverityDisplay(
        Severity.WATCH, tone="info", action="monitor",
        label="Monitor Conditions",
    ),
    Severity.INFO: SeverityDisplay(
        Severity.INFO, tone="neutral", action="monitor",
        label="Monitor Conditions",
    ),
}


def severity_levels() -> List[SeverityDisplay]:
    """All severities in rank order, most urgent first."""
    return sorted(SEVERITY_DISPLAY.values(), key=lambda d: d.rank)
