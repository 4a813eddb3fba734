"""
lifecycle.py — Rules deciding which alerts are shown, and in what order.

An alert is *effectively active* when its stored flag is on and its
expiration, if any, lies strictly in the future. Expiration is evaluated at
read time only; nothing here writes back to the store.

Active alerts are ordered by severity rank:

    critical → 0    warning → 1    watch → 2    info → 3

The sort is stable, so alerts of equal severity keep the order the store
returned them in. A severity outside the vocabulary means validation was
bypassed somewhere upstream, so ranking raises instead of guessing.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Protocol, TypeVar

from alerthub.app.alerts.models import Severity

SEVERITY_RANK: Dict[str, int] = {
    Severity.CRITICAL.value: 0,
    Severity.WARNING.value: 1,
    Severity.WATCH.value: 2,
    Severity.INFO.value: 3,
}


class UnknownSeverityError(ValueError):
    """Raised when an alert carries a severity outside the vocabulary."""

    def __init__(self, severity: object):
        super().__init__(f"Unknown alert severity: {severity!r}")
        self.severity = severity


class _AlertLike(Protocol):
    is_active: bool
    expires_at: Optional[datetime]
    severity: str


A = TypeVar("A", bound=_AlertLike)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC (SQLite drops tzinfo on the way back)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def severity_rank(severity: object) -> int:
    """Rank of a severity value; lower is more urgent."""
    key = severity.value if isinstance(severity, Severity) else severity
    try:
        return SEVERITY_RANK[key]
    except (KeyError, TypeError):
        raise UnknownSeverityError(severity) from None


def is_effectively_active(alert: _AlertLike, now: Optional[datetime] = None) -> bool:
    if not alert.is_active:
        return False
    expires_at = as_utc(alert.expires_at)
    if expires_at is None:
        return True
    return expires_at > (as_utc(now) or datetime.now(timezone.utc))


def rank_active_alerts(alerts: Iterable[A], now: Optional[datetime] = None) -> List[A]:
    """Drop inactive/expired alerts, then stable-sort by severity rank."""
    now = as_utc(now) or datetime.now(timezone.utc)
    active = [a for a in alerts if is_effectively_active(a, now)]
    return sorted(active, key=lambda a: severity_rank(a.severity))
