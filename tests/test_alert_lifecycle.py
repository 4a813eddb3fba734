"""
test_alert_lifecycle.py — Active-alert predicate and severity ranking.

Covers:
    • Severity rank table and fail-fast on unknown values
    • Effectively-active predicate (flag × expiration, naive timestamps)
    • Ranking: filtering, non-decreasing rank, stability on ties
    • Severity display metadata

Run with:
    pytest tests/test_alert_lifecycle.py -v
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from alerthub.app.alerts.lifecycle import (
    SEVERITY_RANK,
    UnknownSeverityError,
    as_utc,
    is_effectively_active,
    rank_active_alerts,
    severity_rank,
)
from alerthub.app.alerts.models import Alert, Severity
from alerthub.app.alerts.severity import SEVERITY_DISPLAY, severity_levels

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _alert(
    title: str = "Alert",
    severity: str = "info",
    is_active: bool = True,
    expires_at=None,
) -> Alert:
    return Alert(
        title=title,
        description="d",
        severity=severity,
        type="flood",
        location="X",
        is_active=is_active,
        expires_at=expires_at,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Severity rank
# ═══════════════════════════════════════════════════════════════════════════

class TestSeverityRank:

    def test_rank_table(self):
        assert SEVERITY_RANK == {"critical": 0, "warning": 1, "watch": 2, "info": 3}

    def test_accepts_enum_members(self):
        assert severity_rank(Severity.CRITICAL) == 0
        assert severity_rank(Severity.INFO) == 3

    def test_every_severity_is_ranked(self):
        assert sorted(severity_rank(s) for s in Severity) == [0, 1, 2, 3]

    def test_unknown_severity_raises(self):
        with pytest.raises(UnknownSeverityError) as exc:
            severity_rank("extreme")
        assert exc.value.severity == "extreme"

    def test_unknown_severity_is_value_error(self):
        with pytest.raises(ValueError):
            severity_rank(None)

    def test_case_sensitive(self):
        with pytest.raises(UnknownSeverityError):
            severity_rank("Critical")


# ═══════════════════════════════════════════════════════════════════════════
# Effectively active
# ═══════════════════════════════════════════════════════════════════════════

class TestEffectivelyActive:

    def test_inactive_never_active(self):
        for expires in (None, NOW + timedelta(days=1), NOW - timedelta(days=1)):
            assert not is_effectively_active(_alert(is_active=False, expires_at=expires), NOW)

    def test_no_expiration_is_active(self):
        assert is_effectively_active(_alert(), NOW)

    def test_future_expiration_is_active(self):
        assert is_effectively_active(_alert(expires_at=NOW + timedelta(minutes=1)), NOW)

    def test_past_expiration_is_not_active(self):
        assert not is_effectively_active(_alert(expires_at=NOW - timedelta(minutes=1)), NOW)

    def test_expiring_exactly_now_is_not_active(self):
        assert not is_effectively_active(_alert(expires_at=NOW), NOW)

    def test_naive_expiration_treated_as_utc(self):
        naive = (NOW + timedelta(hours=1)).replace(tzinfo=None)
        assert is_effectively_active(_alert(expires_at=naive), NOW)

    def test_defaults_to_current_clock(self):
        future = datetime.now(timezone.utc) + timedelta(hours=1)
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        assert is_effectively_active(_alert(expires_at=future))
        assert not is_effectively_active(_alert(expires_at=past))

    def test_as_utc_converts_offsets(self):
        plus_two = timezone(timedelta(hours=2))
        value = datetime(2026, 3, 1, 14, 0, tzinfo=plus_two)
        assert as_utc(value) == NOW
        assert as_utc(value).tzinfo == timezone.utc
        assert as_utc(None) is None


# ═══════════════════════════════════════════════════════════════════════════
# Ranking
# ═══════════════════════════════════════════════════════════════════════════

class TestRankActiveAlerts:

    def test_orders_by_severity(self):
        alerts = [
            _alert("i", "info"), _alert("w", "watch"),
            _alert("c", "critical"), _alert("a", "warning"),
        ]
        ranked = rank_active_alerts(alerts, NOW)
        assert [a.severity for a in ranked] == ["critical", "warning", "watch", "info"]

    def test_ranks_non_decreasing(self):
        severities = ["watch", "critical", "info", "critical", "warning", "watch", "info"]
        ranked = rank_active_alerts([_alert(severity=s) for s in severities], NOW)
        ranks = [severity_rank(a.severity) for a in ranked]
        assert ranks == sorted(ranks)

    def test_ties_keep_input_order(self):
        alerts = [
            _alert("w1", "warning"), _alert("c1", "critical"),
            _alert("w2", "warning"), _alert("c2", "critical"),
            _alert("w3", "warning"),
        ]
        ranked = rank_active_alerts(alerts, NOW)
        assert [a.title for a in ranked] == ["c1", "c2", "w1", "w2", "w3"]

    def test_excludes_inactive_and_expired(self):
        alerts = [
            _alert("off", "critical", is_active=False),
            _alert("expired", "critical", expires_at=NOW - timedelta(hours=1)),
            _alert("open", "watch"),
            _alert("later", "info", expires_at=NOW + timedelta(hours=1)),
        ]
        ranked = rank_active_alerts(alerts, NOW)
        assert [a.title for a in ranked] == ["open", "later"]

    def test_empty_input(self):
        assert rank_active_alerts([], NOW) == []

    def test_unknown_severity_fails_fast(self):
        alerts = [_alert(severity="critical"), _alert(severity="apocalyptic")]
        with pytest.raises(UnknownSeverityError):
            rank_active_alerts(alerts, NOW)

    def test_unknown_severity_on_filtered_alert_is_ignored(self):
        alerts = [_alert(severity="bogus", is_active=False), _alert(severity="watch")]
        assert len(rank_active_alerts(alerts, NOW)) == 1


# ═══════════════════════════════════════════════════════════════════════════
# Display metadata
# ═══════════════════════════════════════════════════════════════════════════

class TestSeverityDisplay:

    def test_every_severity_has_display(self):
        assert set(SEVERITY_DISPLAY) == set(Severity)

    def test_levels_in_rank_order(self):
        assert [d.severity for d in severity_levels()] == [
            Severity.CRITICAL, Severity.WARNING, Severity.WATCH, Severity.INFO,
        ]

    def test_critical_points_to_evacuation(self):
        d = SEVERITY_DISPLAY[Severity.CRITICAL].to_dict()
        assert d == {
            "severity": "critical",
            "rank": 0,
            "tone": "emergency",
            "action": "evacuation-routes",
            "label": "View Evacuation Routes",
        }

    def test_watch_and_info_monitor(self):
        assert SEVERITY_DISPLAY[Severity.WATCH].action == "monitor"
        assert SEVERITY_DISPLAY[Severity.INFO].action == "monitor"
