"""Tests for pomotodo.models.session."""

from __future__ import annotations

from pomotodo.models import SESSION_DURATION_SECONDS, SessionSnapshot


def test_default_duration_is_25_minutes():
    assert SESSION_DURATION_SECONDS == 1500


def test_clock_text_pads_minutes_and_seconds():
    snap = SessionSnapshot(status="running", remaining=65, duration=1500)
    assert snap.minutes == 1
    assert snap.seconds == 5
    assert snap.clock_text == "01:05"


def test_full_session_clock_text():
    snap = SessionSnapshot(status="idle", remaining=1500, duration=1500)
    assert snap.clock_text == "25:00"


def test_progress_percent():
    assert SessionSnapshot(status="idle", remaining=1500, duration=1500).progress_percent == 0
    assert SessionSnapshot(status="running", remaining=750, duration=1500).progress_percent == 50
    assert SessionSnapshot(status="running", remaining=0, duration=1500).progress_percent == 100


def test_is_active():
    assert SessionSnapshot(status="running", remaining=1, duration=3).is_active
    assert SessionSnapshot(status="paused", remaining=1, duration=3).is_active
    assert not SessionSnapshot(status="idle", remaining=3, duration=3).is_active
