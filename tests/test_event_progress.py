"""Tests for event countdowns and progress."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from lifegrid.config.schema import Event
from lifegrid.core.events import (
    calculate_event_progress,
    calculate_event_status,
    describe_days_until,
    get_progress_percentage,
)


class TestEventProgress:
    def test_at_start(self, now: datetime) -> None:
        assert calculate_event_progress(now, now + timedelta(days=10), now) == 0

    def test_at_end(self, now: datetime) -> None:
        assert calculate_event_progress(now - timedelta(days=10), now, now) == 100

    def test_halfway(self, now: datetime) -> None:
        start = now - timedelta(days=5)
        end = now + timedelta(days=5)
        assert calculate_event_progress(start, end, now) == pytest.approx(50.0)

    def test_before_start_and_after_end(self, now: datetime) -> None:
        assert calculate_event_progress(now + timedelta(days=1), now + timedelta(days=2), now) == 0
        assert calculate_event_progress(now - timedelta(days=2), now - timedelta(days=1), now) == 100

    def test_zero_length_range(self, now: datetime) -> None:
        assert calculate_event_progress(now, now, now) == 100
        past = now - timedelta(hours=1)
        assert calculate_event_progress(past, past, now) == 100
        future = now + timedelta(hours=1)
        assert calculate_event_progress(future, future, now) == 0

    def test_created_today_checked_five_days_later(self, now: datetime) -> None:
        created = now
        due = now + timedelta(days=10)
        later = now + timedelta(days=5)
        assert calculate_event_progress(created, due, later) == pytest.approx(50.0)

    def test_date_bounds(self) -> None:
        progress = calculate_event_progress(date(2025, 1, 1), date(2025, 1, 5), datetime(2025, 1, 2))
        assert progress == pytest.approx(25.0)

    def test_alias(self, now: datetime) -> None:
        start = now - timedelta(days=1)
        end = now + timedelta(days=3)
        assert get_progress_percentage(start, end, now) == calculate_event_progress(start, end, now)


class TestDaysLabel:
    def test_today(self) -> None:
        assert describe_days_until(0) == "Today!"

    def test_future(self) -> None:
        assert describe_days_until(12) == "12 days remaining"
        assert describe_days_until(1) == "1 day remaining"

    def test_past(self) -> None:
        assert describe_days_until(-3) == "3 days ago"
        assert describe_days_until(-1) == "1 day ago"


class TestEventStatus:
    def test_upcoming(self, now: datetime) -> None:
        event = Event(
            id="e1",
            title="Launch",
            event_date=now + timedelta(days=4),
            created_at=now - timedelta(days=4),
        )
        status = calculate_event_status(event, now)
        assert status.event_id == "e1"
        assert status.days_until == 4
        assert not status.is_past
        assert status.progress == pytest.approx(50.0)
        assert status.label == "4 days remaining"

    def test_past(self, now: datetime) -> None:
        event = Event(
            title="Wedding",
            event_date=datetime(2025, 6, 1),
            created_at=datetime(2025, 1, 1),
        )
        status = calculate_event_status(event, now)
        assert status.days_until == -13
        assert status.is_past
        assert status.progress == 100
        assert status.label == "13 days ago"

    def test_later_today(self, now: datetime) -> None:
        event = Event(title="Dinner", event_date=now + timedelta(hours=6), created_at=now)
        status = calculate_event_status(event, now)
        assert status.days_until == 0
        assert status.label == "Today!"
        assert status.progress == 0
