"""Shared test fixtures."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta

import pytest

from lifegrid.config.schema import AppState, Event, User


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant: 2025-06-14 at noon."""
    return datetime(2025, 6, 14, 12, 0)


@pytest.fixture
def sample_state(now: datetime) -> AppState:
    """Guest with a birthdate and two events, one past and one upcoming."""
    created = now - timedelta(days=5)
    return AppState(
        user=User(birthdate=datetime(1990, 1, 1)),
        events=[
            Event(
                id="past",
                title="Graduation",
                event_date=datetime(2025, 6, 1),
                created_at=datetime(2025, 1, 1),
            ),
            Event(
                id="trip",
                title="Trip",
                event_date=created + timedelta(days=10),
                created_at=created,
                icon="airplane",
            ),
        ],
        has_completed_onboarding=True,
    )


@pytest.fixture
def local_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], None]]:
    """Switch the process-local time zone to a POSIX TZ rule string."""

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
