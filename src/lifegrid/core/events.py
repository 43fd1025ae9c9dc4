"""Countdown and progress figures for dated events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from lifegrid.config.schema import Event
from lifegrid.core.calendar import Instant, days_until, elapsed


@dataclass(frozen=True, slots=True)
class EventStatus:
    """Everything an event card shows, computed at one reference instant."""

    event_id: str
    title: str
    days_until: int
    is_past: bool
    progress: float
    label: str


def calculate_event_progress(start: Instant, end: Instant, now: Instant) -> float:
    """Linear progress of ``now`` from ``start`` to ``end``, in [0, 100].

    Reaching ``end`` is complete and being at or before ``start`` is 0, so
    a zero-length range reads 100 once reached and 0 before.
    """
    if elapsed(end, now) >= timedelta(0):
        return 100.0
    progressed = elapsed(start, now)
    if progressed <= timedelta(0):
        return 0.0
    return progressed / elapsed(start, end) * 100


def get_progress_percentage(start: Instant, end: Instant, now: Instant) -> float:
    """Alias of :func:`calculate_event_progress` for generic date ranges."""
    return calculate_event_progress(start, end, now)


def describe_days_until(days: int) -> str:
    """Countdown label: ``"Today!"``, ``"N days remaining"`` or ``"N days ago"``."""
    if days == 0:
        return "Today!"
    unit = "day" if abs(days) == 1 else "days"
    if days < 0:
        return f"{abs(days)} {unit} ago"
    return f"{days} {unit} remaining"


def calculate_event_status(event: Event, now: Instant) -> EventStatus:
    days = days_until(event.event_date, now)
    return EventStatus(
        event_id=event.id,
        title=event.title,
        days_until=days,
        is_past=days < 0,
        progress=calculate_event_progress(event.created_at, event.event_date, now),
        label=describe_days_until(days),
    )
