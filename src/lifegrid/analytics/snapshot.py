"""Per-render snapshot of every figure the screens display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from lifegrid.config.schema import AppState
from lifegrid.core.clock import reference_now
from lifegrid.core.events import EventStatus, calculate_event_status
from lifegrid.core.life import LifeProgress, calculate_life_progress
from lifegrid.core.year import YearProgress, calculate_year_progress
from lifegrid.policies.feature_gate import remaining_free_events


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Figures for one render pass, all computed from the same ``now``.

    Attributes:
        now: The reference instant sampled for this pass.
        year: Progress through the current calendar year.
        life: Weeks/months progress, or ``None`` if no birthdate is set.
        events: One status per event, in stored (date) order.
        remaining_free_events: Free slots left; ``None`` for premium users.
    """

    now: datetime
    year: YearProgress
    life: LifeProgress | None
    events: list[EventStatus]
    remaining_free_events: int | None


def build_snapshot(state: AppState, now: datetime | None = None) -> Snapshot:
    """Sample ``now`` once and compute every figure from it."""
    now = reference_now(now)
    user = state.user

    life = None
    if user.birthdate is not None:
        life = calculate_life_progress(user.birthdate, now, user.life_expectancy_years)

    return Snapshot(
        now=now,
        year=calculate_year_progress(now),
        life=life,
        events=[calculate_event_status(event, now) for event in state.events],
        remaining_free_events=remaining_free_events(len(state.events), user.is_premium),
    )
