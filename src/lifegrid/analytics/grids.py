"""Cell states for the year, life-in-weeks and life-in-months grids.

Each grid is a numpy ``int8`` array of :class:`CellState` values the
rendering layer maps to colours. Cells are indexed from 0, so cell ``i`` of
the year grid is day ``i + 1`` and cell ``(y, w)`` of the weeks grid is
week ``y * 52 + w`` of life.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import IntEnum

import numpy as np
from numpy.typing import NDArray

from lifegrid.config.constants import (
    DEFAULT_LIFE_EXPECTANCY_YEARS,
    LIFE_MONTHS_PER_ROW,
    LIFE_WEEKS_PER_ROW,
)
from lifegrid.config.schema import Event
from lifegrid.core.calendar import Instant, day_of_year, days_in_year, to_date
from lifegrid.core.life import months_lived, weeks_lived
from lifegrid.core.year import days_passed_in_year


class CellState(IntEnum):
    FUTURE = 0
    LIVED = 1
    CURRENT = 2


def _fill(n_cells: int, lived: int, current: int | None) -> NDArray[np.int8]:
    """Flat grid: indices below ``lived`` are LIVED, ``current`` is CURRENT."""
    index = np.arange(n_cells)
    cells = np.where(index < lived, CellState.LIVED, CellState.FUTURE).astype(np.int8)
    if current is not None and 0 <= current < n_cells:
        cells[current] = CellState.CURRENT
    return cells


def year_grid(now: Instant, year: int | None = None) -> NDArray[np.int8]:
    """One cell per day of ``year`` (default: the current year).

    Days before today are LIVED and today is CURRENT. Any year other than
    the current one has no progress and is entirely FUTURE.
    """
    target = to_date(now).year if year is None else year
    passed = days_passed_in_year(now, target)
    if passed == 0:
        return _fill(days_in_year(target), 0, None)
    # Cell index of today is passed - 1
    return _fill(days_in_year(target), passed - 1, passed - 1)


def events_by_day(events: Iterable[Event], year: int) -> dict[int, list[Event]]:
    """Group the events that fall in ``year`` by day of year."""
    grouped: dict[int, list[Event]] = {}
    for event in events:
        event_day: date = to_date(event.event_date)
        if event_day.year != year:
            continue
        grouped.setdefault(day_of_year(event_day), []).append(event)
    return grouped


def life_weeks_grid(
    birthdate: Instant | None,
    now: Instant,
    expectancy_years: int = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> NDArray[np.int8]:
    """Life in weeks: ``(expectancy_years, 52)`` cells.

    The week after the last fully lived one is CURRENT. Without a birthdate
    every cell is FUTURE.
    """
    n_cells = expectancy_years * LIFE_WEEKS_PER_ROW
    if birthdate is None:
        cells = _fill(n_cells, 0, None)
    else:
        lived = weeks_lived(birthdate, now)
        cells = _fill(n_cells, lived, lived)
    return cells.reshape(expectancy_years, LIFE_WEEKS_PER_ROW)


def life_months_grid(
    birthdate: Instant | None,
    now: Instant,
    expectancy_years: int = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> NDArray[np.int8]:
    """Life in months: ``(expectancy_years, 12)`` cells, LIVED or FUTURE."""
    n_cells = expectancy_years * LIFE_MONTHS_PER_ROW
    lived = 0 if birthdate is None else months_lived(birthdate, now)
    return _fill(n_cells, lived, None).reshape(expectancy_years, LIFE_MONTHS_PER_ROW)
