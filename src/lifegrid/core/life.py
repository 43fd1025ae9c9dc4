"""Lifespan progress in weeks and months.

Two different unit bases are used on purpose:

- Weeks count raw elapsed time since birth (``floor(elapsed / 7 days)``)
  against ``floor(expectancy * 52.1775)`` total weeks.
- Months subtract calendar fields (year and month, ignoring the day)
  against ``expectancy * 12`` total months.

The two percentages therefore disagree slightly; the grids built from them
are shown on different screens.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from lifegrid.config.constants import (
    DEFAULT_LIFE_EXPECTANCY_YEARS,
    MONTHS_PER_YEAR,
    ONE_WEEK,
    WEEKS_PER_YEAR,
)
from lifegrid.core.calendar import Instant, elapsed, to_date


@dataclass(frozen=True, slots=True)
class UnitProgress:
    """Lived/remaining counts in a single time unit."""

    total: int
    lived: int
    remaining: int
    percentage: float


@dataclass(frozen=True, slots=True)
class LifeProgress:
    """Life progress on both the weeks and the months basis."""

    expectancy_years: float
    weeks: UnitProgress
    months: UnitProgress


def _percentage(lived: int, total: int) -> float:
    # An empty lifespan counts as fully lived
    if total <= 0:
        return 100.0
    return min(100.0, lived / total * 100)


# --- Weeks basis ---


def total_weeks_in_life(expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS) -> int:
    return math.floor(expectancy_years * WEEKS_PER_YEAR)


def weeks_lived(birthdate: Instant, now: Instant) -> int:
    """Whole weeks of elapsed time between ``birthdate`` and ``now``.

    Not aligned to calendar weeks. A birthdate in the future gives a
    negative count.
    """
    return elapsed(birthdate, now) // ONE_WEEK


def weeks_remaining(
    birthdate: Instant,
    now: Instant,
    expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> int:
    return max(0, total_weeks_in_life(expectancy_years) - weeks_lived(birthdate, now))


def life_percentage(
    birthdate: Instant,
    now: Instant,
    expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> float:
    """Percentage of expected weeks already lived, capped at 100."""
    return _percentage(weeks_lived(birthdate, now), total_weeks_in_life(expectancy_years))


# --- Months basis ---


def total_months_in_life(expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS) -> int:
    return math.floor(expectancy_years * MONTHS_PER_YEAR)


def months_lived(birthdate: Instant, now: Instant) -> int:
    """Calendar months between the birth month and the current month.

    Day of month is ignored: someone born on the 15th has lived the same
    number of months on the 14th and on the 16th of any given month.
    """
    born = to_date(birthdate)
    today = to_date(now)
    return (today.year - born.year) * MONTHS_PER_YEAR + (today.month - born.month)


def months_remaining(
    birthdate: Instant,
    now: Instant,
    expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> int:
    return max(0, total_months_in_life(expectancy_years) - months_lived(birthdate, now))


def life_percentage_months(
    birthdate: Instant,
    now: Instant,
    expectancy_years: float = DEFAULT_LIFE_EXPECTANCY_YEARS,
) -> float:
    return _percentage(months_lived(birthdate, now), total_months_in_life(expectancy_years))


def calculate_life_progress(
    birthdate: Instant,
    now: Instant,
    expectancy_years: float | None = None,
) -> LifeProgress:
    """Compute weeks and months progress from a single reference instant.

    Args:
        birthdate: The user's birthdate.
        now: Reference instant shared by every figure.
        expectancy_years: Assumed lifespan. ``None`` or 0 falls back to
            ``DEFAULT_LIFE_EXPECTANCY_YEARS``.

    Returns:
        LifeProgress with ``weeks`` and ``months`` breakdowns.
    """
    expectancy = expectancy_years or DEFAULT_LIFE_EXPECTANCY_YEARS

    total_weeks = total_weeks_in_life(expectancy)
    lived_weeks = weeks_lived(birthdate, now)
    total_months = total_months_in_life(expectancy)
    lived_months = months_lived(birthdate, now)

    return LifeProgress(
        expectancy_years=expectancy,
        weeks=UnitProgress(
            total=total_weeks,
            lived=lived_weeks,
            remaining=max(0, total_weeks - lived_weeks),
            percentage=_percentage(lived_weeks, total_weeks),
        ),
        months=UnitProgress(
            total=total_months,
            lived=lived_months,
            remaining=max(0, total_months - lived_months),
            percentage=_percentage(lived_months, total_months),
        ),
    )
