"""Progress through a calendar year."""

from __future__ import annotations

from dataclasses import dataclass

from lifegrid.core.calendar import Instant, day_of_year, days_in_year, to_date


@dataclass(frozen=True, slots=True)
class YearProgress:
    """Day counts for one calendar year as seen from a reference instant.

    Attributes:
        year: Calendar year the figures describe.
        total_days: 365 or 366.
        days_passed: Day of year of ``now`` for the current year, else 0.
        days_remaining: ``total_days - days_passed``, never negative.
        percentage: ``100 * days_passed / total_days``.
    """

    year: int
    total_days: int
    days_passed: int
    days_remaining: int
    percentage: float


def _resolve_year(now: Instant, year: int | None) -> int:
    return to_date(now).year if year is None else year


def days_passed_in_year(now: Instant, year: int | None = None) -> int:
    """Days passed in ``year`` so far.

    Only the current year has progress; any other year, past or future,
    reports 0.
    """
    target = _resolve_year(now, year)
    if target == to_date(now).year:
        return day_of_year(now)
    return 0


def days_remaining_in_year(now: Instant, year: int | None = None) -> int:
    target = _resolve_year(now, year)
    return max(0, days_in_year(target) - days_passed_in_year(now, target))


def year_progress_percentage(now: Instant, year: int | None = None) -> float:
    target = _resolve_year(now, year)
    return days_passed_in_year(now, target) / days_in_year(target) * 100


def calculate_year_progress(now: Instant, year: int | None = None) -> YearProgress:
    """Bundle every year-progress figure for ``year`` at ``now``."""
    target = _resolve_year(now, year)
    total = days_in_year(target)
    passed = days_passed_in_year(now, target)
    return YearProgress(
        year=target,
        total_days=total,
        days_passed=passed,
        days_remaining=max(0, total - passed),
        percentage=passed / total * 100,
    )
