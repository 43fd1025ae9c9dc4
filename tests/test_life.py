"""Tests for life progress on the weeks and months bases."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from lifegrid.core.life import (
    calculate_life_progress,
    life_percentage,
    life_percentage_months,
    months_lived,
    months_remaining,
    total_months_in_life,
    total_weeks_in_life,
    weeks_lived,
    weeks_remaining,
)


class TestTotals:
    def test_total_weeks_uses_mean_year(self) -> None:
        assert total_weeks_in_life(90) == 4695  # floor(90 * 52.1775)
        assert total_weeks_in_life() == 4695
        assert total_weeks_in_life(1) == 52

    def test_total_months(self) -> None:
        assert total_months_in_life(90) == 1080
        assert total_months_in_life(80) == 960

    def test_zero_expectancy(self) -> None:
        assert total_weeks_in_life(0) == 0
        assert total_months_in_life(0) == 0


class TestWeeks:
    def test_one_mean_year(self, now: datetime) -> None:
        assert weeks_lived(now - timedelta(days=365.25), now) == 52

    def test_exact_weeks(self, now: datetime) -> None:
        assert weeks_lived(now - timedelta(weeks=10), now) == 10
        assert weeks_lived(now - timedelta(weeks=10) + timedelta(seconds=1), now) == 9

    def test_date_birthdate(self) -> None:
        assert weeks_lived(date(2025, 1, 1), datetime(2025, 1, 15, 0, 0)) == 2

    def test_remaining(self, now: datetime) -> None:
        birth = now - timedelta(weeks=1000)
        assert weeks_remaining(birth, now) == 4695 - 1000

    def test_percentage(self, now: datetime) -> None:
        birth = now - timedelta(weeks=1000)
        assert life_percentage(birth, now) == pytest.approx(1000 / 4695 * 100)

    def test_percentage_clamped(self, now: datetime) -> None:
        birth = now - timedelta(weeks=6000)
        assert weeks_lived(birth, now) > total_weeks_in_life(90)
        assert life_percentage(birth, now, 90) == 100
        assert weeks_remaining(birth, now, 90) == 0

    def test_zero_expectancy_does_not_divide(self, now: datetime) -> None:
        birth = now - timedelta(weeks=10)
        assert life_percentage(birth, now, 0) == 100
        assert life_percentage_months(birth, now, 0) == 100


class TestMonths:
    def test_same_month_pair(self) -> None:
        birth = date(2000, 6, 15)
        assert months_lived(birth, date(2025, 6, 14)) == 300
        assert months_lived(birth, date(2025, 6, 16)) == 300

    def test_day_of_month_ignored(self) -> None:
        birth = datetime(1990, 3, 31)
        assert months_lived(birth, datetime(2020, 4, 1)) == months_lived(
            birth, datetime(2020, 4, 30)
        )
        assert months_lived(birth, datetime(2020, 4, 1)) == 361

    def test_earlier_month_in_year(self) -> None:
        assert months_lived(date(2000, 11, 1), date(2025, 2, 1)) == 291

    def test_remaining_and_percentage(self) -> None:
        birth = date(2000, 1, 1)
        today = date(2025, 1, 1)
        assert months_remaining(birth, today) == 1080 - 300
        assert life_percentage_months(birth, today) == pytest.approx(300 / 1080 * 100)

    def test_percentage_clamped(self) -> None:
        assert life_percentage_months(date(1900, 1, 1), date(2025, 1, 1)) == 100
        assert months_remaining(date(1900, 1, 1), date(2025, 1, 1)) == 0


class TestLifeProgress:
    def test_past_expectancy(self, now: datetime) -> None:
        birth = now.replace(year=now.year - 90) - timedelta(days=1)
        assert weeks_remaining(birth, now) == 0
        assert life_percentage(birth, now) == 100

    def test_bundle(self, now: datetime) -> None:
        birth = datetime(1990, 1, 1)
        progress = calculate_life_progress(birth, now, 80)
        assert progress.expectancy_years == 80
        assert progress.weeks.total == total_weeks_in_life(80)
        assert progress.weeks.lived == weeks_lived(birth, now)
        assert progress.weeks.remaining == weeks_remaining(birth, now, 80)
        assert progress.weeks.percentage == pytest.approx(life_percentage(birth, now, 80))
        assert progress.months.total == 960
        assert progress.months.lived == months_lived(birth, now)
        assert progress.months.remaining == months_remaining(birth, now, 80)

    def test_bundle_defaults_expectancy(self, now: datetime) -> None:
        birth = datetime(1990, 1, 1)
        assert calculate_life_progress(birth, now).expectancy_years == 90
        assert calculate_life_progress(birth, now, 0).expectancy_years == 90

    def test_bases_differ(self, now: datetime) -> None:
        # Elapsed-time weeks and calendar-field months are separate notions
        progress = calculate_life_progress(datetime(1990, 6, 30), now)
        assert progress.weeks.percentage != progress.months.percentage
