"""Calendar primitives: leap years, day-of-year and day differences.

Day-level functions here work on calendar dates in the user's local zone.
A naive ``datetime`` is local wall time; an aware one is first converted to
local time, so an instant stored in UTC lands on the day the user sees.
Time of day is then discarded before any arithmetic, so clock shifts such as
daylight-saving transitions cannot produce off-by-one counts.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

Instant = date | datetime


def to_local(instant: datetime) -> datetime:
    """Naive local wall time of ``instant``; naive values pass through."""
    if instant.tzinfo is None:
        return instant
    return instant.astimezone().replace(tzinfo=None)


def to_date(instant: Instant) -> date:
    """Return the local calendar date of ``instant``."""
    if isinstance(instant, datetime):
        return to_local(instant).date()
    return instant


def to_datetime(instant: Instant) -> datetime:
    """Return ``instant`` as a datetime; a plain ``date`` becomes local midnight."""
    if isinstance(instant, datetime):
        return instant
    return datetime.combine(instant, time.min)


def elapsed(start: Instant, end: Instant) -> timedelta:
    """Elapsed time from ``start`` to ``end``.

    If either side carries a zone, both are compared as absolute instants,
    reading a naive side as local time.
    """
    start_dt = to_datetime(start)
    end_dt = to_datetime(end)
    if start_dt.tzinfo is None and end_dt.tzinfo is None:
        return end_dt - start_dt
    return end_dt.astimezone() - start_dt.astimezone()


def start_of_day(instant: Instant) -> datetime:
    """Local midnight at the start of ``instant``'s calendar day."""
    return datetime.combine(to_date(instant), time.min)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    """Number of days in ``year`` (365 or 366)."""
    return 366 if is_leap_year(year) else 365


def day_of_year(instant: Instant) -> int:
    """1-based ordinal of ``instant`` within its calendar year.

    Counted as whole days since the last day of the previous year, so
    January 1 is day 1 and December 31 is day 365 or 366.
    """
    d = to_date(instant)
    last_of_prior_year = date(d.year, 1, 1).toordinal() - 1
    return d.toordinal() - last_of_prior_year


def days_between(a: Instant, b: Instant) -> int:
    """Signed number of calendar days from ``a`` to ``b``.

    Both sides are normalized to midnight first, so the result is the same
    whether the instants fall at midnight or at noon, and
    ``days_between(a, b) == -days_between(b, a)``.
    """
    return to_date(b).toordinal() - to_date(a).toordinal()


def days_until(target: Instant, now: Instant) -> int:
    """Days from today to ``target``: positive future, negative past, 0 today."""
    return days_between(now, target)
