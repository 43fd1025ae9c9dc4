"""Display formatting for calendar instants."""

from __future__ import annotations

from lifegrid.config.constants import DATE_RANGE_SEPARATOR
from lifegrid.core.calendar import Instant, to_date

# en-US short month names, independent of the process locale
_MONTH_ABBR: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_date(instant: Instant) -> str:
    """Format as ``"Jan 1, 2025"``."""
    d = to_date(instant)
    return f"{_MONTH_ABBR[d.month - 1]} {d.day}, {d.year}"


def format_date_range(start: Instant, end: Instant) -> str:
    return f"{format_date(start)}{DATE_RANGE_SEPARATOR}{format_date(end)}"
