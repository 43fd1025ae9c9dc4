"""Application-wide constants for lifegrid."""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

# --- Life expectancy and time units ---

DEFAULT_LIFE_EXPECTANCY_YEARS: int = 90
# Mean Gregorian weeks per year (365.2425 / 7), rounded as the app displays it
WEEKS_PER_YEAR: float = 52.1775
MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

ONE_DAY: timedelta = timedelta(days=1)
ONE_WEEK: timedelta = timedelta(days=DAYS_PER_WEEK)

# --- Grid layout ---

# Life grids use a fixed 52 cells per row, independent of WEEKS_PER_YEAR
LIFE_WEEKS_PER_ROW: int = 52
LIFE_MONTHS_PER_ROW: int = MONTHS_PER_YEAR

# --- Premium / pricing ---

FREE_EVENT_LIMIT: int = 3
PREMIUM_UNLIMITED_EVENTS: bool = True

# --- Themes ---

Theme = Literal[
    "midnight",
    "slate",
    "indigo",
    "emerald",
    "pure-white",
    "pure-black",
    "monochrome",
    "sunset",
    "ocean",
    "forest",
]

DEFAULT_THEME: Theme = "midnight"
PREMIUM_THEMES: frozenset[str] = frozenset(
    {"pure-white", "pure-black", "monochrome", "sunset", "ocean", "forest"}
)

# --- Default birthdate offered during onboarding ---

DEFAULT_BIRTHDATE_YEAR: int = 1990
DEFAULT_BIRTHDATE_MONTH: int = 1
DEFAULT_BIRTHDATE_DAY: int = 1

# --- Formatting ---

DATE_RANGE_SEPARATOR: str = " → "
