"""Default configuration values for lifegrid."""

from __future__ import annotations

from datetime import datetime

from lifegrid.config.constants import (
    DEFAULT_BIRTHDATE_DAY,
    DEFAULT_BIRTHDATE_MONTH,
    DEFAULT_BIRTHDATE_YEAR,
)
from lifegrid.config.schema import AppState, User


def default_birthdate() -> datetime:
    """Birthdate pre-selected in the onboarding picker: Jan 1, 1990."""
    return datetime(DEFAULT_BIRTHDATE_YEAR, DEFAULT_BIRTHDATE_MONTH, DEFAULT_BIRTHDATE_DAY)


def default_user() -> User:
    """Guest user: no birthdate, default theme, free tier."""
    return User()


def default_state() -> AppState:
    """Fresh install: guest user, no events, onboarding not completed."""
    return AppState(user=default_user())
