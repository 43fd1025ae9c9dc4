"""Pydantic v2 models for the persisted lifegrid state."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from lifegrid.config.constants import DEFAULT_LIFE_EXPECTANCY_YEARS, DEFAULT_THEME, Theme
from lifegrid.core.calendar import to_local

# Persisted keys are camelCase (``eventDate``, ``isPremium``); Python code
# uses the snake_case field names.
_MODEL_CONFIG = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


def _new_event_id() -> str:
    return uuid4().hex


class Event(BaseModel):
    """A dated milestone tracked with a countdown and a progress bar."""

    model_config = _MODEL_CONFIG

    id: str = Field(default_factory=_new_event_id)
    title: str = Field(min_length=1)
    event_date: datetime = Field(description="When the event happens")
    created_at: datetime = Field(description="When the event was registered")
    color: str | None = Field(default=None, description="Display colour, e.g. '#6366f1'")
    icon: str | None = Field(default=None, description="Icon name")

    @field_validator("event_date", "created_at")
    @classmethod
    def _to_local_time(cls, value: datetime) -> datetime:
        return to_local(value)


class User(BaseModel):
    """User profile: birthdate, lifespan assumption and app preferences."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    birthdate: datetime | None = None
    life_expectancy_years: int = Field(default=DEFAULT_LIFE_EXPECTANCY_YEARS, gt=0, le=150)
    theme: Theme = DEFAULT_THEME
    is_guest: bool = True
    is_premium: bool = False

    @field_validator("birthdate")
    @classmethod
    def _to_local_time(cls, value: datetime | None) -> datetime | None:
        return None if value is None else to_local(value)


class AppState(BaseModel):
    """Everything the app persists between launches."""

    model_config = _MODEL_CONFIG

    user: User = Field(default_factory=User)
    events: list[Event] = Field(
        default_factory=list,
        description="Events ordered by event_date",
    )
    has_completed_onboarding: bool = False
