"""In-memory app state with file persistence.

Every mutation replaces the current :class:`AppState` with an updated copy
and, when the store has a path, writes it to disk. A failed write is logged
and the in-memory state is kept.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from lifegrid.config.constants import Theme
from lifegrid.config.defaults import default_state
from lifegrid.config.schema import AppState, Event, User
from lifegrid.core.calendar import Instant, to_datetime
from lifegrid.core.clock import reference_now
from lifegrid.io.serialize import dump_state, load_state_file
from lifegrid.policies.feature_gate import can_create_more_events, feature_gate_message
from lifegrid.utils.exceptions import EventLimitError, EventNotFoundError, StateError

logger = logging.getLogger(__name__)


def _sorted_by_date(events: list[Event]) -> list[Event]:
    return sorted(events, key=lambda ev: ev.event_date)


class AppStore:
    """Holds the user profile and events and persists every change.

    Args:
        path: JSON or YAML state file. ``None`` keeps state in memory only.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self.state: AppState = default_state()

    # --- Persistence ---

    def load(self) -> AppState:
        """Load state from ``path``; fall back to defaults if it is unusable."""
        if self.path is None or not self.path.exists():
            return self.state
        try:
            self.state = load_state_file(self.path)
        except (OSError, StateError) as exc:
            logger.warning("Could not load state from %s, using defaults: %s", self.path, exc)
            self.state = default_state()
        logger.debug("Loaded %d events from %s", len(self.state.events), self.path)
        return self.state

    def _commit(self, state: AppState) -> AppState:
        self.state = state
        if self.path is not None:
            try:
                self.path.write_text(dump_state(state))
            except OSError:
                logger.exception("Failed to save state to %s", self.path)
        return state

    # --- User ---

    def set_user(self, **fields: Any) -> AppState:
        """Update user profile fields, e.g. ``set_user(is_guest=False)``."""
        user = User.model_validate(self.state.user.model_dump() | fields)
        return self._commit(self.state.model_copy(update={"user": user}))

    def set_birthdate(self, birthdate: Instant) -> AppState:
        return self.set_user(birthdate=to_datetime(birthdate))

    def set_theme(self, theme: Theme) -> AppState:
        return self.set_user(theme=theme)

    def set_premium(self, is_premium: bool) -> AppState:
        return self.set_user(is_premium=is_premium)

    def complete_onboarding(self) -> AppState:
        return self._commit(self.state.model_copy(update={"has_completed_onboarding": True}))

    def reset(self) -> AppState:
        """Discard all user data and return to a fresh install."""
        return self._commit(default_state())

    # --- Events ---

    def add_event(
        self,
        title: str,
        event_date: Instant,
        *,
        color: str | None = None,
        icon: str | None = None,
        now: datetime | None = None,
    ) -> Event:
        """Register a new event, stamped as created at ``now``.

        Raises:
            EventLimitError: If a free user already has the maximum number
                of events.
        """
        if not can_create_more_events(len(self.state.events), self.state.user.is_premium):
            raise EventLimitError(feature_gate_message("events"))

        event = Event(
            title=title,
            event_date=to_datetime(event_date),
            created_at=reference_now(now),
            color=color,
            icon=icon,
        )
        events = _sorted_by_date([*self.state.events, event])
        self._commit(self.state.model_copy(update={"events": events}))
        logger.debug("Added event %s (%s)", event.id, event.title)
        return event

    def get_event(self, event_id: str) -> Event:
        for event in self.state.events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def update_event(self, event_id: str, **fields: Any) -> Event:
        """Update fields of an existing event and keep the list date-ordered.

        Raises:
            EventNotFoundError: If no event has ``event_id``.
        """
        current = self.get_event(event_id)
        if "event_date" in fields:
            fields["event_date"] = to_datetime(fields["event_date"])
        updated = Event.model_validate(current.model_dump() | fields | {"id": event_id})
        events = _sorted_by_date(
            [updated if ev.id == event_id else ev for ev in self.state.events]
        )
        self._commit(self.state.model_copy(update={"events": events}))
        return updated

    def delete_event(self, event_id: str) -> AppState:
        events = [ev for ev in self.state.events if ev.id != event_id]
        return self._commit(self.state.model_copy(update={"events": events}))
