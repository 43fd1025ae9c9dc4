"""Serialization for persisted app state and computed snapshots.

Dates are stored as ISO-8601 strings. Loading is forgiving: an invalid
birthdate is treated as "not set" and an event whose dates cannot be parsed
is dropped, so a damaged file never prevents the screens from rendering.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lifegrid.analytics.snapshot import Snapshot
from lifegrid.config.schema import AppState, Event, User
from lifegrid.io.yaml_loader import load_yaml
from lifegrid.utils.exceptions import StateError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_instant(raw: Any) -> datetime | None:
    """Parse a persisted date value, or return ``None`` if it is unusable.

    Accepts ISO-8601 strings (date-only strings become midnight) and
    ``date``/``datetime`` objects as produced by YAML.
    """
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, date):
        return datetime.combine(raw, time.min)
    if isinstance(raw, str):
        try:
            return datetime.fromisoformat(raw.strip())
        except ValueError:
            return None
    return None


def _load_user(raw: Any) -> User:
    if not isinstance(raw, dict):
        return User()
    fields = dict(raw)
    if fields.get("birthdate") is not None:
        birthdate = parse_instant(fields["birthdate"])
        if birthdate is None:
            logger.warning("Discarding unparseable birthdate %r", fields["birthdate"])
            del fields["birthdate"]
        else:
            fields["birthdate"] = birthdate
    try:
        return User.model_validate(fields)
    except ValidationError as exc:
        logger.warning("Invalid user profile, falling back to defaults: %s", exc)
        return User(birthdate=fields.get("birthdate"))


def _load_event(raw: Any) -> Event | None:
    if not isinstance(raw, dict):
        return None
    fields = dict(raw)
    for key in ("eventDate", "createdAt"):
        parsed = parse_instant(fields.get(key))
        if parsed is None:
            logger.warning("Dropping event %r: invalid %s", fields.get("id"), key)
            return None
        fields[key] = parsed
    try:
        return Event.model_validate(fields)
    except ValidationError as exc:
        logger.warning("Dropping event %r: %s", fields.get("id"), exc)
        return None


def state_from_dict(data: Any) -> AppState:
    """Rebuild an AppState from decoded JSON/YAML, dropping bad records.

    Raises:
        StateError: If ``data`` is not a mapping at all.
    """
    if not isinstance(data, dict):
        raise StateError(f"state must be a mapping, got {type(data).__name__}")

    raw_events = data.get("events")
    events: list[Event] = []
    if isinstance(raw_events, list):
        events = [ev for ev in map(_load_event, raw_events) if ev is not None]

    onboarded = data.get("hasCompletedOnboarding", False)
    if not isinstance(onboarded, bool):
        logger.warning("Ignoring non-boolean hasCompletedOnboarding %r", onboarded)
        onboarded = False

    return AppState(
        user=_load_user(data.get("user")),
        events=events,
        has_completed_onboarding=onboarded,
    )


def dump_state(state: AppState) -> str:
    """Serialize state to JSON with camelCase keys and ISO-8601 dates."""
    return json.dumps(state.model_dump(mode="json", by_alias=True), indent=2)


def load_state(json_str: str) -> AppState:
    """Deserialize state from a JSON string.

    Raises:
        StateError: If the text is not JSON or not a JSON object.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise StateError(f"invalid state JSON: {exc}") from exc
    return state_from_dict(data)


def load_state_file(path: Path) -> AppState:
    """Load a JSON or YAML (by suffix) state file.

    Raises:
        StateError: If the file is not UTF-8, or not a JSON/YAML mapping.
    """
    if path.suffix.lower() in _YAML_SUFFIXES:
        return state_from_dict(load_yaml(path))
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise StateError(f"{path}: not UTF-8 text: {exc}") from exc
    return load_state(text)


def _json_default(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_snapshot(snapshot: Snapshot) -> str:
    """Serialize a computed snapshot dataclass to JSON."""
    return json.dumps(dataclasses.asdict(snapshot), default=_json_default, indent=2)
