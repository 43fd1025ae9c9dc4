"""Custom exceptions for lifegrid."""

from __future__ import annotations


class LifegridError(Exception):
    """Base exception for lifegrid."""


class StateError(LifegridError):
    """Persisted state could not be loaded."""


class EventLimitError(LifegridError):
    """The free event limit has been reached."""


class EventNotFoundError(LifegridError):
    """No event with the requested id."""
