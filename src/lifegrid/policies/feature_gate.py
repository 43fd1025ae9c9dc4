"""Free vs premium feature access.

Independent of the time engine: the gate only decides how many events
and which themes or icons a user may use.
"""

from __future__ import annotations

from typing import Literal

from lifegrid.config.constants import FREE_EVENT_LIMIT, PREMIUM_THEMES, PREMIUM_UNLIMITED_EVENTS

GatedFeature = Literal["events", "themes", "icons", "lifespan"]


def is_premium_user(is_premium: bool | None = None) -> bool:
    return is_premium is True


def can_create_more_events(current_event_count: int, is_premium: bool | None = None) -> bool:
    """Whether another event may be added on top of ``current_event_count``."""
    if is_premium_user(is_premium) and PREMIUM_UNLIMITED_EVENTS:
        return True
    return current_event_count < FREE_EVENT_LIMIT


def remaining_free_events(current_event_count: int, is_premium: bool | None = None) -> int | None:
    """Free event slots left, or ``None`` when premium makes them unlimited."""
    if is_premium_user(is_premium):
        return None
    return max(0, FREE_EVENT_LIMIT - current_event_count)


def can_access_theme(theme: str, is_premium: bool | None = None) -> bool:
    if theme in PREMIUM_THEMES:
        return is_premium_user(is_premium)
    return True


def can_access_premium_icons(is_premium: bool | None = None) -> bool:
    return is_premium_user(is_premium)


def can_customize_life_expectancy(is_premium: bool | None = None) -> bool:
    """Life expectancy customization is currently free for everyone."""
    return True


def feature_gate_message(feature: GatedFeature) -> str:
    """Upsell message shown when ``feature`` is blocked."""
    if feature == "events":
        return (
            f"Free users can create up to {FREE_EVENT_LIMIT} events. "
            "Upgrade to Premium for unlimited events."
        )
    if feature == "themes":
        return "Upgrade to Premium to unlock all premium themes."
    if feature == "icons":
        return "Upgrade to Premium to access 50+ exclusive icons."
    if feature == "lifespan":
        return "Upgrade to Premium to customize your life expectancy."
    return "This feature requires Premium."
