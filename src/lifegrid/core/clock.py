"""Reference instant sampling.

Engine functions never read the system clock themselves. A caller that
renders a screen samples ``now`` once here and threads it through every
computation so all figures on that screen agree on the same "today".
"""

from __future__ import annotations

from datetime import datetime


def reference_now(now: datetime | None = None) -> datetime:
    """Return ``now`` unchanged, or sample the local wall clock if omitted."""
    if now is not None:
        return now
    return datetime.now()
