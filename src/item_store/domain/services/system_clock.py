"""Wall-clock reporting for the system info endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Callable


def current_local_time(now: Callable[[], datetime] = datetime.now) -> str:
    """Return the current local time as a human-readable string.

    The string carries the local UTC offset, e.g.
    ``2026-10-18 09:15:02.123456+02:00``.

    Args:
        now: Clock to read. Naive results are interpreted as local time.
    """
    return str(now().astimezone())
