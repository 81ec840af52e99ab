"""Timezone-aware clock utilities.

All "now" values in uwodb-clock come from a Clock.  Production code uses
SystemClock; tests inject a FixedClock and move it explicitly instead of
patching the global time source.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...


class SystemClock:
    """Reads the host clock."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        if now.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        if now.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._now = now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta
