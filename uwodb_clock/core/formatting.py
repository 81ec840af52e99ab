"""Clock and countdown labels shown in the navbar."""

from __future__ import annotations

import math
from datetime import timedelta


def pad2(n: int) -> str:
    return f"{n:02d}"


def fmt_hms(hour: int, minute: int, second: int) -> str:
    return f"{pad2(hour)}:{pad2(minute)}:{pad2(second)}"


def fmt_hm(hour: int, minute: int) -> str:
    return f"{pad2(hour)}:{pad2(minute)}"


def fmt_mmss(total_seconds: int) -> str:
    """Minutes are not wrapped at 60: nine hours reads ``540:00``."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{pad2(minutes)}:{pad2(seconds)}"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def countdown(remaining: timedelta) -> str:
    """Format time left as ``MM:SS``, rounded to the second and never negative."""
    return fmt_mmss(max(0, round_half_up(remaining.total_seconds())))


def with_zone(label: str, zone_label: str) -> str:
    return f"{label} {zone_label}" if zone_label else label
