"""Controlled enumerations for the phase calculator.

Every state label exposed to the navbar MUST reference an enum defined here.
"""

from __future__ import annotations

from enum import Enum


class Season(str, Enum):
    """The two alternating in-game seasons."""

    SUMMER = "Summer"
    WINTER = "Winter"

    @property
    def other(self) -> Season:
        return Season.WINTER if self is Season.SUMMER else Season.SUMMER


class PortPhaseLabel(str, Enum):
    """Lighting state inside a port."""

    DAY = "Day"
    NIGHT = "Night"

    @property
    def icon(self) -> str:
        return "sun" if self is PortPhaseLabel.DAY else "moon"
