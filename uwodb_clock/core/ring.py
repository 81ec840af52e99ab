"""Progress ring formatter shared by the season and port indicators."""

from __future__ import annotations

import math
from dataclasses import dataclass

from uwodb_clock.domain.phase import ProgressRing

RING_START_ANGLE = -90.0


@dataclass(frozen=True)
class RingPalette:
    start: str = "rgb(59,130,246)"
    filled: str = "rgb(16,185,129)"
    unfilled: str = "rgba(255,255,255,0.09)"


DEFAULT_PALETTE = RingPalette()


def clamp_progress(progress: float) -> float:
    """Clamp to [0, 1].  NaN counts as no progress."""
    if math.isnan(progress):
        return 0.0
    return max(0.0, min(1.0, progress))


def progress_ring(progress: float, palette: RingPalette | None = None) -> ProgressRing:
    """Map a progress fraction to a clockwise ring starting at 12 o'clock.

    Malformed input is clamped, never rejected.
    """
    palette = palette or DEFAULT_PALETTE
    return ProgressRing(
        start_angle=RING_START_ANGLE,
        filled_degrees=clamp_progress(progress) * 360.0,
        start_color=palette.start,
        filled_color=palette.filled,
        unfilled_color=palette.unfilled,
    )
