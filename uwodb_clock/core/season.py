"""SeasonCycle — Summer/Winter state from elapsed civil time since an anchor.

Design principles:
    1. Pure function: accepts a CivilInstant and a CycleConfig, returns a
       SeasonReading.
    2. No clock access, no I/O, no state.
    3. Anchor and durations always come from the config.

Position in the pattern:
    days     = epoch_day(now) - epoch_day(anchor)
    total    = days * 1440 + minutes_today - anchor_minute_of_day
    position = total floor-mod (first_minutes + second_minutes)

    The day count works on calendar dates only, so a civil day that is 23
    or 25 hours long (DST) still counts as one day.

Next change label:
    (minutes_today + remaining) mod 1440, read as today's wall clock.  It
    carries no date; a flip after midnight shows as an early-morning time.
"""

from __future__ import annotations

from datetime import timedelta

from uwodb_clock.core.formatting import countdown, fmt_hm, with_zone
from uwodb_clock.core.ring import RingPalette, clamp_progress, progress_ring
from uwodb_clock.domain.civil import MINUTES_PER_DAY, CivilInstant
from uwodb_clock.domain.cycle import CycleConfig
from uwodb_clock.domain.phase import SeasonReading


def minutes_since_anchor(now: CivilInstant, config: CycleConfig) -> float:
    """Signed minutes between the anchor and *now*, both on the civil calendar."""
    days = now.epoch_day - config.anchor_date.toordinal()
    return days * MINUTES_PER_DAY + now.minutes_today - config.anchor_minute_of_day


def pattern_position(now: CivilInstant, config: CycleConfig) -> float:
    """Minutes into the current Summer+Winter pattern, in [0, pattern)."""
    pattern = config.pattern_minutes
    position = minutes_since_anchor(now, config) % pattern
    # float modulo of a tiny negative value can round up to the modulus
    if position >= pattern:
        return 0.0
    return position


def season_cycle(
    now: CivilInstant,
    config: CycleConfig,
    palette: RingPalette | None = None,
    timezone_label: str = "",
) -> SeasonReading:
    """Evaluate the season cycle at *now*."""
    position = pattern_position(now, config)

    if position < config.first_minutes:
        season = config.first_season
        since_last = position
    else:
        season = config.second_season
        since_last = position - config.first_minutes
    period = config.duration_of(season)

    remaining_minutes = max(0.0, period - since_last)
    progress = clamp_progress(since_last / period)

    next_total = (now.minutes_today + remaining_minutes) % MINUTES_PER_DAY
    clock_label = fmt_hm(int(next_total // 60), int(next_total % 60))
    remaining = timedelta(minutes=remaining_minutes)

    return SeasonReading(
        label=season,
        progress=progress,
        remaining=remaining,
        ring=progress_ring(progress, palette),
        next_change_clock_label=clock_label,
        next_change_label=with_zone(clock_label, timezone_label),
        # countdown from the whole-second position, like the clock label
        remaining_countdown=countdown(remaining + timedelta(microseconds=now.microsecond)),
    )
