"""PortPhase — Day/Night inside ports on a fixed 15-minute clock face.

The cycle has no anchor.  It is keyed off the minute-of-hour, so it
restarts at :00, :15, :30 and :45 of every hour.  With the default config
Night covers minutes 13-14 of one block and 0-2 of the next (5 minutes),
Day covers minutes 3-12 (10 minutes).

Night is evaluated in two segments:
    late  [780, 900)  progress (s - 780) / 300, countdown to the block end
    early [0, 180)    progress (s + 120) / 300, countdown to sunrise
The late-segment countdown runs to the block boundary, then restarts at
03:00 for the early segment.
"""

from __future__ import annotations

from datetime import timedelta

from uwodb_clock.core.formatting import countdown
from uwodb_clock.core.ring import RingPalette, clamp_progress, progress_ring
from uwodb_clock.domain.civil import CivilInstant
from uwodb_clock.domain.cycle import PortCycleConfig
from uwodb_clock.domain.enums import PortPhaseLabel
from uwodb_clock.domain.phase import PortReading

DEFAULT_PORT_CYCLE = PortCycleConfig()


def second_in_cycle(now: CivilInstant, config: PortCycleConfig = DEFAULT_PORT_CYCLE) -> float:
    """Seconds into the current port cycle, fractional part included."""
    return (now.minute * 60 + now.seconds) % config.cycle_seconds


def port_phase(
    now: CivilInstant,
    config: PortCycleConfig = DEFAULT_PORT_CYCLE,
    palette: RingPalette | None = None,
) -> PortReading:
    """Evaluate the port Day/Night cycle at *now*."""
    s = second_in_cycle(now, config)
    cycle = config.cycle_seconds
    night_start = config.night_start_seconds
    night_stop = night_start + config.night_seconds
    # part of the night that spills into the next cycle, 0 if none
    spill = max(0, night_stop - cycle)

    if night_start <= s < night_stop:
        label = PortPhaseLabel.NIGHT
        progress = (s - night_start) / config.night_seconds
        secs_to_flip = min(night_stop, cycle) - s
    elif s < spill:
        label = PortPhaseLabel.NIGHT
        progress = (s + cycle - night_start) / config.night_seconds
        secs_to_flip = spill - s
    else:
        label = PortPhaseLabel.DAY
        into_day = (s - night_stop) % cycle
        progress = into_day / config.day_seconds
        secs_to_flip = config.day_seconds - into_day

    progress = clamp_progress(progress)
    remaining = timedelta(seconds=max(0.0, secs_to_flip))

    return PortReading(
        label=label,
        progress=progress,
        remaining=remaining,
        ring=progress_ring(progress, palette),
        # countdown from the whole-second position, like the clock label
        remaining_countdown=countdown(remaining + timedelta(microseconds=now.microsecond)),
    )
