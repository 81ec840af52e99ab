"""Validated cycle configuration for the season and port calculators.

Both configs are checked once, when they are built.  The calculators assume
a valid config and never re-check it per evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from uwodb_clock.domain.civil import MINUTES_PER_DAY
from uwodb_clock.domain.enums import Season

SECONDS_PER_HOUR = 60 * 60


class ConfigurationError(ValueError):
    """Raised when a cycle configuration violates its invariants."""


def _require_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class CycleConfig:
    """Anchor and durations of the alternating Summer/Winter cycle.

    ``anchor_date`` + ``anchor_minute_of_day`` is a civil instant at which
    ``starting_season`` is known to begin.  From there the two seasons
    alternate forever, starting season first.
    """

    anchor_date: date
    anchor_minute_of_day: int
    summer_minutes: int
    winter_minutes: int
    starting_season: Season = Season.SUMMER

    def __post_init__(self) -> None:
        _require_positive_int("summer_minutes", self.summer_minutes)
        _require_positive_int("winter_minutes", self.winter_minutes)
        if (
            isinstance(self.anchor_minute_of_day, bool)
            or not isinstance(self.anchor_minute_of_day, int)
            or not 0 <= self.anchor_minute_of_day < MINUTES_PER_DAY
        ):
            raise ConfigurationError(
                f"anchor_minute_of_day must be an integer in [0, {MINUTES_PER_DAY}), "
                f"got {self.anchor_minute_of_day!r}"
            )
        if not isinstance(self.starting_season, Season):
            try:
                object.__setattr__(self, "starting_season", Season(self.starting_season))
            except ValueError as exc:
                raise ConfigurationError(
                    f"unknown starting_season {self.starting_season!r}"
                ) from exc

    @property
    def first_season(self) -> Season:
        return self.starting_season

    @property
    def second_season(self) -> Season:
        return self.starting_season.other

    def duration_of(self, season: Season) -> int:
        return self.summer_minutes if season is Season.SUMMER else self.winter_minutes

    @property
    def first_minutes(self) -> int:
        return self.duration_of(self.first_season)

    @property
    def second_minutes(self) -> int:
        return self.duration_of(self.second_season)

    @property
    def pattern_minutes(self) -> int:
        return self.summer_minutes + self.winter_minutes


@dataclass(frozen=True)
class PortCycleConfig:
    """Fixed clock-face Day/Night schedule inside ports.

    The cycle restarts at every multiple of ``cycle_seconds`` past the hour.
    Night starts ``night_start_seconds`` into a cycle, lasts
    ``night_seconds`` and wraps into the start of the next cycle; Day fills
    the remainder.
    """

    cycle_seconds: int = 900
    night_start_seconds: int = 780
    night_seconds: int = 300

    def __post_init__(self) -> None:
        _require_positive_int("cycle_seconds", self.cycle_seconds)
        _require_positive_int("night_seconds", self.night_seconds)
        if SECONDS_PER_HOUR % self.cycle_seconds:
            raise ConfigurationError(
                f"cycle_seconds must divide one hour, got {self.cycle_seconds}"
            )
        if self.night_seconds >= self.cycle_seconds:
            raise ConfigurationError("night_seconds must be shorter than cycle_seconds")
        if (
            isinstance(self.night_start_seconds, bool)
            or not isinstance(self.night_start_seconds, int)
            or not 0 <= self.night_start_seconds < self.cycle_seconds
        ):
            raise ConfigurationError(
                f"night_start_seconds must be an integer in [0, {self.cycle_seconds}), "
                f"got {self.night_start_seconds!r}"
            )

    @property
    def day_seconds(self) -> int:
        return self.cycle_seconds - self.night_seconds

