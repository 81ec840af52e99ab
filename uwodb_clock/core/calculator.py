"""TimePhaseCalculator — wires a clock, a civil timezone and cycle configs.

The season and port functions are pure and take explicit instants.  This
class is the single place that asks a Clock for "now", converts it to the
civil zone once, and evaluates both cycles against that one sample.
"""

from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from uwodb_clock.config import Settings
from uwodb_clock.core.formatting import fmt_hm, fmt_hms, with_zone
from uwodb_clock.core.port import DEFAULT_PORT_CYCLE, port_phase
from uwodb_clock.core.ring import DEFAULT_PALETTE, RingPalette
from uwodb_clock.core.season import season_cycle
from uwodb_clock.domain.civil import CivilInstant
from uwodb_clock.domain.cycle import ConfigurationError, CycleConfig, PortCycleConfig
from uwodb_clock.domain.enums import Season
from uwodb_clock.domain.phase import NavbarSnapshot, PortReading, SeasonReading
from uwodb_clock.foundation.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class TimePhaseCalculator:
    """Season and port readings for the navbar.

    Stateless apart from its configuration: every call samples the clock
    afresh (or uses the instant it is given) and returns new readings.
    """

    def __init__(
        self,
        season_config: CycleConfig,
        port_config: PortCycleConfig = DEFAULT_PORT_CYCLE,
        timezone: str = "America/Los_Angeles",
        timezone_label: str = "PDT",
        palette: RingPalette = DEFAULT_PALETTE,
        clock: Clock | None = None,
    ) -> None:
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"unknown civil timezone {timezone!r}") from exc

        self._season_config = season_config
        self._port_config = port_config
        self._timezone = timezone
        self._timezone_label = timezone_label
        self._palette = palette
        self._clock = clock or SystemClock()

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock | None = None) -> TimePhaseCalculator:
        """Build a calculator from application settings.

        Raises ConfigurationError on invalid anchor, durations or timezone
        so a bad deployment fails at startup rather than on the first tick.
        """
        season_config = CycleConfig(
            anchor_date=settings.season_anchor_date,
            anchor_minute_of_day=settings.season_anchor_minute_of_day,
            summer_minutes=settings.season_summer_minutes,
            winter_minutes=settings.season_winter_minutes,
            starting_season=_parse_season(settings.season_starting_state),
        )
        palette = RingPalette(
            start=settings.ring_start_color,
            filled=settings.ring_filled_color,
            unfilled=settings.ring_unfilled_color,
        )
        calculator = cls(
            season_config=season_config,
            timezone=settings.civil_timezone,
            timezone_label=settings.civil_timezone_label,
            palette=palette,
            clock=clock,
        )
        logger.info(
            "Season cycle: %s starts %s +%dmin, summer=%dmin winter=%dmin (%s)",
            season_config.starting_season.value,
            season_config.anchor_date.isoformat(),
            season_config.anchor_minute_of_day,
            season_config.summer_minutes,
            season_config.winter_minutes,
            settings.civil_timezone,
        )
        return calculator

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def season_config(self) -> CycleConfig:
        return self._season_config

    # ── Queries ──────────────────────────────────────────────────────────

    def civil_now(self) -> CivilInstant:
        return self.civil_at(self._clock.now())

    def civil_at(self, moment: datetime) -> CivilInstant:
        return CivilInstant.from_datetime(moment, self._timezone)

    def season(self, at: datetime | None = None) -> SeasonReading:
        now = self.civil_at(at) if at is not None else self.civil_now()
        return season_cycle(now, self._season_config, self._palette, self._timezone_label)

    def port(self, at: datetime | None = None) -> PortReading:
        now = self.civil_at(at) if at is not None else self.civil_now()
        return port_phase(now, self._port_config, self._palette)

    def snapshot(self, at: datetime | None = None) -> NavbarSnapshot:
        """Evaluate everything the navbar shows against one clock sample."""
        moment = at if at is not None else self._clock.now()
        now = self.civil_at(moment)
        return NavbarSnapshot(
            sampled_at=moment,
            timezone=self._timezone,
            server_time_label=with_zone(fmt_hms(now.hour, now.minute, now.second), self._timezone_label),
            compact_time_label=with_zone(fmt_hm(now.hour, now.minute), self._timezone_label),
            season=season_cycle(now, self._season_config, self._palette, self._timezone_label),
            port=port_phase(now, self._port_config, self._palette),
        )


def _parse_season(value: str) -> Season:
    for season in Season:
        if value.strip().lower() == season.value.lower():
            return season
    raise ConfigurationError(f"unknown season {value!r}; expected summer or winter")