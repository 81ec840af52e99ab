"""Tests for the Summer/Winter season cycle.

All instants are built directly as CivilInstant fields, so these tests
never touch the system clock.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from uwodb_clock.core import season_cycle
from uwodb_clock.core.season import minutes_since_anchor
from uwodb_clock.domain.civil import CivilInstant
from uwodb_clock.domain.cycle import CycleConfig
from uwodb_clock.domain.enums import Season

# ── Helpers ──────────────────────────────────────────────────────────────────

_LA = "America/Los_Angeles"

# Summer starts 2025-10-04 03:30, 11h Summer / 9h Winter
_CONFIG = CycleConfig(
    anchor_date=date(2025, 10, 4),
    anchor_minute_of_day=3 * 60 + 30,
    summer_minutes=660,
    winter_minutes=540,
)


def _at(year: int, month: int, day: int, hour: int, minute: int, second: int = 0) -> CivilInstant:
    return CivilInstant(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second, timezone=_LA
    )


_ANCHOR = _at(2025, 10, 4, 3, 30)


# ── Anchor & Concrete Scenarios ──────────────────────────────────────────────


class TestAnchor:
    def test_anchor_reports_starting_state_with_zero_progress(self) -> None:
        reading = season_cycle(_ANCHOR, _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.progress == 0.0
        assert reading.remaining == timedelta(minutes=660)

    def test_anchor_next_change_label(self) -> None:
        reading = season_cycle(_ANCHOR, _CONFIG)
        assert reading.next_change_clock_label == "14:30"
        assert reading.remaining_countdown == "660:00"

    def test_winter_first_anchor(self) -> None:
        cfg = CycleConfig(
            anchor_date=date(2025, 10, 4),
            anchor_minute_of_day=210,
            summer_minutes=600,
            winter_minutes=540,
            starting_season=Season.WINTER,
        )
        reading = season_cycle(_ANCHOR, cfg)
        assert reading.label is Season.WINTER
        assert reading.progress == 0.0
        assert reading.remaining == timedelta(minutes=540)

    def test_halfway_through_summer(self) -> None:
        # 330 minutes after the anchor
        reading = season_cycle(_at(2025, 10, 4, 9, 0), _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.progress == pytest.approx(0.5)
        assert reading.remaining_countdown == "330:00"

    def test_minutes_since_anchor_is_signed(self) -> None:
        assert minutes_since_anchor(_at(2025, 10, 4, 3, 29), _CONFIG) == pytest.approx(-1.0)
        assert minutes_since_anchor(_at(2025, 10, 5, 3, 30), _CONFIG) == pytest.approx(1440.0)


# ── Transitions ──────────────────────────────────────────────────────────────


class TestTransitions:
    def test_progress_approaches_one_before_flip(self) -> None:
        reading = season_cycle(_at(2025, 10, 4, 14, 29, 59), _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.progress == pytest.approx(1.0, abs=1e-4)
        assert reading.remaining.total_seconds() == pytest.approx(1.0, abs=1e-3)
        assert reading.remaining_countdown == "00:01"

    def test_countdown_never_zero_before_flip(self) -> None:
        now = CivilInstant(
            year=2025, month=10, day=4, hour=14, minute=29, second=59,
            microsecond=600_000, timezone=_LA,
        )
        reading = season_cycle(now, _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.remaining_countdown == "00:01"

    def test_flip_to_winter(self) -> None:
        reading = season_cycle(_at(2025, 10, 4, 14, 30), _CONFIG)
        assert reading.label is Season.WINTER
        assert reading.progress == 0.0
        assert reading.next_change_clock_label == "23:30"

    def test_progress_resets_just_after_flip(self) -> None:
        reading = season_cycle(_at(2025, 10, 4, 14, 30, 1), _CONFIG)
        assert reading.label is Season.WINTER
        assert reading.progress == pytest.approx(1 / 60 / 540)

    def test_pattern_repeats_after_twenty_hours(self) -> None:
        reading = season_cycle(_at(2025, 10, 4, 23, 30), _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.progress == 0.0

    def test_next_change_wraps_to_todays_clock(self) -> None:
        # Summer from 23:30 ends at 10:30 the next day; the label has no date
        reading = season_cycle(_at(2025, 10, 4, 23, 30), _CONFIG)
        assert reading.next_change_clock_label == "10:30"


# ── Before the Anchor & Calendar Edge Cases ─────────────────────────────────


class TestCalendar:
    def test_instant_before_anchor_uses_floored_modulo(self) -> None:
        reading = season_cycle(_at(2025, 10, 4, 3, 29), _CONFIG)
        assert reading.label is Season.WINTER
        assert reading.progress == pytest.approx(539 / 540)
        assert reading.remaining == timedelta(minutes=1)

    def test_years_before_anchor(self) -> None:
        reading = season_cycle(_at(2020, 1, 1, 0, 0), _CONFIG)
        assert 0.0 <= reading.progress <= 1.0
        assert reading.remaining >= timedelta(0)

    def test_day_count_ignores_dst_length(self) -> None:
        # 2025-11-03 00:00 is 30 civil days after the anchor date:
        # 30*1440 - 210 = 42990 -> 990 into the pattern -> 330 into Winter
        reading = season_cycle(_at(2025, 11, 3, 0, 0), _CONFIG)
        assert reading.label is Season.WINTER
        assert reading.progress == pytest.approx(330 / 540)

    def test_evaluates_converted_instant(self) -> None:
        moment = datetime(2025, 10, 4, 16, 0, 0, tzinfo=timezone.utc)  # 09:00 PDT
        reading = season_cycle(CivilInstant.from_datetime(moment, _LA), _CONFIG)
        assert reading.label is Season.SUMMER
        assert reading.progress == pytest.approx(0.5)


# ── Invariants ───────────────────────────────────────────────────────────────


class TestInvariants:
    def test_progress_bounded_over_two_days(self) -> None:
        start = datetime(2025, 10, 4, 0, 0, 0)
        for step in range(0, 2 * 1440, 7):
            t = start + timedelta(minutes=step, seconds=step % 60)
            reading = season_cycle(
                _at(t.year, t.month, t.day, t.hour, t.minute, t.second), _CONFIG
            )
            assert 0.0 <= reading.progress <= 1.0
            assert reading.remaining >= timedelta(0)
            assert 0.0 <= reading.ring.filled_degrees <= 360.0

    def test_idempotent(self) -> None:
        now = _at(2025, 12, 25, 17, 45, 12)
        assert season_cycle(now, _CONFIG) == season_cycle(now, _CONFIG)

    def test_timezone_label_suffix_and_tooltip(self) -> None:
        reading = season_cycle(_ANCHOR, _CONFIG, timezone_label="PDT")
        assert reading.next_change_label == "14:30 PDT"
        assert reading.tooltip == "Next: 14:30 PDT (660:00)"

    def test_as_phase(self) -> None:
        phase = season_cycle(_at(2025, 10, 4, 9, 0), _CONFIG).as_phase()
        assert phase.label == "Summer"
        assert phase.progress == pytest.approx(0.5)
        assert phase.remaining == timedelta(minutes=330)
