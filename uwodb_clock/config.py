"""Application configuration loaded from environment variables."""

from __future__ import annotations

from datetime import date

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "uwodb-clock"
    debug: bool = False
    log_level: str = "INFO"

    # Civil time: every wall-clock value is read in this zone
    civil_timezone: str = "America/Los_Angeles"
    civil_timezone_label: str = "PDT"

    # Season cycle: anchor marks the start of season_starting_state
    season_anchor_date: date = date(2025, 10, 4)
    season_anchor_minute_of_day: int = 3 * 60 + 30
    season_summer_minutes: int = 11 * 60
    season_winter_minutes: int = 9 * 60
    season_starting_state: str = "summer"

    # Navbar polling
    tick_interval_seconds: float = 1.0

    # Progress ring colours
    ring_start_color: str = "rgb(59,130,246)"
    ring_filled_color: str = "rgb(16,185,129)"
    ring_unfilled_color: str = "rgba(255,255,255,0.09)"

    model_config = {"env_prefix": "UWODB_"}


settings = Settings()
