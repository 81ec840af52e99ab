"""Phase readings — immutable, display-ready outputs of one evaluation.

These are pure data structures.  They are recomputed on every tick and
never stored.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from uwodb_clock.domain.enums import PortPhaseLabel, Season


class ProgressRing(BaseModel):
    """Conic fill of a circular indicator, clockwise from the top."""

    start_angle: float = Field(-90.0, description="Degrees where the fill starts")
    filled_degrees: float = Field(..., ge=0.0, le=360.0)
    start_color: str
    filled_color: str
    unfilled_color: str

    model_config = {"frozen": True}

    def css(self) -> str:
        """Render as a CSS ``conic-gradient`` background image."""
        deg = _css_number(self.filled_degrees)
        return (
            f"conic-gradient(from {_css_number(self.start_angle)}deg, "
            f"{self.start_color} 0deg, "
            f"{self.filled_color} {deg}deg, "
            f"{self.unfilled_color} {deg}deg 360deg)"
        )


def _css_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


class PhaseResult(BaseModel):
    """Where a cycle stands at one instant."""

    label: str
    progress: float = Field(..., ge=0.0, le=1.0, description="Fraction of the current state elapsed")
    remaining: timedelta = Field(..., description="Time until the next transition, never negative")

    model_config = {"frozen": True}


class SeasonReading(BaseModel):
    """Season state plus everything the navbar shows for it."""

    label: Season
    progress: float = Field(..., ge=0.0, le=1.0)
    remaining: timedelta
    ring: ProgressRing
    next_change_clock_label: str = Field(..., description="HH:MM of the next flip, today's clock wrapped")
    next_change_label: str = Field(..., description="Clock label with the timezone suffix")
    remaining_countdown: str = Field(..., description="MM:SS until the next flip")

    model_config = {"frozen": True}

    @property
    def tooltip(self) -> str:
        return f"Next: {self.next_change_label} ({self.remaining_countdown})"

    def as_phase(self) -> PhaseResult:
        return PhaseResult(label=self.label.value, progress=self.progress, remaining=self.remaining)


class PortReading(BaseModel):
    """Port Day/Night state plus everything the navbar shows for it."""

    label: PortPhaseLabel
    progress: float = Field(..., ge=0.0, le=1.0)
    remaining: timedelta
    ring: ProgressRing
    remaining_countdown: str = Field(..., description="MM:SS until the next flip")

    model_config = {"frozen": True}

    @property
    def icon(self) -> str:
        return self.label.icon

    @property
    def tooltip(self) -> str:
        return f"Flip in {self.remaining_countdown}"

    def as_phase(self) -> PhaseResult:
        return PhaseResult(label=self.label.value, progress=self.progress, remaining=self.remaining)


class NavbarSnapshot(BaseModel):
    """One consistent sample of everything the navigation bar renders."""

    sampled_at: datetime
    timezone: str
    server_time_label: str = Field(..., description="HH:MM:SS with timezone suffix")
    compact_time_label: str = Field(..., description="HH:MM with timezone suffix")
    season: SeasonReading
    port: PortReading

    model_config = {"frozen": True}

    def to_payload(self) -> dict:
        """JSON-ready dict for HTTP and WebSocket clients."""
        return {
            "type": "navbar",
            "sampled_at": self.sampled_at.isoformat(),
            "timezone": self.timezone,
            "server_time": self.server_time_label,
            "server_time_compact": self.compact_time_label,
            "season": {
                "label": self.season.label.value,
                "progress": self.season.progress,
                "remaining_seconds": self.season.remaining.total_seconds(),
                "next_change": self.season.next_change_label,
                "countdown": self.season.remaining_countdown,
                "tooltip": self.season.tooltip,
                "ring": self.season.ring.css(),
            },
            "port": {
                "label": self.port.label.value,
                "icon": self.port.icon,
                "progress": self.port.progress,
                "remaining_seconds": self.port.remaining.total_seconds(),
                "countdown": self.port.remaining_countdown,
                "tooltip": self.port.tooltip,
                "ring": self.port.ring.css(),
            },
        }
