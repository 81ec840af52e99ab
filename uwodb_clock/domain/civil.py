"""CivilInstant — a wall-clock reading in one fixed named timezone.

The calculator never looks at the viewer's local time.  Every evaluation
starts by converting an aware instant into the civil zone and freezing the
calendar fields; everything after that is arithmetic on those fields.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field, model_validator

MINUTES_PER_DAY = 24 * 60


class CivilInstant(BaseModel):
    """Calendar fields of an instant as observed in ``timezone``."""

    year: int = Field(..., ge=1, le=9999)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    second: int = Field(..., ge=0, le=59)
    microsecond: int = Field(0, ge=0, le=999_999)
    timezone: str = Field("UTC", description="IANA name of the civil zone")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_calendar_date(self) -> CivilInstant:
        date(self.year, self.month, self.day)
        return self

    @classmethod
    def from_datetime(cls, moment: datetime, timezone: str) -> CivilInstant:
        """Convert an aware datetime into civil fields of *timezone*.

        Raises ValueError for naive datetimes: a wall-clock value with no
        zone cannot be placed on the civil calendar.
        """
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise ValueError("CivilInstant requires a timezone-aware datetime")
        local = moment.astimezone(ZoneInfo(timezone))
        return cls(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            microsecond=local.microsecond,
            timezone=timezone,
        )

    @property
    def civil_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def epoch_day(self) -> int:
        """Day number of the civil date, independent of time of day and offset."""
        return self.civil_date.toordinal()

    @property
    def seconds(self) -> float:
        """Second of the minute including the fractional part."""
        return self.second + self.microsecond / 1_000_000

    @property
    def minutes_today(self) -> float:
        """Minutes elapsed since civil midnight, fractional."""
        return self.hour * 60 + self.minute + self.seconds / 60
