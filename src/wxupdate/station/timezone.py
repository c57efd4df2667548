"""Fixed-offset time zone with a yearly daylight-saving rule."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta


@dataclass(frozen=True)
class TransitionRule:
    """The n-th given weekday of a month, at a local wall-clock hour.

    ``week`` counts occurrences from the start of the month (1 = first).
    """

    month: int
    week: int
    weekday: int = calendar.SUNDAY
    hour: int = 2

    def on(self, year: int) -> datetime:
        """Return the naive local transition instant for ``year``."""
        first = date(year, self.month, 1)
        day = 1 + (self.weekday - first.weekday()) % 7 + (self.week - 1) * 7
        return datetime(year, self.month, day, self.hour)


@dataclass(frozen=True)
class TimeZoneRule:
    """Standard UTC offset plus a daylight-saving window.

    The window is evaluated on local wall-clock time: it starts at
    ``dst_start`` (inclusive) and ends at ``dst_end`` (exclusive), both of
    the same calendar year. Local times inside the skipped spring hour are
    treated as daylight time; the repeated autumn hour resolves to the
    earlier, daylight-time reading.
    """

    standard_offset: timedelta
    dst_start: TransitionRule
    dst_end: TransitionRule
    dst_saving: timedelta = timedelta(hours=1)

    def is_dst(self, local: datetime) -> bool:
        """Check whether daylight saving applies to a local wall-clock time."""
        wall = local.replace(tzinfo=None)
        return self.dst_start.on(wall.year) <= wall < self.dst_end.on(wall.year)

    def utcoffset(self, local: datetime) -> timedelta:
        """Return the UTC offset in effect at a local wall-clock time."""
        if self.is_dst(local):
            return self.standard_offset + self.dst_saving
        return self.standard_offset

    def to_utc(self, local: datetime) -> datetime:
        """Convert a naive local wall-clock time to an aware UTC datetime.

        Raises:
            OverflowError: If the result falls outside the supported years
        """
        wall = local.replace(tzinfo=None)
        return (wall - self.utcoffset(wall)).replace(tzinfo=UTC)


# US Eastern: UTC-5, DST from the second Sunday of March 02:00 to the
# first Sunday of November 02:00.
US_EASTERN = TimeZoneRule(
    standard_offset=timedelta(hours=-5),
    dst_start=TransitionRule(month=3, week=2),
    dst_end=TransitionRule(month=11, week=1),
)
