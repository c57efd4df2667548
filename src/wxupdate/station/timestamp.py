"""Conversion of station-local log timestamps to ``dateutc`` strings."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Final

from wxupdate.errors import InvalidTimestamp
from wxupdate.station.record import LogColumn, LogRecord
from wxupdate.station.timezone import US_EASTERN, TimeZoneRule

logger: Final = logging.getLogger(__name__)


class TimestampConverter:
    """Turn local date/time components into a UTC ``YYYY-MM-DD HH:MM:SS`` string.

    The station clock runs on local time, while the upload API expects
    UTC. The time zone rule is fixed for the lifetime of the converter.
    """

    def __init__(self, rule: TimeZoneRule = US_EASTERN) -> None:
        """Initialize the converter.

        Args:
            rule: Time zone rule the station clock follows
        """
        self.rule = rule

    def to_utc(self, year: int, month: int, day: int, hour: int, minute: int) -> datetime:
        """Convert local components to an aware UTC datetime.

        Raises:
            InvalidTimestamp: If the components are not a valid calendar instant
        """
        try:
            local = datetime(year, month, day, hour, minute)
            return self.rule.to_utc(local)
        except (ValueError, OverflowError) as exc:
            raise InvalidTimestamp(
                f"Invalid local time {year}-{month}-{day} {hour}:{minute}: {exc}"
            ) from exc

    def to_utc_string(self, year: int, month: int, day: int, hour: int, minute: int) -> str:
        """Convert local components to the upload ``dateutc`` format.

        Args:
            year: Four-digit year
            month: Month (1-12)
            day: Day of month
            hour: Hour (0-23)
            minute: Minute (0-59)

        Returns:
            Zero-padded UTC timestamp, e.g. ``2010-04-10 11:10:00``

        Raises:
            InvalidTimestamp: If the components are not a valid calendar instant
        """
        utc = self.to_utc(year, month, day, hour, minute)
        return utc.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")

    def from_record(self, record: LogRecord) -> str:
        """Convert the date/time columns of a log record.

        Raises:
            InvalidTimestamp: If a column is not an integer or the date is invalid
        """
        columns = (
            LogColumn.YEAR,
            LogColumn.MONTH,
            LogColumn.DAY,
            LogColumn.HOUR,
            LogColumn.MINUTE,
        )
        try:
            year, month, day, hour, minute = (int(record[c]) for c in columns)
        except ValueError as exc:
            raise InvalidTimestamp(f"Non-numeric date/time column: {exc}") from exc

        dateutc = self.to_utc_string(year, month, day, hour, minute)
        logger.debug(
            "Local %04d-%02d-%02d %02d:%02d -> UTC %s", year, month, day, hour, minute, dateutc
        )
        return dateutc
