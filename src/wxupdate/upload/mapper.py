"""Mapping of station log records to Weather Underground parameters."""

from __future__ import annotations

import logging
from typing import ClassVar, Final

from wxupdate.constants import SOFTWARE_TYPE
from wxupdate.station.parser import LogLineParser
from wxupdate.station.record import LogColumn, LogRecord
from wxupdate.station.timestamp import TimestampConverter

logger: Final = logging.getLogger(__name__)

# Upload parameters, keyed by Weather Underground name
UploadRecord = dict[str, str]


class FieldMapper:
    """Build the upload record for one log record.

    Values are passed through as the station wrote them: no unit
    conversion and no range checks. The minute, monthly and yearly rain
    columns and the heat index are not uploaded.
    """

    COLUMN_KEYS: ClassVar[dict[str, LogColumn]] = {
        "tempf": LogColumn.TEMPERATURE,
        "humidity": LogColumn.HUMIDITY,
        "dewptf": LogColumn.DEW_POINT,
        "baromin": LogColumn.BAROMETER,
        "windspeedmph": LogColumn.WIND_SPEED,
        "windgustmph": LogColumn.GUST_SPEED,
        "winddir": LogColumn.WIND_DIRECTION,
        "dailyrainin": LogColumn.DAILY_RAIN,
    }

    def __init__(
        self,
        converter: TimestampConverter | None = None,
        parser: LogLineParser | None = None,
    ) -> None:
        """Initialize the mapper.

        Args:
            converter: Optional timestamp converter (US Eastern by default)
            parser: Optional log line parser used by ``map_line``
        """
        self.converter = converter or TimestampConverter()
        self.parser = parser or LogLineParser()

    def map(self, record: LogRecord) -> UploadRecord:
        """Produce the upload parameters for a log record.

        Args:
            record: Parsed 17-column log record

        Returns:
            Mapping of upload parameter name to value

        Raises:
            InvalidTimestamp: If the date/time columns cannot be converted
        """
        upload: UploadRecord = {"dateutc": self.converter.from_record(record)}
        for key, column in self.COLUMN_KEYS.items():
            upload[key] = record[column]
        upload["softwaretype"] = SOFTWARE_TYPE

        logger.debug("Upload record: %s", upload)
        return upload

    def map_line(self, line: str | None) -> UploadRecord:
        """Parse a raw log line and map it.

        Raises:
            MalformedLogLine: If the line does not hold 17 fields
            InvalidTimestamp: If the date/time columns cannot be converted
        """
        return self.map(self.parser.parse(line))
