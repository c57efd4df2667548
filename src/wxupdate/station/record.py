"""Fixed column layout of a Weather Display log line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from wxupdate.constants import LOG_FIELD_COUNT
from wxupdate.errors import MalformedLogLine


class LogColumn(IntEnum):
    """Zero-based column positions in a log line (PR = precipitation).

     0  1    2  3  4    5   6    7      8   9  10  11     12    13    14    15   16
    DD MM YYYY HH MM TEMP HUM DEWP BARO   WSP GSP WDR  MinPR DayPR MonPR YrPR  HIDX
    10  4 2010  7 10 40.5  55 25.5 30.002   0   3 224  0.000 0.000 0.917 4.598 40.5
    """

    DAY = 0
    MONTH = 1
    YEAR = 2
    HOUR = 3
    MINUTE = 4
    TEMPERATURE = 5  # °F
    HUMIDITY = 6  # %
    DEW_POINT = 7  # °F
    BAROMETER = 8  # inHg
    WIND_SPEED = 9  # mph
    GUST_SPEED = 10  # mph
    WIND_DIRECTION = 11  # degrees
    MINUTE_RAIN = 12
    DAILY_RAIN = 13
    MONTHLY_RAIN = 14
    YEARLY_RAIN = 15
    HEAT_INDEX = 16


@dataclass(frozen=True)
class LogRecord:
    """One observation from the station log, kept as raw string tokens.

    Values are not validated here; numeric interpretation is left to the
    consumers of each column.
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.tokens) != LOG_FIELD_COUNT:
            raise MalformedLogLine(len(self.tokens), LOG_FIELD_COUNT)

    def __getitem__(self, column: LogColumn | int) -> str:
        return self.tokens[column]

    def __len__(self) -> int:
        return len(self.tokens)
