"""Station package - log line parsing and local time handling."""

from .parser import LogLineParser
from .record import LogColumn, LogRecord
from .timestamp import TimestampConverter
from .timezone import US_EASTERN, TimeZoneRule, TransitionRule

__all__ = [
    "US_EASTERN",
    "LogColumn",
    "LogLineParser",
    "LogRecord",
    "TimeZoneRule",
    "TimestampConverter",
    "TransitionRule",
]
