"""Parsing of raw Weather Display log lines."""

from __future__ import annotations

import logging
from typing import ClassVar, Final

from wxupdate.constants import LOG_FIELD_COUNT
from wxupdate.errors import MalformedLogLine
from wxupdate.station.record import LogRecord

logger: Final = logging.getLogger(__name__)


class LogLineParser:
    """Split a log line into the fixed 17-column record.

    Columns are separated by runs of whitespace; Weather Display pads
    single-digit values with extra spaces, so empty tokens are discarded.
    No numeric validation happens here.
    """

    FIELD_COUNT: ClassVar[int] = LOG_FIELD_COUNT

    def parse(self, line: str | None) -> LogRecord:
        """Parse one log line.

        Args:
            line: Raw line text; ``None`` or an empty string means no data

        Returns:
            LogRecord holding the tokens in their original order

        Raises:
            MalformedLogLine: If the line does not hold exactly 17 fields
        """
        tokens = tuple(line.split()) if line else ()
        if len(tokens) != self.FIELD_COUNT:
            logger.debug("Rejected log line %r (%d fields)", line, len(tokens))
            raise MalformedLogLine(len(tokens), self.FIELD_COUNT)
        return LogRecord(tokens)
