"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from wxupdate.errors import LogFileUnavailable

logger: Final = logging.getLogger(__name__)


def read_last_line(file_path: Path) -> str:
    """Return the final non-blank line of a text file.

    The log is appended to continuously, so only the newest observation
    is of interest. Undecodable bytes are replaced rather than failing.

    Args:
        file_path: Path to the station log

    Returns:
        Last non-blank line, without its line terminator

    Raises:
        LogFileUnavailable: If the file cannot be read or holds no data
    """
    last: str | None = None
    try:
        with file_path.open(encoding="utf-8", errors="replace") as fh:
            for line in fh:
                if line.strip():
                    last = line
    except OSError as exc:
        raise LogFileUnavailable(f"Unable to read log file {file_path}: {exc}") from exc

    if last is None:
        raise LogFileUnavailable(f"Log file {file_path} holds no observations")

    logger.debug("Last line of %s: %r", file_path, last)
    return last.rstrip("\r\n")
