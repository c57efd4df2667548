"""Common utility functions and helpers for the wxupdate package."""

from wxupdate.utils.file import read_last_line

__all__ = ["read_last_line"]
