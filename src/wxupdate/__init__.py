"""Weather Underground updater for Weather Display station logs."""

__version__ = "0.1.0"

from .controller import UploadResult, WundergroundUpdater
from .errors import (
    ConfigLoadFailure,
    InvalidEndpoint,
    InvalidTimestamp,
    LogFileUnavailable,
    MalformedLogLine,
    NetworkFailure,
    UploadAPIError,
    WxUpdateError,
)

__all__ = [
    "ConfigLoadFailure",
    "InvalidEndpoint",
    "InvalidTimestamp",
    "LogFileUnavailable",
    "MalformedLogLine",
    "NetworkFailure",
    "UploadAPIError",
    "UploadResult",
    "WundergroundUpdater",
    "WxUpdateError",
]
