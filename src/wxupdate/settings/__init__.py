"""Settings management.

This package provides:
- StationSettings: Station credentials and paths loaded from the properties file
"""

from .user import StationSettings, parse_properties

__all__ = ["StationSettings", "parse_properties"]
