"""Station settings loaded from WundergroundUpdate.properties."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wxupdate.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    PROPERTIES_ENCODING,
    REDACTED,
    YAML_ENCODING,
)
from wxupdate.errors import ConfigLoadFailure

# Load environment variables from .env file(s)
load_dotenv()

_PROPERTY_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_PROPERTY_LINE = re.compile(r"((?:\\.|[^\\=:\s])*)\s*[=:]?\s*(.*)$", re.DOTALL)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def _unescape(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        esc = match.group(1)
        if esc.startswith("u") and len(esc) == 5:
            return chr(int(esc[1:], 16))
        return _PROPERTY_ESCAPES.get(esc, esc)

    return re.sub(r"\\(u[0-9a-fA-F]{4}|.)", replace, text)


def parse_properties(content: str) -> dict[str, str]:
    """Parse Java-style ``.properties`` content.

    Supports ``key=value``, ``key: value`` and ``key value`` entries,
    ``#``/``!`` comment lines, backslash escapes and lines continued with
    a trailing backslash. Later keys override earlier ones.

    Args:
        content: Raw file text

    Returns:
        Mapping of property name to unescaped value
    """
    data: dict[str, str] = {}
    pending = ""

    def store(logical: str) -> None:
        match = _PROPERTY_LINE.match(logical)
        if match and match.group(1):
            data[_unescape(match.group(1))] = _unescape(match.group(2))

    for raw in content.splitlines():
        line = raw.lstrip()
        if not pending and (not line or line[0] in "#!"):
            continue
        # an odd number of trailing backslashes continues the line
        if (len(line) - len(line.rstrip("\\"))) % 2:
            pending += line[:-1]
            continue
        store(pending + line)
        pending = ""

    if pending:
        store(pending)
    return data


class StationSettings(BaseModel):
    """Credentials and paths for one personal weather station.

    Keys may be given with the property names used by the distributed
    ``WundergroundUpdate.properties`` file (``urlNormalUpload``,
    ``stationID`` ...) or with the field names below. The model is frozen;
    one instance is loaded per run and passed to whatever needs it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, str_strip_whitespace=True)

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path(CONFIG_FILENAME),
        Path(f"~/.config/wxupdate/{CONFIG_FILENAME}").expanduser(),
        Path(f"/etc/wxupdate/{CONFIG_FILENAME}"),
    ]

    # Upload endpoint and credentials
    upload_url: str = Field(
        "", alias="urlNormalUpload", description="Weather Underground update endpoint"
    )
    station_id: str = Field(..., min_length=1, alias="stationID", description="Station ID")
    password: str = Field(..., min_length=1, alias="password", description="Station password")

    # Station log
    data_file_path: Path = Field(
        ..., alias="dataFilePath", description="Weather Display log file to read"
    )

    # Timing
    upload_interval_secs: int = Field(
        300,
        gt=0,
        alias="uploadIntervalSecs",
        description="Scheduler interval; informational, not enforced",
    )
    http_timeout_secs: float = Field(
        10.0, gt=0, alias="httpTimeoutSecs", description="Upload request timeout (seconds)"
    )

    # ---- validators ----
    @field_validator("station_id", "password", mode="before")
    @classmethod
    def coerce_scalar(cls, v: Any) -> Any:
        """Accept numeric YAML scalars for text credentials."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    # ---- convenience methods ----
    def masked_items(self) -> dict[str, str]:
        """Settings keyed by property name, with the password hidden.

        Returns:
            Mapping suitable for echoing to an operator
        """
        return {
            "urlNormalUpload": self.upload_url,
            "uploadIntervalSecs": str(self.upload_interval_secs),
            "stationID": self.station_id,
            "password": REDACTED,
            "dataFilePath": str(self.data_file_path),
        }

    @classmethod
    def load(cls, path: Path | None = None) -> StationSettings:
        """Load configuration from a properties or YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated StationSettings object

        Raises:
            ConfigLoadFailure: If no config file is found, or it cannot be
                read, parsed or validated
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise ConfigLoadFailure(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise ConfigLoadFailure(
                        f"No configuration file found. Create {CONFIG_FILENAME} "
                        f"or set {CONFIG_ENV_VAR}."
                    )

        is_yaml = path.suffix.lower() in (".yaml", ".yml")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise ConfigLoadFailure(f"Unable to read config file {path}: {exc}") from exc

        # properties files follow java.util.Properties and are read as ISO-8859-1
        encoding = YAML_ENCODING if is_yaml else PROPERTIES_ENCODING
        try:
            raw = _interpolate_env(content.decode(encoding))
        except UnicodeDecodeError as exc:
            raise ConfigLoadFailure(f"Config file {path} is not valid {encoding}: {exc}") from exc

        if is_yaml:
            import yaml  # local import to avoid hard dep for callers

            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as exc:
                raise ConfigLoadFailure(f"Unable to parse config YAML: {exc}") from exc
        else:
            data = parse_properties(raw)

        if not isinstance(data, dict):
            raise ConfigLoadFailure(f"Config file {path} does not hold key/value pairs")

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise ConfigLoadFailure(f"Invalid configuration:\n{err}") from err
