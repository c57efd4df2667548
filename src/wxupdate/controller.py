"""Core controller for a single Weather Underground update."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from wxupdate.settings.user import StationSettings
from wxupdate.upload.client import UploadClient, UploadResponse
from wxupdate.upload.mapper import FieldMapper
from wxupdate.upload.request import RequestBuilder, UpdateRequest
from wxupdate.utils.file import read_last_line

TEST_CONFIG_PROPERTIES = """\
urlNormalUpload=https://weatherstation.wunderground.com/weatherstation/updateweatherstation.php
uploadIntervalSecs=300
stationID=KNYTEST1
password=secret
dataFilePath=dailylog.txt
"""

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    """Outcome of one run: the request built and, unless dry-run, the response."""

    request: UpdateRequest
    response: UploadResponse | None = None


class WundergroundUpdater:
    """Main controller for the update workflow.

    One run does the following, stopping at the first error:
    - Read the last observation from the station log
    - Parse and map it to upload parameters
    - Build the update URL
    - Send it once and read the response

    Errors propagate as ``WxUpdateError`` subclasses; nothing is retried.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        settings: StationSettings | None = None,
        client: UploadClient | None = None,
        mapper: FieldMapper | None = None,
        debug: bool = False,
    ):
        """Initialize the updater.

        Args:
            config_path: Path to the properties file (searched for if None)
            settings: Optional pre-loaded settings, skips loading the file
            client: Optional custom upload client
            mapper: Optional custom field mapper
            debug: Enable debug logging

        Raises:
            ConfigLoadFailure: If the configuration cannot be loaded
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.settings = settings or StationSettings.load(config_path)

        # Allow dependency injection or create defaults
        self.mapper = mapper or FieldMapper()
        self.request_builder = RequestBuilder(self.settings)
        self.client = client or UploadClient(timeout=self.settings.http_timeout_secs)

    def build_request(self) -> UpdateRequest:
        """Build the update request from the newest log line.

        Raises:
            LogFileUnavailable: If the log cannot be read or is empty
            MalformedLogLine: If the last line has the wrong field count
            InvalidTimestamp: If its date/time columns are invalid
            InvalidEndpoint: If the configured endpoint is unusable
        """
        line = read_last_line(self.settings.data_file_path)
        record = self.mapper.map_line(line)
        return self.request_builder.build(record)

    def run_once(self, dry_run: bool = False) -> UploadResult:
        """Perform one update.

        Args:
            dry_run: Build the request but do not send it

        Returns:
            UploadResult for this run
        """
        request = self.build_request()
        logger.info("Update URL: %s", request.redacted_url)
        logger.debug("Unredacted update URL: %s", request.url)

        if dry_run:
            logger.info("Dry run - update not sent")
            return UploadResult(request=request)

        response = self.client.send(request)
        logger.info(
            "Update sent for station %s (HTTP %s)", self.settings.station_id, response.status_code
        )
        return UploadResult(request=request, response=response)
