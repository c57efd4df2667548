"""Serialization of upload records into update request URLs."""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass

from wxupdate.constants import REDACTED, UPDATE_ACTION
from wxupdate.errors import InvalidEndpoint
from wxupdate.settings.user import StationSettings


@dataclass(frozen=True)
class UpdateRequest:
    """A single update request ready to be sent."""

    url: str
    method: str = "GET"

    @property
    def redacted_url(self) -> str:
        """URL with the ``PASSWORD`` value masked, suitable for printing."""
        parts = urllib.parse.urlsplit(self.url)
        query = [
            (key, REDACTED if key == "PASSWORD" else value)
            for key, value in urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
        ]
        return parts._replace(query=urllib.parse.urlencode(query)).geturl()


class RequestBuilder:
    """Build the ``updateraw`` request for a station.

    The query string always starts with ``ID`` and ``PASSWORD``, then
    carries the upload record pairs in insertion order, and ends with
    ``action=updateraw``. Every key and value is form-encoded.
    """

    def __init__(self, settings: StationSettings) -> None:
        """Initialize with station settings.

        Args:
            settings: Settings holding endpoint and credentials
        """
        self.settings = settings

    def build(self, record: Mapping[str, str]) -> UpdateRequest:
        """Create the request for an upload record.

        Args:
            record: Upload parameters produced by ``FieldMapper``

        Returns:
            UpdateRequest with an absolute URL

        Raises:
            InvalidEndpoint: If the configured endpoint is not an absolute URL
        """
        endpoint = self.settings.upload_url.strip()
        try:
            parsed = urllib.parse.urlsplit(endpoint)
        except ValueError as exc:
            raise InvalidEndpoint(f"Invalid upload URL: {endpoint!r} ({exc})") from exc
        if not parsed.scheme or not parsed.netloc:
            raise InvalidEndpoint(f"Invalid upload URL: {endpoint!r}")
        # a query appended after ``#`` would never reach the server
        if parsed.fragment or "#" in endpoint:
            raise InvalidEndpoint(f"Upload URL must not carry a fragment: {endpoint!r}")

        params: list[tuple[str, str]] = [
            ("ID", self.settings.station_id),
            ("PASSWORD", self.settings.password),
        ]
        params.extend(record.items())
        params.append(("action", UPDATE_ACTION))

        query = urllib.parse.urlencode(params)
        separator = "&" if parsed.query else "?"
        if endpoint.endswith(("?", "&")):
            separator = ""
        return UpdateRequest(url=f"{endpoint}{separator}{query}")
