"""HTTP client for the Weather Underground upload endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

import requests

from wxupdate.errors import NetworkFailure, UploadAPIError
from wxupdate.upload.request import UpdateRequest

logger: Final = logging.getLogger(__name__)

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the uploaded parameters",
    401: "Station ID or password rejected",
    403: "Station blocked or password revoked",
    404: "Upload endpoint not found - check urlNormalUpload",
    429: "Rate limit exceeded - lower the upload frequency",
    500: "Weather Underground internal error",
    502: "Bad gateway at Weather Underground",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


@dataclass(frozen=True)
class UploadResponse:
    """Status and body returned by the upload endpoint."""

    status_code: int
    body: str

    @property
    def accepted(self) -> bool:
        """Whether the service reported ``success`` in the body."""
        return self.body.strip().lower().startswith("success")


class UploadClient:
    """Send a single update request.

    Issues exactly one request per call; there is no retry. Transport
    failures and non-200 answers are raised as ``UploadAPIError`` family
    exceptions.
    """

    def __init__(self, timeout: float = 10) -> None:
        """Initialize the client.

        Args:
            timeout: Timeout for the request in seconds
        """
        self.timeout = timeout

    def send(self, request: UpdateRequest) -> UploadResponse:
        """Execute the request and read the full response body.

        Args:
            request: Request produced by ``RequestBuilder``

        Returns:
            UploadResponse with status code and body text

        Raises:
            NetworkFailure: When the service cannot be reached
            UploadAPIError: When the service answers with a non-200 status
        """
        try:
            resp = requests.get(request.url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Upload network error: %s", exc)
            raise NetworkFailure(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = HTTP_ERROR_MAP.get(resp.status_code, resp.text.strip() or resp.reason)
            logger.error("Upload error: %s - %s", resp.status_code, msg)
            raise UploadAPIError.from_status(resp.status_code, msg, resp.text)

        response = UploadResponse(status_code=resp.status_code, body=resp.text)
        if not response.accepted:
            logger.warning("Upload not acknowledged: %s", response.body.strip())
        return response
