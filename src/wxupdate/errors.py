"""Exception classes for the station upload pipeline.

Every failure that can end a run derives from ``WxUpdateError`` so the CLI
can map the whole family to a non-zero exit status. Upload failures keep
the HTTP status code around for diagnostics.
"""

from __future__ import annotations

from typing import Optional


class WxUpdateError(Exception):
    """Base class for all errors raised while performing an update."""


class ConfigLoadFailure(WxUpdateError):
    """Raised when the configuration file is missing, unreadable or invalid."""


class LogFileUnavailable(WxUpdateError):
    """Raised when the station log cannot be read or holds no observation."""


class MalformedLogLine(WxUpdateError):
    """Raised when a log line does not split into the expected column count."""

    def __init__(self, token_count: int, expected: int = 17) -> None:
        """Initialize the exception.

        Args:
            token_count: Number of tokens actually found
            expected: Number of tokens the log format requires
        """
        super().__init__(
            f"Expected {expected} whitespace-separated fields, found {token_count}"
        )
        self.token_count: int = token_count
        self.expected: int = expected


class InvalidTimestamp(WxUpdateError):
    """Raised when date/time columns do not form a valid calendar instant."""


class InvalidEndpoint(WxUpdateError):
    """Raised when the upload endpoint cannot produce a well-formed URL."""


class UploadAPIError(WxUpdateError):
    """Error while talking to the Weather Underground upload endpoint.

    Raised when the HTTP request fails or the service answers with a
    non-success status. Keeps the status code (0 for transport failures)
    and the response text when available.
    """

    def __init__(self, code: int, message: str, body: Optional[str] = None) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 for transport errors
            message: Human-readable error message
            body: Optional raw response body for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.body: Optional[str] = body

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx).

        Returns:
            True for 400-499 status codes
        """
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx).

        Returns:
            True for 500-599 status codes
        """
        return self.code >= 500

    @classmethod
    def from_status(
        cls, status_code: int, message: str, body: Optional[str] = None
    ) -> UploadAPIError:
        """Create the most specific error for an HTTP status code.

        Args:
            status_code: HTTP status code returned by the service
            message: Human-readable error message
            body: Raw response body

        Returns:
            Appropriate UploadAPIError subclass
        """
        if status_code in (401, 403):
            return AuthenticationError(status_code, message, body)
        if 400 <= status_code < 500:
            return ClientError(status_code, message, body)
        if status_code >= 500:
            return ServerError(status_code, message, body)
        return cls(status_code, message, body)


class NetworkFailure(UploadAPIError):
    """Raised when a network issue prevents talking to the service."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(UploadAPIError):
    """Raised when the station ID or password is rejected."""

    pass


class ClientError(UploadAPIError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(UploadAPIError):
    """Raised for 5xx server errors."""

    pass
