import pytest

from wxupdate.errors import (
    AuthenticationError,
    ClientError,
    ConfigLoadFailure,
    InvalidEndpoint,
    InvalidTimestamp,
    LogFileUnavailable,
    MalformedLogLine,
    NetworkFailure,
    ServerError,
    UploadAPIError,
    WxUpdateError,
)


def test_upload_api_error_str_and_flags() -> None:
    err = UploadAPIError(code=404, message="Not Found")
    assert str(err) == "[404] Not Found"
    assert err.is_client_error is True
    assert err.is_server_error is False


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, ClientError),
        (429, ClientError),
        (500, ServerError),
        (503, ServerError),
        (302, UploadAPIError),
    ],
)
def test_from_status_creates_expected_error(
    code: int, expected_type: type[UploadAPIError]
) -> None:
    err = UploadAPIError.from_status(code, "test error", "body")
    assert type(err) is expected_type
    assert err.code == code
    assert err.body == "body"
    assert "test error" in str(err)


def test_network_failure_wraps_exception() -> None:
    try:
        raise ConnectionError("BOOM")
    except ConnectionError as e:
        err = NetworkFailure(message="Connection error", original_error=e)
        assert str(err) == "[0] Connection error"
        assert err.original_error is e


def test_malformed_log_line_message() -> None:
    err = MalformedLogLine(5)
    assert err.token_count == 5
    assert str(err) == "Expected 17 whitespace-separated fields, found 5"


@pytest.mark.parametrize(
    "error_type",
    [
        ConfigLoadFailure,
        LogFileUnavailable,
        InvalidTimestamp,
        InvalidEndpoint,
        NetworkFailure,
        UploadAPIError,
    ],
)
def test_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, WxUpdateError)
