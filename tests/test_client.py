import logging
from unittest.mock import Mock, patch

import pytest
import requests

from wxupdate.errors import (
    AuthenticationError,
    NetworkFailure,
    ServerError,
    UploadAPIError,
)
from wxupdate.upload.client import UploadClient
from wxupdate.upload.request import UpdateRequest

URL = "https://example.com/update?ID=KNYTEST1&PASSWORD=secret&action=updateraw"


@pytest.fixture
def client() -> UploadClient:
    return UploadClient(timeout=5)


def _response(status_code: int, text: str) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    resp.reason = "Reason"
    return resp


def test_send_success(client: UploadClient) -> None:
    with patch("wxupdate.upload.client.requests.get") as mock_get:
        mock_get.return_value = _response(200, "success\n")

        result = client.send(UpdateRequest(url=URL))

    mock_get.assert_called_once_with(URL, timeout=5)
    assert result.status_code == 200
    assert result.body == "success\n"
    assert result.accepted is True


def test_send_in_band_rejection_is_logged(
    client: UploadClient, caplog: pytest.LogCaptureFixture
) -> None:
    with patch("wxupdate.upload.client.requests.get") as mock_get:
        mock_get.return_value = _response(
            200, "INVALIDPASSWORDID|Password or key and/or id are incorrect"
        )

        with caplog.at_level(logging.WARNING, logger="wxupdate.upload.client"):
            result = client.send(UpdateRequest(url=URL))

    assert result.accepted is False
    assert "INVALIDPASSWORDID" in caplog.text


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (401, AuthenticationError),
        (500, ServerError),
    ],
)
def test_send_http_error(
    client: UploadClient, code: int, expected_type: type[UploadAPIError]
) -> None:
    with patch("wxupdate.upload.client.requests.get") as mock_get:
        mock_get.return_value = _response(code, "error page")

        with pytest.raises(expected_type) as excinfo:
            client.send(UpdateRequest(url=URL))

    assert excinfo.value.code == code
    assert excinfo.value.body == "error page"


def test_send_unknown_status_uses_body(client: UploadClient) -> None:
    with patch("wxupdate.upload.client.requests.get") as mock_get:
        mock_get.return_value = _response(418, "short and stout")

        with pytest.raises(UploadAPIError) as excinfo:
            client.send(UpdateRequest(url=URL))

    assert "short and stout" in str(excinfo.value)


def test_send_network_error(client: UploadClient) -> None:
    with patch("wxupdate.upload.client.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("BOOM")

        with pytest.raises(NetworkFailure) as excinfo:
            client.send(UpdateRequest(url=URL))

    assert excinfo.value.code == 0
    assert isinstance(excinfo.value.original_error, requests.ConnectionError)
