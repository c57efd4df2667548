from pathlib import Path

import pytest

from wxupdate.settings.user import StationSettings

UPLOAD_URL = "https://weatherstation.wunderground.com/weatherstation/updateweatherstation.php"

SAMPLE_LINE = "10  4 2010  7 10 40.5  55 25.5 30.002   0   3 224  0.000 0.000 0.917 4.598 40.5"

SAMPLE_LOG = f"""\
10  4 2010  7  0 40.1  56 25.6 30.001   0   2 220  0.000 0.000 0.917 4.598 40.1
10  4 2010  7  5 40.3  55 25.5 30.002   1   4 223  0.000 0.000 0.917 4.598 40.3
{SAMPLE_LINE}
"""


@pytest.fixture
def sample_line() -> str:
    return SAMPLE_LINE


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    path = tmp_path / "dailylog.txt"
    path.write_text(SAMPLE_LOG)
    return path


@pytest.fixture
def settings(log_file: Path) -> StationSettings:
    return StationSettings(
        upload_url=UPLOAD_URL,
        station_id="KNYTEST1",
        password="secret",
        data_file_path=log_file,
    )
