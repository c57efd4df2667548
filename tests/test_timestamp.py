import pytest

from wxupdate.errors import InvalidTimestamp
from wxupdate.station.record import LogRecord
from wxupdate.station.timestamp import TimestampConverter


@pytest.fixture
def converter() -> TimestampConverter:
    return TimestampConverter()


def test_reference_observation(converter: TimestampConverter) -> None:
    assert converter.to_utc_string(2010, 4, 10, 7, 10) == "2010-04-10 11:10:00"


@pytest.mark.parametrize(
    "components, expected",
    [
        # spring forward: 01:59 standard, 02:00 daylight
        ((2010, 3, 14, 1, 59), "2010-03-14 06:59:00"),
        ((2010, 3, 14, 2, 0), "2010-03-14 06:00:00"),
        ((2010, 3, 14, 3, 0), "2010-03-14 07:00:00"),
        # fall back: 01:30 still daylight, 02:00 standard
        ((2010, 11, 7, 1, 30), "2010-11-07 05:30:00"),
        ((2010, 11, 7, 2, 0), "2010-11-07 07:00:00"),
        # winter evening rolls over to the next UTC day
        ((2010, 1, 15, 23, 30), "2010-01-16 04:30:00"),
        ((2010, 12, 31, 20, 0), "2011-01-01 01:00:00"),
        # leap day
        ((2012, 2, 29, 12, 0), "2012-02-29 17:00:00"),
        # zero padded four-digit year
        ((999, 1, 1, 0, 0), "0999-01-01 05:00:00"),
    ],
)
def test_to_utc_string(
    converter: TimestampConverter, components: tuple[int, ...], expected: str
) -> None:
    assert converter.to_utc_string(*components) == expected


@pytest.mark.parametrize(
    "components",
    [
        (2010, 13, 1, 0, 0),
        (2010, 0, 1, 0, 0),
        (2010, 4, 32, 0, 0),
        (2011, 2, 29, 0, 0),
        (2010, 4, 10, 24, 0),
        (2010, 4, 10, 7, 60),
        (9999, 12, 31, 23, 0),  # UTC result overflows
    ],
)
def test_invalid_components(converter: TimestampConverter, components: tuple[int, ...]) -> None:
    with pytest.raises(InvalidTimestamp):
        converter.to_utc_string(*components)


def test_deterministic(converter: TimestampConverter) -> None:
    results = {converter.to_utc_string(2010, 4, 10, 7, 10) for _ in range(3)}
    assert results == {"2010-04-10 11:10:00"}


def test_from_record(converter: TimestampConverter, sample_line: str) -> None:
    record = LogRecord(tuple(sample_line.split()))
    assert converter.from_record(record) == "2010-04-10 11:10:00"


def test_from_record_non_numeric(converter: TimestampConverter, sample_line: str) -> None:
    tokens = sample_line.split()
    tokens[3] = "07:00"
    with pytest.raises(InvalidTimestamp):
        converter.from_record(LogRecord(tuple(tokens)))
