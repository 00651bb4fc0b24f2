import datetime

import pytest

from lims_core.results.dates import DateParseFailure, normalize_day, normalize_day_or_none

MAY_1 = datetime.date(2024, 5, 1)


@pytest.mark.parametrize(
    "raw",
    [
        "2024-05-01",
        " 2024-05-01 ",
        "2024-05-01T00:00:00",
        "2024-05-01T23:59:59Z",
        "2024-05-01 12:00:00+00:00",
        "05/01/2024",
        "01.05.2024",
        "May 1 2024",
        "May 1, 2024",
        "1 May 2024",
    ],
)
def test_same_day_in_different_forms(raw):
    assert normalize_day(raw) == MAY_1


def test_offset_is_converted_to_active_zone(settings):
    settings.TIME_ZONE = "UTC"
    # 02:00 in +05:30 is still the previous day in UTC
    assert normalize_day("2024-05-02T02:00:00+05:30") == MAY_1


@pytest.mark.parametrize("raw", ["", "   ", "not-a-date", "2024-02-30", "13/45/2024", "yesterday"])
def test_unparseable_values_raise(raw):
    with pytest.raises(DateParseFailure):
        normalize_day(raw)


def test_or_none_logs_and_returns_none(caplog):
    with caplog.at_level("WARNING", logger="lims_core.results.dates"):
        assert normalize_day_or_none("garbage", field="activation date") is None
    assert "activation date" in caplog.text
