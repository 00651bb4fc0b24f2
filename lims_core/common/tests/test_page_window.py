import pytest

from lims_core.common.api.pagination import BIGINT_MAX, MAX_PAGE_LIMIT, PageWindow


def test_defaults():
    w = PageWindow.from_raw()
    assert (w.offset, w.limit) == (0, 15)


def test_numeric_strings_are_parsed():
    w = PageWindow.from_raw("30", "10")
    assert (w.offset, w.limit) == (30, 10)
    assert w.stop == 40


@pytest.mark.parametrize("offset", ["-1", "abc", "1.5", ""])
def test_bad_offset_falls_back_to_zero(offset):
    assert PageWindow.from_raw(offset, "10").offset == 0


@pytest.mark.parametrize("limit", ["-5", "0", "many", ""])
def test_bad_limit_falls_back_to_default(limit):
    assert PageWindow.from_raw("0", limit).limit == 15


def test_limit_is_clamped():
    assert PageWindow.from_raw("0", "100000").limit == MAX_PAGE_LIMIT


def test_limits_follow_settings(settings):
    settings.LIMS_SEARCH = {"DEFAULT_LIMIT": 5, "MAX_LIMIT": 50}
    assert PageWindow.from_raw().limit == 5
    assert PageWindow.from_raw(None, "80").limit == 50


def test_slice_and_meta():
    w = PageWindow.from_raw("2", "2")
    assert w.slice([1, 2, 3, 4, 5]) == [3, 4]
    assert w.as_meta(5) == {"total": 5, "offset": 2, "limit": 2}


def test_offset_is_clamped_to_addressable_range():
    w = PageWindow.from_raw("100000000000000000000", "15")
    assert w.offset == BIGINT_MAX - MAX_PAGE_LIMIT
    assert w.stop <= BIGINT_MAX


def test_offset_ceiling_follows_max_limit(settings):
    settings.LIMS_SEARCH = {"DEFAULT_LIMIT": 5, "MAX_LIMIT": 50}
    w = PageWindow.from_raw(str(BIGINT_MAX), "80")
    assert (w.offset, w.stop) == (BIGINT_MAX - 50, BIGINT_MAX)
