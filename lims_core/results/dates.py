# lims_core/results/dates.py
from __future__ import annotations

import datetime
import logging

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

# Non-ISO shapes the search form and older clients send.
EXTRA_DATE_FORMATS = (
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %B %Y",
)


class DateParseFailure(ValueError):
    pass


def _to_day(dt: datetime.datetime) -> datetime.date:
    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return dt.date()


def normalize_day(raw: str) -> datetime.date:
    """
    Parses a date-like string into a calendar day.

    Date-times with an offset are converted to the active time zone before the
    time of day is dropped; naive values are taken as already being local.
    Raises DateParseFailure when nothing matches.
    """
    value = (raw or "").strip()
    if not value:
        raise DateParseFailure("empty date")

    try:
        d = parse_date(value)
        if d is not None:
            return d

        dt = parse_datetime(value)
        if dt is not None:
            return _to_day(dt)
    except ValueError as e:
        # well formed but impossible, e.g. 2024-02-30
        raise DateParseFailure(str(e)) from e

    for fmt in EXTRA_DATE_FORMATS:
        try:
            return datetime.datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    raise DateParseFailure(f"unrecognised date: {value!r}")


def normalize_day_or_none(raw: str, *, field: str) -> datetime.date | None:
    """
    Filter-friendly variant: logs and returns None instead of raising, so the
    caller simply skips that filter.
    """
    try:
        return normalize_day(raw)
    except DateParseFailure as e:
        logger.warning("Ignoring %s filter, could not parse %r (%s)", field, raw, e)
        return None
