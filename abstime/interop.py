"""Conversion to and from the standard library's `datetime` types."""

import math
from datetime import date, datetime
from typing import Any

from abstime.core import DateTime, assert_valid


def from_datetime(value: Any) -> DateTime:
    """Return the wall-clock fields of a `datetime` or `date` as a DateTime.

    Accepts:
    - datetime: Any tzinfo is ignored; microseconds become fractional seconds
    - date: Taken as midnight at the start of that day

    Raises:
        TypeError: If `value` is neither a datetime nor a date
    """
    if isinstance(value, datetime):
        return DateTime(
            year=value.year,
            month=value.month,
            day=value.day,
            hours=value.hour,
            minutes=value.minute,
            seconds=value.second + value.microsecond / 1_000_000,
        )
    if isinstance(value, date):
        return DateTime(
            year=value.year,
            month=value.month,
            day=value.day,
            hours=0,
            minutes=0,
            seconds=0.0,
        )
    raise TypeError(
        f"from_datetime() expects a datetime or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Hint: to read ISO-8601 text use parse_iso8601() instead."
    )


def to_datetime(date_time: DateTime) -> datetime:
    """Return a valid DateTime as a naive `datetime`.

    Sub-microsecond precision is rounded away.

    Raises:
        InvalidDateTimeError: If `date_time` is not valid
        ValueError: If the year is outside the range `datetime` supports
    """
    assert_valid(date_time)
    year = int(date_time.year)
    if not 1 <= year <= 9999:
        raise ValueError(
            f"Year {year} cannot be represented by datetime.datetime.\n"
            f"datetime supports years 1-9999 only.\n"
            f"Hint: use format_iso8601() to serialise DateTimes outside that range."
        )
    whole = math.floor(date_time.seconds)
    micros = min(round((date_time.seconds - whole) * 1_000_000), 999_999)
    return datetime(
        year,
        int(date_time.month),
        int(date_time.day),
        int(date_time.hours),
        int(date_time.minutes),
        whole,
        micros,
    )
