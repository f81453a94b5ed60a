"""ISO-8601 text for date-times.

Parsing accepts the extended (`2024-01-26T11:57:23.5`) and basic
(`20240126T115723.5`) forms without a timezone designator. Anything that does
not match gives None rather than an exception, so callers can branch on it.

Formatting produces either form with a choice of sub-second rounding.
"""

import logging
import math
import re
from collections.abc import Callable
from typing import Literal, TypeAlias

from abstime.core import DateTime, DateTimeOptions, assert_valid, normalize

logger = logging.getLogger(__name__)

Iso8601Format: TypeAlias = Literal["extended", "basic"]
Iso8601Rounding: TypeAlias = Literal["none", "seconds", "milliseconds"]

DEFAULT_FORMAT: Iso8601Format = "extended"
DEFAULT_ROUNDING: Iso8601Rounding = "none"
DEFAULT_TIME_DELIMITER = "T"

_FORMATS = ("extended", "basic")
_ROUNDINGS = ("none", "seconds", "milliseconds")

_YEAR = r"(?P<year>[+-]?\d{4,})"
_DELIMITER = r"(?:T|\s+)"
_SECONDS = r"(?P<seconds>\d{2}(?:[.,]\d+)?)"

_EXTENDED = re.compile(
    _YEAR
    + r"-(?P<month>\d{2})-(?P<day>\d{2})"
    + _DELIMITER
    + r"(?P<hours>\d{2})(?::(?P<minutes>\d{2})(?::"
    + _SECONDS
    + r")?)?",
    re.ASCII | re.IGNORECASE,
)

_BASIC = re.compile(
    _YEAR
    + r"(?P<month>\d{2})(?P<day>\d{2})"
    + _DELIMITER
    + r"(?P<hours>\d{2})(?:(?P<minutes>\d{2})"
    + _SECONDS
    + r"?)?",
    re.ASCII | re.IGNORECASE,
)


def parse_iso8601(text: str) -> DateTime | None:
    """Parse an ISO-8601 date-time without a timezone.

    Minutes and seconds may be omitted (both default to 0), seconds may carry
    a fraction after `.` or `,`, and the year may be signed or longer than
    four digits. The date and time may be separated by `T` or whitespace.

    Fields are normalized rather than checked, so "2024-01-32T00:00" parses
    as 1 February 2024.

    Returns:
        The parsed DateTime, or None if `text` is not in a supported form
        (including any text with a timezone designator such as "Z")
    """
    stripped = text.strip()
    match = _EXTENDED.fullmatch(stripped) or _BASIC.fullmatch(stripped)
    if match is None:
        logger.debug("Not an ISO-8601 date-time: %r", text)
        return None

    minutes = match["minutes"]
    seconds = match["seconds"]
    return normalize(
        DateTimeOptions(
            year=int(match["year"]),
            month=int(match["month"]),
            day=int(match["day"]),
            hours=int(match["hours"]),
            minutes=0 if minutes is None else int(minutes),
            seconds=0 if seconds is None else float(seconds.replace(",", ".")),
        )
    )


def _check_options(format: str, rounding: str) -> None:
    if format not in _FORMATS:
        raise ValueError(
            f"Unknown ISO-8601 format {format!r}.\n"
            f"Valid formats: {', '.join(_FORMATS)}\n"
            f"Example: format_iso8601(dt, format='basic')"
        )
    if rounding not in _ROUNDINGS:
        raise ValueError(
            f"Unknown ISO-8601 rounding {rounding!r}.\n"
            f"Valid roundings: {', '.join(_ROUNDINGS)}\n"
            f"Example: format_iso8601(dt, rounding='seconds')"
        )


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "-" if year < 0 else "+"
    return f"{sign}{abs(year):04d}"


def _format_seconds(seconds: float, rounding: Iso8601Rounding) -> str:
    if rounding == "seconds":
        return f"{math.floor(seconds):02d}"

    if rounding == "milliseconds":
        # Rounding to a millionth of a millisecond first absorbs float noise
        # such as 23.122999999 standing in for 23.123
        total = min(math.floor(round(seconds * 1000, 6)), 59_999)
        whole, millis = divmod(total, 1000)
        return f"{whole:02d}.{millis:03d}"

    total = min(round(seconds * 1_000_000), 59_999_999)
    whole, micros = divmod(total, 1_000_000)
    if micros == 0:
        return f"{whole:02d}"
    return f"{whole:02d}.{micros:06d}".rstrip("0")


def format_iso8601(
    date_time: DateTime,
    *,
    format: Iso8601Format = DEFAULT_FORMAT,
    rounding: Iso8601Rounding = DEFAULT_ROUNDING,
    time_delimiter: str = DEFAULT_TIME_DELIMITER,
) -> str:
    """Format a valid DateTime as ISO-8601 text.

    Args:
        date_time: Value to format; must be valid
        format: "extended" (2024-01-26T11:57:23) or "basic" (20240126T115723)
        rounding: "none" prints as many fractional digits as needed (up to
            microseconds), "seconds" truncates to whole seconds and
            "milliseconds" truncates to exactly three fractional digits
        time_delimiter: Text placed between the date and the time

    Raises:
        InvalidDateTimeError: If `date_time` is not valid
        ValueError: If `format` or `rounding` is not recognised
    """
    _check_options(format, rounding)
    assert_valid(date_time)

    year = _format_year(int(date_time.year))
    month = int(date_time.month)
    day = int(date_time.day)
    hours = int(date_time.hours)
    minutes = int(date_time.minutes)
    seconds = _format_seconds(date_time.seconds, rounding)

    if format == "basic":
        return f"{year}{month:02d}{day:02d}{time_delimiter}{hours:02d}{minutes:02d}{seconds}"
    return f"{year}-{month:02d}-{day:02d}{time_delimiter}{hours:02d}:{minutes:02d}:{seconds}"


def iso8601_formatter(
    *,
    format: Iso8601Format = DEFAULT_FORMAT,
    rounding: Iso8601Rounding = DEFAULT_ROUNDING,
    time_delimiter: str = DEFAULT_TIME_DELIMITER,
) -> Callable[[DateTime], str]:
    """Return a function that formats DateTimes with fixed options.

    Options are checked immediately rather than on first use.

    Example:
        >>> to_text = iso8601_formatter(rounding="seconds")
        >>> [to_text(d) for d in values]
    """
    _check_options(format, rounding)

    def formatter(date_time: DateTime) -> str:
        return format_iso8601(
            date_time,
            format=format,
            rounding=rounding,
            time_delimiter=time_delimiter,
        )

    return formatter
