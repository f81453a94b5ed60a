import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from typing_extensions import TypeIs

from abstime.calendar import days_in_month, from_reference_days, to_reference_days
from abstime.errors import InvalidDateTimeError, NonFiniteError
from abstime.time_of_day import from_seconds, to_seconds
from abstime.util import DAY, FIELDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class DateTime:
    """An abstract date and time with no associated timezone.

    Years use astronomical numbering: 2024 is 2024 CE, 0 is 1 BCE, -1 is
    2 BCE. There is no gap between 1 BCE and 1 CE.

    Instances built by this library are always valid: month 1-12, day within
    the month, hours 0-23, minutes 0-59 and seconds in [0, 60), possibly
    fractional. Constructing one directly performs no checks; use
    `normalize` or `assert_valid` when the fields come from outside.
    """

    year: int
    month: int
    day: int
    hours: int
    minutes: int
    seconds: float
    type: Literal["DateTime"] = field(
        default="DateTime", init=False, repr=False, compare=False
    )

    def __str__(self) -> str:
        """Extended ISO-8601 text, or the dataclass repr if the value is invalid."""
        # Import at runtime to avoid circular dependency
        from abstime.iso8601 import format_iso8601

        if not is_valid(self):
            return repr(self)
        return format_iso8601(self)


@dataclass(frozen=True, kw_only=True)
class DateTimeOptions:
    """Fields from which a DateTime can be built.

    Any DateTime may be used wherever DateTimeOptions is accepted. The fields
    need not be in range; functions either normalize or reject them.
    """

    year: float
    month: float
    day: float
    hours: float
    minutes: float = 0
    seconds: float = 0
    type: Literal["DateTime"] | None = None


DateTimeInput: TypeAlias = DateTime | DateTimeOptions | Mapping[str, Any]


def _read(options: DateTimeInput) -> tuple[Any, ...]:
    """Return (type, year, month, day, hours, minutes, seconds) with defaults applied."""
    if isinstance(options, (DateTime, DateTimeOptions)):
        return (
            options.type,
            options.year,
            options.month,
            options.day,
            options.hours,
            options.minutes,
            options.seconds,
        )
    if isinstance(options, Mapping):
        missing = [name for name in FIELDS[:4] if name not in options]
        if missing:
            raise TypeError(
                f"Date-time mapping is missing required keys: {', '.join(missing)}\n"
                f"Got keys: {sorted(options)}\n"
                f"Example: {{'year': 2024, 'month': 1, 'day': 26, 'hours': 11}}"
            )
        minutes = options.get("minutes")
        seconds = options.get("seconds")
        return (
            options.get("type"),
            options["year"],
            options["month"],
            options["day"],
            options["hours"],
            0 if minutes is None else minutes,
            0 if seconds is None else seconds,
        )
    raise TypeError(
        f"Expected a DateTime, DateTimeOptions or mapping.\n"
        f"Got {type(options).__name__!r}: {options!r}"
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return _is_number(value)


def _is_finite(value: Any) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


def to_reference_seconds(options: DateTimeInput) -> float:
    """Return the number of seconds between midnight, 1 January 1 CE and `options`.

    No validation is performed: out-of-range fields count forwards or
    backwards along the timeline. Integer fields give an exact integer
    result. Returns NaN if any field is NaN or infinite, or if the count is
    too large to combine with a fractional field as a float.
    """
    _, year, month, day, hours, minutes, seconds = _read(options)
    if not all(_is_finite(v) for v in (year, month, day, hours, minutes, seconds)):
        return math.nan
    try:
        return to_reference_days(year, month, day) * DAY + to_seconds(
            hours, minutes, seconds
        )
    except OverflowError:
        logger.debug("Reference seconds overflow a float for %r", options)
        return math.nan


def from_reference_seconds(reference_seconds: float) -> DateTime:
    """Return the DateTime at `reference_seconds` after midnight, 1 January 1 CE.

    The result is always valid. Negative counts give dates before the Common
    Era, e.g. -1 is 23:59:59 on 31 December of year 0.

    Raises:
        NonFiniteError: If `reference_seconds` is NaN or infinite
    """
    if not _is_finite(reference_seconds):
        logger.debug("Rejected non-finite reference seconds: %r", reference_seconds)
        raise NonFiniteError(reference_seconds)

    # Floor division rounds towards negative infinity, so days before the
    # epoch still start at their own midnight
    reference_days = int(reference_seconds // DAY)
    offset = reference_seconds - reference_days * DAY
    if offset >= DAY:
        # A tiny negative count rounds up to a whole day: it is midnight
        reference_days += 1
        offset -= DAY
    year, month, day = from_reference_days(reference_days)

    remainder = (DAY + offset % DAY) % DAY
    hours, minutes, seconds = from_seconds(remainder)

    return DateTime(
        year=year,
        month=month,
        day=day,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def normalize(options: DateTimeInput) -> DateTime:
    """Return a valid DateTime equivalent to `options`.

    Out-of-range fields carry into the next larger unit, exactly as counting
    along the reference-second timeline would: month 13 becomes January of
    the following year, minutes=-1 becomes 59 minutes of the previous hour.

    Raises:
        NonFiniteError: If any field is NaN or infinite, or the
            reference-second count overflows a float
    """
    return from_reference_seconds(to_reference_seconds(options))


def is_shape_valid(value: Any) -> TypeIs[DateTimeInput]:
    """Return True if `value` is shaped like a DateTime.

    Accepts DateTime instances, and DateTimeOptions or mappings tagged with
    type "DateTime" that carry all six numeric fields. Ranges are not
    checked; see `is_valid`.
    """
    if isinstance(value, DateTime):
        fields = [getattr(value, name) for name in FIELDS]
    elif isinstance(value, DateTimeOptions):
        if value.type != "DateTime":
            return False
        fields = [getattr(value, name) for name in FIELDS]
    elif isinstance(value, Mapping):
        if value.get("type") != "DateTime":
            return False
        fields = [value.get(name) for name in FIELDS]
    else:
        return False
    return all(_is_number(v) for v in fields)


def _find_invalid_field(options: DateTimeInput) -> tuple[str, Any, str] | None:
    """Return (field, value, requirement) for the first invalid field, or None."""
    tag, year, month, day, hours, minutes, seconds = _read(options)

    if tag is not None and tag != "DateTime":
        return "type", tag, 'must be "DateTime" if specified'
    if not _is_integer(year):
        return "year", year, "must be an integer"
    if not (_is_integer(month) and 1 <= month <= 12):
        return "month", month, "must be an integer in the range 1-12"
    if not _is_integer(day):
        return "day", day, "must be an integer"
    last_day = days_in_month(int(month), int(year))
    if not 1 <= day <= last_day:
        requirement = f"must be in the range 1-{last_day} for {int(year)}-{int(month):02d}"
        return "day", day, requirement
    if not (_is_integer(hours) and 0 <= hours <= 23):
        return "hours", hours, "must be an integer in the range 0-23"
    if not (_is_integer(minutes) and 0 <= minutes <= 59):
        return "minutes", minutes, "must be an integer in the range 0-59"
    if not (_is_number(seconds) and 0 <= seconds < 60):
        return "seconds", seconds, "must be a number in the range [0, 60)"
    return None


def is_valid(options: Any) -> bool:
    """Return True if every field of `options` is in range.

    Never raises: values of the wrong type simply answer False.
    """
    try:
        return _find_invalid_field(options) is None
    except TypeError:
        return False


def is_valid_shape_and_range(value: Any) -> TypeIs[DateTimeInput]:
    """Return True if `value` is shaped like a DateTime and every field is in range."""
    return is_shape_valid(value) and is_valid(value)


def assert_valid(options: DateTimeInput) -> None:
    """Raise InvalidDateTimeError if any field of `options` is out of range.

    Raises:
        InvalidDateTimeError: Naming the first offending field
        TypeError: If `options` is not a DateTime, DateTimeOptions or mapping
    """
    problem = _find_invalid_field(options)
    if problem is None:
        return
    name, value, requirement = problem
    raise InvalidDateTimeError(
        name,
        value,
        f"Invalid DateTime: {name} {requirement}.\n"
        f"Got {name}={value!r}\n"
        f"Hint: use normalize() to carry out-of-range fields into the next unit.",
    )
