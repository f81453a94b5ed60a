from importlib.resources import files

from .calendar import (
    APRIL,
    AUGUST,
    DECEMBER,
    FEBRUARY,
    JANUARY,
    JULY,
    JUNE,
    MARCH,
    MAY,
    NOVEMBER,
    OCTOBER,
    SEPTEMBER,
    days_in_month,
    days_in_year,
    is_leap_year,
)
from .compare import (
    Comparison,
    after,
    after_fn,
    after_or_equal,
    after_or_equal_fn,
    before,
    before_fn,
    before_or_equal,
    before_or_equal_fn,
    compare,
    compare_fn,
    earliest,
    earliest_fn,
    equal,
    equal_fn,
    latest,
    latest_fn,
    not_equal,
    not_equal_fn,
)
from .core import (
    DateTime,
    DateTimeInput,
    DateTimeOptions,
    assert_valid,
    from_reference_seconds,
    is_shape_valid,
    is_valid,
    is_valid_shape_and_range,
    normalize,
    to_reference_seconds,
)
from .errors import InvalidDateTimeError, NonFiniteError
from .interop import from_datetime, to_datetime
from .iso8601 import format_iso8601, iso8601_formatter, parse_iso8601
from .now import now_device_local, now_utc

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "DateTime",
    "DateTimeOptions",
    "DateTimeInput",
    "Comparison",
    "InvalidDateTimeError",
    "NonFiniteError",
    "to_reference_seconds",
    "from_reference_seconds",
    "normalize",
    "is_shape_valid",
    "is_valid",
    "is_valid_shape_and_range",
    "assert_valid",
    "equal",
    "not_equal",
    "compare",
    "before",
    "before_or_equal",
    "after",
    "after_or_equal",
    "earliest",
    "latest",
    "equal_fn",
    "not_equal_fn",
    "compare_fn",
    "before_fn",
    "before_or_equal_fn",
    "after_fn",
    "after_or_equal_fn",
    "earliest_fn",
    "latest_fn",
    "now_utc",
    "now_device_local",
    "parse_iso8601",
    "format_iso8601",
    "iso8601_formatter",
    "from_datetime",
    "to_datetime",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
    "docs",
]
