"""Exceptions raised by abstime.

Both derive from ValueError, so callers that only care about bad input can
catch that alone.
"""

from typing import Any


class InvalidDateTimeError(ValueError):
    """A date-time has a field that is out of range or of the wrong type.

    Attributes:
        field: Name of the first offending field (e.g. "month")
        value: The offending value
    """

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field: str = field
        self.value: Any = value


class NonFiniteError(ValueError):
    """A reference-second count is NaN or infinite and has no calendar date."""

    def __init__(self, value: float):
        super().__init__(
            f"Cannot convert non-finite reference seconds to a DateTime.\n"
            f"Got: {value!r}\n"
            f"Hint: every field of a DateTime must be a finite number; "
            f"check for NaN or infinity in year, month, day, hours, minutes "
            f"or seconds."
        )
        self.value: float = value
