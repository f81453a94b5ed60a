"""Conversion between time-of-day fields and a count of seconds.

Both directions tolerate out-of-range values: `to_seconds` happily returns a
negative count or one beyond a day, and `from_seconds` folds any finite count
back into a single day.
"""

from abstime.util import DAY, HOUR, MINUTE


def to_seconds(hours: float, minutes: float = 0, seconds: float = 0) -> float:
    """Return `hours:minutes:seconds` as seconds since midnight.

    No range checks are made, so `to_seconds(25)` is 90000 and
    `to_seconds(0, -1)` is -60.
    """
    return hours * HOUR + minutes * MINUTE + seconds


def from_seconds(seconds: float) -> tuple[int, int, float]:
    """Split a count of seconds into (hours, minutes, seconds) within one day.

    Counts outside [0, DAY) wrap around, so -1 becomes 23:59:59.
    """
    # The outer modulo catches tiny negative inputs, for which x % DAY == DAY
    folded = (DAY + seconds % DAY) % DAY
    hours = int(folded // HOUR)
    minutes = int((folded - hours * HOUR) // MINUTE)
    return hours, minutes, float(folded - hours * HOUR - minutes * MINUTE)
