"""Equality and ordering of date-times.

Every comparison is made on the reference-second timeline, so two values with
different fields are equal whenever they denote the same instant, e.g.
2024-01-32 and 2024-02-01.

Each comparator also has a curried `*_fn` form that fixes the right-hand
operand and returns a predicate over the left-hand one, for use as a callback:

    >>> from abstime import before_fn, parse_iso8601
    >>> cutoff = parse_iso8601("2024-01-01T00:00")
    >>> earlier = [d for d in values if before_fn(cutoff)(d)]
"""

from enum import Enum
from typing import Callable, TypeVar

from abstime.core import DateTimeInput, to_reference_seconds

A = TypeVar("A", bound=DateTimeInput)
B = TypeVar("B", bound=DateTimeInput)
R = TypeVar("R")


class Comparison(Enum):
    """Result of `compare`.

    UNDEFINED is only produced when a reference-second value is NaN, which
    cannot happen for finite fields.
    """

    BEFORE = -1
    EQUAL = 0
    AFTER = 1
    UNDEFINED = None


def equal(a: DateTimeInput, b: DateTimeInput) -> bool:
    return to_reference_seconds(a) == to_reference_seconds(b)


def not_equal(a: DateTimeInput, b: DateTimeInput) -> bool:
    return to_reference_seconds(a) != to_reference_seconds(b)


def compare(a: DateTimeInput, b: DateTimeInput) -> Comparison:
    """Three-way comparison of `a` against `b`."""
    left = to_reference_seconds(a)
    right = to_reference_seconds(b)
    if left < right:
        return Comparison.BEFORE
    if left > right:
        return Comparison.AFTER
    if left == right:
        return Comparison.EQUAL
    return Comparison.UNDEFINED


def before(a: DateTimeInput, b: DateTimeInput) -> bool:
    """True if `a` is strictly earlier than `b`."""
    return to_reference_seconds(a) < to_reference_seconds(b)


def before_or_equal(a: DateTimeInput, b: DateTimeInput) -> bool:
    return to_reference_seconds(a) <= to_reference_seconds(b)


def after(a: DateTimeInput, b: DateTimeInput) -> bool:
    """True if `a` is strictly later than `b`."""
    return to_reference_seconds(a) > to_reference_seconds(b)


def after_or_equal(a: DateTimeInput, b: DateTimeInput) -> bool:
    return to_reference_seconds(a) >= to_reference_seconds(b)


def earliest(a: A, b: B) -> A | B:
    """Return whichever of `a` and `b` is earlier, or `a` if they are equal.

    The argument itself is returned, not a normalized copy, so any extra
    fields it carries are kept.
    """
    return b if before(b, a) else a


def latest(a: A, b: B) -> A | B:
    """Return whichever of `a` and `b` is later, or `a` if they are equal."""
    return b if after(b, a) else a


def _curry(
    function: Callable[[A, B], R],
) -> Callable[[B], Callable[[A], R]]:
    def fix_right(b: B) -> Callable[[A], R]:
        def apply(a: A) -> R:
            return function(a, b)

        return apply

    fix_right.__name__ = f"{function.__name__}_fn"
    fix_right.__qualname__ = fix_right.__name__
    fix_right.__doc__ = (
        f"Return a one-argument callable `a -> {function.__name__}(a, b)` with `b` fixed."
    )
    return fix_right


equal_fn = _curry(equal)
not_equal_fn = _curry(not_equal)
compare_fn = _curry(compare)
before_fn = _curry(before)
before_or_equal_fn = _curry(before_or_equal)
after_fn = _curry(after)
after_or_equal_fn = _curry(after_or_equal)
earliest_fn = _curry(earliest)
latest_fn = _curry(latest)
