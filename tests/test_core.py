"""Tests for reference-second conversion and normalization."""

import math
from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from abstime import (
    DateTime,
    DateTimeOptions,
    NonFiniteError,
    from_reference_seconds,
    is_valid,
    normalize,
    to_reference_seconds,
)
from abstime.util import DAY


def dt(year, month, day, hours=0, minutes=0, seconds=0.0) -> DateTime:
    return DateTime(
        year=year, month=month, day=day, hours=hours, minutes=minutes, seconds=seconds
    )


def test_epoch_is_zero():
    """Test that midnight, 1 January 1 CE is reference second 0."""
    assert to_reference_seconds(dt(1, 1, 1)) == 0
    assert from_reference_seconds(0) == dt(1, 1, 1)


@pytest.mark.parametrize(
    "value",
    [
        datetime(1, 1, 1, 0, 0, 1),
        datetime(1970, 1, 1),
        datetime(2000, 2, 29, 12, 30, 15),
        datetime(2024, 1, 26, 11, 57, 23),
        datetime(9999, 12, 31, 23, 59, 59),
    ],
    ids=str,
)
def test_reference_seconds_match_stdlib(value: datetime):
    """Test that reference seconds agree with stdlib datetime arithmetic."""
    expected = (value - datetime(1, 1, 1)).total_seconds()
    converted = dt(
        value.year, value.month, value.day, value.hour, value.minute, value.second
    )
    assert to_reference_seconds(converted) == expected
    assert from_reference_seconds(expected) == converted


def test_to_reference_seconds_accepts_options_and_mappings():
    """Test that DateTimeOptions and mappings default minutes and seconds to 0."""
    expected = to_reference_seconds(dt(2024, 1, 26, 11))

    assert to_reference_seconds(DateTimeOptions(year=2024, month=1, day=26, hours=11)) == expected
    assert to_reference_seconds({"year": 2024, "month": 1, "day": 26, "hours": 11}) == expected
    assert (
        to_reference_seconds(
            {"year": 2024, "month": 1, "day": 26, "hours": 11, "minutes": None}
        )
        == expected
    )


def test_to_reference_seconds_is_exact_for_integers():
    """Test that integer fields give an exact integer count."""
    result = to_reference_seconds(dt(2024, 1, 26, 11, 57, 23))
    assert isinstance(result, int)


def test_to_reference_seconds_non_finite_is_nan():
    """Test that NaN or infinite fields give NaN rather than raising."""
    assert math.isnan(
        to_reference_seconds(DateTimeOptions(year=math.nan, month=1, day=1, hours=0))
    )
    assert math.isnan(
        to_reference_seconds(DateTimeOptions(year=2024, month=1, day=1, hours=math.inf))
    )


def test_to_reference_seconds_rejects_unsupported_input():
    """Test that values that are not date-time shaped raise TypeError."""
    with pytest.raises(TypeError, match="missing required keys: day, hours"):
        to_reference_seconds({"year": 2024, "month": 1})

    with pytest.raises(TypeError, match="Expected a DateTime"):
        to_reference_seconds("2024-01-26T11:57")  # type: ignore[arg-type]


def test_negative_reference_seconds():
    """Test that one second before the epoch is the last second of year 0."""
    result = from_reference_seconds(-1)
    assert result == dt(0, 12, 31, 23, 59, 59.0)
    assert is_valid(result)


def test_negative_fractional_reference_seconds():
    """Test that fractional seconds before the epoch stay non-negative."""
    result = from_reference_seconds(-0.5)
    assert result == dt(0, 12, 31, 23, 59, 59.5)


@pytest.mark.parametrize(
    "seconds",
    [0, -1, -1e-12, 86399.5, -366 * DAY, 63842270243.25, 1e12, -1e12 + 0.5, -62135596800],
)
def test_reference_seconds_round_trip(seconds: float):
    """Test that converting to a DateTime and back recovers the count."""
    result = from_reference_seconds(seconds)
    assert is_valid(result)
    assert to_reference_seconds(result) == pytest.approx(seconds, abs=1e-3)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_from_reference_seconds_rejects_non_finite(value: float):
    """Test that NaN and infinity raise NonFiniteError."""
    with pytest.raises(NonFiniteError, match="non-finite") as info:
        from_reference_seconds(value)

    assert isinstance(info.value, ValueError)
    assert info.value.value is value


def test_normalize_month_rolls_into_next_year():
    """Test that month 13 becomes January of the following year."""
    rolled = normalize(DateTimeOptions(year=2024, month=13, day=1, hours=0))
    assert rolled == normalize(DateTimeOptions(year=2025, month=1, day=1, hours=0))
    assert rolled == dt(2025, 1, 1)


@pytest.mark.parametrize(
    "options, expected",
    [
        ({"year": 2024, "month": 1, "day": 32, "hours": 0}, dt(2024, 2, 1)),
        ({"year": 2024, "month": 3, "day": 0, "hours": 0}, dt(2024, 2, 29)),
        ({"year": 2023, "month": 3, "day": 0, "hours": 0}, dt(2023, 2, 28)),
        ({"year": 2024, "month": 1, "day": 31, "hours": 25}, dt(2024, 2, 1, 1)),
        ({"year": 2024, "month": 1, "day": 1, "hours": 0, "minutes": -1}, dt(2023, 12, 31, 23, 59)),
        ({"year": 2024, "month": 1, "day": 1, "hours": 12, "seconds": 60.5}, dt(2024, 1, 1, 12, 1, 0.5)),
        ({"year": 2024, "month": 1, "day": 1, "hours": -1}, dt(2023, 12, 31, 23)),
        ({"year": 1, "month": 1, "day": 1, "hours": 0, "seconds": -1}, dt(0, 12, 31, 23, 59, 59)),
        ({"year": 2024, "month": 1, "day": 1.5, "hours": 0}, dt(2024, 1, 1, 12)),
        ({"year": 1, "month": 1, "day": 1, "hours": 0, "seconds": -1e-13}, dt(1, 1, 1)),
    ],
)
def test_normalize_carries_out_of_range_fields(options: dict, expected: DateTime):
    """Test that out-of-range fields carry into the adjacent unit."""
    result = normalize(options)
    assert result == expected
    assert is_valid(result)


@pytest.mark.parametrize(
    "value",
    [
        dt(2024, 1, 26, 11, 57, 23),
        dt(2024, 2, 29, 23, 59, 59.5),
        dt(1, 1, 1),
        dt(0, 2, 29, 6, 30),
        dt(-44, 3, 15, 12),
        dt(12024, 12, 31, 23, 59, 59),
    ],
    ids=str,
)
def test_normalize_is_idempotent_for_valid_values(value: DateTime):
    """Test that normalizing a valid DateTime leaves it unchanged."""
    assert normalize(value) == value
    assert normalize(normalize(value)) == value


@pytest.mark.parametrize("field", ["year", "month", "day", "hours", "minutes", "seconds"])
def test_normalize_rejects_non_finite_fields(field: str):
    """Test that a NaN in any field raises NonFiniteError."""
    options = {"year": 2024, "month": 1, "day": 1, "hours": 0, field: math.nan}
    with pytest.raises(NonFiniteError):
        normalize(options)


def test_datetime_is_immutable():
    """Test that DateTime fields cannot be reassigned."""
    value = dt(2024, 1, 26)
    with pytest.raises(FrozenInstanceError):
        value.year = 2025  # type: ignore[misc]


def test_datetime_type_tag():
    """Test that DateTime carries its type tag and it does not affect equality."""
    value = dt(2024, 1, 26)
    assert value.type == "DateTime"
    assert value == dt(2024, 1, 26)
    assert "type" not in repr(value)


def test_datetime_str_is_iso8601():
    """Test that str() renders extended ISO-8601, falling back to repr if invalid."""
    assert str(dt(2024, 1, 26, 11, 57, 23)) == "2024-01-26T11:57:23"
    assert str(dt(2024, 1, 26, 11, 57, 23.5)) == "2024-01-26T11:57:23.5"

    invalid = dt(2024, 13, 1)
    assert str(invalid) == repr(invalid)


def test_tiny_negative_reference_seconds_is_epoch_midnight():
    """Test that a count that rounds up to a whole day lands on the next midnight."""
    assert from_reference_seconds(-1e-12) == dt(1, 1, 1)


@pytest.mark.parametrize(
    "options",
    [
        {"year": 1e306, "month": 1, "day": 1, "hours": 0.5},
        {"year": 1e306, "month": 1, "day": 1.5, "hours": 0},
    ],
)
def test_float_overflow_is_non_finite(options: dict):
    """Test that a day count too large for a float is rejected as non-finite."""
    assert math.isnan(to_reference_seconds(options))
    with pytest.raises(NonFiniteError):
        normalize(options)


def test_huge_integer_years_stay_exact():
    """Test that all-integer fields normalize exactly however large the year."""
    year = 10**20
    assert normalize({"year": year, "month": 13, "day": 1, "hours": 0}) == dt(year + 1, 1, 1)
