"""Proleptic Gregorian calendar arithmetic for any integer year.

Days are counted from 1 January, 1 CE (reference day 0). Years before the
Common Era use astronomical numbering: year 0 is 1 BCE, year -1 is 2 BCE.

Unlike `datetime.date`, every function here accepts out-of-range months and
days and carries them into the neighbouring unit, so the date-time core can
use them to normalize arbitrary field values.
"""

import math

JANUARY = 1
FEBRUARY = 2
MARCH = 3
APRIL = 4
MAY = 5
JUNE = 6
JULY = 7
AUGUST = 8
SEPTEMBER = 9
OCTOBER = 10
NOVEMBER = 11
DECEMBER = 12

# Index 0 is unused so that months can index directly
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


_DAYS_IN_400_YEARS = _days_before_year(401)
_DAYS_IN_100_YEARS = _days_before_year(101)
_DAYS_IN_4_YEARS = _days_before_year(5)


def _carry_month(year: float, month: float) -> tuple[int, int]:
    """Fold a month outside 1-12 into the year, returning (year, month)."""
    month_index = math.floor(month) - 1
    year_carry, month_index = divmod(month_index, 12)
    return math.floor(year) + year_carry, month_index + 1


def is_leap_year(year: int) -> bool:
    """Return True if `year` has 366 days.

    Year 0 (1 BCE) is a leap year under the proleptic Gregorian rule.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in `month` of `year`.

    Months outside 1-12 are carried into the year first, so month 13 of 2023
    answers for January 2024 and month 0 for December of the previous year.
    """
    year, month = _carry_month(year, month)
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def to_reference_days(year: float, month: float, day: float) -> float:
    """Return the number of days between 1 January 1 CE and the given date.

    Out-of-range months and days carry over: day 0 is the last day of the
    previous month and month 0 is December of the previous year. Year and
    month are floored to whole numbers; a fractional day contributes its
    fraction to the result.
    """
    year, month = _carry_month(year, month)
    days = _days_before_year(year) + _DAYS_BEFORE_MONTH[month]
    if month > FEBRUARY and is_leap_year(year):
        days += 1
    return days + day - 1


def from_reference_days(days: int) -> tuple[int, int, int]:
    """Return (year, month, day) for a count of days since 1 January 1 CE.

    Negative counts resolve to dates before the Common Era.

    Algorithm: the leap-year pattern repeats every 400 years, so peel off
    whole 400-, 100-, 4- and 1-year cycles with floor division, then locate
    the month within the remaining year.
    """
    n400, n = divmod(days, _DAYS_IN_400_YEARS)
    year = n400 * 400 + 1

    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)
    year += n100 * 100 + n4 * 4 + n1

    # Last day of a 4-year or 400-year cycle: the extra leap day
    if n1 == 4 or n100 == 4:
        return year - 1, DECEMBER, 31

    leap = n1 == 3 and (n4 != 24 or n100 == 3)

    # Estimate the month, then step back once if the estimate overshoots
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > FEBRUARY and leap)
    if preceding > n:
        month -= 1
        preceding -= _DAYS_IN_MONTH[month] + (month == FEBRUARY and leap)

    return year, month, n - preceding + 1
