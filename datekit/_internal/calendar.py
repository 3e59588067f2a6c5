"""Calendar utilities for Datekit.

This module provides internal functions for proleptic Gregorian calendar
calculations: the leap year rule, month lengths, and conversions between
(year, month, day) triples and ordinal day numbers.

Ordinal 1 = 0001-01-01 (a Monday).

This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.constants import DAYS_IN_MONTH, EPOCH_ORDINAL

# Days in the 400, 100 and 4 year Gregorian cycles
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(2100)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2020)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The inputs are assumed valid; use validate_date first.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to (year, month, day).

    Walks down the 400/100/4/1 year cycles, the same decomposition the
    standard library uses for date.fromordinal.
    """
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4 or 400 year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month = (n + 50) >> 5
    if days_before_month(year, month) > n:
        month -= 1
    day = n - days_before_month(year, month) + 1
    return (year, month, day)


def iso_weekday(ordinal: int) -> int:
    """Return the ISO weekday (Monday=1 .. Sunday=7) of an ordinal day.

    Examples:
        >>> iso_weekday(1)  # 0001-01-01
        1
    """
    return (ordinal - EPOCH_ORDINAL) % 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "iso_weekday",
]
