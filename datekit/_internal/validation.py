"""Validation utilities for Datekit.

These helpers raise InvalidDateError for components that do not name an
existing calendar date or clock time. They never adjust a value.

This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.calendar import days_in_month
from datekit._internal.constants import MAX_YEAR, MIN_YEAR
from datekit.errors import InvalidDateError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        InvalidDateError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not isinstance(year, int) or isinstance(year, bool):
        raise InvalidDateError(f"year must be an integer, got {type(year).__name__}")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidDateError: If month is outside 1-12.
    """
    if not isinstance(month, int) or isinstance(month, bool):
        raise InvalidDateError(f"month must be an integer, got {type(month).__name__}")
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDateError: If day is invalid for the month.
    """
    if not isinstance(day, int) or isinstance(day, bool):
        raise InvalidDateError(f"day must be an integer, got {type(day).__name__}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a full (year, month, day) triple."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_time(hour: int, minute: int, second: int) -> None:
    """Validate clock components.

    Raises:
        InvalidDateError: If any component is out of range.
    """
    for name, value, limit in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDateError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value < 0 or value > limit:
            raise InvalidDateError(f"{name} must be between 0 and {limit}, got {value}")


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
]
