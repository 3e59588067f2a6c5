"""Datekit exception hierarchy.

All Datekit-specific exceptions inherit from DatekitError.
"""

from __future__ import annotations


class DatekitError(Exception):
    """Base exception for all Datekit errors."""

    pass


class ParseError(DatekitError):
    """Failed to parse a string into a date or datetime.

    Raised when a string cannot be turned into a valid temporal value
    under the requested component order.

    Examples:
        - Token count does not match the requested order
        - Unknown month name
        - Month 13, or Feb 29 in a non-leap year
    """

    pass


class InvalidDateError(DatekitError):
    """Well-formed values that do not name an existing date or time.

    Raised instead of rolling a value over into a nearby valid one.

    Examples:
        - Day 31 in a 30-day month
        - Feb 29 in a non-leap year after adding years
        - A wall-clock time skipped by a daylight saving transition
    """

    pass


class UnitMismatchError(DatekitError):
    """Operands cannot be measured in a common reference frame.

    Examples:
        - Duration between a naive and a zoned value
        - Converting an exact Duration into months or years
    """

    pass


class TimezoneError(DatekitError):
    """Invalid or unknown timezone.

    Examples:
        - Key not present in the zone database
        - Offset outside -14:00 to +14:00
    """

    pass


__all__ = [
    "DatekitError",
    "ParseError",
    "InvalidDateError",
    "UnitMismatchError",
    "TimezoneError",
]
