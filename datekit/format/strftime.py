"""strftime-style formatting.

This module renders CalendarDate and DateTimeValue objects through a
subset of strftime directives. Month and weekday names come from a
LocaleNames table rather than the process locale, so output does not
depend on ambient state.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %y - 2-digit year (00-99)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %j - 3-digit day of year (001-366)
    %u - ISO weekday (1=Monday, 7=Sunday)
    %a, %A - Abbreviated and full weekday name
    %b, %B - Abbreviated and full month name
    %z - UTC offset (+0000, -0530)
    %Z - Zone abbreviation (EST, CEST, UTC, +05:30)
    %% - Literal %

A CalendarDate formats its time as 00:00:00. %z and %Z are empty for
naive values, as in Python's own strftime.

Examples:
    >>> from datekit.core.date import CalendarDate
    >>> format_value(CalendarDate(2024, 1, 15), "%A %d %B %Y")
    'Monday 15 January 2024'

    >>> from datekit.units.locale import FRENCH
    >>> format_value(CalendarDate(2024, 2, 1), "%a %d %b", FRENCH)
    'jeu. 01 févr.'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from datekit.units.locale import ENGLISH, LocaleNames

if TYPE_CHECKING:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

TemporalValue = Union["CalendarDate", "DateTimeValue"]

_SUPPORTED = "%Y, %y, %m, %d, %H, %M, %S, %j, %u, %a, %A, %b, %B, %z, %Z, %%"


def format_value(
    value: TemporalValue,
    pattern: str,
    locale: LocaleNames = ENGLISH,
) -> str:
    """Format a temporal value using a strftime-style pattern.

    Args:
        value: A CalendarDate or DateTimeValue.
        pattern: Format string with %-directives.
        locale: Names used for %a, %A, %b and %B.

    Returns:
        Formatted string.

    Raises:
        ValueError: If the pattern contains an unsupported directive.
        TypeError: If value is not a temporal value.

    Examples:
        >>> from datekit.core.datetime import DateTimeValue
        >>> format_value(DateTimeValue(2024, 1, 15, 14, 30, 45), "%Y/%m/%d %H:%M")
        '2024/01/15 14:30'
    """
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

    if not isinstance(value, (CalendarDate, DateTimeValue)):
        raise TypeError(
            f"expected CalendarDate or DateTimeValue, got {type(value).__name__}"
        )

    result = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%" and i + 1 < len(pattern):
            result.append(_format_directive(value, pattern[i : i + 2], locale))
            i += 2
        else:
            result.append(pattern[i])
            i += 1

    return "".join(result)


def _format_offset(offset: int, colon: bool) -> str:
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}" if colon else f"{sign}{hours:02d}{minutes:02d}"


def _format_directive(value: TemporalValue, directive: str, locale: LocaleNames) -> str:
    """Format a single directive.

    Raises:
        ValueError: If the directive is unsupported.
    """
    if directive == "%%":
        return "%"

    if directive == "%Y":
        return f"{value.year:04d}"
    elif directive == "%y":
        return f"{value.year % 100:02d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%j":
        return f"{value.day_of_year:03d}"
    elif directive == "%u":
        return str(value.weekday)
    elif directive in ("%a", "%A"):
        return locale.weekday_name(value.weekday, abbreviated=directive == "%a")
    elif directive in ("%b", "%B"):
        return locale.month_name(value.month, abbreviated=directive == "%b")

    # Time and zone directives; a CalendarDate is midnight and naive
    hour = getattr(value, "hour", 0)
    minute = getattr(value, "minute", 0)
    second = getattr(value, "second", 0)
    offset = getattr(value, "utc_offset", None)

    if directive == "%H":
        return f"{hour:02d}"
    elif directive == "%M":
        return f"{minute:02d}"
    elif directive == "%S":
        return f"{second:02d}"
    elif directive == "%z":
        return "" if offset is None else _format_offset(offset, colon=False)
    elif directive == "%Z":
        if offset is None:
            return ""
        abbreviation = value.timezone_abbreviation  # type: ignore[union-attr]
        return abbreviation if abbreviation else _format_offset(offset, colon=True)
    else:
        raise ValueError(
            f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}"
        )


__all__ = ["format_value"]
