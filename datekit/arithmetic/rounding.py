"""Truncation of values to unit boundaries.

floor resets every component finer than the unit to its minimum valid
value (month 1, day 1, time 00:00:00); WEEK floors to the preceding
Monday. ceiling returns the smallest unit boundary at or after the value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from datekit._internal.calendar import ymd_to_ordinal
from datekit.arithmetic.span_ops import add_span
from datekit.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

TemporalValue = Union["CalendarDate", "DateTimeValue"]


def _floor_ordinal(year: int, month: int, ordinal: int, weekday: int, unit: TimeUnit) -> int:
    if unit is TimeUnit.YEAR:
        return ymd_to_ordinal(year, 1, 1)
    if unit is TimeUnit.MONTH:
        return ymd_to_ordinal(year, month, 1)
    if unit is TimeUnit.WEEK:
        return ordinal - (weekday - 1)
    return ordinal


def floor(value: TemporalValue, unit: TimeUnit | str) -> TemporalValue:
    """Truncate a value to the start of its enclosing unit.

    Raises:
        InvalidDateError: If the truncated wall time of a zoned value does
            not exist in its timezone.

    Examples:
        >>> from datekit.core.datetime import DateTimeValue
        >>> floor(DateTimeValue(2019, 2, 18, 13, 45, 0), TimeUnit.MONTH)
        DateTimeValue(2019, 2, 1, 0, 0, 0)
        >>> floor(DateTimeValue(2019, 2, 18, 13, 45, 30), "hours")
        DateTimeValue(2019, 2, 18, 13, 0, 0)
    """
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

    unit = TimeUnit.coerce(unit)

    if isinstance(value, CalendarDate):
        ordinal = _floor_ordinal(value.year, value.month, value.ordinal, value.weekday, unit)
        return CalendarDate.from_ordinal(ordinal)

    if isinstance(value, DateTimeValue):
        ordinal = _floor_ordinal(value.year, value.month, value.ordinal, value.weekday, unit)
        if unit.is_calendar:
            return DateTimeValue._from_internal(ordinal, 0, value.timezone)
        length = unit.to_seconds()
        seconds = value.seconds_of_day - value.seconds_of_day % length  # type: ignore[operator]
        return DateTimeValue._from_internal(ordinal, seconds, value.timezone, value.fold)

    raise TypeError(
        f"expected CalendarDate or DateTimeValue, got {type(value).__name__}"
    )


def ceiling(value: TemporalValue, unit: TimeUnit | str) -> TemporalValue:
    """Return the smallest boundary of unit that is at or after value.

    A value already on a boundary is returned unchanged. A CalendarDate
    is always on a sub-day boundary.

    Examples:
        >>> from datekit.core.date import CalendarDate
        >>> ceiling(CalendarDate(2019, 2, 18), TimeUnit.MONTH)
        CalendarDate(2019, 3, 1)
        >>> ceiling(CalendarDate(2019, 3, 1), TimeUnit.MONTH)
        CalendarDate(2019, 3, 1)
    """
    from datekit.core.date import CalendarDate
    from datekit.core.span import TimeSpan

    unit = TimeUnit.coerce(unit)
    if isinstance(value, CalendarDate) and not unit.is_calendar:
        return value

    start = floor(value, unit)
    if start == value:
        return value
    return add_span(start, TimeSpan(1, unit))


__all__ = ["floor", "ceiling"]
