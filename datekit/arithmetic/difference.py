"""Signed durations between two values, in any unit.

Fixed-length units (seconds through weeks) divide the exact elapsed time.
Months and years are counted on the calendar: whole units from the
earlier value, plus the elapsed fraction of the unit that follows. Leap
days inside the span are therefore accounted for:

    duration(CalendarDate(2020, 1, 1), CalendarDate(2019, 1, 1), "years") == 1.0
    duration(CalendarDate(2020, 7, 1), CalendarDate(2020, 1, 1), "years") == 182 / 366
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from datekit._internal.calendar import days_in_month, ymd_to_ordinal
from datekit._internal.constants import SECONDS_PER_DAY
from datekit.arithmetic.span_ops import shift_month
from datekit.errors import UnitMismatchError
from datekit.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

TemporalValue = Union["CalendarDate", "DateTimeValue"]


def duration(a: TemporalValue, b: TemporalValue, unit: TimeUnit | str) -> float:
    """Return the signed duration ``a - b`` expressed in ``unit``.

    A CalendarDate takes part as naive midnight. For months and years on
    zoned values, ``b`` is first converted into ``a``'s timezone and the
    calendar is read off the local wall times.

    Args:
        a: The later value for a positive result.
        b: The earlier value for a positive result.
        unit: A TimeUnit or its name ("days", "years", ...).

    Returns:
        The duration as a float.

    Raises:
        UnitMismatchError: If one operand is naive and the other zoned.

    Examples:
        >>> from datekit.core.date import CalendarDate
        >>> duration(CalendarDate(2020, 1, 1), CalendarDate(2019, 1, 1), TimeUnit.YEAR)
        1.0
        >>> duration(CalendarDate(2019, 3, 1), CalendarDate(2019, 2, 1), "days")
        28.0
    """
    unit = TimeUnit.coerce(unit)
    later = _as_datetime(a)
    earlier = _as_datetime(b)

    if later.is_naive != earlier.is_naive:
        raise UnitMismatchError(
            "cannot measure between a naive and a zoned value; "
            "attach a timezone to both or to neither"
        )

    length = unit.to_seconds()
    if length is not None:
        return (later - earlier).total_seconds / length

    if later.timezone is not None:
        earlier = earlier.astimezone(later.timezone)

    step = 12 if unit is TimeUnit.YEAR else 1
    return _calendar_units(_wall(earlier), _wall(later), step)


def _as_datetime(value: TemporalValue) -> DateTimeValue:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

    if isinstance(value, DateTimeValue):
        return value
    if isinstance(value, CalendarDate):
        return DateTimeValue.from_date(value)
    raise TypeError(
        f"expected CalendarDate or DateTimeValue, got {type(value).__name__}"
    )


def _wall(value: DateTimeValue) -> tuple[int, int, int, int]:
    return (value.year, value.month, value.day, value.seconds_of_day)


def _wall_seconds(year: int, month: int, day: int, seconds: int) -> int:
    return ymd_to_ordinal(year, month, day) * SECONDS_PER_DAY + seconds


def _shifted(start: tuple[int, int, int, int], months: int) -> int:
    """Wall seconds of start moved by whole months.

    Only used as a measuring anchor, so a day past the end of the target
    month is clamped to its last day (Feb 29 anchors Feb 28 in common years).
    """
    year, month, day, seconds = start
    new_year, new_month = shift_month(year, month, months)
    new_day = min(day, days_in_month(new_year, new_month))
    return _wall_seconds(new_year, new_month, new_day, seconds)


def _calendar_units(
    start: tuple[int, int, int, int],
    end: tuple[int, int, int, int],
    step: int,
) -> float:
    start_seconds = _wall_seconds(*start)
    end_seconds = _wall_seconds(*end)
    if end_seconds < start_seconds:
        return -_calendar_units(end, start, step)

    whole = ((end[0] - start[0]) * 12 + (end[1] - start[1])) // step
    anchor = _shifted(start, whole * step)
    while anchor > end_seconds:
        whole -= 1
        anchor = _shifted(start, whole * step)

    following = _shifted(start, (whole + 1) * step)
    while following <= end_seconds:
        whole += 1
        anchor = following
        following = _shifted(start, (whole + 1) * step)

    return whole + (end_seconds - anchor) / (following - anchor)


__all__ = ["duration"]
