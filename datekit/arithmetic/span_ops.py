"""TimeSpan arithmetic for CalendarDate and DateTimeValue.

Calendar units move the corresponding calendar field and then revalidate
the whole value. A result that names a day which does not exist is an
error, never clamped or rolled over:

    CalendarDate(2020, 2, 29) + TimeSpan.years(1)   -> InvalidDateError
    CalendarDate(2020, 2, 29) + TimeSpan.years(4)   -> CalendarDate(2024, 2, 29)
    CalendarDate(2019, 1, 31) + TimeSpan.months(1)  -> InvalidDateError
    CalendarDate(2019, 12, 15) + TimeSpan.months(1) -> CalendarDate(2020, 1, 15)

Weeks and days move the civil date and keep the wall-clock time, so across
a daylight saving transition one day may last 23 or 25 hours. Hours,
minutes and seconds are exact elapsed time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Union

from datekit._internal.constants import SECONDS_PER_DAY
from datekit.errors import InvalidDateError
from datekit.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue
    from datekit.core.span import TimeSpan

logger = logging.getLogger(__name__)

TemporalValue = Union["CalendarDate", "DateTimeValue"]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Move (year, month) by a number of months, rolling the year over.

    Examples:
        >>> shift_month(2019, 12, 1)
        (2020, 1)
        >>> shift_month(2020, 1, -13)
        (2018, 12)
    """
    total = year * 12 + (month - 1) + months
    new_year, month_index = divmod(total, 12)
    return new_year, month_index + 1


def add_span(value: TemporalValue, span: TimeSpan) -> TemporalValue:
    """Add a TimeSpan to a CalendarDate or DateTimeValue.

    Sub-day spans added to a CalendarDate promote it to a naive
    DateTimeValue at midnight.

    Args:
        value: The value to add to.
        span: The span to add.

    Returns:
        A new value; the type matches the input unless promoted.

    Raises:
        InvalidDateError: If the result does not exist, or falls outside
            years 1-9999.
        TypeError: If value or span has the wrong type.

    Examples:
        >>> from datekit.core.date import CalendarDate
        >>> from datekit.core.span import TimeSpan
        >>> add_span(CalendarDate(2020, 2, 29), TimeSpan.years(4))
        CalendarDate(2024, 2, 29)
    """
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue
    from datekit.core.span import TimeSpan

    if not isinstance(span, TimeSpan):
        raise TypeError(f"span must be a TimeSpan, got {type(span).__name__}")

    unit = span.unit
    amount = span.amount

    if isinstance(value, CalendarDate):
        if unit in (TimeUnit.YEAR, TimeUnit.MONTH):
            year, month = _target_month(value.year, value.month, span)
            return _rebuild(value, span, lambda: CalendarDate(year, month, value.day))
        if unit in (TimeUnit.WEEK, TimeUnit.DAY):
            days = amount * (7 if unit is TimeUnit.WEEK else 1)
            return _rebuild(value, span, lambda: CalendarDate.from_ordinal(value.ordinal + days))
        return add_span(DateTimeValue.from_date(value), span)

    if isinstance(value, DateTimeValue):
        if unit in (TimeUnit.YEAR, TimeUnit.MONTH):
            year, month = _target_month(value.year, value.month, span)
            return _rebuild(value, span, lambda: value.replace(year=year, month=month))
        if unit in (TimeUnit.WEEK, TimeUnit.DAY):
            days = amount * (7 if unit is TimeUnit.WEEK else 1)
            return _rebuild(
                value,
                span,
                lambda: DateTimeValue._from_internal(
                    value.ordinal + days, value.seconds_of_day, value.timezone
                ),
            )

        elapsed = amount * unit.to_seconds()  # type: ignore[operator]
        if value.timezone is None:
            return _rebuild(
                value,
                span,
                lambda: DateTimeValue._from_internal(
                    value.ordinal, value.seconds_of_day + elapsed, None
                ),
            )
        utc_seconds = value.ordinal * SECONDS_PER_DAY + value.seconds_of_day - value.utc_offset
        return _rebuild(
            value,
            span,
            lambda: DateTimeValue._from_utc_seconds(utc_seconds + elapsed, value.timezone),
        )

    raise TypeError(
        f"expected CalendarDate or DateTimeValue, got {type(value).__name__}"
    )


def subtract_span(value: TemporalValue, span: TimeSpan) -> TemporalValue:
    """Subtract a TimeSpan; equivalent to adding its negation."""
    return add_span(value, -span)


def _target_month(year: int, month: int, span: TimeSpan) -> tuple[int, int]:
    if span.unit is TimeUnit.YEAR:
        return year + span.amount, month
    return shift_month(year, month, span.amount)


def _rebuild(
    value: TemporalValue,
    span: TimeSpan,
    build: Callable[[], TemporalValue],
) -> TemporalValue:
    try:
        return build()
    except InvalidDateError as exc:
        logger.debug("adding %s to %s has no valid result: %s", span, value, exc)
        raise InvalidDateError(f"{value} + {span} does not exist: {exc}") from exc


__all__ = [
    "add_span",
    "subtract_span",
    "shift_month",
]
