"""CalendarDate class representing a plain calendar date.

This module provides the CalendarDate class for representing dates in the
proleptic Gregorian calendar, with no clock time and no timezone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from datekit._internal.calendar import (
    days_before_month,
    is_leap_year,
    iso_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datekit._internal.constants import MAX_YEAR, MIN_YEAR, SECONDS_PER_DAY
from datekit._internal.validation import validate_date
from datekit.errors import InvalidDateError

if TYPE_CHECKING:
    from datekit.core.duration import Duration
    from datekit.core.span import TimeSpan


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    The Gregorian leap year rule is extended to all years, ignoring the
    historical calendar reforms. Supported years are 1 through 9999.

    Internal representation is the ordinal day number (0001-01-01 = 1),
    which makes day arithmetic and comparison integer operations.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.

    Examples:
        >>> d = CalendarDate(2019, 2, 18)
        >>> d.month
        2
        >>> d.weekday
        1

        >>> CalendarDate(2020, 2, 29)  # Valid leap year date
        CalendarDate(2020, 2, 29)

        >>> CalendarDate(2019, 2, 29)
        Traceback (most recent call last):
        ...
        InvalidDateError: day must be between 1 and 28 for 2019-02, got 29
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Raises:
            InvalidDateError: If the components do not name an existing date.
        """
        validate_date(year, month, day)
        self._days: int = ymd_to_ordinal(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal day number.

        Raises:
            InvalidDateError: If the ordinal falls outside years 1-9999.

        Examples:
            >>> CalendarDate.from_ordinal(738900)
            CalendarDate(2024, 1, 15)
        """
        if ordinal < _MIN_ORDINAL or ordinal > _MAX_ORDINAL:
            raise InvalidDateError(
                f"ordinal {ordinal} is outside years {MIN_YEAR}-{MAX_YEAR}"
            )
        instance = object.__new__(cls)
        instance._days = ordinal
        return instance

    @property
    def year(self) -> int:
        return ordinal_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return ordinal_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return ordinal_to_ymd(self._days)[2]

    @property
    def ordinal(self) -> int:
        """Return the ordinal day number (0001-01-01 = 1)."""
        return self._days

    @property
    def weekday(self) -> int:
        """Return the ISO weekday, Monday=1 through Sunday=7.

        Examples:
            >>> CalendarDate(2019, 2, 18).weekday  # Monday
            1
            >>> CalendarDate(2019, 2, 24).weekday  # Sunday
            7
        """
        return iso_weekday(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        year, month, day = ordinal_to_ymd(self._days)
        return days_before_month(year, month) + day

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with the given components replaced.

        The result is validated as a whole; an impossible date raises
        rather than rolling over into the next month.

        Raises:
            InvalidDateError: If the resulting date does not exist.

        Examples:
            >>> CalendarDate(2019, 1, 15).replace(month=6)
            CalendarDate(2019, 6, 15)

            >>> CalendarDate(2019, 1, 31).replace(month=2)
            Traceback (most recent call last):
            ...
            InvalidDateError: day must be between 1 and 28 for 2019-02, got 31
        """
        y, m, d = ordinal_to_ymd(self._days)
        return CalendarDate(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD."""
        year, month, day = ordinal_to_ymd(self._days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __add__(self, other: object) -> CalendarDate:
        """Add a TimeSpan; see datekit.arithmetic.add_span."""
        from datekit.arithmetic.span_ops import add_span
        from datekit.core.span import TimeSpan

        if not isinstance(other, TimeSpan):
            return NotImplemented
        return add_span(self, other)  # type: ignore[return-value]

    @overload
    def __sub__(self, other: TimeSpan) -> CalendarDate: ...

    @overload
    def __sub__(self, other: CalendarDate) -> Duration: ...

    def __sub__(self, other: object) -> CalendarDate | Duration:
        """Subtract a TimeSpan, or another CalendarDate to get a Duration.

        Examples:
            >>> (CalendarDate(2020, 3, 1) - CalendarDate(2020, 2, 1)).days
            29
        """
        from datekit.core.duration import Duration
        from datekit.core.span import TimeSpan

        if isinstance(other, TimeSpan):
            return self + (-other)
        if isinstance(other, CalendarDate):
            return Duration(seconds=(self._days - other._days) * SECONDS_PER_DAY)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._days)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


_MIN_ORDINAL = ymd_to_ordinal(MIN_YEAR, 1, 1)
_MAX_ORDINAL = ymd_to_ordinal(MAX_YEAR, 12, 31)


__all__ = ["CalendarDate"]
