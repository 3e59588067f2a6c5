"""DateTimeValue class combining a date, a clock time and an optional zone.

This module provides the DateTimeValue class for representing civil date
and time values with whole-second precision. A value without a timezone
is naive; a value with one is zoned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from datekit._internal.calendar import (
    days_before_month,
    iso_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datekit._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datekit._internal.validation import validate_date, validate_time
from datekit.core.date import CalendarDate
from datekit.errors import InvalidDateError, TimezoneError, UnitMismatchError
from datekit.units.timezone import Timezone

if TYPE_CHECKING:
    from datekit.core.duration import Duration
    from datekit.core.span import TimeSpan


_UNSET = object()


class DateTimeValue:
    """A civil date and time with an optional timezone.

    The internal representation is the local wall time, stored as the
    ordinal day and the seconds since local midnight, plus the timezone.
    Zoned values must name a wall time that exists in their zone: the
    hour skipped when clocks spring forward is rejected. A wall time that
    occurs twice (clocks falling back) denotes the earlier instant unless
    fold=1 is given. Exact arithmetic and timezone conversion record the
    fold of the instant they land on.

    Attributes:
        year, month, day: Date components.
        hour, minute, second: Clock components.
        timezone: The Timezone, or None if naive.
        fold: 1 for the second occurrence of a repeated wall time.

    Examples:
        >>> dt = DateTimeValue(2019, 2, 18, 13, 45, 0)
        >>> dt.hour
        13
        >>> dt.is_naive
        True

        >>> ny = Timezone.named("America/New_York")
        >>> DateTimeValue(2019, 7, 4, 9, 0, 0, timezone=ny).utc_offset
        -14400
    """

    __slots__ = ("_days", "_seconds", "_tz", "_fold")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        timezone: Timezone | None = None,
        fold: int = 0,
    ) -> None:
        """Create a DateTimeValue from component parts.

        Args:
            fold: 1 selects the later of two instants sharing a repeated
                wall time. Ignored where the wall time is not repeated.

        Raises:
            InvalidDateError: If any component is out of range, or the wall
                time does not exist in the given timezone.
        """
        validate_date(year, month, day)
        validate_time(hour, minute, second)
        if timezone is not None and not isinstance(timezone, Timezone):
            raise TimezoneError(
                f"timezone must be a Timezone, got {type(timezone).__name__}"
            )
        if fold not in (0, 1) or isinstance(fold, bool):
            raise InvalidDateError(f"fold must be 0 or 1, got {fold!r}")

        self._days: int = ymd_to_ordinal(year, month, day)
        self._seconds: int = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        self._tz: Timezone | None = timezone
        self._fold: int = fold
        self._check_exists()

    @classmethod
    def _from_internal(
        cls,
        days: int,
        seconds: int,
        tz: Timezone | None,
        fold: int = 0,
    ) -> DateTimeValue:
        """Build from the internal representation, normalizing seconds into days.

        Raises:
            InvalidDateError: If the result is outside years 1-9999 or does
                not exist in its timezone.
        """
        extra_days, seconds = divmod(seconds, SECONDS_PER_DAY)
        days += extra_days
        if days < _MIN_ORDINAL or days > _MAX_ORDINAL:
            raise InvalidDateError(
                f"result is outside the supported years {MIN_YEAR}-{MAX_YEAR}"
            )
        instance = object.__new__(cls)
        instance._days = days
        instance._seconds = seconds
        instance._tz = tz
        instance._fold = fold
        instance._check_exists()
        return instance

    @classmethod
    def _from_utc_seconds(cls, utc_seconds: int, tz: Timezone) -> DateTimeValue:
        if utc_seconds < _MIN_ORDINAL * SECONDS_PER_DAY or utc_seconds > (
            _MAX_ORDINAL + 1
        ) * SECONDS_PER_DAY:
            raise InvalidDateError(
                f"result is outside the supported years {MIN_YEAR}-{MAX_YEAR}"
            )
        try:
            days, seconds, fold = tz.to_local(utc_seconds)
        except (OverflowError, ValueError) as exc:
            raise InvalidDateError(
                f"result is outside the supported years {MIN_YEAR}-{MAX_YEAR}"
            ) from exc
        return cls._from_internal(days, seconds, tz, fold)

    @classmethod
    def from_date(
        cls,
        date: CalendarDate,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        timezone: Timezone | None = None,
    ) -> DateTimeValue:
        """Attach a clock time (midnight by default) to a CalendarDate.

        Examples:
            >>> DateTimeValue.from_date(CalendarDate(2019, 2, 18))
            DateTimeValue(2019, 2, 18, 0, 0, 0)
        """
        return cls(
            date.year, date.month, date.day, hour, minute, second, timezone=timezone
        )

    def _check_exists(self) -> None:
        if self._tz is None:
            self._fold = 0
            return
        if not self._tz.exists_at(self._days, self._seconds):
            raise InvalidDateError(
                f"{self._wall_iso()} does not exist in {self._tz} "
                "(skipped by a daylight saving transition)"
            )
        # fold only matters where the two occurrences differ in offset
        if self._fold and self._tz.utcoffset_at(
            self._days, self._seconds, 0
        ) == self._tz.utcoffset_at(self._days, self._seconds, 1):
            self._fold = 0

    # Date components

    @property
    def year(self) -> int:
        return ordinal_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return ordinal_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return ordinal_to_ymd(self._days)[2]

    # Time components

    @property
    def hour(self) -> int:
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def ordinal(self) -> int:
        """Return the ordinal day number of the local date."""
        return self._days

    @property
    def seconds_of_day(self) -> int:
        """Return the seconds since local midnight."""
        return self._seconds

    @property
    def fold(self) -> int:
        """Return 1 for the second occurrence of a repeated wall time, else 0."""
        return self._fold

    @property
    def weekday(self) -> int:
        """Return the ISO weekday of the local date, Monday=1 through Sunday=7."""
        return iso_weekday(self._days)

    @property
    def day_of_year(self) -> int:
        year, month, day = ordinal_to_ymd(self._days)
        return days_before_month(year, month) + day

    # Timezone

    @property
    def timezone(self) -> Timezone | None:
        return self._tz

    @property
    def is_naive(self) -> bool:
        return self._tz is None

    @property
    def is_aware(self) -> bool:
        return self._tz is not None

    @property
    def utc_offset(self) -> int | None:
        """Return the UTC offset in seconds in effect at this value, None if naive."""
        if self._tz is None:
            return None
        return self._tz.utcoffset_at(self._days, self._seconds, self._fold)

    @property
    def timezone_abbreviation(self) -> str | None:
        """Return the zone abbreviation ("EST", "CEST"), None if naive."""
        if self._tz is None:
            return None
        return self._tz.abbreviation_at(self._days, self._seconds, self._fold)

    def _timeline_seconds(self) -> int:
        """Seconds on the comparison timeline: UTC if zoned, wall clock if naive."""
        local = self._days * SECONDS_PER_DAY + self._seconds
        if self._tz is None:
            return local
        return local - self._tz.utcoffset_at(self._days, self._seconds, self._fold)

    # Conversions

    def date(self) -> CalendarDate:
        """Return the local date as a CalendarDate."""
        return CalendarDate.from_ordinal(self._days)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        timezone: Timezone | None | object = _UNSET,
    ) -> DateTimeValue:
        """Return a new DateTimeValue with specified components replaced.

        The wall time is kept when only the timezone is replaced. Omit
        timezone to keep the current one; pass None to make the value naive.

        Raises:
            InvalidDateError: If the result does not exist.

        Examples:
            >>> DateTimeValue(2019, 2, 18, 13, 45, 0).replace(hour=10)
            DateTimeValue(2019, 2, 18, 10, 45, 0)
        """
        y, m, d = ordinal_to_ymd(self._days)
        return DateTimeValue(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            timezone=self._tz if timezone is _UNSET else timezone,  # type: ignore[arg-type]
        )

    def astimezone(self, timezone: Timezone) -> DateTimeValue:
        """Convert to another timezone, preserving the instant.

        Raises:
            TimezoneError: If this value is naive.

        Examples:
            >>> utc = DateTimeValue(2019, 1, 15, 12, 0, 0, timezone=Timezone.utc())
            >>> utc.astimezone(Timezone.named("Asia/Kolkata")).hour
            17
        """
        if self._tz is None:
            raise TimezoneError(
                "Cannot convert naive value to a timezone. "
                "Use replace(timezone=...) to attach one first."
            )
        return DateTimeValue._from_utc_seconds(self._timeline_seconds(), timezone)

    def to_utc(self) -> DateTimeValue:
        return self.astimezone(Timezone.utc())

    def to_iso_format(self) -> str:
        """Return an ISO 8601 string, with offset for zoned values.

        Examples:
            >>> DateTimeValue(2019, 2, 18, 13, 45, 0).to_iso_format()
            '2019-02-18T13:45:00'
        """
        result = self._wall_iso()
        offset = self.utc_offset
        if offset is None:
            return result
        if offset == 0 and self._tz is not None and self._tz.is_fixed:
            return result + "Z"
        sign = "+" if offset >= 0 else "-"
        hours, minutes = divmod(abs(offset) // 60, 60)
        return f"{result}{sign}{hours:02d}:{minutes:02d}"

    def _wall_iso(self) -> str:
        year, month, day = ordinal_to_ymd(self._days)
        return (
            f"{year:04d}-{month:02d}-{day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    # Arithmetic operators

    def __add__(self, other: object) -> DateTimeValue:
        """Add a TimeSpan; see datekit.arithmetic.add_span."""
        from datekit.arithmetic.span_ops import add_span
        from datekit.core.span import TimeSpan

        if not isinstance(other, TimeSpan):
            return NotImplemented
        return add_span(self, other)  # type: ignore[return-value]

    @overload
    def __sub__(self, other: TimeSpan) -> DateTimeValue: ...

    @overload
    def __sub__(self, other: DateTimeValue) -> Duration: ...

    def __sub__(self, other: object) -> DateTimeValue | Duration:
        """Subtract a TimeSpan, or another DateTimeValue to get a Duration.

        Raises:
            UnitMismatchError: If one value is naive and the other zoned.

        Examples:
            >>> a = DateTimeValue(2019, 2, 18, 14, 0, 0)
            >>> b = DateTimeValue(2019, 2, 18, 12, 0, 0)
            >>> (a - b).total_seconds
            7200
        """
        from datekit.core.duration import Duration
        from datekit.core.span import TimeSpan

        if isinstance(other, TimeSpan):
            return self + (-other)
        if isinstance(other, DateTimeValue):
            if (self._tz is None) != (other._tz is None):
                raise UnitMismatchError(
                    "Cannot subtract naive and zoned values. "
                    "Both must be naive or both must be zoned."
                )
            return Duration(seconds=self._timeline_seconds() - other._timeline_seconds())
        return NotImplemented

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Zoned values are equal when they denote the same instant.

        A naive value is never equal to a zoned one.
        """
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        if (self._tz is None) != (other._tz is None):
            return False
        return self._timeline_seconds() == other._timeline_seconds()

    def _check_comparable(self, other: DateTimeValue) -> None:
        if (self._tz is None) != (other._tz is None):
            raise TypeError(
                "can't compare naive and zoned values. "
                "Both must be naive or both must be zoned."
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        self._check_comparable(other)
        return self._timeline_seconds() < other._timeline_seconds()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        self._check_comparable(other)
        return self._timeline_seconds() <= other._timeline_seconds()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        self._check_comparable(other)
        return self._timeline_seconds() > other._timeline_seconds()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeValue):
            return NotImplemented
        self._check_comparable(other)
        return self._timeline_seconds() >= other._timeline_seconds()

    def __hash__(self) -> int:
        return hash((self._timeline_seconds(), self._tz is None))

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._days)
        tz_part = ""
        if self._tz is not None:
            tz_part = f", timezone={self._tz!r}"
        if self._fold:
            tz_part += ", fold=1"
        return (
            f"DateTimeValue({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}{tz_part})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


_MIN_ORDINAL = ymd_to_ordinal(MIN_YEAR, 1, 1)
_MAX_ORDINAL = ymd_to_ordinal(MAX_YEAR, 12, 31)


__all__ = ["DateTimeValue"]
