"""DateTimeToolkit facade.

The toolkit binds the collaborators every operation may need (a zone
database, a locale table and parse options) and exposes the whole
library as methods. The module-level functions with the same names
delegate to a default toolkit created on first use.

Examples:
    >>> from datekit.toolkit import DateTimeToolkit
    >>> kit = DateTimeToolkit()
    >>> d = kit.parse("18/02/2019", "dmy")
    >>> kit.weekday(d, use_full_name=True)
    'Monday'
    >>> kit.add_span(d, TimeSpan.months(1))
    CalendarDate(2019, 3, 18)
"""

from __future__ import annotations

import dataclasses
from typing import Union

from datekit import arithmetic, parsing
from datekit._internal.calendar import days_in_month as _days_in_month
from datekit._internal.calendar import is_leap_year as _is_leap_year
from datekit._internal.validation import validate_month, validate_year
from datekit.core.date import CalendarDate
from datekit.core.datetime import DateTimeValue
from datekit.core.span import TimeSpan
from datekit.errors import InvalidDateError
from datekit.format.strftime import format_value
from datekit.parsing import ParseOptions
from datekit.parsing._order import OrderSpec
from datekit.units.locale import ENGLISH, LocaleNames
from datekit.units.timeunit import Component, TimeUnit
from datekit.units.timezone import Timezone
from datekit.units.zonedb import ZoneDatabase, default_database

TemporalValue = Union[CalendarDate, DateTimeValue]


def _check_value(value: object) -> None:
    if not isinstance(value, (CalendarDate, DateTimeValue)):
        raise TypeError(
            f"expected CalendarDate or DateTimeValue, got {type(value).__name__}"
        )


class DateTimeToolkit:
    """Parsing, component access, arithmetic and formatting in one place.

    Args:
        zones: Database for IANA keys. Defaults to the bundled tzdata
            database.
        locale: Names used for parsing, weekday labels and formatting.
            Overrides the locale of options when both are given. Defaults
            to the locale of options, or English.
        options: Parse options. Defaults to ParseOptions(locale=locale).
    """

    def __init__(
        self,
        zones: ZoneDatabase | None = None,
        locale: LocaleNames | None = None,
        options: ParseOptions | None = None,
    ) -> None:
        if options is None:
            options = ParseOptions(locale=locale if locale is not None else ENGLISH)
        elif locale is not None and options.locale != locale:
            options = dataclasses.replace(options, locale=locale)
        self._zones = zones if zones is not None else default_database()
        self._locale = options.locale
        self._options = options

    @property
    def zones(self) -> ZoneDatabase:
        return self._zones

    @property
    def locale(self) -> LocaleNames:
        return self._locale

    @property
    def options(self) -> ParseOptions:
        return self._options

    def parse(
        self,
        text: str,
        order: OrderSpec,
        timezone: str | Timezone | None = None,
    ) -> TemporalValue:
        """Parse text whose components appear in the given order.

        See datekit.parsing.parse for the accepted inputs.

        Raises:
            ParseError: If the text does not hold a valid date in that order.
            TimezoneError: If the timezone cannot be resolved.
        """
        return parsing.parse(
            text, order, timezone, options=self._options, zones=self._zones
        )

    # Component accessors

    def year(self, value: TemporalValue) -> int:
        _check_value(value)
        return value.year

    def month(self, value: TemporalValue) -> int:
        _check_value(value)
        return value.month

    def day(self, value: TemporalValue) -> int:
        _check_value(value)
        return value.day

    def hour(self, value: TemporalValue) -> int:
        """Return the hour; a CalendarDate reports 0."""
        _check_value(value)
        return getattr(value, "hour", 0)

    def minute(self, value: TemporalValue) -> int:
        _check_value(value)
        return getattr(value, "minute", 0)

    def second(self, value: TemporalValue) -> int:
        _check_value(value)
        return getattr(value, "second", 0)

    def day_of_year(self, value: TemporalValue) -> int:
        _check_value(value)
        return value.day_of_year

    def weekday(
        self,
        value: TemporalValue,
        use_full_name: bool = False,
        *,
        label: bool = False,
    ) -> int | str:
        """Return the day of the week.

        Args:
            value: The date or date-time.
            use_full_name: Return the full localized name ("Monday").
            label: Return the abbreviated localized name ("Mon").

        Returns:
            The ISO weekday (Monday=1 .. Sunday=7) unless a name is asked for.

        Examples:
            >>> kit = DateTimeToolkit()
            >>> kit.weekday(CalendarDate(2019, 2, 18))
            1
            >>> kit.weekday(CalendarDate(2019, 2, 18), label=True)
            'Mon'
        """
        _check_value(value)
        iso = value.weekday
        if use_full_name:
            return self._locale.weekday_name(iso)
        if label:
            return self._locale.weekday_name(iso, abbreviated=True)
        return iso

    def is_leap_year(self, year: int) -> bool:
        validate_year(year)
        return _is_leap_year(year)

    def days_in_month(self, year: int, month: int) -> int:
        """Return the length of a month, e.g. 29 for February 2016.

        Raises:
            InvalidDateError: If the year or month is out of range.
        """
        validate_year(year)
        validate_month(month)
        return _days_in_month(year, month)

    def with_component(
        self,
        value: TemporalValue,
        component: Component | str,
        new_value: int,
    ) -> TemporalValue:
        """Replace one component and revalidate the whole value.

        Replacing a time component of a CalendarDate promotes it to a
        naive DateTimeValue at midnight.

        Raises:
            InvalidDateError: If new_value is not an integer or the result
                does not exist. Values never roll over into a neighboring
                month or day.

        Examples:
            >>> kit = DateTimeToolkit()
            >>> kit.with_component(CalendarDate(2019, 1, 31), Component.DAY, 1)
            CalendarDate(2019, 1, 1)
            >>> kit.with_component(CalendarDate(2019, 1, 31), "hour", 9)
            DateTimeValue(2019, 1, 31, 9, 0, 0)
        """
        _check_value(value)
        component = Component.coerce(component)
        if not isinstance(new_value, int) or isinstance(new_value, bool):
            raise InvalidDateError(
                f"{component.name.lower()} must be an integer, got {type(new_value).__name__}"
            )
        if isinstance(value, CalendarDate) and component.is_time:
            value = DateTimeValue.from_date(value)
        return value.replace(**{component.name.lower(): new_value})

    # Arithmetic

    def add_span(self, value: TemporalValue, span: TimeSpan) -> TemporalValue:
        """Add a TimeSpan; see datekit.arithmetic.add_span.

        Raises:
            InvalidDateError: If the result does not exist.
        """
        return arithmetic.add_span(value, span)

    def subtract_span(self, value: TemporalValue, span: TimeSpan) -> TemporalValue:
        return arithmetic.subtract_span(value, span)

    def duration(
        self,
        a: TemporalValue,
        b: TemporalValue,
        unit: TimeUnit | str,
    ) -> float:
        """Return the signed duration a - b in unit.

        Raises:
            UnitMismatchError: If one operand is naive and the other zoned.
        """
        return arithmetic.duration(a, b, unit)

    def floor(self, value: TemporalValue, unit: TimeUnit | str) -> TemporalValue:
        return arithmetic.floor(value, unit)

    def ceiling(self, value: TemporalValue, unit: TimeUnit | str) -> TemporalValue:
        return arithmetic.ceiling(value, unit)

    # Formatting

    def format(self, value: TemporalValue, pattern: str) -> str:
        """Format with strftime directives using this toolkit's locale."""
        return format_value(value, pattern, self._locale)

    def timezone(self, spec: str | Timezone) -> Timezone:
        """Resolve a timezone spec against this toolkit's zone database.

        Raises:
            TimezoneError: If the key is unknown or the offset is malformed.
        """
        return Timezone.resolve(spec, self._zones)

    def __repr__(self) -> str:
        return (
            f"DateTimeToolkit(zones={self._zones!r}, locale={self._locale.code!r}, "
            f"options={self._options!r})"
        )


_default: DateTimeToolkit | None = None


def default_toolkit() -> DateTimeToolkit:
    """Return the shared toolkit used by the module-level functions."""
    global _default
    if _default is None:
        _default = DateTimeToolkit()
    return _default


def parse(text: str, order: OrderSpec, timezone: str | Timezone | None = None) -> TemporalValue:
    return default_toolkit().parse(text, order, timezone)


def year(value: TemporalValue) -> int:
    return default_toolkit().year(value)


def month(value: TemporalValue) -> int:
    return default_toolkit().month(value)


def day(value: TemporalValue) -> int:
    return default_toolkit().day(value)


def hour(value: TemporalValue) -> int:
    return default_toolkit().hour(value)


def minute(value: TemporalValue) -> int:
    return default_toolkit().minute(value)


def second(value: TemporalValue) -> int:
    return default_toolkit().second(value)


def day_of_year(value: TemporalValue) -> int:
    return default_toolkit().day_of_year(value)


def weekday(
    value: TemporalValue,
    use_full_name: bool = False,
    *,
    label: bool = False,
) -> int | str:
    return default_toolkit().weekday(value, use_full_name, label=label)


def is_leap_year(year: int) -> bool:
    return default_toolkit().is_leap_year(year)


def days_in_month(year: int, month: int) -> int:
    return default_toolkit().days_in_month(year, month)


def with_component(
    value: TemporalValue,
    component: Component | str,
    new_value: int,
) -> TemporalValue:
    return default_toolkit().with_component(value, component, new_value)


__all__ = [
    "DateTimeToolkit",
    "default_toolkit",
    "parse",
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "day_of_year",
    "weekday",
    "is_leap_year",
    "days_in_month",
    "with_component",
]
