"""TimeUnit and Component enumerations.

TimeUnit names the units used for spans, durations and truncation.
Component names the fields of a date/time value, used for parse orders
and single-field replacement.
"""

from __future__ import annotations

from enum import Enum

from datekit._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)


class TimeUnit(Enum):
    """Standard time units for temporal operations.

    Each unit knows its length in seconds where that length is fixed.

    Note:
        YEAR and MONTH do not have fixed second equivalents due to
        variable lengths (leap years, different month lengths).
        The to_seconds() method returns None for these units.

    Examples:
        >>> TimeUnit.HOUR.to_seconds()
        3600

        >>> TimeUnit.MONTH.to_seconds() is None
        True
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def to_seconds(self) -> int | None:
        """Return the number of seconds in one unit, or None for MONTH and YEAR.

        Examples:
            >>> TimeUnit.DAY.to_seconds()
            86400
        """
        return _UNIT_SECONDS[self]

    @property
    def is_calendar(self) -> bool:
        """Return True for units whose length depends on the calendar.

        DAY and WEEK count as calendar units: a civil day may last 23 or
        25 hours across a daylight saving transition.
        """
        return self in (TimeUnit.DAY, TimeUnit.WEEK, TimeUnit.MONTH, TimeUnit.YEAR)

    @classmethod
    def from_name(cls, name: str) -> TimeUnit:
        """Look up a unit by name, accepting plurals ("days") and any case.

        Raises:
            ValueError: If the name is not a unit.
        """
        key = name.strip().lower()
        if key.endswith("s"):
            key = key[:-1]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown time unit: {name!r}") from None

    @classmethod
    def coerce(cls, unit: TimeUnit | str) -> TimeUnit:
        """Accept a TimeUnit or its name."""
        if isinstance(unit, TimeUnit):
            return unit
        if isinstance(unit, str):
            return cls.from_name(unit)
        raise TypeError(f"expected TimeUnit or str, got {type(unit).__name__}")


_UNIT_SECONDS: dict[TimeUnit, int | None] = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: SECONDS_PER_MINUTE,
    TimeUnit.HOUR: SECONDS_PER_HOUR,
    TimeUnit.DAY: SECONDS_PER_DAY,
    TimeUnit.WEEK: SECONDS_PER_WEEK,
    TimeUnit.MONTH: None,
    TimeUnit.YEAR: None,
}


class Component(Enum):
    """A single field of a date or datetime value.

    The single-letter codes are the ones used by parse order shorthands
    such as "ymd_hms".
    """

    YEAR = "y"
    MONTH = "m"
    DAY = "d"
    HOUR = "h"
    MINUTE = "M"
    SECOND = "s"

    @property
    def is_time(self) -> bool:
        """Return True for the clock components (hour, minute, second)."""
        return self in (Component.HOUR, Component.MINUTE, Component.SECOND)

    @property
    def unit(self) -> TimeUnit:
        """Return the TimeUnit measuring this component."""
        return TimeUnit[self.name]

    @classmethod
    def coerce(cls, component: Component | str) -> Component:
        """Accept a Component or its name ("month", "HOUR").

        Raises:
            ValueError: If the name is not a component.
        """
        if isinstance(component, Component):
            return component
        if isinstance(component, str):
            try:
                return cls[component.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown component: {component!r}") from None
        raise TypeError(f"expected Component or str, got {type(component).__name__}")


__all__ = ["TimeUnit", "Component"]
