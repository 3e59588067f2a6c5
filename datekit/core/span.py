"""TimeSpan class representing a calendar-aware quantity of one unit.

Unlike Duration (exact seconds), a TimeSpan of one month or one year has
no fixed length; its effect depends on the value it is added to. A span
carries a single unit so that each addition is one well-defined step.
"""

from __future__ import annotations

from datekit.units.timeunit import TimeUnit


class TimeSpan:
    """A signed integer amount of a single TimeUnit.

    Attributes:
        amount: Number of units (can be negative).
        unit: The unit.

    Examples:
        >>> TimeSpan.years(4)
        TimeSpan(4, TimeUnit.YEAR)

        >>> -TimeSpan.months(1)
        TimeSpan(-1, TimeUnit.MONTH)

        >>> from datekit.core.date import CalendarDate
        >>> CalendarDate(2020, 2, 29) + TimeSpan.years(4)
        CalendarDate(2024, 2, 29)
    """

    __slots__ = ("_amount", "_unit")

    def __init__(self, amount: int, unit: TimeUnit) -> None:
        """Create a span.

        Raises:
            TypeError: If amount is not an integer or unit is not a TimeUnit.
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
        if not isinstance(unit, TimeUnit):
            raise TypeError(f"unit must be a TimeUnit, got {type(unit).__name__}")
        self._amount = amount
        self._unit = unit

    @classmethod
    def years(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.YEAR)

    @classmethod
    def months(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.MONTH)

    @classmethod
    def weeks(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.WEEK)

    @classmethod
    def days(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.DAY)

    @classmethod
    def hours(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.HOUR)

    @classmethod
    def minutes(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.MINUTE)

    @classmethod
    def seconds(cls, amount: int) -> TimeSpan:
        return cls(amount, TimeUnit.SECOND)

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def unit(self) -> TimeUnit:
        return self._unit

    @property
    def is_calendar(self) -> bool:
        """Return True if the span's elapsed length depends on where it is applied."""
        return self._unit.is_calendar

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-self._amount, self._unit)

    def __mul__(self, factor: object) -> TimeSpan:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return TimeSpan(self._amount * factor, self._unit)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._amount == other._amount and self._unit == other._unit

    def __hash__(self) -> int:
        return hash((self._amount, self._unit))

    def __repr__(self) -> str:
        return f"TimeSpan({self._amount}, TimeUnit.{self._unit.name})"

    def __str__(self) -> str:
        plural = "" if abs(self._amount) == 1 else "s"
        return f"{self._amount} {self._unit.value}{plural}"


__all__ = ["TimeSpan"]
