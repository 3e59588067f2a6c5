"""Duration class representing exact elapsed time.

A Duration is a signed count of seconds. It is what subtracting two
values with the ``-`` operator yields. Calendar units (months, years)
have no fixed length and are handled by datekit.arithmetic.duration
instead.
"""

from __future__ import annotations

from datekit._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datekit.errors import UnitMismatchError
from datekit.units.timeunit import TimeUnit


class Duration:
    """A signed span of exact elapsed time, in whole seconds.

    Examples:
        >>> d = Duration(days=1, hours=2)
        >>> d.total_seconds
        93600

        >>> Duration(hours=36).in_unit(TimeUnit.DAY)
        1.5

        >>> -Duration(seconds=5)
        Duration(seconds=-5)
    """

    __slots__ = ("_seconds",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        *,
        weeks: int = 0,
    ) -> None:
        self._seconds: int = (
            weeks * 7 * SECONDS_PER_DAY
            + days * SECONDS_PER_DAY
            + hours * SECONDS_PER_HOUR
            + minutes * SECONDS_PER_MINUTE
            + seconds
        )

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @property
    def total_seconds(self) -> int:
        """Return the signed number of seconds."""
        return self._seconds

    @property
    def days(self) -> int:
        """Return whole days, truncated toward zero."""
        whole = abs(self._seconds) // SECONDS_PER_DAY
        return whole if self._seconds >= 0 else -whole

    def in_unit(self, unit: TimeUnit) -> float:
        """Express the duration in a fixed-length unit.

        Raises:
            UnitMismatchError: If unit is MONTH or YEAR, whose length
                depends on where in the calendar the span starts.
        """
        length = unit.to_seconds()
        if length is None:
            raise UnitMismatchError(
                f"an exact duration cannot be expressed in {unit.value}s; "
                "use datekit.duration() with two anchored values"
            )
        return self._seconds / length

    def is_zero(self) -> bool:
        return self._seconds == 0

    def __neg__(self) -> Duration:
        return Duration(seconds=-self._seconds)

    def __abs__(self) -> Duration:
        return Duration(seconds=abs(self._seconds))

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(seconds=self._seconds + other._seconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(seconds=self._seconds - other._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds})"

    def __str__(self) -> str:
        """Return an ISO 8601-like form such as "P1DT2H" or "-PT30S"."""
        sign = "-" if self._seconds < 0 else ""
        days, rest = divmod(abs(self._seconds), SECONDS_PER_DAY)
        hours, rest = divmod(rest, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

        date_part = f"{days}D" if days else ""
        time_part = "".join(
            f"{value}{suffix}"
            for value, suffix in ((hours, "H"), (minutes, "M"), (seconds, "S"))
            if value
        )
        if not date_part and not time_part:
            return "PT0S"
        return f"{sign}P{date_part}{'T' + time_part if time_part else ''}"


__all__ = ["Duration"]
