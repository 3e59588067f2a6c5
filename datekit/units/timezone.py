"""Timezone representation.

A Timezone is either a fixed UTC offset ("+05:30", UTC) or a named IANA
zone whose offset follows daylight saving rules. Named zones are resolved
against a ZoneDatabase; Datekit never reads the host's zone configuration
implicitly.
"""

from __future__ import annotations

import datetime as _datetime
import re
import zoneinfo
from typing import ClassVar

from datekit._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_DAY
from datekit.errors import TimezoneError
from datekit.units.zonedb import ZoneDatabase, default_database

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class Timezone:
    """A fixed UTC offset or a named zone.

    Local wall times are the primary representation in Datekit, so the
    zone answers questions about a given local (ordinal day, seconds since
    midnight) pair: its UTC offset, whether it exists, and the inverse
    mapping from a UTC instant back to local time. Ambiguous wall times
    (the repeated hour when clocks fall back) resolve to the earlier
    instant.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_string("+05:30").offset_seconds
        19800

        >>> Timezone.named("America/New_York").key
        'America/New_York'
    """

    __slots__ = ("_offset_seconds", "_name", "_zone")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a fixed-offset Timezone.

        Args:
            offset_seconds: UTC offset in seconds, positive east of UTC.
            name: Optional display name (e.g., "UTC").

        Raises:
            TimezoneError: If offset_seconds is not an integer or is outside
                -14:00 to +14:00.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int | None = offset_seconds
        self._name: str | None = name
        self._zone: zoneinfo.ZoneInfo | None = None

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a fixed offset from hours and minutes.

        The sign of hours applies to minutes as well.

        Examples:
            >>> Timezone.from_hours(-5).offset_seconds
            -18000
            >>> Timezone.from_hours(5, 30).offset_seconds
            19800
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        if hours >= 0:
            return cls(hours * 3600 + minutes * 60)
        return cls(hours * 3600 - minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse a fixed offset string.

        Supported formats:
            - "Z", "UTC": UTC
            - "+HH:MM", "-HH:MM", "+HHMM", "-HHMM", "+HH", "-HH"

        Raises:
            TimezoneError: If the string is not a fixed offset.
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * 3600 + minutes * 60))

    @classmethod
    def named(cls, key: str, database: ZoneDatabase | None = None) -> Timezone:
        """Create a named zone from an IANA key.

        Args:
            key: IANA key such as "Europe/Paris".
            database: Zone database to resolve against; the shared
                tzdata-backed database when omitted.

        Raises:
            TimezoneError: If the key is unknown to the database.
        """
        zone = (database or default_database()).resolve(key)
        instance = object.__new__(cls)
        instance._offset_seconds = None
        instance._name = key
        instance._zone = zone
        return instance

    @classmethod
    def resolve(
        cls,
        spec: str | Timezone,
        database: ZoneDatabase | None = None,
    ) -> Timezone:
        """Turn a user-supplied timezone spec into a Timezone.

        Accepts a Timezone (returned as is), "UTC"/"Z", a fixed offset
        string, or an IANA key.
        """
        if isinstance(spec, Timezone):
            return spec
        if not isinstance(spec, str):
            raise TimezoneError(f"Expected string or Timezone, got {type(spec).__name__}")
        stripped = spec.strip()
        if stripped.upper() in ("Z", "UTC") or stripped[:1] in ("+", "-"):
            return cls.from_string(stripped)
        return cls.named(stripped, database)

    @property
    def key(self) -> str | None:
        """Return the IANA key for named zones, None for fixed offsets."""
        return self._name if self._zone is not None else None

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_fixed(self) -> bool:
        return self._zone is None

    @property
    def offset_seconds(self) -> int | None:
        """Return the fixed UTC offset, or None for named zones."""
        return self._offset_seconds

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    def utcoffset_at(self, days: int, seconds: int, fold: int = 0) -> int:
        """Return the UTC offset in seconds in effect at a local wall time.

        Args:
            days: Ordinal day of the local date.
            seconds: Seconds since local midnight.
            fold: 1 selects the second occurrence of a repeated wall time.
        """
        if self._zone is None:
            return self._offset_seconds  # type: ignore[return-value]
        offset = self._wall(days, seconds, fold).utcoffset()
        return int(offset.total_seconds())  # type: ignore[union-attr]

    def exists_at(self, days: int, seconds: int) -> bool:
        """Return False for wall times skipped by a forward clock shift."""
        if self._zone is None:
            return True
        wall = self._wall(days, seconds)
        back = wall.astimezone(_datetime.timezone.utc).astimezone(self._zone)
        return back.replace(tzinfo=None) == wall.replace(tzinfo=None)

    def abbreviation_at(self, days: int, seconds: int, fold: int = 0) -> str:
        """Return the zone abbreviation ("EST", "CEST") at a local wall time."""
        if self._zone is None:
            return "UTC" if self.is_utc else str(self)
        return self._wall(days, seconds, fold).tzname() or str(self)

    def to_local(self, utc_seconds: int) -> tuple[int, int, int]:
        """Map a UTC instant to local (ordinal day, seconds since midnight, fold).

        The fold is 1 only for the second occurrence of a wall time that
        a backward clock shift repeats.

        Args:
            utc_seconds: Seconds since 0001-01-01T00:00 UTC, counted as
                ordinal * 86400 + seconds of day.
        """
        if self._zone is None:
            days, secs = divmod(utc_seconds + self._offset_seconds, SECONDS_PER_DAY)  # type: ignore[operator]
            return days, secs, 0
        days, secs = divmod(utc_seconds, SECONDS_PER_DAY)
        utc = _datetime.datetime.fromordinal(days).replace(
            tzinfo=_datetime.timezone.utc
        ) + _datetime.timedelta(seconds=secs)
        local = utc.astimezone(self._zone)
        return (
            local.toordinal(),
            local.hour * 3600 + local.minute * 60 + local.second,
            local.fold,
        )

    def _wall(self, days: int, seconds: int, fold: int = 0) -> _datetime.datetime:
        return (
            _datetime.datetime.fromordinal(days) + _datetime.timedelta(seconds=seconds)
        ).replace(tzinfo=self._zone, fold=fold)

    def __eq__(self, other: object) -> bool:
        """Fixed zones compare by offset, named zones by key."""
        if not isinstance(other, Timezone):
            return NotImplemented
        if self._zone is not None or other._zone is not None:
            return self.key == other.key
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        if self._zone is not None:
            return hash(self._name)
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._zone is not None:
            return f"Timezone.named({self._name!r})"
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the key, "UTC", or an offset like "+05:30"."""
        if self._zone is not None:
            return self._name  # type: ignore[return-value]
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"

        total_minutes = abs(self._offset_seconds) // 60  # type: ignore[arg-type]
        hours, minutes = divmod(total_minutes, 60)
        sign = "+" if self._offset_seconds >= 0 else "-"  # type: ignore[operator]
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
