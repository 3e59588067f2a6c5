"""Month and weekday name tables.

LocaleNames is a lookup-only collaborator used when parsing alphabetic
month tokens and when formatting names. Tables are plain data; callers
can build their own for languages not shipped here.

Examples:
    >>> ENGLISH.month_number("Sept")
    9
    >>> FRENCH.weekday_name(1)
    'lundi'
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field


def _fold(text: str) -> str:
    """Case- and accent-insensitive lookup key ("Février" -> "fevrier")."""
    decomposed = unicodedata.normalize("NFKD", text.strip().casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).rstrip(".")


@dataclass(frozen=True)
class LocaleNames:
    """Localized month and weekday names.

    Attributes:
        code: Locale identifier such as "en".
        months: Twelve full month names, January first.
        month_abbreviations: Twelve abbreviated month names.
        weekdays: Seven full weekday names, Monday first.
        weekday_abbreviations: Seven abbreviated weekday names.
        extra_month_aliases: Additional spellings mapped to month numbers
            (e.g., "sept" -> 9).
        ordinal_suffixes: Suffixes written after day numbers ("st" in "1st").
    """

    code: str
    months: tuple[str, ...]
    month_abbreviations: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekday_abbreviations: tuple[str, ...]
    extra_month_aliases: dict[str, int] = field(default_factory=dict, hash=False, compare=False)
    ordinal_suffixes: tuple[str, ...] = ()
    _lookup: dict[str, int] = field(init=False, repr=False, hash=False, compare=False)
    _weekday_lookup: dict[str, int] = field(init=False, repr=False, hash=False, compare=False)

    def __post_init__(self) -> None:
        for label, names, size in (
            ("months", self.months, 12),
            ("month_abbreviations", self.month_abbreviations, 12),
            ("weekdays", self.weekdays, 7),
            ("weekday_abbreviations", self.weekday_abbreviations, 7),
        ):
            if len(names) != size:
                raise ValueError(f"{label} must have {size} entries, got {len(names)}")

        lookup: dict[str, int] = {}
        for number, (full, abbr) in enumerate(
            zip(self.months, self.month_abbreviations), start=1
        ):
            lookup[_fold(full)] = number
            lookup[_fold(abbr)] = number
        for alias, number in self.extra_month_aliases.items():
            lookup[_fold(alias)] = number
        object.__setattr__(self, "_lookup", lookup)

        weekday_lookup: dict[str, int] = {}
        for number, (full, abbr) in enumerate(
            zip(self.weekdays, self.weekday_abbreviations), start=1
        ):
            weekday_lookup[_fold(full)] = number
            weekday_lookup[_fold(abbr)] = number
        object.__setattr__(self, "_weekday_lookup", weekday_lookup)

    def month_number(self, token: str) -> int | None:
        """Return 1-12 for a month name or abbreviation, None if unknown."""
        return self._lookup.get(_fold(token))

    def weekday_number(self, token: str) -> int | None:
        """Return the ISO weekday for a weekday name or abbreviation, None if unknown."""
        return self._weekday_lookup.get(_fold(token))

    def is_ordinal_suffix(self, token: str) -> bool:
        return _fold(token) in self.ordinal_suffixes

    def month_name(self, month: int, abbreviated: bool = False) -> str:
        names = self.month_abbreviations if abbreviated else self.months
        return names[month - 1]

    def weekday_name(self, iso_weekday: int, abbreviated: bool = False) -> str:
        """Return the name for an ISO weekday (Monday=1 .. Sunday=7)."""
        names = self.weekday_abbreviations if abbreviated else self.weekdays
        return names[iso_weekday - 1]


ENGLISH = LocaleNames(
    code="en",
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    month_abbreviations=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
    weekday_abbreviations=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    extra_month_aliases={"sept": 9},
    ordinal_suffixes=("st", "nd", "rd", "th"),
)

FRENCH = LocaleNames(
    code="fr",
    months=(
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    month_abbreviations=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekdays=("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
    weekday_abbreviations=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
    ordinal_suffixes=("er",),
)

GERMAN = LocaleNames(
    code="de",
    months=(
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    month_abbreviations=(
        "Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
        "Jul", "Aug", "Sep", "Okt", "Nov", "Dez",
    ),
    weekdays=(
        "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag",
    ),
    weekday_abbreviations=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
    extra_month_aliases={"maerz": 3, "jänner": 1},
)

LOCALES: dict[str, LocaleNames] = {
    locale.code: locale for locale in (ENGLISH, FRENCH, GERMAN)
}


__all__ = ["LocaleNames", "ENGLISH", "FRENCH", "GERMAN", "LOCALES"]
