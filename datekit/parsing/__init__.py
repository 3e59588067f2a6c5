"""Ordered parsing of date and date-time strings.

The caller states the component order; the parser tolerates any
delimiters between components, alphabetic month names, ordinal suffixes
and packed digit runs. A weekday name is checked against the date it
accompanies.

Public API:
    parse: Parse a string under an explicit component order.
    ParseOptions: Two-digit year handling and month-name locale.
    ymd, ydm, mdy, myd, dmy, dym: Date-only order shorthands.
    ymd_hms, ymd_hm, mdy_hms, dmy_hms: Date-time order shorthands.

Examples:
    >>> from datekit.parsing import parse, dmy
    >>> parse("2016-02/29", "ymd")
    CalendarDate(2016, 2, 29)
    >>> dmy("Monday 18th February 2019")
    CalendarDate(2019, 2, 18)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from datekit.errors import InvalidDateError, ParseError
from datekit.parsing._order import PACKED_WIDTH, OrderSpec, order_code, resolve_order
from datekit.parsing._tokens import Token, scan
from datekit.units.locale import ENGLISH, LocaleNames
from datekit.units.timeunit import Component
from datekit.units.timezone import Timezone

if TYPE_CHECKING:
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue
    from datekit.units.zonedb import ZoneDatabase

logger = logging.getLogger(__name__)

# Longer digit runs cannot name any component, even zero-padded.
_MAX_DIGITS = 9

ParsedValue = Union["CalendarDate", "DateTimeValue"]


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for parsing.

    Attributes:
        default_century: Added to one- and two-digit year tokens
            ("19" -> 2019 with the default of 2000).
        locale: Month and weekday names recognized in the input.

    Examples:
        >>> from datekit.units.locale import FRENCH
        >>> opts = ParseOptions(default_century=1900, locale=FRENCH)
        >>> parse("18 février 85", "dmy", options=opts)
        CalendarDate(1985, 2, 18)
    """

    default_century: int = 2000
    locale: LocaleNames = field(default=ENGLISH)

    def __post_init__(self) -> None:
        if isinstance(self.default_century, bool) or not isinstance(self.default_century, int):
            raise TypeError(
                f"default_century must be int, got {type(self.default_century).__name__}"
            )
        if self.default_century % 100 != 0:
            raise ValueError(
                f"default_century must be a multiple of 100, got {self.default_century}"
            )


def _split_packed(tokens: list[Token], components: tuple[Component, ...]) -> list[Token]:
    """Split digit runs such as "20160229" when there are too few tokens.

    A run is split only when its length equals the summed packed widths
    of the components it would cover.
    """
    missing = len(components) - len(tokens)
    result: list[Token] = []
    index = 0
    for token in tokens:
        covered = 1
        if missing > 0 and token.is_digit:
            total = 0
            for count in range(1, min(missing + 1, len(components) - index) + 1):
                total += PACKED_WIDTH[components[index + count - 1]]
                if total >= len(token.text):
                    if total == len(token.text):
                        covered = count
                    break
        if covered == 1:
            result.append(token)
        else:
            pos = token.start
            for component in components[index:index + covered]:
                width = PACKED_WIDTH[component]
                offset = pos - token.start
                result.append(Token(token.text[offset:offset + width], pos, pos + width))
                pos += width
            missing -= covered - 1
        index += covered
    return result


def _read_value(
    token: Token,
    component: Component,
    options: ParseOptions,
    text: str,
) -> int:
    if component is Component.MONTH and not token.is_digit:
        month = options.locale.month_number(token.text)
        if month is None:
            raise ParseError(f"unknown month name {token.text!r} in {text!r}")
        return month

    if not token.is_digit:
        raise ParseError(
            f"expected a number for {component.name.lower()}, got {token.text!r} in {text!r}"
        )

    if len(token.text) > _MAX_DIGITS:
        raise ParseError(
            f"number too long for {component.name.lower()}: {token.text[:_MAX_DIGITS]!r}..."
        )
    value = int(token.text)
    if component is Component.YEAR and len(token.text) <= 2:
        value += options.default_century
    return value


def _check_weekdays(
    date: CalendarDate,
    weekdays: list[int],
    options: ParseOptions,
    text: str,
) -> None:
    for weekday in weekdays:
        if weekday != date.weekday:
            locale = options.locale
            logger.debug("weekday mismatch parsing %r: date falls on %d", text, date.weekday)
            raise ParseError(
                f"{text!r} names {locale.weekday_name(weekday)}, but "
                f"{date} is a {locale.weekday_name(date.weekday)}"
            )


def parse(
    text: str,
    order: OrderSpec,
    timezone: str | Timezone | None = None,
    *,
    options: ParseOptions | None = None,
    zones: ZoneDatabase | None = None,
) -> ParsedValue:
    """Parse text whose components appear in the given order.

    Args:
        text: The string to parse.
        order: Shorthand such as "ymd" or "dmy_hms", or a sequence of
            Component members.
        timezone: IANA key, "UTC", fixed offset ("+05:30") or Timezone.
            None yields a naive value.
        options: Two-digit year century and locale. Defaults to
            ParseOptions().
        zones: Database used to resolve IANA keys. Defaults to the
            bundled tzdata database.

    Returns:
        A CalendarDate for date-only orders without a timezone, otherwise a
        DateTimeValue. Missing trailing time components are 0.

    Raises:
        ParseError: If the string does not match the order, the values
            do not form an existing date and time, or a weekday name
            disagrees with the date.
        TimezoneError: If the timezone cannot be resolved.
        ValueError: If the order itself is malformed.

    Examples:
        >>> parse("20160229", "ymd")
        CalendarDate(2016, 2, 29)
        >>> parse("2019-02-18T13:45", "ymd_hm")
        DateTimeValue(2019, 2, 18, 13, 45, 0)
    """
    from datekit.core.date import CalendarDate
    from datekit.core.datetime import DateTimeValue

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if options is None:
        options = ParseOptions()

    components = resolve_order(order)
    tz = Timezone.resolve(timezone, zones) if timezone is not None else None

    if not text.strip():
        raise ParseError("empty string")

    tokens, weekdays = scan(text, options.locale)
    if len(tokens) < len(components):
        tokens = _split_packed(tokens, components)
    if len(tokens) != len(components):
        found = ", ".join(repr(t.text) for t in tokens)
        logger.debug("token count mismatch parsing %r as %s: %s", text, order_code(components), found)
        raise ParseError(
            f"expected {len(components)} components ({order_code(components)}) "
            f"in {text!r}, found {len(tokens)}: {found}"
        )

    values = {
        component: _read_value(token, component, options, text)
        for token, component in zip(tokens, components)
    }

    try:
        date = CalendarDate(values[Component.YEAR], values[Component.MONTH], values[Component.DAY])
        _check_weekdays(date, weekdays, options, text)
        if len(components) == 3 and tz is None:
            return date
        return DateTimeValue.from_date(
            date,
            values.get(Component.HOUR, 0),
            values.get(Component.MINUTE, 0),
            values.get(Component.SECOND, 0),
            timezone=tz,
        )
    except InvalidDateError as exc:
        logger.debug("rejected %r as %s: %s", text, order_code(components), exc)
        raise ParseError(f"invalid date {text!r}: {exc}") from exc


def _shorthand(code: str):
    def parse_in_order(
        text: str,
        timezone: str | Timezone | None = None,
        *,
        options: ParseOptions | None = None,
        zones: ZoneDatabase | None = None,
    ) -> ParsedValue:
        return parse(text, code, timezone, options=options, zones=zones)

    parse_in_order.__name__ = code
    parse_in_order.__qualname__ = code
    parse_in_order.__doc__ = f"Parse text written in {code!r} order."
    return parse_in_order


ymd = _shorthand("ymd")
ydm = _shorthand("ydm")
mdy = _shorthand("mdy")
myd = _shorthand("myd")
dmy = _shorthand("dmy")
dym = _shorthand("dym")
ymd_hms = _shorthand("ymd_hms")
ymd_hm = _shorthand("ymd_hm")
mdy_hms = _shorthand("mdy_hms")
dmy_hms = _shorthand("dmy_hms")


__all__ = [
    "parse",
    "ParseOptions",
    "ymd",
    "ydm",
    "mdy",
    "myd",
    "dmy",
    "dym",
    "ymd_hms",
    "ymd_hm",
    "mdy_hms",
    "dmy_hms",
]
