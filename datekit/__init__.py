"""Datekit: flexible date parsing and calendar-aware arithmetic.

Datekit parses loosely formatted date strings under an explicit component
order, exposes component accessors and strict single-field replacement,
and performs calendar-aware arithmetic that refuses to invent dates.

Core Types:
    CalendarDate: Calendar date (year, month, day)
    DateTimeValue: Date and clock time with optional timezone
    TimeSpan: Signed amount of one calendar or clock unit
    Duration: Exact elapsed seconds

Units:
    TimeUnit: Units for spans, durations and truncation
    Component: Fields of a date/time value
    Timezone: Fixed offset or named IANA zone
    ZoneDatabase: Injected IANA zone database (tzdata by default)
    LocaleNames: Month and weekday name tables

Operations:
    parse, add_span, duration, floor, ceiling, with_component,
    format_value, and the DateTimeToolkit facade that binds them.

Exceptions:
    DatekitError: Base exception
    ParseError: Failed to parse string
    InvalidDateError: Date or time that does not exist
    UnitMismatchError: Operands in different reference frames
    TimezoneError: Invalid timezone

Example:
    >>> from datekit import parse, add_span, TimeSpan
    >>> leap_day = parse("2016-02/29", "ymd")
    >>> add_span(leap_day, TimeSpan.years(4))
    CalendarDate(2020, 2, 29)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datekit.core.date import CalendarDate
from datekit.core.datetime import DateTimeValue
from datekit.core.duration import Duration
from datekit.core.span import TimeSpan

# Units
from datekit.units.locale import ENGLISH, FRENCH, GERMAN, LocaleNames
from datekit.units.timeunit import Component, TimeUnit
from datekit.units.timezone import Timezone
from datekit.units.zonedb import ZoneDatabase

# Exceptions
from datekit.errors import (
    DatekitError,
    InvalidDateError,
    ParseError,
    TimezoneError,
    UnitMismatchError,
)

# Operations
from datekit.arithmetic import add_span, ceiling, duration, floor, subtract_span
from datekit.format import format_value
from datekit.parsing import ParseOptions
from datekit.toolkit import (
    DateTimeToolkit,
    day,
    day_of_year,
    days_in_month,
    hour,
    is_leap_year,
    minute,
    month,
    parse,
    second,
    weekday,
    with_component,
    year,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateTimeValue",
    "Duration",
    "TimeSpan",
    # Units
    "Component",
    "TimeUnit",
    "Timezone",
    "ZoneDatabase",
    "LocaleNames",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    # Exceptions
    "DatekitError",
    "ParseError",
    "InvalidDateError",
    "UnitMismatchError",
    "TimezoneError",
    # Operations
    "DateTimeToolkit",
    "ParseOptions",
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
    "add_span",
    "subtract_span",
    "duration",
    "floor",
    "ceiling",
    "format_value",
]
