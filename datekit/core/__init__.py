"""Core temporal value types.

This module provides:
    - CalendarDate: A plain calendar date
    - DateTimeValue: A date and clock time with optional timezone
    - TimeSpan: A calendar-aware quantity of one unit
    - Duration: Exact elapsed seconds
"""

from __future__ import annotations

from datekit.core.date import CalendarDate
from datekit.core.datetime import DateTimeValue
from datekit.core.duration import Duration
from datekit.core.span import TimeSpan

__all__: list[str] = [
    "CalendarDate",
    "DateTimeValue",
    "Duration",
    "TimeSpan",
]
