"""Temporal formatting.

Functions:
    format_value: Format a CalendarDate or DateTimeValue using a
        strftime-style pattern and a LocaleNames table.

Examples:
    >>> from datekit.core.date import CalendarDate
    >>> from datekit.format import format_value
    >>> format_value(CalendarDate(2016, 2, 29), "%Y/%m/%d")
    '2016/02/29'
"""

from __future__ import annotations

from datekit.format.strftime import format_value

__all__: list[str] = ["format_value"]
