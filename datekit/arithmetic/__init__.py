"""Temporal arithmetic operations.

This module provides the function forms of Datekit arithmetic. The
operators on CalendarDate and DateTimeValue delegate to them.

Span Operations (from datekit.arithmetic.span_ops):
    - add_span: Calendar-aware addition of a TimeSpan
    - subtract_span: Subtraction of a TimeSpan

Difference Operations (from datekit.arithmetic.difference):
    - duration: Signed a - b in any unit, including months and years

Rounding Operations (from datekit.arithmetic.rounding):
    - floor: Truncate to the start of a unit
    - ceiling: Round up to the next unit boundary
"""

from __future__ import annotations

from datekit.arithmetic.difference import duration
from datekit.arithmetic.rounding import ceiling, floor
from datekit.arithmetic.span_ops import add_span, subtract_span

__all__ = [
    # Span operations
    "add_span",
    "subtract_span",
    # Difference operations
    "duration",
    # Rounding operations
    "floor",
    "ceiling",
]
