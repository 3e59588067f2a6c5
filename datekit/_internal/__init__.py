"""Internal utilities for Datekit.

This module contains private implementation details:
    - Calendar arithmetic (leap years, ordinals, weekdays)
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
