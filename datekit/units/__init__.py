"""Temporal units and collaborators.

This module provides:
    - TimeUnit: Units for spans, durations and truncation
    - Component: Fields of a date/time value
    - Timezone: Fixed-offset or named timezone
    - ZoneDatabase: Injected IANA timezone database
    - LocaleNames: Month and weekday name tables
"""

from __future__ import annotations

from datekit.units.locale import ENGLISH, FRENCH, GERMAN, LocaleNames
from datekit.units.timeunit import Component, TimeUnit
from datekit.units.timezone import Timezone
from datekit.units.zonedb import ZoneDatabase

__all__: list[str] = [
    "Component",
    "TimeUnit",
    "Timezone",
    "ZoneDatabase",
    "LocaleNames",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
]
