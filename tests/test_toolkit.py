"""Tests for the DateTimeToolkit facade and the module-level functions."""

from __future__ import annotations

import logging

import pytest

import datekit
from datekit import (
    CalendarDate,
    Component,
    DateTimeToolkit,
    DateTimeValue,
    InvalidDateError,
    ParseError,
    ParseOptions,
    TimeSpan,
    TimeUnit,
    Timezone,
    UnitMismatchError,
)
from datekit.units.locale import FRENCH
from datekit.units.zonedb import ZoneDatabase


@pytest.fixture
def kit(zones: ZoneDatabase) -> DateTimeToolkit:
    return DateTimeToolkit(zones=zones)


class TestAccessors:
    """Tests for component accessors."""

    def test_date_components(self, kit: DateTimeToolkit) -> None:
        """Date components are read directly."""
        d = CalendarDate(2019, 2, 18)
        assert (kit.year(d), kit.month(d), kit.day(d)) == (2019, 2, 18)

    def test_date_reports_midnight(self, kit: DateTimeToolkit) -> None:
        """A CalendarDate has a zero clock."""
        d = CalendarDate(2019, 2, 18)
        assert (kit.hour(d), kit.minute(d), kit.second(d)) == (0, 0, 0)

    def test_datetime_components(self, kit: DateTimeToolkit) -> None:
        """Clock components are read from a DateTimeValue."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 30)
        assert (kit.hour(dt), kit.minute(dt), kit.second(dt)) == (13, 45, 30)

    def test_day_of_year(self, kit: DateTimeToolkit) -> None:
        """Dec 31 of a leap year is day 366."""
        assert kit.day_of_year(CalendarDate(2016, 12, 31)) == 366

    def test_weekday_forms(self, kit: DateTimeToolkit) -> None:
        """Weekday as number, full name or label."""
        d = CalendarDate(2019, 2, 18)
        assert kit.weekday(d) == 1
        assert kit.weekday(d, use_full_name=True) == "Monday"
        assert kit.weekday(d, label=True) == "Mon"

    def test_weekday_localized(self, zones: ZoneDatabase) -> None:
        """Names follow the toolkit's locale."""
        kit = DateTimeToolkit(zones=zones, locale=FRENCH)
        assert kit.weekday(CalendarDate(2019, 2, 18), use_full_name=True) == "lundi"

    def test_not_temporal(self, kit: DateTimeToolkit) -> None:
        """Accessors reject other types."""
        with pytest.raises(TypeError):
            kit.year("2019-02-18")  # type: ignore[arg-type]

    def test_leap_year_helpers(self, kit: DateTimeToolkit) -> None:
        """Leap year rule and month lengths are exposed."""
        assert kit.is_leap_year(2000) is True
        assert kit.is_leap_year(1900) is False
        assert kit.days_in_month(2016, 2) == 29
        with pytest.raises(InvalidDateError):
            kit.days_in_month(2016, 13)


class TestWithComponent:
    """Tests for single-field replacement."""

    def test_replace_day(self, kit: DateTimeToolkit) -> None:
        """A compatible day is replaced."""
        result = kit.with_component(CalendarDate(2019, 1, 31), Component.DAY, 1)
        assert result == CalendarDate(2019, 1, 1)

    def test_no_rollover(self, kit: DateTimeToolkit) -> None:
        """Jan 31 with month 2 is refused."""
        with pytest.raises(InvalidDateError):
            kit.with_component(CalendarDate(2019, 1, 31), Component.MONTH, 2)

    def test_leap_day_year(self, kit: DateTimeToolkit) -> None:
        """Feb 29 can move to another leap year only."""
        d = CalendarDate(2016, 2, 29)
        assert kit.with_component(d, "year", 2020) == CalendarDate(2020, 2, 29)
        with pytest.raises(InvalidDateError):
            kit.with_component(d, "year", 2019)

    def test_hour_24(self, kit: DateTimeToolkit) -> None:
        """Hour 24 is refused."""
        with pytest.raises(InvalidDateError):
            kit.with_component(DateTimeValue(2019, 1, 1), Component.HOUR, 24)

    def test_time_promotes_date(self, kit: DateTimeToolkit) -> None:
        """Setting the hour of a CalendarDate yields a DateTimeValue."""
        result = kit.with_component(CalendarDate(2019, 1, 31), Component.HOUR, 9)
        assert result == DateTimeValue(2019, 1, 31, 9, 0, 0)

    def test_keeps_timezone(self, kit: DateTimeToolkit, paris: Timezone) -> None:
        """Zoned values stay zoned."""
        dt = DateTimeValue(2019, 7, 1, 8, 0, 0, timezone=paris)
        assert kit.with_component(dt, Component.MINUTE, 30).timezone == paris

    def test_gap(self, kit: DateTimeToolkit, new_york: Timezone) -> None:
        """Moving into a DST gap is refused."""
        dt = DateTimeValue(2019, 3, 10, 1, 0, 0, timezone=new_york)
        with pytest.raises(InvalidDateError):
            kit.with_component(dt, Component.HOUR, 2)

    def test_value_must_be_integer(self, kit: DateTimeToolkit) -> None:
        """None or a string is not a new component value."""
        d = CalendarDate(2019, 1, 31)
        with pytest.raises(InvalidDateError, match="day must be an integer"):
            kit.with_component(d, "day", None)  # type: ignore[arg-type]
        with pytest.raises(InvalidDateError):
            kit.with_component(d, Component.HOUR, "9")  # type: ignore[arg-type]
        with pytest.raises(InvalidDateError):
            kit.with_component(d, Component.MONTH, True)

    def test_unknown_component(self, kit: DateTimeToolkit) -> None:
        """Component names are checked."""
        with pytest.raises(ValueError):
            kit.with_component(CalendarDate(2019, 1, 1), "fortnight", 1)


class TestToolkitOperations:
    """Tests for the operations bound to a toolkit."""

    def test_parse_uses_zone_database(self, kit: DateTimeToolkit) -> None:
        """IANA keys resolve through the injected database."""
        dt = kit.parse("2019-07-04 09:00", "ymd_hm", "Europe/Paris")
        assert dt.utc_offset == 7200

    def test_parse_uses_options(self, zones: ZoneDatabase) -> None:
        """Parse options are bound to the toolkit."""
        kit = DateTimeToolkit(zones=zones, options=ParseOptions(default_century=1900))
        assert kit.parse("18/02/85", "dmy") == CalendarDate(1985, 2, 18)

    def test_locale_drives_parsing(self, zones: ZoneDatabase) -> None:
        """Without explicit options, the locale is used for month names."""
        kit = DateTimeToolkit(zones=zones, locale=FRENCH)
        assert kit.parse("18 février 2019", "dmy") == CalendarDate(2019, 2, 18)

    def test_locale_overrides_options(self, zones: ZoneDatabase) -> None:
        """An explicit locale also governs parsing when options are given."""
        kit = DateTimeToolkit(
            zones=zones, locale=FRENCH, options=ParseOptions(default_century=1900)
        )
        assert kit.options.locale is FRENCH
        assert kit.options.default_century == 1900
        assert kit.parse("18 février 85", "dmy") == CalendarDate(1985, 2, 18)
        with pytest.raises(ParseError):
            kit.parse("18 February 85", "dmy")

    def test_options_locale_used_without_locale(self, zones: ZoneDatabase) -> None:
        """Without a locale argument, the options' locale names everything."""
        kit = DateTimeToolkit(zones=zones, options=ParseOptions(locale=FRENCH))
        assert kit.locale is FRENCH
        assert kit.weekday(CalendarDate(2019, 2, 18), use_full_name=True) == "lundi"

    def test_parse_error(self, kit: DateTimeToolkit) -> None:
        """Invalid dates surface as ParseError."""
        with pytest.raises(ParseError):
            kit.parse("2017-02/29", "ymd")

    def test_add_span(self, kit: DateTimeToolkit) -> None:
        """add_span delegates to the arithmetic module."""
        assert kit.add_span(CalendarDate(2016, 2, 29), TimeSpan.years(4)) == CalendarDate(2020, 2, 29)
        assert kit.subtract_span(CalendarDate(2016, 3, 1), TimeSpan.days(1)) == CalendarDate(2016, 2, 29)

    def test_duration(self, kit: DateTimeToolkit) -> None:
        """duration measures in any unit."""
        assert kit.duration(CalendarDate(2020, 1, 1), CalendarDate(2019, 1, 1), TimeUnit.YEAR) == 1.0
        with pytest.raises(UnitMismatchError):
            kit.duration(CalendarDate(2020, 1, 1), kit.parse("2019-01-01", "ymd", "UTC"), "days")

    def test_floor_and_ceiling(self, kit: DateTimeToolkit) -> None:
        """Truncation is exposed on the toolkit."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 0)
        assert kit.floor(dt, TimeUnit.MONTH) == DateTimeValue(2019, 2, 1, 0, 0, 0)
        assert kit.ceiling(dt, TimeUnit.MONTH) == DateTimeValue(2019, 3, 1, 0, 0, 0)

    def test_format(self, zones: ZoneDatabase) -> None:
        """format uses the toolkit's locale."""
        kit = DateTimeToolkit(zones=zones, locale=FRENCH)
        assert kit.format(CalendarDate(2019, 2, 18), "%A %d %B") == "lundi 18 février"

    def test_timezone(self, kit: DateTimeToolkit) -> None:
        """Timezone specs resolve against the toolkit's database."""
        assert kit.timezone("Asia/Tokyo").key == "Asia/Tokyo"


class TestModuleFunctions:
    """Tests for the functions backed by the default toolkit."""

    def test_parse(self) -> None:
        """Top-level parse works without setup."""
        assert datekit.parse("2016-02/29", "ymd") == CalendarDate(2016, 2, 29)

    def test_accessors(self) -> None:
        """Top-level accessors agree with the toolkit."""
        d = CalendarDate(2019, 2, 18)
        assert datekit.year(d) == 2019
        assert datekit.weekday(d, True) == "Monday"
        assert datekit.weekday(d, label=True) == "Mon"
        assert datekit.day_of_year(d) == 49
        assert datekit.hour(d) == 0

    def test_with_component(self) -> None:
        """Top-level with_component is strict."""
        with pytest.raises(InvalidDateError):
            datekit.with_component(CalendarDate(2019, 1, 31), Component.MONTH, 2)

    def test_default_toolkit_is_shared(self) -> None:
        """The default toolkit is created once."""
        from datekit.toolkit import default_toolkit

        assert default_toolkit() is default_toolkit()


class TestLogging:
    """Tests for debug logging."""

    def test_parse_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejected input is logged at debug level before raising."""
        with caplog.at_level(logging.DEBUG, logger="datekit"):
            with pytest.raises(ParseError):
                datekit.parse("2017-02-29", "ymd")
        assert any("2017-02-29" in record.getMessage() for record in caplog.records)

    def test_span_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Span arithmetic landing on a missing date is logged."""
        with caplog.at_level(logging.DEBUG, logger="datekit"):
            with pytest.raises(InvalidDateError):
                datekit.add_span(CalendarDate(2020, 2, 29), TimeSpan.years(1))
        assert any(record.levelno == logging.DEBUG for record in caplog.records)
