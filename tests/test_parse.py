"""Tests for ordered parsing."""

from __future__ import annotations

import pytest

from datekit.core.date import CalendarDate
from datekit.core.datetime import DateTimeValue
from datekit.errors import InvalidDateError, ParseError, TimezoneError
from datekit.parsing import ParseOptions, dmy, mdy, parse, ydm, ymd, ymd_hm, ymd_hms
from datekit.parsing._order import order_code, resolve_order
from datekit.parsing._tokens import scan, tokenize
from datekit.units.locale import ENGLISH, FRENCH, GERMAN
from datekit.units.timeunit import Component
from datekit.units.timezone import Timezone
from datekit.units.zonedb import ZoneDatabase


class TestResolveOrder:
    """Tests for component order handling."""

    def test_shorthand(self) -> None:
        """Shorthand letters map to components."""
        assert resolve_order("ydm") == (Component.YEAR, Component.DAY, Component.MONTH)

    def test_shorthand_with_time(self) -> None:
        """Time letters follow an underscore."""
        assert resolve_order("dmy_hm") == (
            Component.DAY,
            Component.MONTH,
            Component.YEAR,
            Component.HOUR,
            Component.MINUTE,
        )

    def test_sequence(self) -> None:
        """Sequences of Components or names are accepted."""
        order = resolve_order([Component.MONTH, "day", "YEAR"])
        assert order_code(order) == "mdy"

    def test_missing_component(self) -> None:
        """Year, month and day are all required."""
        with pytest.raises(ValueError):
            resolve_order("ym")

    def test_repeated_component(self) -> None:
        """No component may appear twice."""
        with pytest.raises(ValueError):
            resolve_order("ymdd")

    def test_time_must_be_prefix(self) -> None:
        """Seconds without minutes is not an order."""
        with pytest.raises(ValueError):
            resolve_order("ymd_hs")

    def test_unknown_letter(self) -> None:
        """Unknown shorthand letters are rejected."""
        with pytest.raises(ValueError, match="unknown component code"):
            resolve_order("ymx")


class TestTokenize:
    """Tests for splitting input into tokens."""

    def test_mixed_delimiters(self) -> None:
        """Any non-alphanumeric run separates tokens."""
        assert [t.text for t in tokenize("2016-02/29", ENGLISH)] == ["2016", "02", "29"]

    def test_iso_separator(self) -> None:
        """A T between numbers is dropped."""
        tokens = tokenize("2019-02-18T13:45:00", ENGLISH)
        assert [t.text for t in tokens] == ["2019", "02", "18", "13", "45", "00"]

    def test_ordinal_suffix_and_weekday(self) -> None:
        """Ordinal suffixes and weekday names are decorative."""
        tokens = tokenize("Monday, 18th Feb 2019", ENGLISH)
        assert [t.text for t in tokens] == ["18", "Feb", "2019"]

    def test_only_decimal_digits_are_numbers(self) -> None:
        """Superscripts are kept as words, not numbers."""
        tokens = tokenize("18 ²", ENGLISH)
        assert [t.is_digit for t in tokens] == [True, False]

    def test_scan_reports_weekdays(self) -> None:
        """Dropped weekday names are returned as ISO weekdays."""
        tokens, weekdays = scan("Tue, 19 Feb 2019", ENGLISH)
        assert [t.text for t in tokens] == ["19", "Feb", "2019"]
        assert weekdays == [2]

    def test_positions(self) -> None:
        """Tokens remember where they were found."""
        token = tokenize("  2019", ENGLISH)[0]
        assert (token.start, token.end) == (2, 6)


class TestParseDates:
    """Tests for date-only orders."""

    def test_mixed_delimiters(self) -> None:
        """2016-02/29 is a valid leap day."""
        assert parse("2016-02/29", "ymd") == CalendarDate(2016, 2, 29)

    def test_invalid_leap_day(self) -> None:
        """2017-02/29 does not exist."""
        with pytest.raises(ParseError):
            parse("2017-02/29", "ymd")

    def test_invalid_date_is_chained(self) -> None:
        """The calendar failure is kept as the cause."""
        with pytest.raises(ParseError) as excinfo:
            parse("2017-02-29", "ymd")
        assert isinstance(excinfo.value.__cause__, InvalidDateError)

    def test_order_is_respected(self) -> None:
        """The same digits mean different dates under different orders."""
        assert parse("01/02/2019", "mdy") == CalendarDate(2019, 1, 2)
        assert parse("01/02/2019", "dmy") == CalendarDate(2019, 2, 1)

    def test_ydm(self) -> None:
        """Year-day-month is supported."""
        assert ydm("2019 18 02") == CalendarDate(2019, 2, 18)

    def test_month_name(self) -> None:
        """Alphabetic months resolve through the locale."""
        assert dmy("18 February 2019") == CalendarDate(2019, 2, 18)
        assert mdy("Feb 18, 2019") == CalendarDate(2019, 2, 18)
        assert mdy("SEPT. 1 2019") == CalendarDate(2019, 9, 1)

    def test_weekday_and_suffix(self) -> None:
        """Decorations around the date are ignored."""
        assert dmy("Monday 18th February 2019") == CalendarDate(2019, 2, 18)

    def test_contradicting_weekday(self) -> None:
        """A weekday name that disagrees with the date is refused."""
        with pytest.raises(ParseError, match="names Tuesday"):
            dmy("Tuesday 18 Feb 2019")

    def test_localized_weekday_checked(self) -> None:
        """Weekdays are checked in the configured locale."""
        opts = ParseOptions(locale=FRENCH)
        assert parse("lundi 18 février 2019", "dmy", options=opts) == CalendarDate(2019, 2, 18)
        with pytest.raises(ParseError, match="mardi"):
            parse("mardi 18 février 2019", "dmy", options=opts)

    def test_unknown_month_name(self) -> None:
        """Unknown words in the month slot fail."""
        with pytest.raises(ParseError, match="unknown month name"):
            dmy("18 Brumaire 2019")

    def test_word_in_numeric_slot(self) -> None:
        """Only the month may be alphabetic."""
        with pytest.raises(ParseError, match="expected a number"):
            ymd("2019 Feb March")

    def test_packed_digits(self) -> None:
        """A digit run with the packed width is split positionally."""
        assert ymd("20160229") == CalendarDate(2016, 2, 29)
        assert dmy("29022016") == CalendarDate(2016, 2, 29)

    def test_packed_wrong_width(self) -> None:
        """Runs of another length are not guessed at."""
        with pytest.raises(ParseError):
            ymd("2016229")

    def test_two_digit_year(self) -> None:
        """Two-digit years use the default century."""
        assert dmy("18/02/19") == CalendarDate(2019, 2, 18)

    def test_two_digit_year_custom_century(self) -> None:
        """The century is configurable."""
        opts = ParseOptions(default_century=1900)
        assert parse("18/02/85", "dmy", options=opts) == CalendarDate(1985, 2, 18)

    def test_locale(self) -> None:
        """Month names come from the configured locale."""
        opts = ParseOptions(locale=FRENCH)
        assert parse("1er février 2019", "dmy", options=opts) == CalendarDate(2019, 2, 1)
        opts = ParseOptions(locale=GERMAN)
        assert parse("3. März 2019", "dmy", options=opts) == CalendarDate(2019, 3, 3)

    def test_too_few_tokens(self) -> None:
        """Missing components are reported."""
        with pytest.raises(ParseError, match="expected 3 components"):
            ymd("2019-02")

    def test_too_many_tokens(self) -> None:
        """Extra components are reported."""
        with pytest.raises(ParseError, match="found 4"):
            ymd("2019-02-18-07")

    def test_empty(self) -> None:
        """Blank input fails."""
        with pytest.raises(ParseError, match="empty"):
            ymd("   ")

    def test_month_out_of_range(self) -> None:
        """Month 13 fails as a parse error."""
        with pytest.raises(ParseError):
            ymd("2019-13-01")

    def test_superscript_digit(self) -> None:
        """Digit-like characters that are not decimal digits fail cleanly."""
        with pytest.raises(ParseError, match="expected a number"):
            ymd("2019-02-²")

    def test_overlong_number(self) -> None:
        """A digit run too long to convert is a parse error."""
        with pytest.raises(ParseError, match="number too long"):
            ymd("9" * 5000 + "-01-01")

    def test_not_a_string(self) -> None:
        """Non-string input is a programming error."""
        with pytest.raises(TypeError):
            ymd(20190218)  # type: ignore[arg-type]


class TestParseDateTimes:
    """Tests for orders with time components."""

    def test_full(self) -> None:
        """All six components are read."""
        assert ymd_hms("2019-02-18 13:45:30") == DateTimeValue(2019, 2, 18, 13, 45, 30)

    def test_iso_style(self) -> None:
        """The ISO T separator is accepted."""
        assert ymd_hm("2019-02-18T13:45") == DateTimeValue(2019, 2, 18, 13, 45, 0)

    def test_hour_only(self) -> None:
        """Missing trailing time components are 0."""
        assert parse("2019-02-18 13", "ymd_h") == DateTimeValue(2019, 2, 18, 13, 0, 0)

    def test_packed_datetime(self) -> None:
        """Date and time runs split independently."""
        assert ymd_hm("20190218 1345") == DateTimeValue(2019, 2, 18, 13, 45, 0)

    def test_hour_out_of_range(self) -> None:
        """Hour 25 fails as a parse error."""
        with pytest.raises(ParseError):
            ymd_hms("2019-02-18 25:00:00")


class TestParseTimezones:
    """Tests for the timezone argument."""

    def test_named_zone(self, zones: ZoneDatabase) -> None:
        """IANA keys resolve against the injected database."""
        dt = ymd_hms("2019-07-04 09:00:00", "America/New_York", zones=zones)
        assert dt.timezone == Timezone.named("America/New_York", zones)
        assert dt.utc_offset == -4 * 3600

    def test_fixed_offset(self) -> None:
        """Offsets are accepted."""
        dt = ymd_hm("2019-07-04 09:00", "+05:30")
        assert dt.utc_offset == 19800

    def test_date_only_promoted(self) -> None:
        """A timezone promotes a date-only order to midnight."""
        dt = ymd("2019-07-04", "UTC")
        assert isinstance(dt, DateTimeValue)
        assert dt == DateTimeValue(2019, 7, 4, timezone=Timezone.utc())

    def test_unknown_zone(self, zones: ZoneDatabase) -> None:
        """Unknown keys raise TimezoneError."""
        with pytest.raises(TimezoneError):
            ymd("2019-07-04", "Mars/Olympus_Mons", zones=zones)

    def test_gap_time(self, zones: ZoneDatabase) -> None:
        """A wall time skipped by DST fails as a parse error."""
        with pytest.raises(ParseError):
            ymd_hm("2019-03-10 02:30", "America/New_York", zones=zones)


class TestParseOptions:
    """Tests for ParseOptions validation."""

    def test_defaults(self) -> None:
        """English and the 2000s by default."""
        opts = ParseOptions()
        assert opts.default_century == 2000
        assert opts.locale is ENGLISH

    def test_century_must_be_round(self) -> None:
        """The century must be a multiple of 100."""
        with pytest.raises(ValueError):
            ParseOptions(default_century=1950)
