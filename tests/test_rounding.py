"""Tests for floor and ceiling."""

from __future__ import annotations

import pytest

from datekit.arithmetic import ceiling, floor
from datekit.core.date import CalendarDate
from datekit.core.datetime import DateTimeValue
from datekit.errors import InvalidDateError
from datekit.units.timeunit import TimeUnit
from datekit.units.timezone import Timezone


class TestFloor:
    """Tests for truncating to a unit."""

    def test_month(self) -> None:
        """Flooring to a month resets day and time."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 0)
        assert floor(dt, TimeUnit.MONTH) == DateTimeValue(2019, 2, 1, 0, 0, 0)

    def test_year(self) -> None:
        """Flooring to a year resets month, day and time."""
        assert floor(CalendarDate(2019, 8, 17), TimeUnit.YEAR) == CalendarDate(2019, 1, 1)

    def test_week_goes_to_monday(self) -> None:
        """Sunday 2019-02-24 floors to Monday 2019-02-18."""
        assert floor(CalendarDate(2019, 2, 24), TimeUnit.WEEK) == CalendarDate(2019, 2, 18)

    def test_week_across_year(self) -> None:
        """The Monday may be in the previous year."""
        assert floor(CalendarDate(2020, 1, 1), "week") == CalendarDate(2019, 12, 30)

    def test_day(self) -> None:
        """Flooring to a day drops the clock."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 30)
        assert floor(dt, TimeUnit.DAY) == DateTimeValue(2019, 2, 18)

    def test_hour_by_name(self) -> None:
        """Units may be given by name."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 30)
        assert floor(dt, "hours") == DateTimeValue(2019, 2, 18, 13, 0, 0)

    def test_minute(self) -> None:
        """Flooring to a minute drops the seconds."""
        dt = DateTimeValue(2019, 2, 18, 13, 45, 30)
        assert floor(dt, TimeUnit.MINUTE) == DateTimeValue(2019, 2, 18, 13, 45, 0)

    def test_date_with_clock_unit(self) -> None:
        """A CalendarDate is already on every clock boundary."""
        d = CalendarDate(2019, 2, 18)
        assert floor(d, TimeUnit.HOUR) == d

    def test_keeps_timezone(self, paris: Timezone) -> None:
        """Zoned values stay in their zone."""
        dt = DateTimeValue(2019, 7, 14, 18, 20, 0, timezone=paris)
        result = floor(dt, TimeUnit.MONTH)
        assert result.timezone == paris
        assert (result.day, result.hour) == (1, 0)

    def test_hour_keeps_fold(self, new_york: Timezone) -> None:
        """Flooring the later 01:45 to the hour stays in the later hour."""
        later = DateTimeValue(2019, 11, 3, 1, 45, 0, timezone=new_york, fold=1)
        result = floor(later, TimeUnit.HOUR)
        assert (result.hour, result.minute, result.fold) == (1, 0, 1)
        assert (later - result).total_seconds == 45 * 60

    def test_midnight_gap(self, zones) -> None:
        """Flooring into a missing local midnight is refused."""
        # Sao Paulo skipped midnight on 2018-11-04
        sao_paulo = Timezone.named("America/Sao_Paulo", zones)
        dt = DateTimeValue(2018, 11, 4, 12, 0, 0, timezone=sao_paulo)
        with pytest.raises(InvalidDateError):
            floor(dt, TimeUnit.DAY)

    def test_rejects_other_types(self) -> None:
        """Only temporal values can be floored."""
        with pytest.raises(TypeError):
            floor("2019-02-18", TimeUnit.DAY)  # type: ignore[arg-type]


class TestCeiling:
    """Tests for rounding up to a unit boundary."""

    def test_month(self) -> None:
        """Mid-month dates round up to the next month."""
        assert ceiling(CalendarDate(2019, 2, 18), TimeUnit.MONTH) == CalendarDate(2019, 3, 1)

    def test_on_boundary(self) -> None:
        """A value on the boundary is unchanged."""
        assert ceiling(CalendarDate(2019, 3, 1), TimeUnit.MONTH) == CalendarDate(2019, 3, 1)

    def test_year_rollover(self) -> None:
        """December rounds up into the next year."""
        assert ceiling(CalendarDate(2019, 12, 2), TimeUnit.YEAR) == CalendarDate(2020, 1, 1)

    def test_hour(self) -> None:
        """Clock units round up too."""
        dt = DateTimeValue(2019, 2, 18, 23, 10, 0)
        assert ceiling(dt, TimeUnit.HOUR) == DateTimeValue(2019, 2, 19, 0, 0, 0)

    def test_date_with_clock_unit(self) -> None:
        """A CalendarDate is returned as is for clock units."""
        d = CalendarDate(2019, 2, 18)
        assert ceiling(d, TimeUnit.MINUTE) is d
