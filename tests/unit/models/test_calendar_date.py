"""Test the CalendarDate value type and calendar arithmetic helpers."""
import pytest
from datetime import date
from pydantic import ValidationError
from date_entry.models.calendar import CalendarDate, days_in_month, is_leap_year


class TestCalendarDate:
    def test_valid(self):
        d = CalendarDate(year=2023, month=12, day=31)
        assert (d.year, d.month, d.day) == (2023, 12, 31)

    def test_rejects_day_past_month_end(self):
        with pytest.raises(ValidationError):
            CalendarDate(year=2023, month=4, day=31)

    def test_rejects_feb_29_outside_leap_year(self):
        with pytest.raises(ValidationError):
            CalendarDate(year=2023, month=2, day=29)

    def test_rejects_month_13(self):
        with pytest.raises(ValidationError):
            CalendarDate(year=2023, month=13, day=1)

    def test_rejects_year_zero(self):
        with pytest.raises(ValidationError):
            CalendarDate(year=0, month=1, day=1)

    def test_immutable(self):
        d = CalendarDate(year=2023, month=1, day=1)
        with pytest.raises(ValidationError):
            d.day = 2

    def test_native_round_trip(self):
        native = date(2024, 2, 29)
        assert CalendarDate.from_date(native).to_date() == native

    def test_str_is_iso(self):
        assert str(CalendarDate(year=987, month=6, day=1)) == "0987-06-01"

    def test_hashable(self):
        assert len({CalendarDate(year=2023, month=1, day=1), CalendarDate(year=2023, month=1, day=1)}) == 1


class TestLeapYears:
    @pytest.mark.parametrize("year, leap", [
        (2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (1600, True),
    ])
    def test_is_leap_year(self, year, leap):
        assert is_leap_year(year) is leap

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31
