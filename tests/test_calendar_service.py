"""
Tests for the date picker calendar: rollover, day counts, grids and holidays.
"""

import datetime
import pytest

from app.services.calendar_service import (
    CalendarCursor, CalendarService, InvalidDateError, days_in_month, first_weekday,
    holiday_language,
)


class TestMonthNavigation:

    def test_forward_rolls_into_next_year(self):
        cursor = CalendarCursor(2024, 12)
        cursor.advance_month(1)
        assert (cursor.year, cursor.month) == (2025, 1)

    def test_backward_rolls_into_previous_year(self):
        cursor = CalendarCursor(2024, 1)
        cursor.advance_month(-1)
        assert (cursor.year, cursor.month) == (2023, 12)

    def test_mid_year_steps(self):
        cursor = CalendarCursor(2024, 6)
        cursor.advance_month(1)
        assert (cursor.year, cursor.month) == (2024, 7)
        cursor.advance_month(-1)
        cursor.advance_month(-1)
        assert (cursor.year, cursor.month) == (2024, 5)

    @pytest.mark.parametrize("delta", [0, 2, -3])
    def test_only_single_steps(self, delta):
        with pytest.raises(ValueError):
            CalendarCursor(2024, 6).advance_month(delta)

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range(self, month):
        with pytest.raises(ValueError):
            CalendarCursor(2024, month)


class TestMonthShape:

    @pytest.mark.parametrize("year, month, expected", [
        (2024, 2, 29),
        (2023, 2, 28),
        (2000, 2, 29),
        (1900, 2, 28),
        (2024, 12, 31),
        (2024, 4, 30),
    ])
    def test_days_in_month(self, year, month, expected):
        assert days_in_month(year, month) == expected

    @pytest.mark.parametrize("year, month, expected", [
        (2024, 9, 0),   # Sunday
        (2024, 1, 1),   # Monday
        (2026, 10, 4),  # Thursday
        (2025, 2, 6),   # Saturday
    ])
    def test_first_weekday_is_sunday_based(self, year, month, expected):
        assert first_weekday(year, month) == expected

    def test_grid_layout(self):
        # March 2024 starts on a Friday and has 31 days
        weeks = CalendarCursor(2024, 3).month_grid()
        assert all(len(week) == 7 for week in weeks)
        assert weeks[0] == [None, None, None, None, None, 1, 2]
        assert weeks[-1] == [31, None, None, None, None, None, None]
        days = [day for week in weeks for day in week if day is not None]
        assert days == list(range(1, 32))

    def test_grid_for_month_starting_on_sunday(self):
        weeks = CalendarCursor(2026, 2).month_grid()
        # February 2026: starts Sunday, 28 days, exactly four rows
        assert len(weeks) == 4
        assert weeks[0][0] == 1
        assert weeks[-1][-1] == 28


class TestConfirmDay:

    def test_end_of_day_local_time(self):
        timestamp = CalendarCursor(2024, 2).confirm_day(29)
        assert datetime.datetime.fromtimestamp(timestamp) == datetime.datetime(2024, 2, 29, 23, 59, 59)

    @pytest.mark.parametrize("day", [0, 30, 32])
    def test_day_outside_month_raises(self, day):
        with pytest.raises(InvalidDateError):
            CalendarCursor(2024, 2).confirm_day(day)

    def test_invalid_date_is_value_error(self):
        assert issubclass(InvalidDateError, ValueError)

    def test_cursor_for_timestamp(self):
        timestamp = datetime.datetime(2025, 7, 4, 12, 0).timestamp()
        cursor = CalendarCursor.for_timestamp(timestamp)
        assert (cursor.year, cursor.month) == (2025, 7)


class TestHolidayDecoration:

    def test_japanese_new_year(self):
        service = CalendarService(country="JP")
        assert service.is_holiday(datetime.date(2026, 1, 1))
        assert not service.is_holiday(datetime.date(2026, 1, 7))

    def test_holidays_disabled(self):
        service = CalendarService(country="JP", show_holidays=False)
        assert service.get_holiday_name(datetime.date(2026, 1, 1)) == ""

    def test_unknown_country_disables_holidays(self):
        service = CalendarService(country="XX")
        assert service.get_holiday_name(datetime.date(2026, 1, 1)) == ""

    def test_decorated_grid(self):
        service = CalendarService(country="JP")
        cursor = CalendarCursor(2026, 1)
        weeks = service.decorate(cursor, today=datetime.date(2026, 1, 15))

        cells = [cell for week in weeks for cell in week if cell is not None]
        assert [cell.day for cell in cells] == list(range(1, 32))

        new_year = cells[0]
        assert new_year.is_holiday
        # January 1st 2026 is a Thursday
        assert new_year.weekday == 4
        assert not new_year.is_weekend

        assert cells[14].is_today
        assert sum(cell.is_today for cell in cells) == 1

        # January 3rd 2026 is a Saturday, January 4th a Sunday
        assert cells[2].is_weekend and cells[2].weekday == 6
        assert cells[3].is_weekend and cells[3].weekday == 0

    def test_holiday_names_follow_ui_language(self):
        new_year = datetime.date(2026, 1, 1)
        english = CalendarService(country="JP", language="en")
        japanese = CalendarService(country="JP", language="ja")
        assert english.get_holiday_name(new_year) == "New Year's Day"
        assert japanese.get_holiday_name(new_year) == "元日"

    def test_holiday_language_mapping(self):
        assert holiday_language("JP", "en") == "en_US"
        assert holiday_language("JP", "ja") == "ja"
        assert holiday_language("JP", "xx") is None
        assert holiday_language("XX", "en") is None
