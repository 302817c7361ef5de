"""
Calendar Service - Month grid computation for the date picker.

Architecture Decision: Standard library calendar arithmetic
Day counts and weekdays come from the calendar module instead of lookup
tables, so leap years and the December/January rollover need no special code.
Holiday decoration is delegated to the holidays library.
"""

import calendar
import datetime
import logging
from dataclasses import dataclass
from typing import List, Optional

import holidays

from app.i18n import get_language

logger = logging.getLogger(__name__)

# Due dates mark the end of the chosen local day
DUE_TIME = datetime.time(23, 59, 59)


class InvalidDateError(ValueError):
    """Raised when a day does not exist in the cursor's month"""


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, 0 = Sunday .. 6 = Saturday"""
    monday_based = calendar.monthrange(year, month)[0]
    return (monday_based + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def holiday_language(country: str, language: str) -> Optional[str]:
    """
    Map a UI language onto a locale the holidays library ships for the country.

    Returns:
        e.g. 'en_US' for ('JP', 'en'), or None to keep the country default
    """
    supported = holidays.list_localized_countries().get(country, [])
    for code in supported:
        if code == language or code.startswith(language + "_"):
            return code
    return None


@dataclass
class CalendarCursor:
    """
    The (year, month) shown by the date picker.

    Transient UI state: it is never persisted and does not change any task
    until a day is confirmed.
    """
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12, got {self.month}")

    @classmethod
    def for_date(cls, date: datetime.date) -> "CalendarCursor":
        return cls(year=date.year, month=date.month)

    @classmethod
    def for_timestamp(cls, timestamp: float) -> "CalendarCursor":
        return cls.for_date(datetime.datetime.fromtimestamp(timestamp).date())

    def advance_month(self, delta: int):
        """Move one month forward (+1) or back (-1), rolling the year over"""
        if delta == 1:
            if self.month == 12:
                self.month = 1
                self.year += 1
            else:
                self.month += 1
        elif delta == -1:
            if self.month == 1:
                self.month = 12
                self.year -= 1
            else:
                self.month -= 1
        else:
            raise ValueError(f"Can only move by one month, got {delta}")

    @property
    def first_weekday(self) -> int:
        return first_weekday(self.year, self.month)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def month_grid(self) -> List[List[Optional[int]]]:
        """
        Weeks of the month, Sunday first.

        Each week has 7 cells; cells before the 1st and after the last day
        are None.
        """
        cells: List[Optional[int]] = [None] * self.first_weekday
        cells.extend(range(1, self.days_in_month + 1))
        while len(cells) % 7:
            cells.append(None)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

    def confirm_day(self, day: int) -> int:
        """
        Due-date timestamp for the given day of the cursor's month.

        Returns:
            Unix timestamp of 23:59:59 local time on that day

        Raises:
            InvalidDateError: if the day does not exist in this month
        """
        if not 1 <= day <= self.days_in_month:
            raise InvalidDateError(
                f"{self.year:04d}-{self.month:02d} has no day {day}"
            )
        due = datetime.datetime.combine(datetime.date(self.year, self.month, day), DUE_TIME)
        return int(due.timestamp())


@dataclass
class DayCell:
    """A day of the picker grid with its decoration"""
    day: int
    weekday: int  # 0 = Sunday
    is_today: bool = False
    holiday_name: str = ""

    @property
    def is_weekend(self) -> bool:
        return self.weekday in (0, 6)

    @property
    def is_holiday(self) -> bool:
        return bool(self.holiday_name)


class CalendarService:
    """
    Decorates month grids with weekends and public holidays.
    """

    def __init__(self, country: str = 'JP', subdivision: Optional[str] = None,
                 show_holidays: bool = True, language: Optional[str] = None):
        """
        Initialize with a country code.

        Args:
            country: ISO 3166 country code understood by the holidays library
            subdivision: Optional state/prefecture code
            show_holidays: When False, no holiday names are looked up
            language: UI language for holiday names, defaults to the app setting
        """
        self.country = country
        self.subdivision = subdivision
        self.show_holidays = show_holidays
        self.language = language or get_language()
        self._holidays = None

        if show_holidays:
            try:
                self._holidays = holidays.country_holidays(
                    country, subdiv=subdivision,
                    language=holiday_language(country, self.language),
                )
            except NotImplementedError:
                logger.warning("No holiday data for %s, holidays disabled", country)

    def get_holiday_name(self, date_obj: datetime.date) -> str:
        """Holiday name for the date, or empty string"""
        if self._holidays is None:
            return ""
        return self._holidays.get(date_obj, "")

    def is_holiday(self, date_obj: datetime.date) -> bool:
        return bool(self.get_holiday_name(date_obj))

    def decorate(self, cursor: CalendarCursor, today: Optional[datetime.date] = None) -> List[List[Optional[DayCell]]]:
        """Turn the cursor's grid into DayCells, keeping None padding"""
        weeks = []
        for week in cursor.month_grid():
            row = []
            for weekday, day in enumerate(week):
                if day is None:
                    row.append(None)
                    continue
                date_obj = datetime.date(cursor.year, cursor.month, day)
                row.append(DayCell(
                    day=day,
                    weekday=weekday,
                    is_today=(date_obj == today),
                    holiday_name=self.get_holiday_name(date_obj),
                ))
            weeks.append(row)
        return weeks
