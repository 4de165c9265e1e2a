"""
Business calendar arithmetic for the scoring engine.

All functions take the reference date explicitly; nothing in here reads the
wall clock except today_in(), which callers use at the boundary to obtain
that reference date.

Conventions:
- Business days are Monday through Friday; weekends carry no new work.
- The weekly accounting cycle runs Friday through Thursday.
- Week offsets are 0 for the current cycle and negative for past cycles.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

import pytz

from scoreboard.config import Config
from scoreboard.constants import CalendarConstants
from scoreboard.data_models.period import Period, TimeRange
from scoreboard.utils.exceptions import InvalidPeriodError

# date.weekday() values
MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


class BusinessCalendar:
    """Pure date helpers for business days and Friday-to-Thursday cycles"""

    # Days to step back from the reference date to reach the last business day
    _LAST_BUSINESS_DAY_OFFSETS = {
        SUNDAY: 2,
        MONDAY: 3,
        SATURDAY: 1,
    }

    # Business day number inside the cycle; the weekend is still day 1
    _CYCLE_DAY_INDEX = {
        FRIDAY: 1,
        SATURDAY: 1,
        SUNDAY: 1,
        MONDAY: 2,
        TUESDAY: 3,
        WEDNESDAY: 4,
        THURSDAY: 5,
    }

    @staticmethod
    def last_business_day(today: date) -> date:
        """
        Get the most recent completed business day before today

        Args:
            today: Reference date

        Returns:
            Friday for Saturday, Sunday and Monday; otherwise yesterday
        """
        offset = BusinessCalendar._LAST_BUSINESS_DAY_OFFSETS.get(today.weekday(), 1)
        return today - timedelta(days=offset)

    @staticmethod
    def weekly_cycle_start(today: date, week_offset: int = 0) -> date:
        """
        Get the Friday that opens a weekly cycle

        Args:
            today: Reference date
            week_offset: 0 for the current cycle, negative for earlier cycles

        Returns:
            Cycle start date (always a Friday)

        Raises:
            InvalidPeriodError: If week_offset points to a future cycle
        """
        if week_offset > 0:
            raise InvalidPeriodError(f"week offset {week_offset} is in the future")

        days_since_start = (today.weekday() - CalendarConstants.CYCLE_START_WEEKDAY) % 7
        current_start = today - timedelta(days=days_since_start)
        return current_start + timedelta(days=week_offset * CalendarConstants.CYCLE_LENGTH_DAYS)

    @staticmethod
    def weekly_cycle_end(start: date) -> date:
        """Get the Thursday that closes the cycle opened on start (not clamped to today)."""
        return start + timedelta(days=CalendarConstants.CYCLE_LENGTH_DAYS - 1)

    @staticmethod
    def clamp(day: date, today: date) -> date:
        """Pull a date back to today if it lies in the future."""
        return min(day, today)

    @staticmethod
    def weekday_index_in_cycle(today: date) -> int:
        """
        Get the business day number of today within its weekly cycle

        Returns:
            1 for Friday through Sunday, then 2 (Monday) up to 5 (Thursday)
        """
        return BusinessCalendar._CYCLE_DAY_INDEX[today.weekday()]

    @staticmethod
    def resolve_window(range_symbol: Union[str, TimeRange], today: date,
                       week_offset: int = 0) -> Period:
        """
        Resolve a symbolic range to a concrete period

        Args:
            range_symbol: One of the TimeRange values
            today: Reference date
            week_offset: Cycle selector, only used by the weekly range

        Returns:
            Period for the range; the weekly range is returned unclamped

        Raises:
            InvalidPeriodError: If the symbol is unknown or the offset is in the future
        """
        try:
            time_range = TimeRange(range_symbol)
        except ValueError:
            raise InvalidPeriodError(f"unknown time range '{range_symbol}'")

        if time_range is TimeRange.TODAY:
            return Period(today, today, time_range.value)

        if time_range is TimeRange.YESTERDAY:
            yesterday = today - timedelta(days=1)
            return Period(yesterday, yesterday, time_range.value)

        if time_range is TimeRange.LAST_BUSINESS_DAY:
            day = BusinessCalendar.last_business_day(today)
            return Period(day, day, time_range.value)

        if time_range is TimeRange.WEEK:
            start = today - timedelta(days=CalendarConstants.ROLLING_WEEK_DAYS)
            return Period(start, today, time_range.value)

        if time_range is TimeRange.MONTH:
            start = today - timedelta(days=CalendarConstants.ROLLING_MONTH_DAYS)
            return Period(start, today, time_range.value)

        if time_range is TimeRange.WEEKLY:
            start = BusinessCalendar.weekly_cycle_start(today, week_offset)
            return Period(start, BusinessCalendar.weekly_cycle_end(start), time_range.value)

        return Period(date(CalendarConstants.EPOCH_YEAR, 1, 1), today, time_range.value)

    @staticmethod
    def week_label(today: date, week_offset: int = 0) -> str:
        """
        Format a cycle for the week navigator, e.g. "Oct 16 – Oct 19, 2026"

        The end of the current cycle is clamped to today.
        """
        start = BusinessCalendar.weekly_cycle_start(today, week_offset)
        end = BusinessCalendar.clamp(BusinessCalendar.weekly_cycle_end(start), today)
        return f"{start:%b} {start.day} – {end:%b} {end.day}, {end.year}"

    @staticmethod
    def today_in(timezone_name: Optional[str] = None) -> date:
        """
        Get the current date in a timezone; the only wall-clock read in this module.

        Args:
            timezone_name: IANA zone name; defaults to Config.TIMEZONE
        """
        tz = pytz.timezone(timezone_name or Config.TIMEZONE)
        return datetime.now(tz).date()
