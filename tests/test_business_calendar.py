"""Tests for scoreboard.utils.business_calendar and the Period model."""
from datetime import date, timedelta

import pytest

from scoreboard.config import Config
from scoreboard.data_models.period import Period, TimeRange
from scoreboard.utils import business_calendar
from scoreboard.utils.business_calendar import BusinessCalendar
from scoreboard.utils.exceptions import InvalidPeriodError, ScoreboardException
from tests.conftest import (
    FRIDAY, MONDAY, SATURDAY, SUNDAY, THURSDAY, TUESDAY, WEDNESDAY
)


# ---------------------------------------------------------------------------
# last_business_day
# ---------------------------------------------------------------------------
class TestLastBusinessDay:

    def test_monday_goes_back_to_friday(self):
        assert BusinessCalendar.last_business_day(MONDAY) == FRIDAY
        assert (MONDAY - FRIDAY).days == 3

    def test_sunday_goes_back_to_friday(self):
        assert BusinessCalendar.last_business_day(SUNDAY) == FRIDAY

    def test_saturday_goes_back_to_friday(self):
        assert BusinessCalendar.last_business_day(SATURDAY) == FRIDAY

    def test_tuesday_goes_back_one_day(self):
        assert BusinessCalendar.last_business_day(TUESDAY) == MONDAY

    def test_friday_goes_back_to_thursday(self):
        assert BusinessCalendar.last_business_day(FRIDAY) == THURSDAY - timedelta(days=7)

    def test_result_is_always_a_weekday(self):
        for offset in range(28):
            day = MONDAY + timedelta(days=offset)
            assert BusinessCalendar.last_business_day(day).weekday() < 5


# ---------------------------------------------------------------------------
# weekly cycle
# ---------------------------------------------------------------------------
class TestWeeklyCycle:

    @pytest.mark.parametrize("today", [FRIDAY, SATURDAY, SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY])
    def test_current_cycle_starts_on_friday(self, today):
        assert BusinessCalendar.weekly_cycle_start(today) == FRIDAY

    def test_negative_offset_steps_back_whole_weeks(self):
        assert BusinessCalendar.weekly_cycle_start(MONDAY, -1) == date(2026, 10, 9)
        assert BusinessCalendar.weekly_cycle_start(MONDAY, -3) == date(2026, 9, 25)

    def test_future_offset_is_rejected(self):
        with pytest.raises(InvalidPeriodError):
            BusinessCalendar.weekly_cycle_start(MONDAY, 1)

    def test_cycle_end_is_following_thursday(self):
        end = BusinessCalendar.weekly_cycle_end(FRIDAY)
        assert end == THURSDAY
        assert end.weekday() == 3

    def test_cycle_end_is_not_clamped(self):
        start = BusinessCalendar.weekly_cycle_start(MONDAY)
        assert BusinessCalendar.weekly_cycle_end(start) > MONDAY

    def test_clamp(self):
        assert BusinessCalendar.clamp(THURSDAY, MONDAY) == MONDAY
        assert BusinessCalendar.clamp(FRIDAY, MONDAY) == FRIDAY


class TestWeekdayIndexInCycle:

    def test_weekend_is_still_day_one(self):
        assert BusinessCalendar.weekday_index_in_cycle(FRIDAY) == 1
        assert BusinessCalendar.weekday_index_in_cycle(SATURDAY) == 1
        assert BusinessCalendar.weekday_index_in_cycle(SUNDAY) == 1

    def test_weekdays_count_up_to_five(self):
        assert BusinessCalendar.weekday_index_in_cycle(MONDAY) == 2
        assert BusinessCalendar.weekday_index_in_cycle(TUESDAY) == 3
        assert BusinessCalendar.weekday_index_in_cycle(WEDNESDAY) == 4
        assert BusinessCalendar.weekday_index_in_cycle(THURSDAY) == 5


# ---------------------------------------------------------------------------
# resolve_window
# ---------------------------------------------------------------------------
class TestResolveWindow:

    def test_single_day_ranges(self):
        assert BusinessCalendar.resolve_window("today", MONDAY) == Period(MONDAY, MONDAY, "today")
        yesterday = BusinessCalendar.resolve_window("yesterday", MONDAY)
        assert (yesterday.start, yesterday.end) == (SUNDAY, SUNDAY)
        last = BusinessCalendar.resolve_window(TimeRange.LAST_BUSINESS_DAY, MONDAY)
        assert (last.start, last.end) == (FRIDAY, FRIDAY)

    def test_rolling_windows_end_today(self):
        week = BusinessCalendar.resolve_window("week", MONDAY)
        assert (week.start, week.end) == (date(2026, 10, 12), MONDAY)
        month = BusinessCalendar.resolve_window("month", MONDAY)
        assert (month.start, month.end) == (date(2026, 9, 19), MONDAY)

    def test_weekly_uses_friday_to_thursday_cycle(self):
        current = BusinessCalendar.resolve_window("weekly", MONDAY)
        assert (current.start, current.end) == (FRIDAY, THURSDAY)
        previous = BusinessCalendar.resolve_window("weekly", MONDAY, week_offset=-1)
        assert (previous.start, previous.end) == (date(2026, 10, 9), date(2026, 10, 15))

    def test_all_starts_at_epoch(self):
        window = BusinessCalendar.resolve_window("all", MONDAY)
        assert window.start == date(1970, 1, 1)
        assert window.end == MONDAY

    def test_unknown_range_is_rejected(self):
        with pytest.raises(InvalidPeriodError) as exc_info:
            BusinessCalendar.resolve_window("fortnight", MONDAY)
        assert "fortnight" in str(exc_info.value)

    def test_future_weekly_offset_is_rejected(self):
        with pytest.raises(InvalidPeriodError):
            BusinessCalendar.resolve_window("weekly", MONDAY, week_offset=2)


class TestWeekLabel:

    def test_current_cycle_is_clamped_to_today(self):
        assert BusinessCalendar.week_label(MONDAY) == "Oct 16 – Oct 19, 2026"

    def test_past_cycle_shows_full_range(self):
        assert BusinessCalendar.week_label(MONDAY, -1) == "Oct 9 – Oct 15, 2026"


class TestTodayIn:

    def test_returns_a_date(self):
        assert isinstance(BusinessCalendar.today_in("UTC"), date)

    def test_defaults_to_configured_timezone(self, monkeypatch):
        requested = []
        real_timezone = business_calendar.pytz.timezone

        def recording_timezone(name):
            requested.append(name)
            return real_timezone(name)

        monkeypatch.setattr(Config, "TIMEZONE", "Pacific/Kiritimati")
        monkeypatch.setattr(business_calendar.pytz, "timezone", recording_timezone)

        assert isinstance(BusinessCalendar.today_in(), date)
        BusinessCalendar.today_in("Europe/London")
        assert requested == ["Pacific/Kiritimati", "Europe/London"]


# ---------------------------------------------------------------------------
# Period
# ---------------------------------------------------------------------------
class TestPeriod:

    def test_inverted_period_is_rejected(self):
        with pytest.raises(InvalidPeriodError) as exc_info:
            Period(MONDAY, FRIDAY)
        assert isinstance(exc_info.value, ScoreboardException)
        assert exc_info.value.user_message

    def test_contains_is_inclusive(self):
        period = Period(FRIDAY, MONDAY)
        assert period.contains(FRIDAY)
        assert period.contains(MONDAY)
        assert not period.contains(TUESDAY)
        assert period.days == 4

    def test_clamped(self):
        period = Period(FRIDAY, THURSDAY)
        assert period.clamped(MONDAY).end == MONDAY
        assert period.clamped(THURSDAY + timedelta(days=1)) is period
