"""
Period data models.

A Period is a resolved, inclusive date interval. Symbolic ranges are turned
into periods by BusinessCalendar.resolve_window.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from scoreboard.utils.exceptions import InvalidPeriodError


class TimeRange(str, Enum):
    """Symbolic time ranges understood by the calendar."""
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_BUSINESS_DAY = "last_business_day"
    WEEK = "week"              # Rolling 7 days ending today
    MONTH = "month"            # Rolling 30 days ending today
    WEEKLY = "weekly"          # Friday-to-Thursday cycle, selected by week offset
    ALL = "all"


@dataclass(frozen=True)
class Period:
    """Inclusive [start, end] date interval."""
    start: date
    end: date
    range_name: Optional[str] = None

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidPeriodError(
                f"start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end - self.start).days + 1

    def clamped(self, today: date) -> "Period":
        """Return this period with its end pulled back to today when it lies in the future."""
        if self.end <= today:
            return self
        return Period(self.start, max(self.start, today), self.range_name)
