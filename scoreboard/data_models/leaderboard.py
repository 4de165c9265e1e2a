"""
Leaderboard data models.

Provides immutable data transfer objects for ranked output. Entries and
placed nodes are built fresh for every request and never mutated; derived
values (trend, weekly fields) are attached with dataclasses.replace.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from scoreboard.data_models.period import Period


class Trend(Enum):
    """Direction of rank movement between two periods"""
    UP = "up"
    DOWN = "down"
    SAME = "same"


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""
    participant_id: str
    rank: int
    avg_productivity: float
    avg_quality: float
    avg_total: float
    submission_count: int          # All submissions in the period, rated or not
    rated_count: int               # Submissions that carry a rating
    static_count: int = 0
    video_count: int = 0
    weighted_count: float = 0.0
    trend: Trend = Trend.SAME
    # Weekly view only
    rank_change: Optional[int] = None
    cumulative_total: Optional[float] = None
    last_period_added: Optional[float] = None
    avg_score_delta: Optional[float] = None
    daily_static_count: Optional[int] = None
    daily_video_count: Optional[int] = None


@dataclass(frozen=True)
class WeeklyLeaderboard:
    """Ranked Friday-to-Thursday cycle with movement against the previous cycle."""
    entries: List[LeaderboardEntry]
    period: Period
    previous_period: Period
    label: str
    week_offset: int
    day_index: int                  # Business day within the current cycle, 1..5
    last_business_day: Optional[date] = None


@dataclass(frozen=True)
class PlacedNode:
    """Chart coordinates for one participant."""
    participant_id: str
    x: float
    y: float
    cell: Tuple[int, int]
