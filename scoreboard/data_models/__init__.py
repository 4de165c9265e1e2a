"""
Immutable data transfer objects for the scoring engine.
"""

from .period import Period, TimeRange
from .submission import AssetKind, AssetRecord, RatingRecord, SubmissionRecord
from .leaderboard import LeaderboardEntry, PlacedNode, Trend, WeeklyLeaderboard

__all__ = [
    'Period', 'TimeRange',
    'AssetKind', 'AssetRecord', 'RatingRecord', 'SubmissionRecord',
    'LeaderboardEntry', 'PlacedNode', 'Trend', 'WeeklyLeaderboard',
]
