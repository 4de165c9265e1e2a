"""
Services package for the scoring engine.

Every service is a pure computation over an in-memory snapshot and accepts
an optional ConfigurationService.
"""

from .configuration import ConfigurationService
from .productivity import ProductivityScorer
from .leaderboard import LeaderboardAggregator
from .weekly_leaderboard import WeeklyLeaderboardService
from .feedback import FeedbackService
from .suggested_score import SuggestedScoreAdvisor
from .matrix_layout import ChartGeometry, MatrixLayoutEngine

__all__ = [
    'ConfigurationService', 'ProductivityScorer', 'LeaderboardAggregator',
    'WeeklyLeaderboardService', 'FeedbackService', 'SuggestedScoreAdvisor',
    'ChartGeometry', 'MatrixLayoutEngine',
]
