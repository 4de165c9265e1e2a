"""
Weekly Leaderboard Service

Builds the Friday-to-Thursday cycle view of the leaderboard. On top of the
plain period ranking it reports how each participant moved against the
immediately preceding cycle and what the most recent business day added.

Key Features:
- Rank change and trend against the previous cycle (positive = moved up)
- Cumulative cycle total (sum of rated per-submission totals)
- Last business day average and asset counts ("what was just added")
- Average score delta caused by the last business day
"""

from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from scoreboard.data_models.leaderboard import LeaderboardEntry, WeeklyLeaderboard
from scoreboard.data_models.period import Period, TimeRange
from scoreboard.data_models.submission import SubmissionRecord
from scoreboard.services.leaderboard import LeaderboardAggregator
from scoreboard.utils.business_calendar import BusinessCalendar
from scoreboard.utils.logger import setup_logger
from scoreboard.utils.ranking import RankingUtility

logger = setup_logger(__name__)


class WeeklyLeaderboardService:
    """Service for ranking weekly cycles and diffing them against the previous cycle."""

    def __init__(self, aggregator: Optional[LeaderboardAggregator] = None, config_service=None):
        self.aggregator = aggregator or LeaderboardAggregator(config_service=config_service)

    def build(self, today: date, submissions: Iterable[SubmissionRecord],
              week_offset: int = 0) -> WeeklyLeaderboard:
        """
        Build the weekly view for one cycle.

        This method:
        1. Resolves the selected cycle and the one before it
        2. Ranks both from the same snapshot
        3. Fills trend and rank change from the previous cycle
        4. Adds cycle totals and the last business day contribution

        Args:
            today: Reference date
            submissions: Snapshot covering at least the selected and previous cycles
            week_offset: 0 for the current cycle, negative for earlier cycles

        Returns:
            WeeklyLeaderboard with entries in rank order
        """
        submissions = list(submissions)

        period = BusinessCalendar.resolve_window(TimeRange.WEEKLY, today, week_offset)
        previous_period = BusinessCalendar.resolve_window(TimeRange.WEEKLY, today, week_offset - 1)

        previous = RankingUtility.by_participant(self.aggregator.rank(previous_period, submissions))
        current = self.aggregator.rank(period, submissions)

        last_business_day = BusinessCalendar.last_business_day(today)
        if period.contains(last_business_day):
            day_period = Period(last_business_day, last_business_day, TimeRange.LAST_BUSINESS_DAY.value)
            daily = RankingUtility.by_participant(self.aggregator.rank(day_period, submissions))
        else:
            # Browsing a past cycle: the last business day belongs to a later one
            last_business_day = None
            daily = {}

        cumulative = self._cumulative_totals(period, submissions)

        entries = [
            self._weekly_entry(entry, previous.get(entry.participant_id),
                               daily.get(entry.participant_id),
                               cumulative.get(entry.participant_id, 0.0))
            for entry in current
        ]

        movers = sum(1 for e in entries if e.rank_change)
        logger.info(
            f"Weekly leaderboard {period.start} - {period.end}: {len(entries)} ranked, "
            f"{movers} moved since previous cycle"
        )

        return WeeklyLeaderboard(
            entries=entries,
            period=period,
            previous_period=previous_period,
            label=BusinessCalendar.week_label(today, week_offset),
            week_offset=week_offset,
            day_index=BusinessCalendar.weekday_index_in_cycle(today),
            last_business_day=last_business_day,
        )

    def _weekly_entry(self, entry: LeaderboardEntry, previous: Optional[LeaderboardEntry],
                      daily: Optional[LeaderboardEntry], cumulative_total: float) -> LeaderboardEntry:
        rank_change = previous.rank - entry.rank if previous else None
        last_added = daily.avg_total if daily else None

        avg_score_delta = None
        if last_added is not None and entry.rated_count > 1:
            # Average before the last day's rating was folded in
            previous_avg = (cumulative_total - last_added) / (entry.rated_count - 1)
            avg_score_delta = round(entry.avg_total - previous_avg, 1)

        logger.debug(
            f"Participant {entry.participant_id}: rank {entry.rank}, change {rank_change}, "
            f"cumulative {cumulative_total}, last added {last_added}"
        )

        return replace(
            entry,
            trend=LeaderboardAggregator.trend(entry, previous),
            rank_change=rank_change,
            cumulative_total=cumulative_total,
            last_period_added=last_added,
            avg_score_delta=avg_score_delta,
            daily_static_count=daily.static_count if daily else None,
            daily_video_count=daily.video_count if daily else None,
        )

    @staticmethod
    def _cumulative_totals(period: Period, submissions: List[SubmissionRecord]) -> Dict[str, float]:
        """Sum of rated per-submission totals inside the period, per participant."""
        totals: Dict[str, float] = defaultdict(float)
        for submission in submissions:
            if submission.rating is not None and period.contains(submission.date):
                totals[submission.participant_id] += submission.rating.total
        return dict(totals)
