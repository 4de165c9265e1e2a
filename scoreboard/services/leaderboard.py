"""
Leaderboard aggregation service.

Turns a period's submissions and ratings into ranked LeaderboardEntry rows
and compares two rankings to derive rank trends.

Key rules:
- Only rated submissions feed the averages; submission_count counts all of them
- Participants with no rated submission in the period are left out entirely
- Ordering and tie-break come from RankingUtility (strict ordinal ranks)
"""

import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional, Union

from scoreboard.data_models.leaderboard import LeaderboardEntry, Trend
from scoreboard.data_models.period import Period, TimeRange
from scoreboard.data_models.submission import SubmissionRecord
from scoreboard.services.productivity import ProductivityScorer
from scoreboard.utils.business_calendar import BusinessCalendar
from scoreboard.utils.exceptions import InvalidPeriodError
from scoreboard.utils.ranking import RankingUtility

logger = logging.getLogger(__name__)


class LeaderboardAggregator:
    """Service for period rankings and rank trends."""

    def __init__(self, scorer: Optional[ProductivityScorer] = None, config_service=None):
        self.scorer = scorer or ProductivityScorer(config_service=config_service)

    def rank(self, period: Period, submissions: Iterable[SubmissionRecord]) -> List[LeaderboardEntry]:
        """
        Rank participants over a period.

        Args:
            period: Resolved period; submissions outside it are ignored
            submissions: Snapshot of submission records

        Returns:
            Entries ordered by rank (empty when nobody has a rating)
        """
        if not isinstance(period, Period):
            raise InvalidPeriodError(f"expected a resolved Period, got {type(period).__name__}")

        grouped: Dict[str, List[SubmissionRecord]] = defaultdict(list)
        outside = 0
        for submission in submissions:
            if not period.contains(submission.date):
                outside += 1
                continue
            grouped[submission.participant_id].append(submission)

        if outside:
            logger.debug(f"Ignored {outside} submissions outside {period.start} - {period.end}")

        entries = []
        for participant_id, participant_submissions in grouped.items():
            entry = self._build_entry(participant_id, participant_submissions)
            if entry is None:
                logger.debug(f"Participant {participant_id} has no rated submissions, excluded")
                continue
            entries.append(entry)

        ranked = RankingUtility.assign_ranks(entries)
        logger.info(
            f"Ranked {len(ranked)} participants for {period.range_name or 'period'} "
            f"{period.start} - {period.end}"
        )
        return ranked

    def _build_entry(self, participant_id: str,
                     submissions: List[SubmissionRecord]) -> Optional[LeaderboardEntry]:
        """Aggregate one participant's submissions; None when none are rated."""
        ratings = [s.rating for s in submissions if s.rating is not None]
        if not ratings:
            return None

        avg_productivity = sum(r.productivity for r in ratings) / len(ratings)
        avg_quality = sum(r.quality for r in ratings) / len(ratings)
        # One division so equal totals compare equal in the tie-break
        avg_total = sum(r.total for r in ratings) / len(ratings)

        return LeaderboardEntry(
            participant_id=participant_id,
            rank=0,  # assigned by RankingUtility
            avg_productivity=avg_productivity,
            avg_quality=avg_quality,
            avg_total=avg_total,
            submission_count=len(submissions),
            rated_count=len(ratings),
            static_count=sum(s.static_count for s in submissions),
            video_count=sum(s.video_count for s in submissions),
            weighted_count=self.scorer.weighted_count_for_submissions(submissions),
        )

    @staticmethod
    def trend(current: LeaderboardEntry, previous: Optional[LeaderboardEntry]) -> Trend:
        """Up if the rank number went down, Down if it went up, Same otherwise."""
        return RankingUtility.trend_between(current.rank, previous.rank if previous else None)

    def apply_trends(self, current: List[LeaderboardEntry],
                     previous: List[LeaderboardEntry]) -> List[LeaderboardEntry]:
        """Return copies of the current entries with trend set against a previous ranking."""
        previous_by_participant = RankingUtility.by_participant(previous)
        return [
            replace(entry, trend=self.trend(entry, previous_by_participant.get(entry.participant_id)))
            for entry in current
        ]

    def rank_with_trends(self, period: Period, submissions: Iterable[SubmissionRecord],
                         previous_period: Period,
                         previous_submissions: Iterable[SubmissionRecord]) -> List[LeaderboardEntry]:
        """
        Rank a period and compare it with a previous one.

        The previous period is ranked first; its entries only feed the trend.
        """
        previous = self.rank(previous_period, previous_submissions)
        current = self.rank(period, submissions)
        return self.apply_trends(current, previous)

    def rank_range(self, range_symbol: Union[str, TimeRange], today: date,
                   submissions: Iterable[SubmissionRecord], week_offset: int = 0) -> List[LeaderboardEntry]:
        """Resolve a symbolic range against today and rank it."""
        period = BusinessCalendar.resolve_window(range_symbol, today, week_offset)
        return self.rank(period, submissions)
