"""
Participant feedback service.

Produces the KPI banner and per-submission rows a participant sees about
their own work over a period, plus the submissions-per-day series used by
the admin chart.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Tuple

from scoreboard.data_models.period import Period
from scoreboard.data_models.submission import SubmissionRecord
from scoreboard.services.productivity import ProductivityScorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedbackRow:
    """One submission as shown in the feedback table."""
    submission_date: date
    static_count: int
    video_count: int
    weighted_count: float
    productivity: Optional[int]
    quality: Optional[int]
    total_score: Optional[int]


@dataclass(frozen=True)
class FeedbackSummary:
    """KPI banner for one participant and period."""
    participant_id: str
    period: Period
    total_submissions: int
    statics: int
    videos: int
    weighted_count: float
    avg_productivity: float
    avg_quality: float
    avg_total: float
    rows: List[FeedbackRow]

    @property
    def has_ratings(self) -> bool:
        return any(row.total_score is not None for row in self.rows)


class FeedbackService:
    """Service for participant-facing feedback summaries."""

    def __init__(self, scorer: Optional[ProductivityScorer] = None, config_service=None):
        self.scorer = scorer or ProductivityScorer(config_service=config_service)

    def summarize(self, participant_id: str, period: Period,
                  submissions: Iterable[SubmissionRecord]) -> FeedbackSummary:
        """
        Summarize one participant's submissions over a period.

        Averages cover rated submissions only and are 0 when none is rated.
        Rows are ordered newest first.
        """
        own = sorted(
            (s for s in submissions if s.participant_id == participant_id and period.contains(s.date)),
            key=lambda s: s.date,
            reverse=True,
        )

        rows = []
        productivity_sum = quality_sum = rated = 0
        for submission in own:
            rating = submission.rating
            rows.append(FeedbackRow(
                submission_date=submission.date,
                static_count=submission.static_count,
                video_count=submission.video_count,
                weighted_count=self.scorer.weighted_count_for_submission(submission),
                productivity=rating.productivity if rating else None,
                quality=rating.quality if rating else None,
                total_score=rating.total if rating else None,
            ))
            if rating:
                productivity_sum += rating.productivity
                quality_sum += rating.quality
                rated += 1

        summary = FeedbackSummary(
            participant_id=participant_id,
            period=period,
            total_submissions=len(own),
            statics=sum(row.static_count for row in rows),
            videos=sum(row.video_count for row in rows),
            weighted_count=round(sum(row.weighted_count for row in rows), 1),
            avg_productivity=round(productivity_sum / rated, 2) if rated else 0,
            avg_quality=round(quality_sum / rated, 2) if rated else 0,
            avg_total=round((productivity_sum + quality_sum) / rated, 2) if rated else 0,
            rows=rows,
        )
        logger.debug(f"Feedback for {participant_id}: {len(own)} submissions, {rated} rated")
        return summary

    @staticmethod
    def daily_submission_counts(submissions: Iterable[SubmissionRecord]) -> List[Tuple[date, int]]:
        """Number of submissions per date, oldest first."""
        counts = Counter(s.date for s in submissions)
        return sorted(counts.items())
