"""
Suggested score advisor.

Compares a participant's weighted output with the period median and maps
the ratio onto the 1-5 rating scale. The result is advisory only: it is
handed to the review UI and never written over a reviewer's rating.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from scoreboard.constants import SuggestedScoreConstants
from scoreboard.data_models.submission import SubmissionRecord
from scoreboard.services.productivity import ProductivityScorer
from scoreboard.utils.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestedScore:
    """Advisory productivity score for one submission."""
    participant_id: str
    submission_date: date
    weighted_count: float
    median_weighted_count: float
    suggested: int
    existing_productivity: Optional[int] = None   # Reviewer's rating, if already given


class SuggestedScoreAdvisor:
    """Ratio-to-median heuristic for suggesting a productivity rating."""

    def __init__(self, scorer: Optional[ProductivityScorer] = None, config_service=None):
        self.scorer = scorer or ProductivityScorer(config_service=config_service)

        thresholds = SuggestedScoreConstants.THRESHOLDS
        neutral = SuggestedScoreConstants.NEUTRAL_SCORE
        if config_service is not None:
            thresholds = config_service.get('suggested.thresholds', thresholds)
            neutral = config_service.get('suggested.neutral_score', neutral)

        self.thresholds = self._validate_thresholds(thresholds)
        if isinstance(neutral, bool) or not isinstance(neutral, int):
            raise InvalidConfigurationError('suggested.neutral_score', f"{neutral!r} is not an integer score")
        if not SuggestedScoreConstants.MIN_SCORE <= neutral <= SuggestedScoreConstants.MAX_SCORE:
            raise InvalidConfigurationError('suggested.neutral_score', f"{neutral} is outside 1-5")
        self.neutral_score = neutral

    @staticmethod
    def _validate_thresholds(thresholds: Sequence[float]) -> List[float]:
        expected = SuggestedScoreConstants.MAX_SCORE - SuggestedScoreConstants.MIN_SCORE
        values = [float(t) for t in thresholds]
        if len(values) != expected:
            raise InvalidConfigurationError(
                'suggested.thresholds', f"expected {expected} ratios, got {len(values)}"
            )
        if any(later <= earlier for earlier, later in zip(values, values[1:])):
            raise InvalidConfigurationError('suggested.thresholds', "ratios must be strictly increasing")
        return values

    def suggest(self, participant_weighted_count: float, period_median_weighted_count: float) -> int:
        """
        Suggest a 1-5 score from a weighted count and the period median.

        Args:
            participant_weighted_count: Weighted count under review
            period_median_weighted_count: Median weighted count of the period

        Returns:
            Suggested score; the neutral score when the median is 0
        """
        if participant_weighted_count < 0 or period_median_weighted_count < 0:
            raise ValueError("Weighted counts cannot be negative")

        if period_median_weighted_count == 0:
            return self.neutral_score

        ratio = participant_weighted_count / period_median_weighted_count
        for score, threshold in enumerate(self.thresholds, start=SuggestedScoreConstants.MIN_SCORE):
            if ratio <= threshold:
                return score
        return SuggestedScoreConstants.MAX_SCORE

    @staticmethod
    def median(values: Iterable[float]) -> float:
        """Median with the usual even-count averaging; 0.0 for no values."""
        ordered = sorted(values)
        count = len(ordered)
        if count == 0:
            return 0.0
        middle = count // 2
        if count % 2:
            return float(ordered[middle])
        return (ordered[middle - 1] + ordered[middle]) / 2

    def suggest_for_submissions(self, submissions: Iterable[SubmissionRecord]) -> List[SuggestedScore]:
        """
        Suggest a score for every submission in a period snapshot.

        The median is taken over the weighted counts of all given submissions.
        """
        submissions = list(submissions)
        counts = [self.scorer.weighted_count_for_submission(s) for s in submissions]
        period_median = self.median(counts)

        suggestions = [
            SuggestedScore(
                participant_id=submission.participant_id,
                submission_date=submission.date,
                weighted_count=count,
                median_weighted_count=period_median,
                suggested=self.suggest(count, period_median),
                existing_productivity=submission.rating.productivity if submission.rating else None,
            )
            for submission, count in zip(submissions, counts)
        ]
        logger.info(f"Suggested scores for {len(suggestions)} submissions (median {period_median})")
        return suggestions
