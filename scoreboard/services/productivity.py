"""
Productivity scoring service.

Turns a participant's static and video output into one weighted count using
a pluggable WeightingPolicy.
"""

import logging
from typing import Iterable, Optional, Sequence

from scoreboard.data_models.submission import AssetRecord, SubmissionRecord
from scoreboard.utils.weighting_policies import WeightingPolicy, WeightingPolicyFactory

logger = logging.getLogger(__name__)


class ProductivityScorer:
    """Computes weighted productivity counts."""

    def __init__(self, policy: Optional[WeightingPolicy] = None, config_service=None):
        """
        Args:
            policy: Explicit weighting policy; takes precedence over configuration
            config_service: ConfigurationService to build the policy from
        """
        if policy is None:
            if config_service is not None:
                policy = WeightingPolicyFactory.from_config(config_service)
            else:
                policy = WeightingPolicyFactory.create_policy("default")
        self.policy = policy

    def weighted_count(self, statics: int, videos: Sequence[AssetRecord]) -> float:
        """
        Weighted productivity for a number of statics plus a list of videos.

        Args:
            statics: Number of static assets
            videos: Video assets (their durations drive the weights)

        Returns:
            statics * 1.0 plus the policy weight of every video
        """
        if statics < 0:
            raise ValueError(f"Static count cannot be negative: {statics}")

        total = statics * self.policy.static_weight
        for video in videos:
            if not video.is_video:
                raise ValueError("weighted_count expects video assets only in 'videos'")
            total += self.policy.video_weight(video.duration)
        return total

    def weighted_count_for_assets(self, assets: Iterable[AssetRecord]) -> float:
        assets = list(assets)
        videos = [asset for asset in assets if asset.is_video]
        return self.weighted_count(len(assets) - len(videos), videos)

    def weighted_count_for_submission(self, submission: SubmissionRecord) -> float:
        return self.weighted_count(submission.static_count, submission.videos)

    def weighted_count_for_submissions(self, submissions: Iterable[SubmissionRecord]) -> float:
        """Sum of the weighted counts of several submissions."""
        return sum(self.weighted_count_for_submission(s) for s in submissions)
