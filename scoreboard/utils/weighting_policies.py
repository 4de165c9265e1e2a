"""
Weighting Policy Pattern for Productivity Counts

This module implements the Strategy pattern for turning a participant's raw
asset output into a single weighted productivity count, so the weight table
can be swapped or reconfigured without touching the scorer.

Every policy honours the same contract:
- A static asset weighs exactly 1.0
- Each video weighs at least 1.0, and long videos weigh more than a static
- Weights never decrease as video duration grows
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
import logging
import math

from scoreboard.constants import WeightingConstants
from scoreboard.utils.exceptions import InvalidWeightPolicyError

logger = logging.getLogger(__name__)

# (upper bound in seconds or None for unbounded, weight)
Bucket = Tuple[Optional[float], float]


class WeightingPolicy(ABC):
    """
    Abstract base class for weighting policies.

    Each policy maps a video's duration to a weight; statics always count 1.0.
    """

    static_weight: float = WeightingConstants.STATIC_WEIGHT

    @abstractmethod
    def video_weight(self, duration: Optional[float]) -> float:
        """
        Weight of a single video.

        Args:
            duration: Video length in seconds, or None when unknown

        Returns:
            Weight >= 1.0
        """
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Get human-readable name of this policy"""
        pass


class DurationBucketPolicy(WeightingPolicy):
    """
    Bucketed weighting: each video falls in the first bucket whose upper
    bound is >= its duration. The last bucket must be unbounded.

    A video of unknown duration is weighted as the shortest bucket.
    """

    def __init__(self, buckets: Sequence[Bucket]):
        self.buckets: List[Bucket] = [
            (None if bound is None else float(bound), float(weight))
            for bound, weight in buckets
        ]
        self._validate()

    def _validate(self):
        if not self.buckets:
            raise InvalidWeightPolicyError("at least one duration bucket is required")

        previous_bound = -math.inf
        previous_weight = self.static_weight
        for index, (bound, weight) in enumerate(self.buckets):
            is_last = index == len(self.buckets) - 1

            if bound is None and not is_last:
                raise InvalidWeightPolicyError("only the last bucket may be unbounded")
            if bound is not None and bound <= previous_bound:
                raise InvalidWeightPolicyError(
                    f"bucket bounds must be strictly increasing ({bound} after {previous_bound})"
                )
            if weight < previous_weight:
                raise InvalidWeightPolicyError(
                    f"bucket weight {weight} is lower than {previous_weight}; weights must be "
                    f">= {self.static_weight} and non-decreasing"
                )
            if bound is not None:
                previous_bound = bound
            previous_weight = weight

        if self.buckets[-1][0] is not None:
            raise InvalidWeightPolicyError("the last bucket must be unbounded")
        if self.buckets[-1][1] <= self.static_weight:
            raise InvalidWeightPolicyError(
                f"long videos must outweigh a static asset ({self.buckets[-1][1]} <= {self.static_weight})"
            )

    def video_weight(self, duration: Optional[float]) -> float:
        if duration is None:
            return self.buckets[0][1]
        if duration < 0:
            raise ValueError(f"Video duration cannot be negative: {duration}")

        for bound, weight in self.buckets:
            if bound is None or duration <= bound:
                return weight
        # Unreachable: the last bucket is unbounded
        return self.buckets[-1][1]

    def get_policy_name(self) -> str:
        return "Duration Buckets"


class FlatVideoPolicy(DurationBucketPolicy):
    """Every video counts the same regardless of length."""

    def __init__(self, video_weight: float = WeightingConstants.FLAT_VIDEO_WEIGHT):
        super().__init__([(None, video_weight)])

    def get_policy_name(self) -> str:
        return "Flat Video Weight"


class WeightingPolicyFactory:
    """Factory for creating weighting policies from configuration"""

    @staticmethod
    def create_policy(policy_type: str = "default", **kwargs) -> WeightingPolicy:
        """
        Create a weighting policy by type.

        Args:
            policy_type: "default", "buckets" or "flat"
            **kwargs: buckets=[(bound, weight), ...] for "buckets",
                video_weight=float for "flat"

        Returns:
            Configured WeightingPolicy instance
        """
        policy_type = policy_type.upper()

        if policy_type == "DEFAULT":
            return DurationBucketPolicy(WeightingConstants.DEFAULT_VIDEO_BUCKETS)
        elif policy_type == "BUCKETS":
            buckets = kwargs.get('buckets')
            if buckets is None:
                raise InvalidWeightPolicyError("'buckets' policy requires a buckets table")
            return DurationBucketPolicy(buckets)
        elif policy_type == "FLAT":
            return FlatVideoPolicy(kwargs.get('video_weight', WeightingConstants.FLAT_VIDEO_WEIGHT))
        else:
            raise InvalidWeightPolicyError(f"unknown policy type '{policy_type}'")

    @staticmethod
    def from_config(config_service) -> WeightingPolicy:
        """Create the policy described by the 'weighting.*' configuration keys."""
        policy_type = config_service.get('weighting.policy', 'default')
        policy = WeightingPolicyFactory.create_policy(
            policy_type,
            buckets=config_service.get('weighting.video_buckets'),
            video_weight=config_service.get('weighting.flat_video_weight',
                                            WeightingConstants.FLAT_VIDEO_WEIGHT),
        )
        logger.debug(f"Using weighting policy: {policy.get_policy_name()}")
        return policy

    @staticmethod
    def get_available_policies() -> List[str]:
        """Get list of available policy types"""
        return ["default", "buckets", "flat"]
