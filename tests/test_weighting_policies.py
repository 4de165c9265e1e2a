"""Tests for weighting policies and the ProductivityScorer."""
import pytest

from scoreboard.data_models.submission import AssetRecord
from scoreboard.services.productivity import ProductivityScorer
from scoreboard.utils.exceptions import InvalidWeightPolicyError
from scoreboard.utils.weighting_policies import (
    DurationBucketPolicy, FlatVideoPolicy, WeightingPolicyFactory
)
from tests.conftest import MONDAY


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------
class TestDurationBucketPolicy:

    def setup_method(self):
        self.policy = WeightingPolicyFactory.create_policy("default")

    @pytest.mark.parametrize("duration, weight", [
        (0, 1.5), (15, 1.5), (15.01, 2.5), (60, 2.5), (61, 4.0), (3600, 4.0),
    ])
    def test_default_buckets(self, duration, weight):
        assert self.policy.video_weight(duration) == weight

    def test_unknown_duration_uses_shortest_bucket(self):
        assert self.policy.video_weight(None) == 1.5

    def test_negative_duration(self):
        with pytest.raises(ValueError):
            self.policy.video_weight(-1)

    def test_weights_never_decrease_with_duration(self):
        weights = [self.policy.video_weight(seconds) for seconds in range(0, 300, 5)]
        assert weights == sorted(weights)
        assert all(w >= self.policy.static_weight for w in weights)

    @pytest.mark.parametrize("buckets", [
        [],
        [(30, 2.0)],                           # last bucket bounded
        [(None, 2.0), (30, 3.0)],              # unbounded bucket not last
        [(30, 2.0), (30, 3.0), (None, 4.0)],   # bounds not increasing
        [(30, 3.0), (None, 2.0)],              # weights decreasing
        [(30, 0.5), (None, 2.0)],              # lighter than a static
        [(None, 1.0)],                         # long video does not outweigh a static
    ])
    def test_invalid_tables(self, buckets):
        with pytest.raises(InvalidWeightPolicyError):
            DurationBucketPolicy(buckets)


class TestWeightingPolicyFactory:

    def test_type_is_case_insensitive(self):
        assert isinstance(WeightingPolicyFactory.create_policy("FLAT"), FlatVideoPolicy)

    def test_custom_buckets(self):
        policy = WeightingPolicyFactory.create_policy("buckets", buckets=[[10, 1.2], [None, 3.0]])
        assert policy.video_weight(5) == 1.2
        assert policy.video_weight(11) == 3.0

    def test_buckets_policy_needs_table(self):
        with pytest.raises(InvalidWeightPolicyError):
            WeightingPolicyFactory.create_policy("buckets")

    def test_unknown_type(self):
        with pytest.raises(InvalidWeightPolicyError):
            WeightingPolicyFactory.create_policy("quadratic")

    def test_flat_policy(self):
        policy = WeightingPolicyFactory.create_policy("flat", video_weight=3.0)
        assert policy.video_weight(1) == policy.video_weight(900) == 3.0
        assert policy.get_policy_name() == "Flat Video Weight"

    def test_available_policies(self):
        assert WeightingPolicyFactory.get_available_policies() == ["default", "buckets", "flat"]

    def test_from_config(self, make_config):
        policy = WeightingPolicyFactory.from_config(make_config({
            'weighting.policy': 'buckets',
            'weighting.video_buckets': [[20, 2.0], [None, 5.0]],
        }))
        assert policy.video_weight(20) == 2.0
        assert policy.video_weight(21) == 5.0


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------
class TestProductivityScorer:

    def setup_method(self):
        self.scorer = ProductivityScorer()

    def test_statics_only(self):
        assert self.scorer.weighted_count(3, []) == 3.0

    def test_mixed_output(self):
        videos = [AssetRecord.video(10), AssetRecord.video(45), AssetRecord.video(120)]
        assert self.scorer.weighted_count(2, videos) == 2 + 1.5 + 2.5 + 4.0

    def test_video_outweighs_static(self):
        assert self.scorer.weighted_count(0, [AssetRecord.video(90)]) > self.scorer.weighted_count(1, [])

    def test_negative_statics(self):
        with pytest.raises(ValueError):
            self.scorer.weighted_count(-1, [])

    def test_static_in_video_list(self):
        with pytest.raises(ValueError):
            self.scorer.weighted_count(0, [AssetRecord.static()])

    def test_for_assets_and_submissions(self, submission_factory):
        assets = [AssetRecord.static(), AssetRecord.video(None)]
        assert self.scorer.weighted_count_for_assets(assets) == 2.5

        submissions = [
            submission_factory("alice", MONDAY, statics=1, video_durations=(30,)),
            submission_factory("alice", MONDAY, statics=2),
        ]
        assert self.scorer.weighted_count_for_submission(submissions[0]) == 3.5
        assert self.scorer.weighted_count_for_submissions(submissions) == 5.5

    def test_explicit_policy_wins_over_config(self, make_config):
        config = make_config({'weighting.policy': 'flat', 'weighting.flat_video_weight': 9.0})
        scorer = ProductivityScorer(policy=FlatVideoPolicy(2.0), config_service=config)
        assert scorer.weighted_count(0, [AssetRecord.video(5)]) == 2.0
        assert ProductivityScorer(config_service=config).weighted_count(0, [AssetRecord.video(5)]) == 9.0
