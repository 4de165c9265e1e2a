"""
Configuration seed data for the scoring engine.

Default tunables across 3 categories. ConfigurationService starts from
these and overlays file and explicit overrides on top.
"""

from scoreboard.constants import (
    MatrixConstants, SuggestedScoreConstants, WeightingConstants
)

DEFAULT_CONFIGS = {
    # Weighting (3 parameters)
    'weighting.policy': 'default',
    'weighting.video_buckets': [list(bucket) for bucket in WeightingConstants.DEFAULT_VIDEO_BUCKETS],
    'weighting.flat_video_weight': WeightingConstants.FLAT_VIDEO_WEIGHT,

    # Suggested score (2 parameters)
    'suggested.thresholds': list(SuggestedScoreConstants.THRESHOLDS),
    'suggested.neutral_score': SuggestedScoreConstants.NEUTRAL_SCORE,

    # Matrix chart (4 parameters)
    'matrix.width': MatrixConstants.CHART_WIDTH,
    'matrix.height': MatrixConstants.CHART_HEIGHT,
    'matrix.padding': {
        'top': MatrixConstants.PADDING_TOP,
        'right': MatrixConstants.PADDING_RIGHT,
        'bottom': MatrixConstants.PADDING_BOTTOM,
        'left': MatrixConstants.PADDING_LEFT,
    },
    'matrix.spread_radii': [list(step) for step in MatrixConstants.SPREAD_RADII],
}
