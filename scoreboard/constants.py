"""
Scoreboard-wide constants.

Default values for the calendar, weighting, suggestion and chart layout
components. Runtime overrides go through ConfigurationService; these are
the values it is seeded with.
"""

class CalendarConstants:
    """Constants related to business-day and cycle arithmetic."""

    # Rolling window lengths (days back from the reference date)
    ROLLING_WEEK_DAYS = 7
    ROLLING_MONTH_DAYS = 30

    # Weekly cycle runs Friday through Thursday
    CYCLE_START_WEEKDAY = 4  # date.weekday(): Monday=0 ... Friday=4
    CYCLE_LENGTH_DAYS = 7

    # Lower bound for the "all" range
    EPOCH_YEAR = 1970

class WeightingConstants:
    """Constants for weighted productivity counts."""

    STATIC_WEIGHT = 1.0

    # (upper bound in seconds, weight); None means unbounded
    DEFAULT_VIDEO_BUCKETS = [
        (15.0, 1.5),
        (60.0, 2.5),
        (None, 4.0),
    ]

    # Single weight used by the flat policy
    FLAT_VIDEO_WEIGHT = 2.5

class SuggestedScoreConstants:
    """Constants for the suggested score heuristic."""

    # ratio <= threshold[i] maps to score i + 1; anything above maps to 5
    THRESHOLDS = [0.6, 0.8, 1.0, 1.2]

    # Returned when there is nothing to compare against
    NEUTRAL_SCORE = 3

    MIN_SCORE = 1
    MAX_SCORE = 5

class MatrixConstants:
    """Constants for the productivity/quality chart layout."""

    CHART_WIDTH = 700
    CHART_HEIGHT = 700
    PADDING_TOP = 60
    PADDING_RIGHT = 60
    PADDING_BOTTOM = 80
    PADDING_LEFT = 80

    # Score axis range
    MIN_SCORE = 1
    MAX_SCORE = 5

    # Spread radius by group size: (max members, radius); last entry covers the rest
    SPREAD_RADII = [
        (3, 28.0),
        (6, 36.0),
        (None, 44.0),
    ]
