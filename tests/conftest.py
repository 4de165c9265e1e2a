"""Shared builders for scoring engine tests."""
from datetime import date
from typing import Optional, Sequence

import pytest

from scoreboard.data_models.submission import AssetRecord, RatingRecord, SubmissionRecord
from scoreboard.services.configuration import ConfigurationService


# Reference week (2026): Fri Oct 16 opens the cycle, Thu Oct 22 closes it
FRIDAY = date(2026, 10, 16)
SATURDAY = date(2026, 10, 17)
SUNDAY = date(2026, 10, 18)
MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
WEDNESDAY = date(2026, 10, 21)
THURSDAY = date(2026, 10, 22)


def make_submission(participant_id: str, day: date, productivity: Optional[int] = None,
                    quality: Optional[int] = None, statics: int = 1,
                    video_durations: Sequence[Optional[float]] = ()) -> SubmissionRecord:
    """Build a submission; pass both productivity and quality to rate it."""
    assets = [AssetRecord.static() for _ in range(statics)]
    assets += [AssetRecord.video(d) for d in video_durations]
    rating = None
    if productivity is not None and quality is not None:
        rating = RatingRecord(productivity, quality)
    return SubmissionRecord(participant_id, day, tuple(assets), rating)


@pytest.fixture
def submission_factory():
    return make_submission


@pytest.fixture
def make_config():
    """ConfigurationService factory that ignores any SCOREBOARD_CONFIG_PATH in the environment."""
    def _make(overrides=None, config_path=""):
        return ConfigurationService(overrides=overrides, config_path=config_path)
    return _make
