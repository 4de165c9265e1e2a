"""
Submission data models.

Immutable records for the raw snapshot supplied by the data-access layer:
assets (static images or videos), the reviewer's rating, and the daily
submission that ties them to a participant.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from scoreboard.utils.time_parser import parse_duration_to_seconds


class AssetKind(Enum):
    """Kind of creative asset"""
    STATIC = "static"
    VIDEO = "video"

    @classmethod
    def parse(cls, value: Any) -> "AssetKind":
        """Parse an asset kind, accepting the storage layer's 'image' alias."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ("static", "image"):
            return cls.STATIC
        if text == "video":
            return cls.VIDEO
        raise ValueError(f"Unknown asset kind: {value!r}")


@dataclass(frozen=True)
class AssetRecord:
    """Single uploaded asset. Duration (seconds) only applies to videos."""
    kind: AssetKind
    duration: Optional[float] = None

    def __post_init__(self):
        if self.kind is AssetKind.STATIC and self.duration is not None:
            raise ValueError("Static assets cannot carry a duration")
        if self.duration is not None and self.duration < 0:
            raise ValueError(f"Video duration cannot be negative: {self.duration}")

    @property
    def is_video(self) -> bool:
        return self.kind is AssetKind.VIDEO

    @classmethod
    def static(cls) -> "AssetRecord":
        return cls(AssetKind.STATIC)

    @classmethod
    def video(cls, duration: Optional[float]) -> "AssetRecord":
        return cls(AssetKind.VIDEO, duration)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetRecord":
        kind = AssetKind.parse(data.get("kind", data.get("asset_type")))
        if kind is AssetKind.STATIC:
            return cls(kind)
        return cls(kind, parse_duration_to_seconds(data.get("duration")))


@dataclass(frozen=True)
class RatingRecord:
    """Reviewer rating on the 1-5 integer scale."""
    productivity: int
    quality: int

    def __post_init__(self):
        for axis in ("productivity", "quality"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 5:
                raise ValueError(f"Rating {axis} must be an integer from 1 to 5, got {value!r}")

    @property
    def total(self) -> int:
        return self.productivity + self.quality

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RatingRecord":
        return cls(productivity=data["productivity"], quality=data["quality"])


@dataclass(frozen=True)
class SubmissionRecord:
    """One participant's submission for one calendar date."""
    participant_id: str
    date: date
    assets: Tuple[AssetRecord, ...] = field(default_factory=tuple)
    rating: Optional[RatingRecord] = None

    def __post_init__(self):
        # Accept any iterable of assets but store an immutable tuple
        if not isinstance(self.assets, tuple):
            object.__setattr__(self, "assets", tuple(self.assets))

    @property
    def is_rated(self) -> bool:
        return self.rating is not None

    @property
    def static_count(self) -> int:
        return sum(1 for asset in self.assets if not asset.is_video)

    @property
    def videos(self) -> List[AssetRecord]:
        return [asset for asset in self.assets if asset.is_video]

    @property
    def video_count(self) -> int:
        return len(self.videos)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionRecord":
        """
        Build a submission from a snapshot row.

        Accepts either ``participant_id`` or ``user_id``, ``date`` or
        ``submission_date`` (ISO string, date or datetime), an ``assets``
        list, and either a ``rating`` mapping or a ``ratings`` list (the
        first rating wins).
        """
        participant_id = data.get("participant_id", data.get("user_id"))
        if participant_id is None:
            raise ValueError("Submission row is missing a participant id")

        raw_date = data.get("date", data.get("submission_date"))
        if isinstance(raw_date, datetime):
            submission_date = raw_date.date()
        elif isinstance(raw_date, date):
            submission_date = raw_date
        elif isinstance(raw_date, str):
            submission_date = date.fromisoformat(raw_date[:10])
        else:
            raise ValueError(f"Submission row has an invalid date: {raw_date!r}")

        rating_data = data.get("rating")
        if rating_data is None:
            ratings = data.get("ratings") or []
            rating_data = ratings[0] if ratings else None

        return cls(
            participant_id=str(participant_id),
            date=submission_date,
            assets=tuple(AssetRecord.from_dict(a) for a in data.get("assets") or []),
            rating=RatingRecord.from_dict(rating_data) if rating_data else None,
        )
