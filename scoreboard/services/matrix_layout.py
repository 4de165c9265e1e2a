"""
Matrix layout engine for the productivity/quality chart.

Places every ranked participant on a square plot with productivity on the
x axis and quality on the y axis (screen y grows downward, so higher quality
plots higher). Participants are snapped to the nearest integer grid cell;
several participants in one cell are spread on a circle around the cell
centre, starting straight up and going clockwise.

Layout guarantees:
- Members of different cells never overlap: the grid spacing is required to
  exceed three times the largest spread radius
- Members of one cell never share a point when the cell holds 2+ people
- Positions depend only on the grouped set; members of a cell are ordered
  by participant_id before angles are handed out
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from scoreboard.constants import MatrixConstants
from scoreboard.data_models.leaderboard import LeaderboardEntry, PlacedNode
from scoreboard.utils.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

# (max group size or None for any size, radius)
RadiusStep = Tuple[Optional[int], float]


@dataclass(frozen=True)
class ChartGeometry:
    """Chart canvas size and the padding around the plot area."""
    width: float = MatrixConstants.CHART_WIDTH
    height: float = MatrixConstants.CHART_HEIGHT
    padding_top: float = MatrixConstants.PADDING_TOP
    padding_right: float = MatrixConstants.PADDING_RIGHT
    padding_bottom: float = MatrixConstants.PADDING_BOTTOM
    padding_left: float = MatrixConstants.PADDING_LEFT

    def __post_init__(self):
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise InvalidConfigurationError(
                'matrix.padding', f"padding leaves no plot area in a {self.width}x{self.height} chart"
            )

    @property
    def plot_left(self) -> float:
        return self.padding_left

    @property
    def plot_right(self) -> float:
        return self.width - self.padding_right

    @property
    def plot_top(self) -> float:
        return self.padding_top

    @property
    def plot_bottom(self) -> float:
        return self.height - self.padding_bottom

    @property
    def plot_width(self) -> float:
        return self.plot_right - self.plot_left

    @property
    def plot_height(self) -> float:
        return self.plot_bottom - self.plot_top

    @property
    def grid_spacing(self) -> float:
        """Smallest distance between two neighbouring cell centres."""
        steps = MatrixConstants.MAX_SCORE - MatrixConstants.MIN_SCORE
        return min(self.plot_width, self.plot_height) / steps

    def score_to_x(self, productivity: float) -> float:
        span = MatrixConstants.MAX_SCORE - MatrixConstants.MIN_SCORE
        return self.plot_left + (productivity - MatrixConstants.MIN_SCORE) / span * self.plot_width

    def score_to_y(self, quality: float) -> float:
        span = MatrixConstants.MAX_SCORE - MatrixConstants.MIN_SCORE
        return self.plot_bottom - (quality - MatrixConstants.MIN_SCORE) / span * self.plot_height

    @classmethod
    def from_config(cls, config_service) -> "ChartGeometry":
        padding = config_service.get('matrix.padding', {}) or {}
        return cls(
            width=config_service.get('matrix.width', MatrixConstants.CHART_WIDTH),
            height=config_service.get('matrix.height', MatrixConstants.CHART_HEIGHT),
            padding_top=padding.get('top', MatrixConstants.PADDING_TOP),
            padding_right=padding.get('right', MatrixConstants.PADDING_RIGHT),
            padding_bottom=padding.get('bottom', MatrixConstants.PADDING_BOTTOM),
            padding_left=padding.get('left', MatrixConstants.PADDING_LEFT),
        )


class MatrixLayoutEngine:
    """Computes collision-free chart positions for ranked entries."""

    def __init__(self, geometry: Optional[ChartGeometry] = None,
                 spread_radii: Optional[Sequence[RadiusStep]] = None, config_service=None):
        if geometry is None:
            geometry = ChartGeometry.from_config(config_service) if config_service else ChartGeometry()
        if spread_radii is None:
            spread_radii = MatrixConstants.SPREAD_RADII
            if config_service is not None:
                spread_radii = config_service.get('matrix.spread_radii', spread_radii)

        self.geometry = geometry
        self.spread_radii: List[RadiusStep] = self._validate_radii(spread_radii)

        max_radius = max(radius for _, radius in self.spread_radii)
        if geometry.grid_spacing <= 3 * max_radius:
            raise InvalidConfigurationError(
                'matrix.spread_radii',
                f"grid spacing {geometry.grid_spacing:.1f} must exceed three times the largest "
                f"spread radius ({max_radius})"
            )

    @staticmethod
    def _validate_radii(spread_radii: Sequence[RadiusStep]) -> List[RadiusStep]:
        steps = [(None if size is None else int(size), float(radius)) for size, radius in spread_radii]
        if not steps or steps[-1][0] is not None:
            raise InvalidConfigurationError('matrix.spread_radii', "the last step must cover any group size")

        previous_size = 1
        for size, radius in steps:
            if radius <= 0:
                raise InvalidConfigurationError('matrix.spread_radii', f"radius {radius} must be positive")
            if size is not None:
                if size <= previous_size:
                    raise InvalidConfigurationError(
                        'matrix.spread_radii', "group size limits must be increasing and above 1"
                    )
                previous_size = size
        return steps

    @staticmethod
    def grid_cell(productivity: float, quality: float) -> Tuple[int, int]:
        """Round each axis half-up to the nearest integer and clamp to the score range."""
        def snap(value: float) -> int:
            rounded = math.floor(value + 0.5)
            return max(MatrixConstants.MIN_SCORE, min(MatrixConstants.MAX_SCORE, rounded))
        return snap(productivity), snap(quality)

    def spread_radius(self, group_size: int) -> float:
        for max_size, radius in self.spread_radii:
            if max_size is None or group_size <= max_size:
                return radius
        return self.spread_radii[-1][1]

    def layout(self, entries: Sequence[LeaderboardEntry]) -> List[PlacedNode]:
        """
        Place every entry on the chart.

        Args:
            entries: Ranked entries (any object with participant_id,
                avg_productivity and avg_quality works)

        Returns:
            One PlacedNode per entry, in input order
        """
        groups: Dict[Tuple[int, int], List[LeaderboardEntry]] = defaultdict(list)
        seen = set()
        for entry in entries:
            if entry.participant_id in seen:
                raise ValueError(f"Participant {entry.participant_id} appears more than once")
            seen.add(entry.participant_id)
            groups[self.grid_cell(entry.avg_productivity, entry.avg_quality)].append(entry)

        placed: Dict[str, PlacedNode] = {}
        for cell, members in groups.items():
            members = sorted(members, key=lambda e: e.participant_id)
            center_x = self.geometry.score_to_x(cell[0])
            center_y = self.geometry.score_to_y(cell[1])

            if len(members) == 1:
                placed[members[0].participant_id] = PlacedNode(
                    members[0].participant_id, center_x, center_y, cell
                )
                continue

            radius = self.spread_radius(len(members))
            angle_step = 2 * math.pi / len(members)
            start_angle = -math.pi / 2  # straight up on screen

            for index, member in enumerate(members):
                angle = start_angle + index * angle_step
                placed[member.participant_id] = PlacedNode(
                    member.participant_id,
                    center_x + math.cos(angle) * radius,
                    center_y + math.sin(angle) * radius,
                    cell,
                )

        crowded = sum(1 for members in groups.values() if len(members) > 1)
        logger.debug(f"Placed {len(placed)} nodes in {len(groups)} cells ({crowded} shared)")
        return [placed[entry.participant_id] for entry in entries]
