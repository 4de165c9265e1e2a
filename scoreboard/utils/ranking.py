"""
Shared ranking utilities for the leaderboard and weekly services.

Keeps the ordering rule in one place so every ranked view agrees:
avg_total descending, then submission_count descending, then
participant_id ascending. Ranks are strict ordinals (1..N, no shared ranks).
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from scoreboard.data_models.leaderboard import LeaderboardEntry, Trend


class RankingUtility:
    """Shared ranking logic for consistent ordering across services."""

    @staticmethod
    def sort_key(entry: LeaderboardEntry) -> Tuple[float, int, str]:
        """Sort key implementing the leaderboard ordering and tie-break."""
        return (-entry.avg_total, -entry.submission_count, entry.participant_id)

    @staticmethod
    def assign_ranks(entries: Iterable[LeaderboardEntry]) -> List[LeaderboardEntry]:
        """
        Order entries and number them 1..N.

        Exact ties on avg_total and submission_count still get distinct
        ranks, decided by participant_id.
        """
        ordered = sorted(entries, key=RankingUtility.sort_key)
        return [replace(entry, rank=position) for position, entry in enumerate(ordered, start=1)]

    @staticmethod
    def by_participant(entries: Iterable[LeaderboardEntry]) -> Dict[str, LeaderboardEntry]:
        return {entry.participant_id: entry for entry in entries}

    @staticmethod
    def trend_between(current_rank: int, previous_rank: Optional[int]) -> Trend:
        """Smaller rank numbers are better; no previous rank means no movement."""
        if previous_rank is None or current_rank == previous_rank:
            return Trend.SAME
        if current_rank < previous_rank:
            return Trend.UP
        return Trend.DOWN

    @staticmethod
    def validate_ranks(entries: List[LeaderboardEntry]) -> bool:
        """Check that ranks form the permutation 1..N in list order."""
        return [entry.rank for entry in entries] == list(range(1, len(entries) + 1))

