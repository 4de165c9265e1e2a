"""
Temporal scoring and ranking engine for daily creative-work submissions.

Turns submission/asset/rating snapshots into time-windowed leaderboards,
weekly rank movement, suggested scores and chart positions.
"""

__version__ = "1.0.0"
