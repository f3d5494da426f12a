"""
Leaderboard data models for the pool ladder rating core.

Provides immutable data transfer objects for the partitioned leaderboard.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class RankEntry:
    """Single leaderboard row."""
    player_id: str
    rating: float
    is_active: bool
    rank: Optional[int]  # None for dormant players
    last_played: Optional[datetime] = None


@dataclass(frozen=True)
class LeaderboardView:
    """Display-ready leaderboard split into active and dormant sections."""
    active: List[RankEntry]
    dormant: List[RankEntry]
    requester_entry: Optional[RankEntry]  # Set when the requester ranks below the cap
    total_active: int
    display_cap: int
