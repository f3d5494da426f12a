"""
Profile data models for the pool ladder rating core.

Provides immutable data transfer objects for per-player dashboard stats.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class GameResult:
    """Single game from one player's point of view."""
    opponent_id: str
    result: str  # 'win' or 'loss'
    timestamp: Optional[datetime]


@dataclass(frozen=True)
class PlayerStats:
    """Win/loss summary for a player."""
    player_id: str
    total_games: int
    wins: int
    losses: int
    win_rate: int  # Whole percent
    current_streak: str  # W3, L1, etc. W0 if no games
    recent_games: int  # Games inside the recent-activity window
    recent: List[GameResult]  # Newest first
