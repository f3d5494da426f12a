"""
Services package for the pool ladder.

Leaderboard composition, player stats and cached rating access.
"""

from .leaderboard import LeaderboardComposer
from .profile import PlayerStatsService
from .rating_cache import CachedRatingService

__all__ = ['LeaderboardComposer', 'PlayerStatsService', 'CachedRatingService']
