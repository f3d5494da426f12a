"""
Cached wrapper for RatingEngine.

Memoizes final ratings and rating trajectories keyed by the exact game log
and K-factor. Appending or editing a game changes the key, so a cached
result can never describe an outdated log.
"""

import time
from datetime import datetime
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from ladder.config import Config
from ladder.constants import CacheConstants
from ladder.data_models.games import GameRecord, RatingSnapshot, UserStats
from ladder.operations.rating_engine import RatingEngine
from ladder.utils.elo import EloCalculator
from ladder.utils.logger import setup_logger

logger = setup_logger(__name__)


class CachedRatingService:
    """Wrapper for RatingEngine with TTL-based caching."""

    def __init__(self, ttl: float = CacheConstants.DEFAULT_CACHE_TTL,
                 max_size: int = CacheConstants.DEFAULT_MAX_CACHE_SIZE):
        self._ttl = ttl
        self._cache_max_size = max_size
        self._cache: Dict[Hashable, Tuple[float, Any]] = {}  # key -> (timestamp, result)
        self.hits = 0
        self.misses = 0

    def _lookup(self, key: Hashable):
        if key in self._cache:
            timestamp, data = self._cache[key]
            if time.time() - timestamp < self._ttl:
                self.hits += 1
                return data
            self._cache.pop(key, None)
        self.misses += 1
        return None

    def _store(self, key: Hashable, data: Any):
        self._cache[key] = (time.time(), data)
        if len(self._cache) > self._cache_max_size:
            self._cleanup_cache()

    def get_ratings(self, games: Iterable[GameRecord], k_factor: Optional[float] = None) -> List[UserStats]:
        """Final ratings for the log, computed once per distinct (log, K)."""
        games = tuple(games)
        k_factor = EloCalculator.validate_k_factor(Config.K_FACTOR if k_factor is None else k_factor)
        key = ('ratings', games, k_factor)

        cached = self._lookup(key)
        if cached is not None:
            logger.debug(f"Cache hit for ratings over {len(games)} games")
            return list(cached)

        ratings = RatingEngine.calc_elo_from_games(games, k_factor)
        self._store(key, ratings)
        return list(ratings)

    def get_history(
        self,
        games: Iterable[GameRecord],
        k_factor: Optional[float] = None,
        now: Optional[datetime] = None
    ) -> List[RatingSnapshot]:
        """Rating trajectory for the log, computed once per distinct (log, K)."""
        games = tuple(games)
        k_factor = EloCalculator.validate_k_factor(Config.K_FACTOR if k_factor is None else k_factor)

        # Undated games are stamped with `now`, which then becomes part of the key.
        # Without an explicit `now` such a log can never hit, so it is not stored.
        has_undated = any(game.timestamp is None for game in games)
        if has_undated and now is None:
            return RatingEngine.calc_elo_history(games, k_factor)
        key = ('history', games, k_factor, now if has_undated else None)

        cached = self._lookup(key)
        if cached is not None:
            logger.debug(f"Cache hit for history over {len(games)} games")
            return self._copy_history(cached)

        history = RatingEngine.calc_elo_history(games, k_factor, now=now)
        self._store(key, self._copy_history(history))
        return history

    @staticmethod
    def _copy_history(history: List[RatingSnapshot]) -> List[RatingSnapshot]:
        """Snapshots hold mutable rating dicts; never share them with callers."""
        return [RatingSnapshot(timestamp=s.timestamp, ratings=dict(s.ratings)) for s in history]

    def invalidate_all(self):
        """Clear entire cache."""
        logger.info("Clearing entire rating cache")
        self._cache.clear()

    def _cleanup_cache(self):
        """Remove oldest cache entries to stay within size limit."""
        # Sort by timestamp and keep newest entries
        sorted_items = sorted(self._cache.items(), key=lambda x: x[1][0], reverse=True)
        self._cache = dict(sorted_items[:self._cache_max_size])
        logger.debug(f"Cleaned rating cache, kept {len(self._cache)} entries")
