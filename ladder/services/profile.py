"""
Player stats service for the pool ladder dashboard.

Summarizes one player's games: record, win rate, current streak and recent
activity.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from ladder.config import Config
from ladder.data_models.games import GameRecord, as_utc
from ladder.data_models.profile import GameResult, PlayerStats
from ladder.utils.logger import setup_logger

logger = setup_logger(__name__)


class PlayerStatsService:
    """Computes dashboard stats for a player from the game log."""

    def __init__(self, recent_window: Optional[timedelta] = None, recent_limit: Optional[int] = None):
        self.recent_window = Config.recent_activity_window() if recent_window is None else recent_window
        self.recent_limit = Config.RECENT_GAMES_LIMIT if recent_limit is None else recent_limit

    def get_player_results(self, games: Iterable[GameRecord], player_id: str) -> List[GameResult]:
        """All of a player's games as results, newest first."""
        own_games = [
            game for game in games
            if game.is_valid and player_id in (game.winner_id, game.loser_id)
        ]
        own_games.sort(key=lambda game: game.sort_key, reverse=True)

        return [
            GameResult(
                opponent_id=game.loser_id if game.winner_id == player_id else game.winner_id,
                result='win' if game.winner_id == player_id else 'loss',
                timestamp=game.timestamp
            )
            for game in own_games
        ]

    @staticmethod
    def calculate_streak(results: List[GameResult]) -> int:
        """Current streak from newest-first results: positive for wins, negative for losses."""
        if not results:
            return 0

        streak_type = results[0].result
        streak_count = 0
        for game_result in results:
            if game_result.result != streak_type:
                break
            streak_count += 1
        return streak_count if streak_type == 'win' else -streak_count

    @staticmethod
    def _format_current_streak_value(current_streak: int) -> str:
        """Format current streak value for display."""
        if current_streak > 0:
            return f"W{current_streak}"  # Win streak: W3, W1, etc.
        elif current_streak < 0:
            return f"L{abs(current_streak)}"  # Loss streak: L1, L4, etc.
        return "W0"  # No games yet

    def get_player_stats(
        self,
        games: Iterable[GameRecord],
        player_id: str,
        now: Optional[datetime] = None
    ) -> PlayerStats:
        """
        Build the dashboard summary for a player.

        Args:
            games: Full game log
            player_id: Player to summarize
            now: Reference time for the recent-activity window

        Returns:
            PlayerStats; a player with no games gets zeros and a W0 streak
        """
        if now is None:
            now = datetime.now(timezone.utc)

        results = self.get_player_results(games, player_id)
        wins = sum(1 for game_result in results if game_result.result == 'win')
        losses = len(results) - wins
        total = len(results)

        # Half-up rounding to a whole percent
        win_rate = math.floor(wins * 100 / total + 0.5) if total > 0 else 0

        recent_cutoff = as_utc(now) - self.recent_window
        recent_games = sum(
            1 for game_result in results
            if game_result.timestamp is not None and as_utc(game_result.timestamp) >= recent_cutoff
        )

        logger.debug(f"Stats for {player_id}: {wins}W/{losses}L over {total} games")

        return PlayerStats(
            player_id=player_id,
            total_games=total,
            wins=wins,
            losses=losses,
            win_rate=win_rate,
            current_streak=self._format_current_streak_value(self.calculate_streak(results)),
            recent_games=recent_games,
            recent=results[:self.recent_limit]
        )
