"""
Leaderboard service for the pool ladder.

Combines final ratings with recency data into a partitioned leaderboard:
active players ranked by rating, dormant players listed without a rank.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
import logging

from ladder.config import Config
from ladder.data_models.games import GameRecord, UserStats, as_utc
from ladder.data_models.leaderboard import LeaderboardView, RankEntry
from ladder.utils.rating_exceptions import InvalidLeaderboardParameterError

logger = logging.getLogger(__name__)


class LeaderboardComposer:
    """Builds display-ready rankings from final ratings and the game log."""

    def __init__(self, activity_window: Optional[timedelta] = None, display_cap: Optional[int] = None):
        self.activity_window = Config.activity_window() if activity_window is None else activity_window
        self.display_cap = Config.LEADERBOARD_DISPLAY_CAP if display_cap is None else display_cap

        if self.activity_window < timedelta(0):
            raise InvalidLeaderboardParameterError(
                'activity_window', self.activity_window, 'window must not be negative'
            )
        if isinstance(self.display_cap, bool) or not isinstance(self.display_cap, int) or self.display_cap < 1:
            raise InvalidLeaderboardParameterError(
                'display_cap', self.display_cap, 'cap must be a positive integer'
            )

    @staticmethod
    def last_played_by_player(games: Iterable[GameRecord]) -> Dict[str, datetime]:
        """
        Find the most recent game timestamp for every player.

        Scans the whole log newest first and keeps the first hit per player,
        as winner or loser. Undated games count as played at the epoch.
        """
        last_played: Dict[str, datetime] = {}
        for game in sorted(games, key=lambda g: g.sort_key, reverse=True):
            for player_id in (game.winner_id, game.loser_id):
                if player_id and player_id not in last_played:
                    last_played[player_id] = game.sort_key
        return last_played

    def is_active(self, last_played: Optional[datetime], now: datetime) -> bool:
        """A player is active when their last game falls inside the window, boundary included."""
        if last_played is None:
            return False
        return as_utc(last_played) >= as_utc(now) - self.activity_window

    def classify(
        self,
        final_ratings: List[UserStats],
        games: Iterable[GameRecord],
        now: Optional[datetime] = None
    ) -> List[RankEntry]:
        """
        Rank active players and list dormant ones.

        Active players take ranks 1..N in final-ratings order. Equal ratings
        are not further disambiguated: they keep their final-ratings position.
        Dormant players follow, sorted by rating with no rank.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        last_played = self.last_played_by_player(games)

        active: List[RankEntry] = []
        dormant: List[RankEntry] = []
        for stats in final_ratings:
            played_at = last_played.get(stats.user_id)
            if self.is_active(played_at, now):
                active.append(RankEntry(
                    player_id=stats.user_id,
                    rating=stats.elo,
                    is_active=True,
                    rank=len(active) + 1,
                    last_played=played_at
                ))
            else:
                dormant.append(RankEntry(
                    player_id=stats.user_id,
                    rating=stats.elo,
                    is_active=False,
                    rank=None,
                    last_played=played_at
                ))

        dormant.sort(key=lambda entry: entry.rating, reverse=True)
        return active + dormant

    def compose(
        self,
        final_ratings: List[UserStats],
        games: Iterable[GameRecord],
        requester_id: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> LeaderboardView:
        """
        Build the capped leaderboard.

        Shows the top `display_cap` active players and every dormant player.
        A requester who is active but ranked below the cap is returned as
        `requester_entry` with their true rank. A requester without a rating
        appears nowhere.
        """
        entries = self.classify(final_ratings, games, now)
        active = [entry for entry in entries if entry.is_active]
        dormant = [entry for entry in entries if not entry.is_active]

        requester_entry = None
        if requester_id is not None:
            for entry in active[self.display_cap:]:
                if entry.player_id == requester_id:
                    requester_entry = entry
                    break

        logger.debug(
            f"Leaderboard: {len(active)} active, {len(dormant)} dormant, "
            f"requester below cap: {requester_entry is not None}"
        )

        return LeaderboardView(
            active=active[:self.display_cap],
            dormant=dormant,
            requester_entry=requester_entry,
            total_active=len(active),
            display_cap=self.display_cap
        )

    @staticmethod
    def chart_player_ids(entries: List[RankEntry]) -> List[str]:
        """Players to draw in the rating chart: every active player, best first."""
        return [entry.player_id for entry in entries if entry.is_active]
