"""
Rating Engine Module

Pure Elo calculations over a log of pool games. Every call recomputes from
the full game log; no rating state is kept between calls.

Key functionality:
- discover_players(): Ordered roster of every player in a valid game
- sort_games(): Chronological processing order, undated games first
- calc_elo_from_games(): Final rating per player, highest first
- calc_elo_history(): Rating trajectory with one snapshot per valid game
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ladder.config import Config
from ladder.constants import EloConstants
from ladder.data_models.games import GameRecord, RatingSnapshot, UserStats
from ladder.utils.elo import EloCalculator
from ladder.utils.logger import setup_logger

logger = setup_logger(__name__)


class RatingEngine:
    """
    Deterministic mapping from a game log to ratings.

    Games are applied in timestamp order. Elo updates do not commute, so
    the order (including where undated games land) decides the result.
    """

    @staticmethod
    def discover_players(games: Iterable[GameRecord]) -> List[str]:
        """
        Build the player roster in first-encounter order.

        Only games that can actually be processed contribute players, so a
        player seen only in a self-referential record never gets a rating.

        Args:
            games: Game records in input order

        Returns:
            Player ids, winner before loser within each game
        """
        players: Dict[str, None] = {}
        for game in games:
            if not game.is_valid:
                continue
            players.setdefault(game.winner_id, None)
            players.setdefault(game.loser_id, None)
        return list(players)

    @staticmethod
    def sort_games(games: Iterable[GameRecord]) -> List[GameRecord]:
        """Stable ascending sort by timestamp; undated games sort at the epoch."""
        return sorted(games, key=lambda game: game.sort_key)

    @staticmethod
    def _replay(
        sorted_games: List[GameRecord],
        players: List[str],
        k_factor: float
    ) -> Iterator[Tuple[GameRecord, Dict[str, float]]]:
        """Apply games in order, yielding the live ratings after each valid one."""
        ratings = {player_id: float(EloConstants.STARTING_ELO) for player_id in players}

        for game in sorted_games:
            if (not game.is_valid
                    or game.winner_id not in ratings
                    or game.loser_id not in ratings):
                logger.warning(
                    f"Skipping game that cannot be rated: winner={game.winner_id!r} "
                    f"loser={game.loser_id!r} timestamp={game.timestamp}"
                )
                continue

            ratings[game.winner_id], ratings[game.loser_id] = EloCalculator.apply_game(
                ratings[game.winner_id], ratings[game.loser_id], k_factor
            )
            yield game, ratings

    @staticmethod
    def calc_elo_from_games(
        games: Iterable[GameRecord],
        k_factor: Optional[float] = None
    ) -> List[UserStats]:
        """
        Calculate final Elo ratings for all players from a list of games.

        Args:
            games: Game records in any order
            k_factor: Learning rate, defaults to Config.K_FACTOR

        Returns:
            One UserStats per player, sorted by rating descending. Ratings
            are rounded to 2 decimals here and nowhere else.

        Raises:
            InvalidLearningRateError: If the K-factor is not above 0
        """
        k_factor = EloCalculator.validate_k_factor(
            Config.K_FACTOR if k_factor is None else k_factor
        )
        games = list(games)
        players = RatingEngine.discover_players(games)
        ratings = {player_id: float(EloConstants.STARTING_ELO) for player_id in players}

        processed = 0
        for _, current in RatingEngine._replay(RatingEngine.sort_games(games), players, k_factor):
            ratings = current
            processed += 1

        logger.debug(f"Rated {len(players)} players from {processed}/{len(games)} games (K={k_factor})")

        ranked = sorted(players, key=lambda player_id: ratings[player_id], reverse=True)
        return [
            UserStats(user_id=player_id, elo=EloCalculator.round_rating(ratings[player_id]))
            for player_id in ranked
        ]

    @staticmethod
    def calc_elo_history(
        games: Iterable[GameRecord],
        k_factor: Optional[float] = None,
        now: Optional[datetime] = None
    ) -> List[RatingSnapshot]:
        """
        Calculate the rating trajectory, one snapshot per valid game.

        The first snapshot holds every player at the starting rating and is
        stamped with the first game's timestamp. Every snapshot carries all
        players, including those who have not played yet. Skipped games do
        not produce a snapshot.

        Args:
            games: Game records in any order
            k_factor: Learning rate, defaults to Config.K_FACTOR
            now: Stamp for undated snapshots, defaults to the current UTC time

        Returns:
            Snapshots in processing order; empty when no game is valid

        Raises:
            InvalidLearningRateError: If the K-factor is not above 0
        """
        k_factor = EloCalculator.validate_k_factor(
            Config.K_FACTOR if k_factor is None else k_factor
        )
        if now is None:
            now = datetime.now(timezone.utc)

        games = list(games)
        players = RatingEngine.discover_players(games)
        if not players:
            return []

        sorted_games = RatingEngine.sort_games(games)
        first_stamp = sorted_games[0].timestamp
        history = [
            RatingSnapshot(
                timestamp=first_stamp if first_stamp is not None else now,
                ratings={player_id: float(EloConstants.STARTING_ELO) for player_id in players}
            )
        ]

        for game, ratings in RatingEngine._replay(sorted_games, players, k_factor):
            history.append(RatingSnapshot(
                timestamp=game.timestamp if game.timestamp is not None else now,
                ratings=dict(ratings)
            ))

        return history
