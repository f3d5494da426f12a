import math
from typing import Tuple

from ladder.constants import EloConstants
from ladder.utils.rating_exceptions import InvalidLearningRateError

class EloCalculator:
    """Handles Elo rating calculations for the pool ladder"""

    @staticmethod
    def validate_k_factor(k_factor: float) -> float:
        """
        Reject learning rates that would freeze or invert ratings

        Args:
            k_factor: Learning rate applied to each game

        Returns:
            The K-factor as a float

        Raises:
            InvalidLearningRateError: If K is not a finite number above 0
        """
        if isinstance(k_factor, bool):
            raise InvalidLearningRateError(k_factor)
        try:
            value = float(k_factor)
        except (TypeError, ValueError):
            raise InvalidLearningRateError(k_factor)
        if not math.isfinite(value) or value <= 0:
            raise InvalidLearningRateError(k_factor)
        return value

    @staticmethod
    def calculate_expected_score(rating_a: float, rating_b: float) -> float:
        """
        Calculate the expected score for player A against player B

        Args:
            rating_a: Player A's current Elo rating
            rating_b: Player B's current Elo rating

        Returns:
            Expected score (0.0 to 1.0) for player A
        """
        return 1 / (1 + 10 ** ((rating_b - rating_a) / EloConstants.RATING_SCALE))

    @staticmethod
    def calculate_rating_delta(winner_rating: float, loser_rating: float,
                               k_factor: float) -> float:
        """
        Calculate the rating points that move from loser to winner

        Args:
            winner_rating: Winner's rating before the game
            loser_rating: Loser's rating before the game
            k_factor: Learning rate

        Returns:
            Points gained by the winner, equal to the points lost by the loser
        """
        expected_winner = EloCalculator.calculate_expected_score(winner_rating, loser_rating)
        return k_factor * (EloConstants.WIN_SCORE - expected_winner)

    @staticmethod
    def apply_game(winner_rating: float, loser_rating: float,
                   k_factor: float) -> Tuple[float, float]:
        """
        Apply one decisive game to both ratings

        Args:
            winner_rating: Winner's rating before the game
            loser_rating: Loser's rating before the game
            k_factor: Learning rate

        Returns:
            Tuple of (new_winner_rating, new_loser_rating), unrounded
        """
        delta = EloCalculator.calculate_rating_delta(winner_rating, loser_rating, k_factor)
        return winner_rating + delta, loser_rating - delta

    @staticmethod
    def round_rating(rating: float) -> float:
        """Round a rating for display; never feed the result back into updates"""
        return round(rating, EloConstants.OUTPUT_PRECISION)
