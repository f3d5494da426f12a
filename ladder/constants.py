"""
Ladder-wide constants for the pool ladder rating core.

This module contains the magic numbers used throughout the codebase
to improve maintainability and clarity.
"""

from datetime import datetime, timezone


class EloConstants:
    """Constants related to Elo calculations."""

    # Starting Elo for new players
    STARTING_ELO = 1500

    # Logistic scale of the expected score formula
    RATING_SCALE = 400

    # Decimal places kept in published ratings
    OUTPUT_PRECISION = 2

    # Actual score of the winner of a decisive game
    WIN_SCORE = 1.0


class TimeConstants:
    """Constants for ordering games in time."""

    # Undated games sort as if played at the Unix epoch
    EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class LeaderboardConstants:
    """Constants for leaderboard displays."""

    # Default number of active players shown before truncation
    DEFAULT_DISPLAY_CAP = 10

    # Days without a game before a player is considered dormant
    DEFAULT_ACTIVITY_WINDOW_DAYS = 21


class CacheConstants:
    """Constants for caching behavior."""

    # Default TTL for cached rating results (seconds)
    DEFAULT_CACHE_TTL = 180  # 3 minutes

    # Maximum cache size (number of entries)
    DEFAULT_MAX_CACHE_SIZE = 64
