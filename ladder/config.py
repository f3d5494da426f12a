import os
from datetime import timedelta
from dotenv import load_dotenv

from ladder.constants import LeaderboardConstants

load_dotenv()

class Config:
    """Ladder configuration settings"""

    # Elo calculation settings
    K_FACTOR = float(os.getenv('LADDER_K_FACTOR', '10'))

    # Leaderboard settings
    ACTIVITY_WINDOW_DAYS = int(os.getenv('LADDER_ACTIVITY_WINDOW_DAYS', LeaderboardConstants.DEFAULT_ACTIVITY_WINDOW_DAYS))
    LEADERBOARD_DISPLAY_CAP = int(os.getenv('LADDER_LEADERBOARD_DISPLAY_CAP', LeaderboardConstants.DEFAULT_DISPLAY_CAP))

    # Dashboard stats settings
    RECENT_ACTIVITY_DAYS = int(os.getenv('LADDER_RECENT_ACTIVITY_DAYS', '7'))
    RECENT_GAMES_LIMIT = int(os.getenv('LADDER_RECENT_GAMES_LIMIT', '20'))

    # Logging settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LADDER_LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LADDER_LOG_TO_FILE', 'False').lower() == 'true'

    @classmethod
    def activity_window(cls) -> timedelta:
        """Get the recency window that separates active from dormant players"""
        return timedelta(days=cls.ACTIVITY_WINDOW_DAYS)

    @classmethod
    def recent_activity_window(cls) -> timedelta:
        """Get the window used for the 'recent games' dashboard counter"""
        return timedelta(days=cls.RECENT_ACTIVITY_DAYS)

    @classmethod
    def validate(cls):
        """Validate that configuration values are usable"""
        if not cls.K_FACTOR > 0:
            raise ValueError("LADDER_K_FACTOR must be greater than 0")
        if cls.ACTIVITY_WINDOW_DAYS < 0:
            raise ValueError("LADDER_ACTIVITY_WINDOW_DAYS must not be negative")
        if cls.LEADERBOARD_DISPLAY_CAP < 1:
            raise ValueError("LADDER_LEADERBOARD_DISPLAY_CAP must be at least 1")
        if cls.RECENT_GAMES_LIMIT < 0:
            raise ValueError("LADDER_RECENT_GAMES_LIMIT must not be negative")
