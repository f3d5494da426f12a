"""
Custom exceptions for the rating core with user-friendly error messages.
"""

class RatingException(Exception):
    """Base exception for rating and leaderboard errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class InvalidLearningRateError(RatingException):
    """Raised when the K-factor would freeze or invert ratings."""
    def __init__(self, k_factor):
        super().__init__(
            f"Invalid learning rate {k_factor!r}: K-factor must be a finite number greater than 0",
            "❌ Ratings are misconfigured. Please contact an admin."
        )
        self.k_factor = k_factor

class InvalidLeaderboardParameterError(RatingException):
    """Raised when a leaderboard display parameter is out of range."""
    def __init__(self, parameter: str, value, reason: str):
        super().__init__(
            f"Invalid leaderboard parameter {parameter}={value!r}: {reason}",
            "❌ The leaderboard could not be displayed with these settings."
        )
        self.parameter = parameter

class InvalidTimeFrameError(RatingException):
    """Raised when a time frame cannot be resolved."""
    def __init__(self, scope: str, index: int):
        super().__init__(
            f"Invalid time frame {scope!r} with index {index}: index must not be negative",
            "❌ That time period is not available!"
        )
