"""
Game and rating data models for the pool ladder rating core.

Provides immutable data transfer objects for game records, final ratings
and rating trajectory snapshots.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ladder.constants import TimeConstants


@dataclass(frozen=True)
class GameRecord:
    """One completed match."""
    winner_id: str
    loser_id: str
    timestamp: Optional[datetime] = None

    @property
    def is_valid(self) -> bool:
        """A game counts only between two distinct, non-empty player ids."""
        return bool(self.winner_id) and bool(self.loser_id) and self.winner_id != self.loser_id

    @property
    def sort_key(self) -> datetime:
        """Timestamp used for ordering; undated games sort at the Unix epoch."""
        return as_utc(self.timestamp) if self.timestamp is not None else TimeConstants.EPOCH


@dataclass(frozen=True)
class UserStats:
    """Single row of the final ratings."""
    user_id: str
    elo: float
    dead: bool = False  # Reserved for retired players, always False


@dataclass(frozen=True)
class RatingSnapshot:
    """Ratings of every known player at one point of the trajectory."""
    timestamp: datetime
    ratings: Dict[str, float] = field(default_factory=dict)

    def as_point(self) -> Dict[str, Any]:
        """Flat chart point: the timestamp plus one numeric field per player."""
        point: Dict[str, Any] = {'timestamp': self.timestamp}
        point.update(self.ratings)
        return point


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so dated games always compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
