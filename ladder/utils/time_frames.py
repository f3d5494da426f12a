"""
Time frame utilities for period-scoped rankings.

Resolves a period scope ("week", "month", "year", "all") plus a look-back
index into a start/end pair, and filters the game log to that range.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Tuple

from ladder.constants import TimeConstants
from ladder.data_models.games import GameRecord, as_utc
from ladder.utils.rating_exceptions import InvalidTimeFrameError

# Weeks start on Sunday
_SUNDAY = 6


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _shift_months(moment: datetime, months: int) -> datetime:
    """Move back by whole months, clamping the day to the target month."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    return moment.replace(year=year, month=month, day=min(moment.day, _days_in_month(year, month)))


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (datetime(year, month + 1, 1) - datetime(year, month, 1)).days


def get_time_frame_by_scope(
    scope: str,
    index: int = 0,
    now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """
    Get time frame boundaries for a scope and look-back index.

    Args:
        scope: "week", "month" or "year"; anything else means all time
        index: Offset index (0 = current, 1 = previous, etc.)
        now: Reference time, defaults to the current UTC time

    Returns:
        Tuple of (start, end). Calendar scopes end on their last microsecond;
        all time spans from the Unix epoch to now.

    Raises:
        InvalidTimeFrameError: If index is negative
    """
    if index < 0:
        raise InvalidTimeFrameError(scope, index)
    if now is None:
        now = datetime.now(timezone.utc)
    last_microsecond = timedelta(microseconds=1)

    if scope == 'week':
        anchor = now - timedelta(days=7 * index)
        days_since_sunday = (anchor.weekday() - _SUNDAY) % 7
        start = _start_of_day(anchor - timedelta(days=days_since_sunday))
        return start, start + timedelta(days=7) - last_microsecond

    if scope == 'month':
        anchor = _shift_months(now, index)
        start = _start_of_day(anchor.replace(day=1))
        end = start + timedelta(days=_days_in_month(start.year, start.month))
        return start, end - last_microsecond

    if scope == 'year':
        start = _start_of_day(now.replace(year=now.year - index, month=1, day=1))
        return start, start.replace(year=start.year + 1) - last_microsecond

    epoch = TimeConstants.EPOCH if now.tzinfo is not None else TimeConstants.EPOCH.replace(tzinfo=None)
    return epoch, now


def list_games_in_time_frame(
    games: Iterable[GameRecord],
    start_time: datetime,
    end_time: datetime
) -> List[GameRecord]:
    """
    Filter games played between two instants, both bounds included.

    Undated games cannot be placed in a period and are always excluded.
    """
    start_time = as_utc(start_time)
    end_time = as_utc(end_time)
    return [
        game for game in games
        if game.timestamp is not None and start_time <= as_utc(game.timestamp) <= end_time
    ]
