"""
Tests for player dashboard stats.

Run with: pytest tests/test_profile.py -v
"""

from datetime import timedelta

import pytest

from ladder.data_models.games import GameRecord
from ladder.data_models.profile import GameResult
from ladder.services.profile import PlayerStatsService


def test_record_and_win_rate(now):
    games = [
        GameRecord('alice', 'bob', now - timedelta(days=10)),
        GameRecord('bob', 'alice', now - timedelta(days=9)),
        GameRecord('alice', 'carol', now - timedelta(days=1)),
        GameRecord('carol', 'bob', now - timedelta(days=1)),
    ]
    stats = PlayerStatsService().get_player_stats(games, 'alice', now=now)

    assert stats.total_games == 3
    assert stats.wins == 2
    assert stats.losses == 1
    assert stats.win_rate == 67
    assert stats.current_streak == 'W1'
    assert stats.recent_games == 1


@pytest.mark.parametrize("wins,losses,expected", [(1, 7, 13), (1, 2, 33), (0, 4, 0), (5, 0, 100)])
def test_win_rate_rounds_half_up(now, wins, losses, expected):
    games = [GameRecord('alice', 'bob', now - timedelta(hours=i)) for i in range(wins)]
    games += [GameRecord('bob', 'alice', now - timedelta(days=1, hours=i)) for i in range(losses)]
    assert PlayerStatsService().get_player_stats(games, 'alice', now=now).win_rate == expected


def test_loss_streak(now):
    games = [
        GameRecord('alice', 'bob', now - timedelta(days=5)),
        GameRecord('bob', 'alice', now - timedelta(days=3)),
        GameRecord('carol', 'alice', now - timedelta(days=2)),
        GameRecord('bob', 'alice', now - timedelta(days=1)),
    ]
    assert PlayerStatsService().get_player_stats(games, 'alice', now=now).current_streak == 'L3'


def test_player_without_games(now):
    stats = PlayerStatsService().get_player_stats([GameRecord('bob', 'carol', now)], 'alice', now=now)
    assert stats.total_games == 0
    assert stats.win_rate == 0
    assert stats.current_streak == 'W0'
    assert stats.recent == []


def test_self_games_ignored(now):
    games = [GameRecord('alice', 'alice', now), GameRecord('alice', 'bob', now - timedelta(days=1))]
    stats = PlayerStatsService().get_player_stats(games, 'alice', now=now)
    assert stats.total_games == 1


def test_recent_list_newest_first_and_capped(now):
    games = [GameRecord('alice', f'opponent{i}', now - timedelta(days=i)) for i in range(30)]
    stats = PlayerStatsService(recent_limit=5).get_player_stats(games, 'alice', now=now)

    assert len(stats.recent) == 5
    assert stats.recent[0] == GameResult(opponent_id='opponent0', result='win', timestamp=now)
    assert [r.opponent_id for r in stats.recent] == [f'opponent{i}' for i in range(5)]


def test_recent_games_window_inclusive(now):
    games = [
        GameRecord('alice', 'bob', now - timedelta(days=7)),
        GameRecord('alice', 'bob', now - timedelta(days=7, seconds=1)),
        GameRecord('alice', 'bob', None),
    ]
    stats = PlayerStatsService(recent_window=timedelta(days=7)).get_player_stats(games, 'alice', now=now)
    assert stats.recent_games == 1


def test_streak_from_results():
    results = [GameResult('bob', 'win', None), GameResult('bob', 'win', None), GameResult('bob', 'loss', None)]
    assert PlayerStatsService.calculate_streak(results) == 2
    assert PlayerStatsService.calculate_streak([]) == 0
