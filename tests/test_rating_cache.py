"""
Tests for the cached rating service.

Run with: pytest tests/test_rating_cache.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from ladder.data_models.games import GameRecord
from ladder.operations.rating_engine import RatingEngine
from ladder.services.rating_cache import CachedRatingService
from ladder.utils.rating_exceptions import InvalidLearningRateError

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def games():
    return [
        GameRecord('alice', 'bob', T0),
        GameRecord('carol', 'alice', T0 + timedelta(hours=1)),
    ]


def test_repeat_query_hits_cache(games):
    service = CachedRatingService()
    first = service.get_ratings(games, 10)
    second = service.get_ratings(list(games), 10)

    assert first == second == RatingEngine.calc_elo_from_games(games, 10)
    assert service.hits == 1
    assert service.misses == 1


def test_appended_game_is_never_stale(games):
    service = CachedRatingService()
    before = service.get_ratings(games, 10)
    after = service.get_ratings(games + [GameRecord('bob', 'carol', T0 + timedelta(hours=2))], 10)

    assert after != before
    assert after == RatingEngine.calc_elo_from_games(
        games + [GameRecord('bob', 'carol', T0 + timedelta(hours=2))], 10
    )
    assert service.hits == 0


def test_k_factor_is_part_of_key(games):
    service = CachedRatingService()
    assert service.get_ratings(games, 10) != service.get_ratings(games, 32)
    assert service.misses == 2


def test_history_cached(games):
    service = CachedRatingService()
    first = service.get_history(games, 10)
    second = service.get_history(games, 10)
    assert first == second == RatingEngine.calc_elo_history(games, 10)
    assert service.hits == 1


def test_undated_history_keyed_by_now():
    service = CachedRatingService()
    games = [GameRecord('alice', 'bob', None)]
    now_a = datetime(2024, 6, 1, tzinfo=timezone.utc)
    now_b = datetime(2024, 6, 2, tzinfo=timezone.utc)

    assert service.get_history(games, 10, now=now_a)[0].timestamp == now_a
    assert service.get_history(games, 10, now=now_b)[0].timestamp == now_b
    assert service.get_history(games, 10, now=now_a)[0].timestamp == now_a
    assert service.hits == 1


def test_returned_list_is_a_copy(games):
    service = CachedRatingService()
    service.get_ratings(games, 10).clear()
    assert len(service.get_ratings(games, 10)) == 3


def test_editing_returned_history_does_not_leak_into_cache(games):
    service = CachedRatingService()
    expected = RatingEngine.calc_elo_history(games, 10)

    first = service.get_history(games, 10)
    first[1].ratings['alice'] = 0.0
    first.pop()

    second = service.get_history(games, 10)
    assert service.hits == 1
    assert second == expected
    assert second[1].ratings['alice'] == 1505.0

    second[1].ratings['bob'] = 0.0
    assert service.get_history(games, 10) == expected


def test_undated_history_without_now_is_not_stored():
    service = CachedRatingService()
    games = [GameRecord('alice', 'bob', None)]

    history = service.get_history(games, 10)
    assert [s.ratings for s in history] == [
        {'alice': 1500.0, 'bob': 1500.0},
        {'alice': 1505.0, 'bob': 1495.0},
    ]
    assert service._cache == {}
    assert service.hits == 0


def test_expired_entries_recomputed(games):
    service = CachedRatingService(ttl=0)
    service.get_ratings(games, 10)
    service.get_ratings(games, 10)
    assert service.hits == 0
    assert service.misses == 2


def test_size_limit_enforced(games):
    service = CachedRatingService(max_size=2)
    for k_factor in (8, 10, 16, 32):
        service.get_ratings(games, k_factor)
    assert len(service._cache) == 2


def test_invalidate_all(games):
    service = CachedRatingService()
    service.get_ratings(games, 10)
    service.invalidate_all()
    service.get_ratings(games, 10)
    assert service.misses == 2


def test_invalid_k_factor_propagates(games):
    with pytest.raises(InvalidLearningRateError):
        CachedRatingService().get_ratings(games, 0)
