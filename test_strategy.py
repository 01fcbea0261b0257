import pytest

from checkers.engine import initialize_board, moves_for_player
from checkers.strategy import MoveStrategy, RandomMoveStrategy, get_move_strategy
from checkers.types import Player


def test_random_strategy_picks_offered_move():
    moves = moves_for_player(initialize_board(), Player.RED).moves
    strat = RandomMoveStrategy(seed=1)
    for _ in range(50):
        assert strat.choose(moves) in moves


def test_random_strategy_is_reproducible_with_seed():
    moves = moves_for_player(initialize_board(), Player.BLACK).moves
    a = RandomMoveStrategy(seed=42)
    b = RandomMoveStrategy(seed=42)
    assert [a.choose(moves) for _ in range(20)] == [b.choose(moves) for _ in range(20)]


def test_random_strategy_covers_all_moves():
    moves = moves_for_player(initialize_board(), Player.RED).moves
    strat = RandomMoveStrategy(seed=0)
    seen = {strat.choose(moves) for _ in range(500)}
    assert seen == set(moves)


def test_empty_move_list_raises():
    with pytest.raises(ValueError):
        RandomMoveStrategy().choose([])


def test_factory_returns_strategy():
    strat = get_move_strategy(seed=5)
    assert isinstance(strat, MoveStrategy)
    assert isinstance(strat, RandomMoveStrategy)
