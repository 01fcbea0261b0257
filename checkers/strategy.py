"""
Move selection strategies for the computer side.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from checkers.types import Move


class MoveStrategy(ABC):
    """Abstract interface for move selection policies."""

    @abstractmethod
    def choose(self, legal_moves: Sequence[Move]) -> Move:  # pragma: no cover
        raise NotImplementedError


class RandomMoveStrategy(MoveStrategy):
    """Picks uniformly at random among the offered moves."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def choose(self, legal_moves: Sequence[Move]) -> Move:
        if not legal_moves:
            raise ValueError("Cannot choose from an empty move list")
        return legal_moves[int(self._rng.integers(len(legal_moves)))]


def get_move_strategy(seed: Optional[int] = None) -> MoveStrategy:
    """Factory for the default strategy (uniform random)."""
    return RandomMoveStrategy(seed)


__all__ = [
    "MoveStrategy",
    "RandomMoveStrategy",
    "get_move_strategy",
]
