"""
Move grouping and display helpers for the Checkers GUI.
"""
from __future__ import annotations

from typing import List, Dict, Optional

from checkers.engine import move_to_str
from checkers.types import Move, Position


def group_moves_by_start(moves: List[Move]) -> Dict[Position, List[Move]]:
    """Group moves by their starting square."""
    result: Dict[Position, List[Move]] = {}
    for move in moves:
        result.setdefault(move.start, []).append(move)
    return result


def group_moves_by_dest(moves: List[Move]) -> Dict[Position, List[Move]]:
    """Group moves by their landing square."""
    result: Dict[Position, List[Move]] = {}
    for move in moves:
        result.setdefault(move.end, []).append(move)
    return result


class MoveManager:
    """Keeps the offered move list in display order."""

    def __init__(self, moves: Optional[List[Move]] = None):
        self.legal_moves_list: List[Move] = []
        self.moves_by_start: Dict[Position, List[Move]] = {}
        self.set_moves(moves or [])

    def set_moves(self, moves: List[Move]) -> None:
        """Replace the offered moves and rebuild groupings."""
        self.legal_moves_list = list(moves)
        self.moves_by_start = group_moves_by_start(self.legal_moves_list)

    def get_legal_moves_for_square(self, square: Position) -> List[Move]:
        """Get all legal moves starting from a specific square."""
        return self.moves_by_start.get(square, [])

    def get_destinations_for_square(self, square: Position) -> List[Position]:
        return list(group_moves_by_dest(self.get_legal_moves_for_square(square)))

    def get_ordered_moves_for_display(self) -> List[Move]:
        """Get moves ordered for display (captures first, then board order)."""
        return sorted(self.legal_moves_list, key=lambda m: (not m.is_jump, m.start, m.end))

    def get_move_display_strings(self) -> List[str]:
        """Get string representations of moves for display."""
        return [move_to_str(move) for move in self.get_ordered_moves_for_display()]

    def find_move_by_start_square(self, start_square: Position) -> Optional[int]:
        """Find the display index of the first move starting from a square."""
        for i, move in enumerate(self.get_ordered_moves_for_display()):
            if move.start == start_square:
                return i
        return None
