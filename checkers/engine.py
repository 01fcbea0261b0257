"""
Engine API: board setup, move execution, promotion and win detection.

Move generation lives in `checkers.moves` and is re-exported here so callers
can do `from checkers.engine import moves_for_player, apply_move`.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from checkers.moves import moves_for_piece, moves_for_player
from checkers.types import (
    BOARD_SIZE,
    INITIAL_PIECE_ROWS,
    PIECE_SYMBOLS,
    Board,
    Move,
    MoveResult,
    Piece,
    PieceType,
    Player,
    Position,
    SquareState,
    midpoint,
)

__all__ = [
    "initialize_board",
    "opponent",
    "moves_for_piece",
    "moves_for_player",
    "apply_move",
    "promote_if_eligible",
    "winner",
    "count_pieces",
    "move_to_str",
    "parse_move_str",
    "board_to_str",
]

logger = logging.getLogger(__name__)


# ============================
# Board setup and utilities
# ============================
def initialize_board() -> Board:
    """Initial position: Black on rows 0..2, Red on rows 5..7, dark squares only."""
    grid: List[List[SquareState]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if (r + c) % 2 == 0:
                continue
            if r < INITIAL_PIECE_ROWS:
                grid[r][c] = Piece(Player.BLACK, PieceType.MAN)
            elif r >= BOARD_SIZE - INITIAL_PIECE_ROWS:
                grid[r][c] = Piece(Player.RED, PieceType.MAN)
    return Board(grid)


def opponent(player: Player) -> Player:
    return player.opponent


def count_pieces(board: Board) -> Tuple[int, int, int, int]:
    """Count pieces of each side.

    Returns:
        Tuple of (red_pieces, black_pieces, red_kings, black_kings)
    """
    reds = blacks = rk = bk = 0
    for _, piece in board.pieces():
        if piece.player is Player.RED:
            reds += 1
            rk += piece.is_king
        else:
            blacks += 1
            bk += piece.is_king
    return reds, blacks, rk, bk


def move_to_str(move: Move) -> str:
    """Coordinate notation, e.g. '5,0-4,1' for a step or '3,2x1,4' for a jump."""
    sep = "x" if move.is_jump else "-"
    return f"{move.start.row},{move.start.col}{sep}{move.end.row},{move.end.col}"


def parse_move_str(s: str) -> Optional[Move]:
    """Parse `move_to_str` notation back into a Move; None if malformed."""
    s = s.strip().lower().replace(" ", "")
    sep = "x" if "x" in s else "-"
    parts = s.split(sep)
    if len(parts) != 2:
        return None
    try:
        (r1, c1), (r2, c2) = (tuple(int(v) for v in p.split(",")) for p in parts)
    except ValueError:
        return None
    start, end = Position(r1, c1), Position(r2, c2)
    if not (start.in_bounds() and end.in_bounds()):
        return None
    if abs(r1 - r2) == 2 and abs(c1 - c2) == 2:
        return Move(start, end, captured=midpoint(start, end))
    return Move(start, end)


def board_to_str(board: Board) -> str:
    """Plain-text diagram, row 0 first; '.' marks empty dark squares."""
    lines: List[str] = []
    for r, row in enumerate(board.rows):
        cells = []
        for c, piece in enumerate(row):
            if piece is not None:
                cells.append(PIECE_SYMBOLS[(piece.player, piece.type)])
            else:
                cells.append("." if (r + c) % 2 == 1 else " ")
        lines.append("".join(cells))
    return "\n".join(lines)


# ============================
# Applying moves
# ============================
def apply_move(board: Board, move: Move) -> MoveResult:
    """Apply a single step or jump, returning the new board and captured piece.

    The input board is left untouched. An empty `start` square or an
    off-board `end`/`captured` square is a caller bug and yields the original
    board with nothing captured.
    """
    piece = board.piece_at(move.start)
    if piece is None:
        logger.warning("apply_move called with empty start square %s", move.start)
        return MoveResult(board, None)
    if not move.end.in_bounds() or (move.captured is not None and not move.captured.in_bounds()):
        logger.warning("apply_move called with off-board square in %s", move)
        return MoveResult(board, None)

    changes = {move.start: None, move.end: piece}
    captured_piece: Optional[Piece] = None
    if move.captured is not None:
        captured_piece = board.piece_at(move.captured)
        changes[move.captured] = None
    return MoveResult(board.with_squares(changes), captured_piece)


def promote_if_eligible(board: Board, pos: Position) -> Board:
    """King a man standing on its promotion row; otherwise return `board` itself."""
    piece = board.piece_at(pos)
    if piece is None or piece.is_king or pos.row != piece.player.promotion_row:
        return board
    logger.debug("Promoting %s man on %s", piece.player.value, pos)
    return board.with_squares({pos: piece.crowned()})


def winner(board: Board, player: Player, player_moves: Sequence[Move]) -> Optional[Player]:
    """Decide the game for the side about to move.

    A side with no legal moves loses, whether or not it still has pieces;
    otherwise the side to move wins if the opponent has no pieces left.
    """
    if not player_moves:
        return player.opponent
    if next(board.pieces(player.opponent), None) is None:
        return player
    return None
