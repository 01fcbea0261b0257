"""
Type definitions for the Checkers engine.

This module provides:
- Enums for players and piece kinds
- Frozen dataclasses for pieces, positions and moves
- The immutable Board value every engine operation works on
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Dict, Iterator, Mapping, Optional, Sequence

# Constants for the fixed 8x8 American checkers board
BOARD_SIZE = 8
INITIAL_PIECE_ROWS = 3


class Player(str, Enum):
    """The two sides. RED starts on the bottom rows and moves toward row 0."""
    RED = "RED"
    BLACK = "BLACK"

    @property
    def opponent(self) -> Player:
        return Player.BLACK if self is Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """Row delta of a forward step for a man of this side."""
        return -1 if self is Player.RED else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Player.RED else BOARD_SIZE - 1


class PieceType(str, Enum):
    MAN = "MAN"
    KING = "KING"


@dataclass(frozen=True)
class Piece:
    player: Player
    type: PieceType = PieceType.MAN

    @property
    def is_king(self) -> bool:
        return self.type is PieceType.KING

    def crowned(self) -> Piece:
        """Return the king of the same owner (a new value)."""
        return Piece(self.player, PieceType.KING)


@dataclass(frozen=True, order=True)
class Position:
    """A square on the board. Construction never validates; see `in_bounds`."""
    row: int
    col: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, drow: int, dcol: int) -> Position:
        return Position(self.row + drow, self.col + dcol)

    def is_dark(self) -> bool:
        return (self.row + self.col) % 2 == 1


def midpoint(a: Position, b: Position) -> Position:
    return Position((a.row + b.row) // 2, (a.col + b.col) // 2)


@dataclass(frozen=True)
class Move:
    """A single step or a single jump.

    `captured` is set iff the move is a jump, and then names the midpoint
    square whose piece gets removed.
    """
    start: Position
    end: Position
    captured: Optional[Position] = None

    @property
    def is_jump(self) -> bool:
        return self.captured is not None


SquareState = Optional[Piece]
Rows = Tuple[Tuple[SquareState, ...], ...]


class Board:
    """Immutable 8x8 grid of optional pieces.

    Every change goes through `with_squares`, which returns a new Board and
    leaves the receiver untouched, so snapshots held by callers never go stale.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[SquareState]]) -> None:
        frozen: Rows = tuple(tuple(row) for row in rows)
        if len(frozen) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in frozen):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        object.__setattr__(self, "_rows", frozen)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Board is immutable")

    @classmethod
    def empty(cls) -> Board:
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[SquareState]]) -> Board:
        return cls(rows)

    @property
    def rows(self) -> Rows:
        return self._rows

    def piece_at(self, pos: Position) -> SquareState:
        """Piece on `pos`, or None for empty and off-board squares."""
        if not pos.in_bounds():
            return None
        return self._rows[pos.row][pos.col]

    def is_empty(self, pos: Position) -> bool:
        return pos.in_bounds() and self._rows[pos.row][pos.col] is None

    def with_squares(self, changes: Mapping[Position, SquareState]) -> Board:
        """Return a new board with the given squares replaced."""
        grid: List[List[SquareState]] = [list(row) for row in self._rows]
        for pos, piece in changes.items():
            if not pos.in_bounds():
                raise ValueError(f"Square {pos} is off the board")
            grid[pos.row][pos.col] = piece
        return Board(grid)

    def pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Piece]]:
        """Yield (position, piece) in row-major order, optionally for one side."""
        for r, row in enumerate(self._rows):
            for c, piece in enumerate(row):
                if piece is None:
                    continue
                if player is None or piece.player is player:
                    yield Position(r, c), piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.pieces())} pieces)"


@dataclass(frozen=True)
class PlayerMoves:
    """Legal moves of one side plus whether capture is compulsory."""
    moves: List[Move]
    must_jump: bool


@dataclass(frozen=True)
class MoveResult:
    """Board after a move, and the piece removed by it (if any)."""
    board: Board
    captured_piece: Optional[Piece] = None


def parse_player(value: str) -> Player:
    """Parse 'red'/'black' (any case) into a Player."""
    try:
        return Player(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unknown player {value!r}; expected one of {[p.value for p in Player]}") from None


PIECE_SYMBOLS: Dict[Tuple[Player, PieceType], str] = {
    (Player.RED, PieceType.MAN): "r",
    (Player.RED, PieceType.KING): "R",
    (Player.BLACK, PieceType.MAN): "b",
    (Player.BLACK, PieceType.KING): "B",
}
