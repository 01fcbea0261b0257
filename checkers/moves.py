from __future__ import annotations

from typing import List, Tuple, Optional

from checkers.types import Board, Move, Piece, Player, PlayerMoves, Position

_DIRS: List[Tuple[int, int]] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def _directions(piece: Piece) -> List[Tuple[int, int]]:
    if piece.is_king:
        return _DIRS
    fwd = piece.player.forward
    return [(fwd, -1), (fwd, 1)]


class MoveGenerator:
    """Generates legal moves for a given board.

    Capture priority is applied twice: per piece (a piece with a jump may not
    step) and per player (if any piece can jump, only jumps are offered).
    """

    def _gen_simple_moves(self, board: Board, pos: Position, piece: Piece) -> List[Move]:
        moves: List[Move] = []
        for dr, dc in _directions(piece):
            nb = pos.offset(dr, dc)
            if board.is_empty(nb):
                moves.append(Move(pos, nb))
        return moves

    def _gen_jumps(self, board: Board, pos: Position, piece: Piece) -> List[Move]:
        jumps: List[Move] = []
        for dr, dc in _directions(piece):
            mid = pos.offset(dr, dc)
            end = pos.offset(2 * dr, 2 * dc)
            over: Optional[Piece] = board.piece_at(mid)
            if over is not None and over.player is piece.player.opponent and board.is_empty(end):
                jumps.append(Move(pos, end, captured=mid))
        return jumps

    def moves_for_piece(self, board: Board, pos: Position, must_continue_jump: bool = False) -> List[Move]:
        piece = board.piece_at(pos)
        if piece is None:
            return []
        jumps = self._gen_jumps(board, pos, piece)
        if jumps:
            return jumps
        if must_continue_jump:
            return []
        return self._gen_simple_moves(board, pos, piece)

    def moves_for_player(self, board: Board, player: Player) -> PlayerMoves:
        jumps: List[Move] = []
        quiets: List[Move] = []
        for pos, piece in board.pieces(player):
            caps = self._gen_jumps(board, pos, piece)
            if caps:
                jumps.extend(caps)
            else:
                quiets.extend(self._gen_simple_moves(board, pos, piece))
        # Decided after the full scan so the result never depends on scan order.
        if jumps:
            return PlayerMoves(moves=jumps, must_jump=True)
        return PlayerMoves(moves=quiets, must_jump=False)


class MoveValidator:
    """Validates moves against generated legal moves."""

    @staticmethod
    def is_capture(move: Move) -> bool:
        return move.captured is not None

    @staticmethod
    def validate(board: Board, player: Player, move: Move) -> bool:
        return move in MoveGenerator().moves_for_player(board, player).moves


_GENERATOR = MoveGenerator()


# Convenience functional API

def moves_for_piece(board: Board, pos: Position, must_continue_jump: bool = False) -> List[Move]:
    """Legal moves of the piece on `pos`; empty for an empty square."""
    return _GENERATOR.moves_for_piece(board, pos, must_continue_jump)


def moves_for_player(board: Board, player: Player) -> PlayerMoves:
    """Legal moves of every piece of `player`, jumps only if any jump exists."""
    return _GENERATOR.moves_for_player(board, player)
