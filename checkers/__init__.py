"""Checkers package: rules engine, turn controller and move strategies.

Usage examples:
    from checkers import initialize_board, moves_for_player, apply_move
    from checkers import TurnController, RandomMoveStrategy

The tkinter UI lives in `checkers.gui` and is imported separately.
"""
from __future__ import annotations

# Data model
from .types import (
    BOARD_SIZE,
    INITIAL_PIECE_ROWS,
    Board,
    Move,
    MoveResult,
    Piece,
    PieceType,
    Player,
    PlayerMoves,
    Position,
)

# Engine API
from .engine import (
    initialize_board,
    opponent,
    moves_for_piece,
    moves_for_player,
    apply_move,
    promote_if_eligible,
    winner,
    count_pieces,
    move_to_str,
    parse_move_str,
    board_to_str,
)

# Strategies
from .strategy import MoveStrategy, RandomMoveStrategy, get_move_strategy

# Turn controller
from .controller import (
    TurnController,
    HumanTurn,
    AiTurn,
    ContinuingJump,
    GameOver,
    PendingAiMove,
)
