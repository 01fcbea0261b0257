"""
Turn controller: the game state machine between a human and the computer.

The controller owns the current board and exposes one explicit state at a
time (`HumanTurn`, `AiTurn`, `ContinuingJump`, `GameOver`). The computer's
"thinking" delay is an explicit suspension: `begin_ai_move` hands out a
`PendingAiMove` token and `resolve_ai_move` applies the strategy's choice
later, unless a reset made the token stale in between.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from checkers.engine import (
    apply_move,
    initialize_board,
    move_to_str,
    moves_for_piece,
    moves_for_player,
    promote_if_eligible,
    winner,
)
from checkers.strategy import MoveStrategy, get_move_strategy
from checkers.types import Board, Move, Piece, Player, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HumanTurn:
    player: Player


@dataclass(frozen=True)
class AiTurn:
    player: Player


@dataclass(frozen=True)
class ContinuingJump:
    """`player` must keep jumping with the piece on `position`."""
    player: Player
    position: Position


@dataclass(frozen=True)
class GameOver:
    winner: Player


TurnState = Union[HumanTurn, AiTurn, ContinuingJump, GameOver]


@dataclass(frozen=True)
class PendingAiMove:
    """Snapshot taken when the computer starts thinking."""
    generation: int
    player: Player
    board: Board
    moves: Tuple[Move, ...]
    continuing: bool = False


@dataclass
class CaptureLog:
    scores: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    captured: Dict[Player, List[Piece]] = field(default_factory=lambda: {p: [] for p in Player})

    def record(self, player: Player, piece: Piece) -> None:
        self.scores[player] += 1
        self.captured[player].append(piece)


class TurnController:
    """Drives a human-vs-computer game.

    The human side always moves first. Human input arrives through `click`
    (square selection) or `play_move`; the computer side is driven through
    `begin_ai_move`/`resolve_ai_move` or `step_ai`.
    """

    def __init__(self, human_player: Player = Player.RED,
                 strategy: Optional[MoveStrategy] = None) -> None:
        self.human_player = human_player
        self.ai_player = human_player.opponent
        self.strategy: MoveStrategy = strategy or get_move_strategy()
        self._generation = 0
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Start a new game, discarding any pending computer decision."""
        self._generation += 1
        self._pending: Optional[PendingAiMove] = None
        self.board: Board = initialize_board()
        self.log = CaptureLog()
        self.last_move: Optional[Move] = None
        self.move_count = 0
        self.selected: Optional[Position] = None
        self.state: TurnState = HumanTurn(self.human_player)
        offered = moves_for_player(self.board, self.human_player)
        self.legal_moves: List[Move] = offered.moves
        self.must_jump: bool = offered.must_jump
        logger.debug("New game (generation %d), %s to move", self._generation, self.human_player.value)

    def start_from(self, board: Board, player: Optional[Player] = None) -> None:
        """Reset bookkeeping and continue play from an arbitrary position."""
        self.reset()
        self.board = board
        self._switch_to(player or self.human_player)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def active_player(self) -> Optional[Player]:
        if isinstance(self.state, GameOver):
            return None
        return self.state.player

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner if isinstance(self.state, GameOver) else None

    @property
    def is_game_over(self) -> bool:
        return isinstance(self.state, GameOver)

    @property
    def is_continuing_jump(self) -> bool:
        return isinstance(self.state, ContinuingJump)

    @property
    def is_human_turn(self) -> bool:
        return self.active_player is self.human_player

    @property
    def is_ai_turn(self) -> bool:
        return self.active_player is self.ai_player

    @property
    def is_ai_thinking(self) -> bool:
        return self._pending is not None

    @property
    def scores(self) -> Dict[Player, int]:
        return self.log.scores

    @property
    def captured(self) -> Dict[Player, List[Piece]]:
        return self.log.captured

    @property
    def selected_moves(self) -> List[Move]:
        """Offered moves starting from the selected square."""
        if self.selected is None:
            return []
        return [m for m in self.legal_moves if m.start == self.selected]

    def _accepts_human_input(self) -> bool:
        return self.is_human_turn and self._pending is None

    # ------------------------------------------------------------------
    # Human input
    # ------------------------------------------------------------------
    def click(self, pos: Position) -> bool:
        """Handle a click on `pos`. Returns True if a move was played."""
        if not self._accepts_human_input():
            logger.debug("Ignoring click on %s: not accepting human input", pos)
            return False

        if self.selected is not None:
            for move in self.legal_moves:
                if move.start == self.selected and move.end == pos:
                    return self.play_move(move)

        piece = self.board.piece_at(pos)
        if piece is not None and piece.player is self.human_player:
            if isinstance(self.state, ContinuingJump) and pos != self.state.position:
                logger.debug("Rejecting selection of %s: jump must continue from %s", pos, self.state.position)
                return False
            self.selected = pos
        elif not isinstance(self.state, ContinuingJump):
            self.selected = None
        return False

    def play_move(self, move: Move) -> bool:
        """Play a human move. Returns False if the move is rejected."""
        if not self._accepts_human_input():
            logger.debug("Rejecting %s: not the human's turn", move_to_str(move))
            return False
        if move not in self.legal_moves:
            logger.debug("Rejecting %s: not in the offered move set", move_to_str(move))
            return False
        self._advance(move)
        return True

    # ------------------------------------------------------------------
    # Computer side
    # ------------------------------------------------------------------
    def begin_ai_move(self) -> Optional[PendingAiMove]:
        """Start the computer's suspension; None if it is not the computer's turn."""
        if not self.is_ai_turn:
            return None
        if self._pending is not None:
            return self._pending
        self._pending = PendingAiMove(
            generation=self._generation,
            player=self.ai_player,
            board=self.board,
            moves=tuple(self.legal_moves),
            continuing=isinstance(self.state, ContinuingJump),
        )
        logger.debug("Computer thinking over %d moves", len(self._pending.moves))
        return self._pending

    def resolve_ai_move(self, pending: PendingAiMove) -> Optional[Move]:
        """Apply the strategy's choice for `pending`, unless it is stale."""
        if pending.generation != self._generation or pending is not self._pending:
            logger.debug("Discarding stale computer decision (generation %d)", pending.generation)
            return None
        if pending.board is not self.board:
            logger.debug("Discarding computer decision: board changed since it was taken")
            self._pending = None
            return None
        self._pending = None
        move = self.strategy.choose(pending.moves)
        if move not in pending.moves:
            raise ValueError(f"Strategy chose a move outside the offered set: {move_to_str(move)}")
        self._advance(move, pending.board)
        return move

    def cancel_ai_move(self) -> None:
        self._pending = None

    def step_ai(self) -> Optional[Move]:
        """Begin and resolve one computer move synchronously."""
        pending = self.begin_ai_move()
        if pending is None:
            return None
        return self.resolve_ai_move(pending)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _advance(self, move: Move, board: Optional[Board] = None) -> None:
        player = self.state.player  # type: ignore[union-attr]
        result = apply_move(self.board if board is None else board, move)
        board = promote_if_eligible(result.board, move.end)
        if result.captured_piece is not None:
            self.log.record(player, result.captured_piece)
        self.board = board
        self.last_move = move
        self.move_count += 1
        logger.debug("%s plays %s", player.value, move_to_str(move))

        if move.is_jump:
            further = moves_for_piece(board, move.end, True)
            if further:
                self.state = ContinuingJump(player, move.end)
                self.legal_moves = further
                self.must_jump = True
                self.selected = move.end if player is self.human_player else None
                return

        self._switch_to(player.opponent)

    def _switch_to(self, player: Player) -> None:
        self.selected = None
        offered = moves_for_player(self.board, player)
        self.must_jump = offered.must_jump
        result = winner(self.board, player, offered.moves)
        if result is not None:
            self.state = GameOver(result)
            self.legal_moves = []
            logger.info("Game over after %d moves: %s wins", self.move_count, result.value)
            return
        self.legal_moves = offered.moves
        self.state = HumanTurn(player) if player is self.human_player else AiTurn(player)
