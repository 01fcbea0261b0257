from __future__ import annotations

import pytest

pytest.importorskip("tkinter")

from config import CheckersConfig, UISettings
from checkers.controller import TurnController, HumanTurn, AiTurn, ContinuingJump
from checkers.engine import initialize_board, moves_for_player
from checkers.gui.ai_integration import AiScheduler
from checkers.gui.factory import GUIFactory
from checkers.gui.move_manager import MoveManager, group_moves_by_start, group_moves_by_dest
from checkers.strategy import MoveStrategy
from checkers.types import Board, Move, Piece, Player, Position


class FirstMoveStrategy(MoveStrategy):
    def choose(self, legal_moves):
        return legal_moves[0]


class FakeRoot:
    """Records `after` callbacks instead of running a Tk event loop."""

    def __init__(self):
        self.calls = {}
        self.cancelled = []
        self._next = 0

    def after(self, delay, callback):
        self._next += 1
        after_id = f"after#{self._next}"
        self.calls[after_id] = (delay, callback)
        return after_id

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)
        self.calls.pop(after_id, None)

    def run_pending(self):
        after_id, (delay, callback) = next(iter(self.calls.items()))
        del self.calls[after_id]
        callback()
        return delay


def P(r, c):
    return Position(r, c)


def test_group_moves():
    moves = moves_for_player(initialize_board(), Player.RED).moves
    by_start = group_moves_by_start(moves)
    assert set(by_start[P(5, 2)]) == {Move(P(5, 2), P(4, 1)), Move(P(5, 2), P(4, 3))}
    by_dest = group_moves_by_dest(moves)
    assert {m.start for m in by_dest[P(4, 1)]} == {P(5, 0), P(5, 2)}


def test_move_manager_orders_captures_first():
    jump = Move(P(3, 2), P(1, 4), P(2, 3))
    step = Move(P(6, 1), P(5, 0))
    mm = MoveManager([step, jump])
    assert mm.get_ordered_moves_for_display() == [jump, step]
    assert mm.get_move_display_strings() == ["3,2x1,4", "6,1-5,0"]
    assert mm.find_move_by_start_square(P(6, 1)) == 1
    assert mm.find_move_by_start_square(P(0, 0)) is None
    assert mm.get_destinations_for_square(P(3, 2)) == [P(1, 4)]


def test_scheduler_runs_ai_move_after_delay():
    root = FakeRoot()
    c = TurnController(strategy=FirstMoveStrategy())
    seen = []
    sched = AiScheduler(root, c, delay_ms=500, on_move=seen.append)
    assert not sched.schedule()  # human's turn

    c.play_move(Move(P(5, 0), P(4, 1)))
    assert sched.schedule()
    assert sched.is_thinking and c.is_ai_thinking
    assert not sched.schedule()
    assert root.run_pending() == 500
    assert len(seen) == 1
    assert c.state == HumanTurn(Player.RED)
    assert not sched.is_thinking
    assert root.calls == {}


def test_scheduler_chains_continuation_with_half_delay():
    board = Board.empty().with_squares({
        P(1, 2): Piece(Player.BLACK),
        P(2, 3): Piece(Player.RED),
        P(4, 5): Piece(Player.RED),
        P(7, 0): Piece(Player.RED),
    })
    root = FakeRoot()
    c = TurnController(strategy=FirstMoveStrategy())
    c.start_from(board, Player.BLACK)
    cfg = CheckersConfig(ui=UISettings(ai_move_delay_ms=600))
    sched = GUIFactory.create_ai_scheduler(root, c, cfg)
    assert sched.schedule()
    assert root.run_pending() == 600
    assert c.state == ContinuingJump(Player.BLACK, P(3, 4))
    assert root.run_pending() == 300
    assert c.state == HumanTurn(Player.RED)


def test_cancel_discards_pending_move_on_reset():
    root = FakeRoot()
    c = TurnController(strategy=FirstMoveStrategy())
    sched = AiScheduler(root, c, delay_ms=750)
    c.play_move(Move(P(5, 0), P(4, 1)))
    sched.schedule()
    (_, callback), = root.calls.values()

    sched.cancel()
    c.reset()
    assert root.cancelled
    # Even if the timer fired anyway, the stale decision is dropped
    callback()
    assert c.board == initialize_board()
    assert c.state == HumanTurn(Player.RED)


def test_stale_timer_after_reset_without_cancel():
    root = FakeRoot()
    c = TurnController(strategy=FirstMoveStrategy())
    sched = AiScheduler(root, c, delay_ms=750)
    c.play_move(Move(P(5, 0), P(4, 1)))
    sched.schedule()
    c.reset()
    root.run_pending()
    assert c.board == initialize_board()
    assert c.state == HumanTurn(Player.RED)
    assert c.state != AiTurn(Player.BLACK)


def test_format_captured_marks_kings():
    from checkers.gui.checkers_ui import format_captured
    from checkers.types import PieceType
    assert format_captured([]) == "-"
    assert format_captured([Piece(Player.BLACK), Piece(Player.BLACK, PieceType.KING)]) == "● K"


class RecordingRenderer:
    def __init__(self):
        self.selected = []
        self.redraws = 0

    def set_selected_square(self, square):
        self.selected.append(square)

    def redraw_board(self, board):
        self.redraws += 1


class FakeWindow(FakeRoot):
    """Stands in for CheckersUI when exercising its callbacks."""

    def __init__(self, controller):
        super().__init__()
        self.controller = controller
        self.board_renderer = RecordingRenderer()
        self.refreshes = 0

    def _refresh_ui(self):
        self.refreshes += 1


def test_ai_move_callback_flashes_moved_piece():
    from checkers.gui.checkers_ui import AI_HIGHLIGHT_MS, CheckersUI
    c = TurnController(strategy=FirstMoveStrategy())
    c.play_move(Move(P(5, 0), P(4, 1)))
    move = c.step_ai()
    window = FakeWindow(c)

    CheckersUI._on_ai_move(window, move)
    assert window.board_renderer.selected == [move.end]
    assert window.board_renderer.redraws == 1
    assert window.run_pending() == AI_HIGHLIGHT_MS
    assert window.refreshes == 2


def test_ai_move_callback_without_move_only_refreshes():
    from checkers.gui.checkers_ui import CheckersUI
    window = FakeWindow(TurnController(strategy=FirstMoveStrategy()))
    CheckersUI._on_ai_move(window, None)
    assert window.refreshes == 1
    assert window.calls == {}
