import pytest

from checkers.engine import (
    initialize_board,
    opponent,
    apply_move,
    promote_if_eligible,
    winner,
    count_pieces,
    move_to_str,
    parse_move_str,
    board_to_str,
    moves_for_player,
)
from checkers.types import Board, Move, Piece, PieceType, Player, Position


def place(board, *placements):
    changes = {}
    for p in placements:
        row, col, player = p[:3]
        kind = p[3] if len(p) > 3 else PieceType.MAN
        changes[Position(row, col)] = Piece(player, kind)
    return board.with_squares(changes)


def test_initial_board_layout():
    board = initialize_board()
    assert count_pieces(board) == (12, 12, 0, 0)
    for pos, piece in board.pieces():
        assert pos.is_dark()
        if piece.player is Player.BLACK:
            assert pos.row <= 2
        else:
            assert pos.row >= 5
    assert board.piece_at(Position(5, 0)) == Piece(Player.RED, PieceType.MAN)
    assert board.piece_at(Position(0, 1)) == Piece(Player.BLACK, PieceType.MAN)


def test_opponent_is_involutive():
    for p in Player:
        assert opponent(p) is not p
        assert opponent(opponent(p)) is p


def test_apply_simple_move_copies_board():
    board = initialize_board()
    move = Move(Position(5, 0), Position(4, 1))
    result = apply_move(board, move)
    assert result.captured_piece is None
    assert result.board.piece_at(Position(4, 1)) == Piece(Player.RED)
    assert result.board.piece_at(Position(5, 0)) is None
    # Input untouched
    assert board == initialize_board()
    assert board.piece_at(Position(5, 0)) == Piece(Player.RED)


def test_apply_jump_removes_captured_piece():
    board = place(Board.empty(), (3, 2, Player.RED), (2, 3, Player.BLACK, PieceType.KING))
    move = Move(Position(3, 2), Position(1, 4), captured=Position(2, 3))
    result = apply_move(board, move)
    assert result.captured_piece == Piece(Player.BLACK, PieceType.KING)
    assert result.board.piece_at(Position(2, 3)) is None
    assert result.board.piece_at(Position(1, 4)) == Piece(Player.RED)


def test_capture_is_not_reversible():
    board = place(Board.empty(), (3, 2, Player.RED), (2, 3, Player.BLACK))
    after = apply_move(board, Move(Position(3, 2), Position(1, 4), Position(2, 3))).board
    back = apply_move(after, Move(Position(1, 4), Position(3, 2))).board
    assert back != board
    assert back.piece_at(Position(2, 3)) is None


def test_apply_from_empty_square_is_inert():
    board = initialize_board()
    result = apply_move(board, Move(Position(4, 1), Position(3, 2)))
    assert result.board is board
    assert result.captured_piece is None


@pytest.mark.parametrize("move", [
    Move(Position(5, 0), Position(4, -1)),
    Move(Position(7, 0), Position(8, 1)),
    Move(Position(5, 0), Position(3, -2), captured=Position(4, -1)),
])
def test_apply_with_off_board_square_is_inert(move):
    board = initialize_board()
    result = apply_move(board, move)
    assert result.board is board
    assert result.captured_piece is None
    assert board == initialize_board()


def test_with_squares_rejects_off_board_keys():
    board = Board.empty()
    with pytest.raises(ValueError):
        board.with_squares({Position(4, -1): Piece(Player.RED)})
    with pytest.raises(ValueError):
        board.with_squares({Position(8, 1): Piece(Player.RED)})
    assert board == Board.empty()


def test_promotion_for_each_side():
    board = place(Board.empty(), (0, 1, Player.RED), (7, 0, Player.BLACK), (0, 3, Player.BLACK))
    board = promote_if_eligible(board, Position(0, 1))
    board = promote_if_eligible(board, Position(7, 0))
    assert board.piece_at(Position(0, 1)).is_king
    assert board.piece_at(Position(7, 0)).is_king
    # A black man on row 0 is on its own home row, not the promotion row
    assert promote_if_eligible(board, Position(0, 3)) is board


def test_promotion_is_idempotent_and_returns_same_board_when_unchanged():
    board = place(Board.empty(), (0, 5, Player.RED))
    once = promote_if_eligible(board, Position(0, 5))
    twice = promote_if_eligible(once, Position(0, 5))
    assert once == twice
    assert twice is once
    assert promote_if_eligible(board, Position(4, 4)) is board


def test_winner_blocked_side_loses_even_with_pieces():
    # Red man on (7,0) is boxed in by two black men
    board = place(Board.empty(), (7, 0, Player.RED), (6, 1, Player.BLACK), (5, 2, Player.BLACK))
    red_moves = moves_for_player(board, Player.RED).moves
    assert red_moves == []
    assert winner(board, Player.RED, red_moves) is Player.BLACK


def test_winner_when_opponent_has_no_pieces():
    board = place(Board.empty(), (4, 3, Player.RED))
    moves = moves_for_player(board, Player.RED).moves
    assert winner(board, Player.RED, moves) is Player.RED


def test_no_winner_in_initial_position():
    board = initialize_board()
    assert winner(board, Player.RED, moves_for_player(board, Player.RED).moves) is None


def test_move_string_round_trip():
    step = Move(Position(5, 0), Position(4, 1))
    jump = Move(Position(3, 2), Position(1, 4), Position(2, 3))
    assert move_to_str(step) == "5,0-4,1"
    assert move_to_str(jump) == "3,2x1,4"
    assert parse_move_str("5,0-4,1") == step
    assert parse_move_str(" 3,2 x 1,4 ") == jump


@pytest.mark.parametrize("text", ["", "5,0", "a,b-c,d", "5,0-4,1-3,2", "9,0-8,1"])
def test_parse_move_str_rejects_malformed(text):
    assert parse_move_str(text) is None


def test_board_to_str():
    text = board_to_str(initialize_board())
    rows = text.split("\n")
    assert len(rows) == 8
    assert rows[0] == " b b b b"
    assert rows[3] == ". . . . "
    assert rows[7] == "r r r r "


def test_board_from_rows_and_size_check():
    rows = [[None] * 8 for _ in range(8)]
    rows[5][0] = Piece(Player.RED)
    board = Board.from_rows(rows)
    rows[5][0] = None  # later edits to the source do not leak in
    assert board.piece_at(Position(5, 0)) == Piece(Player.RED)
    assert hash(board) == hash(Board.empty().with_squares({Position(5, 0): Piece(Player.RED)}))
    with pytest.raises(ValueError):
        Board.from_rows([[None] * 8] * 7)
    with pytest.raises(AttributeError):
        board._rows = ()
