"""
Board rendering functionality for the Checkers GUI.
"""
from __future__ import annotations

from typing import List, Optional, Tuple
import tkinter as tk

from checkers.types import Board, Move, Player, Position
from checkers.gui.constants import (
    BOARD_SQUARES, BOARD_BG_LIGHT, BOARD_BG_DARK, BOARD_HL_SQ, BOARD_HL_DEST,
    BOARD_LASTMOVE, BOARD_FORCED, PIECE_BLACK_FILL, PIECE_BLACK_OUTLINE,
    PIECE_RED_FILL, PIECE_RED_OUTLINE, KING_TEXT_COLOR, SQUARE_SIZE, FONT_COORD,
    TEXT_COLOR_DISABLED,
)


class BoardRenderer:
    """Handles all board rendering and visual updates."""

    def __init__(self, canvas: tk.Canvas, square_size: int = SQUARE_SIZE,
                 show_coordinates: bool = True, highlight_moves: bool = True):
        self.canvas = canvas
        self.square_size = square_size
        self.show_coordinates = show_coordinates
        self.highlight_moves = highlight_moves
        self.selected_square: Optional[Position] = None
        self.forced_square: Optional[Position] = None
        self.highlighted_destinations: List[Position] = []
        self.last_move: Optional[Move] = None

        # Pre-draw board grid
        self._draw_squares()

    def set_selected_square(self, square: Optional[Position]) -> None:
        """Set the currently selected square."""
        self.selected_square = square

    def set_forced_square(self, square: Optional[Position]) -> None:
        """Set the square of a piece that must continue jumping."""
        self.forced_square = square

    def set_highlighted_destinations(self, destinations: List[Position]) -> None:
        """Set squares to highlight as possible destinations."""
        self.highlighted_destinations = destinations

    def set_last_move(self, move: Optional[Move]) -> None:
        """Set the last move for highlighting."""
        self.last_move = move

    def pixel_to_position(self, x: int, y: int) -> Optional[Position]:
        """Map a canvas click to a board square, or None outside the board."""
        pos = Position(y // self.square_size, x // self.square_size)
        return pos if pos.in_bounds() else None

    def redraw_board(self, board: Board) -> None:
        """Redraw the entire board with current state."""
        self._clear_overlays()
        self._draw_last_move()
        self._draw_pieces(board)
        self._draw_selection_highlight()
        if self.highlight_moves:
            self._draw_destination_highlights()

    def _square_box(self, pos: Position) -> Tuple[int, int, int, int]:
        x1 = pos.col * self.square_size
        y1 = pos.row * self.square_size
        return x1, y1, x1 + self.square_size, y1 + self.square_size

    def _square_center(self, pos: Position) -> Tuple[int, int]:
        half = self.square_size // 2
        return pos.col * self.square_size + half, pos.row * self.square_size + half

    def _draw_squares(self) -> None:
        """Draw the static board squares."""
        self.canvas.delete("square")
        for r in range(BOARD_SQUARES):
            for c in range(BOARD_SQUARES):
                pos = Position(r, c)
                color = BOARD_BG_DARK if pos.is_dark() else BOARD_BG_LIGHT
                self.canvas.create_rectangle(
                    *self._square_box(pos), fill=color, outline=color, tags=("square",)
                )
                if self.show_coordinates and pos.is_dark():
                    x1, y1, _, _ = self._square_box(pos)
                    self.canvas.create_text(
                        x1 + 3, y1 + 2, text=f"{r},{c}", anchor="nw",
                        fill=TEXT_COLOR_DISABLED, font=FONT_COORD, tags=("square",)
                    )

    def _clear_overlays(self) -> None:
        """Clear all overlay elements."""
        self.canvas.delete("piece")
        self.canvas.delete("sel")
        self.canvas.delete("dest")
        self.canvas.delete("last")

    def _draw_last_move(self) -> None:
        """Draw an arrow along the last move."""
        if self.last_move is None:
            return
        x1, y1 = self._square_center(self.last_move.start)
        x2, y2 = self._square_center(self.last_move.end)
        self.canvas.create_line(
            x1, y1, x2, y2, fill=BOARD_LASTMOVE, width=4, arrow="last", tags=("last",)
        )

    def _draw_pieces(self, board: Board) -> None:
        """Draw all pieces on the board."""
        rad = int(self.square_size * 0.36)
        for pos, piece in board.pieces():
            cx, cy = self._square_center(pos)
            is_black = piece.player is Player.BLACK
            fill = PIECE_BLACK_FILL if is_black else PIECE_RED_FILL
            outline = PIECE_BLACK_OUTLINE if is_black else PIECE_RED_OUTLINE

            self.canvas.create_oval(
                cx - rad, cy - rad, cx + rad, cy + rad,
                fill=fill, outline=outline, width=2, tags=("piece",)
            )

            # Draw king marker
            if piece.is_king:
                self.canvas.create_text(
                    cx, cy, text="K", fill=KING_TEXT_COLOR,
                    font=("Segoe UI", int(self.square_size * 0.33), "bold"),
                    tags=("piece",)
                )

    def _draw_selection_highlight(self) -> None:
        """Draw highlight for the selected square and any forced jumper."""
        for square, color in ((self.forced_square, BOARD_FORCED), (self.selected_square, BOARD_HL_SQ)):
            if square is None:
                continue
            x1, y1, x2, y2 = self._square_box(square)
            self.canvas.create_rectangle(
                x1 + 3, y1 + 3, x2 - 3, y2 - 3,
                outline=color, width=3, tags=("sel",)
            )

    def _draw_destination_highlights(self) -> None:
        """Draw highlights for possible destination squares."""
        rad = int(self.square_size * 0.16)
        for dst in self.highlighted_destinations:
            cx, cy = self._square_center(dst)
            self.canvas.create_oval(
                cx - rad, cy - rad, cx + rad, cy + rad,
                fill=BOARD_HL_DEST, outline="", tags=("dest",)
            )
