"""
Main Checkers GUI class using modular components.
"""
from __future__ import annotations

import logging
from typing import List, Optional
import tkinter as tk
from tkinter import ttk

from config import CheckersConfig, get_config
from checkers.engine import count_pieces
from checkers.types import Move, Piece, Player
from checkers.gui.constants import (
    FONT_TITLE, FONT_NORMAL, CAPTURED_MAN_GLYPH, CAPTURED_KING_GLYPH, AI_HIGHLIGHT_MS,
)
from checkers.gui.factory import GUIComponentFactory, GUIFactory

logger = logging.getLogger(__name__)


def format_captured(pieces: List[Piece]) -> str:
    """Glyph row for captured pieces, kings marked separately."""
    if not pieces:
        return "-"
    return " ".join(CAPTURED_KING_GLYPH if p.is_king else CAPTURED_MAN_GLYPH for p in pieces)


class CheckersUI(tk.Tk):
    """Human vs. computer checkers window."""

    def __init__(self, config: Optional[CheckersConfig] = None):
        super().__init__()
        self.config_model = config or get_config()
        self.title("Checkers")
        self.resizable(False, False)

        # Initialize components
        self.controller = GUIFactory.create_controller(self.config_model)
        self.ai = GUIFactory.create_ai_scheduler(self, self.controller, self.config_model, self._on_ai_move)
        self.move_manager = GUIFactory.create_move_manager()

        # Build UI
        self._build_ui()
        self._setup_event_handlers()
        self._new_game()

    def _build_ui(self):
        """Build the main UI layout."""
        container = ttk.Frame(self, padding=8)
        container.grid(row=0, column=0, sticky="nsew")

        # Left: Board
        self.canvas = GUIComponentFactory.create_main_canvas(container, self.config_model.ui.square_size)
        self.canvas.grid(row=0, column=0, rowspan=3, sticky="n")

        # Right: Controls
        controls = GUIComponentFactory.create_frame(container)
        controls.grid(row=0, column=1, sticky="nw")

        title = GUIComponentFactory.create_label(controls, "Checkers", FONT_TITLE)
        title.grid(row=0, column=0, sticky="w", pady=(0, 10))

        self.btn_new = GUIComponentFactory.create_button(controls, "New Game", self._new_game)
        self.btn_new.grid(row=1, column=0, sticky="w")

        GUIComponentFactory.create_label(controls, "Legal moves:").grid(row=2, column=0, sticky="w", pady=(8, 2))
        self.moves_list = GUIComponentFactory.create_listbox(controls)
        self.moves_list.grid(row=3, column=0, sticky="w")

        # Status panel
        status = GUIComponentFactory.create_frame(container, padding=(0, 8))
        status.grid(row=2, column=1, sticky="nw")
        self.lbl_turn = GUIComponentFactory.create_label(status, "", FONT_NORMAL)
        self.lbl_turn.grid(row=0, column=0, sticky="w")
        self.lbl_scores = GUIComponentFactory.create_label(status, "")
        self.lbl_scores.grid(row=1, column=0, sticky="w", pady=(4, 0))
        self.lbl_counts = GUIComponentFactory.create_label(status, "", foreground="#888")
        self.lbl_counts.grid(row=2, column=0, sticky="w", pady=(4, 0))
        self.lbl_captured = GUIComponentFactory.create_label(status, "")
        self.lbl_captured.grid(row=3, column=0, sticky="w", pady=(4, 0))

        self.board_renderer = GUIFactory.create_board_renderer(self.canvas, self.config_model)

    def _setup_event_handlers(self):
        """Set up event handlers."""
        self.canvas.bind("<Button-1>", self.on_click)
        self.moves_list.bind("<Double-Button-1>", self._play_selected_move)

    def _new_game(self, _event=None):
        """Start a new game, dropping any computer move still in flight."""
        self.ai.cancel()
        self.controller.reset()
        logger.info("New game: human plays %s", self.controller.human_player.value)
        self._refresh_ui()

    def _status_text(self) -> str:
        c = self.controller
        if c.winner is not None:
            who = "You win!" if c.winner is c.human_player else "Computer wins!"
            return f"{c.winner.value.title()} wins. {who}"
        if c.is_ai_thinking:
            return f"Computer ({c.ai_player.value.title()}) is thinking..."
        side = "You" if c.is_human_turn else "Computer"
        text = f"{c.active_player.value.title()} ({side}) to move"
        if c.is_continuing_jump:
            text += " - must continue jump!"
        elif c.must_jump:
            text += " - must jump!"
        return text

    def _refresh_ui(self):
        """Refresh all UI elements."""
        c = self.controller
        self.move_manager.set_moves(c.legal_moves if c.is_human_turn else [])
        self.moves_list.delete(0, tk.END)
        for move_str in self.move_manager.get_move_display_strings():
            self.moves_list.insert(tk.END, move_str)

        self.lbl_turn.config(text=self._status_text())
        self.lbl_scores.config(text=(
            f"Captures: Red {c.scores[Player.RED]} | Black {c.scores[Player.BLACK]}"
        ))
        reds, blacks, rk, bk = count_pieces(c.board)
        self.lbl_counts.config(text=f"Pieces: Red {reds} (K:{rk}) | Black {blacks} (K:{bk})")
        self.lbl_captured.config(text=(
            f"Red took: {format_captured(c.captured[Player.RED])}\n"
            f"Black took: {format_captured(c.captured[Player.BLACK])}"
        ))

        forced = c.state.position if c.is_continuing_jump else None
        self.board_renderer.set_forced_square(forced)
        self.board_renderer.set_selected_square(c.selected)
        self.board_renderer.set_highlighted_destinations([m.end for m in c.selected_moves])
        self.board_renderer.set_last_move(c.last_move)
        self.board_renderer.redraw_board(c.board)

        if c.is_ai_turn and not self.ai.is_thinking:
            self.ai.schedule()
            self.lbl_turn.config(text=self._status_text())

    def on_click(self, event):
        pos = self.board_renderer.pixel_to_position(event.x, event.y)
        if pos is None:
            return
        self.controller.click(pos)
        self._refresh_ui()
        index = None if self.controller.selected is None else \
            self.move_manager.find_move_by_start_square(self.controller.selected)
        if index is not None:
            self.moves_list.selection_clear(0, tk.END)
            self.moves_list.selection_set(index)
            self.moves_list.see(index)

    def _play_selected_move(self, _event=None):
        selection = self.moves_list.curselection()
        if not selection:
            return
        ordered = self.move_manager.get_ordered_moves_for_display()
        if selection[0] < len(ordered):
            self.controller.play_move(ordered[selection[0]])
            self._refresh_ui()

    def _on_ai_move(self, move: Optional[Move]) -> None:
        self._refresh_ui()
        if move is None:
            return
        # Flash the piece the computer just moved
        self.board_renderer.set_selected_square(move.end)
        self.board_renderer.redraw_board(self.controller.board)
        self.after(AI_HIGHLIGHT_MS, self._refresh_ui)
