"""
GUI component factory for creating and configuring GUI components.
"""
from __future__ import annotations

from typing import Tuple, Any
import tkinter as tk
from tkinter import ttk

from config import CheckersConfig
from checkers.controller import TurnController
from checkers.strategy import get_move_strategy
from checkers.gui.constants import BOARD_SQUARES, BOARD_BG_LIGHT, FONT_LABEL
from checkers.gui.board_renderer import BoardRenderer
from checkers.gui.move_manager import MoveManager
from checkers.gui.ai_integration import AiScheduler


class GUIComponentFactory:
    """Factory for creating and configuring GUI widgets."""

    @staticmethod
    def create_main_canvas(parent: ttk.Frame, square_size: int) -> tk.Canvas:
        """Create the main board canvas."""
        size = BOARD_SQUARES * square_size
        return tk.Canvas(parent, width=size, height=size, highlightthickness=0, bg=BOARD_BG_LIGHT)

    @staticmethod
    def create_frame(parent: Any, padding: Tuple[int, int] = (10, 0)) -> ttk.Frame:
        return ttk.Frame(parent, padding=padding)

    @staticmethod
    def create_button(parent: ttk.Frame, text: str, command: Any) -> ttk.Button:
        """Create a styled button."""
        return ttk.Button(parent, text=text, command=command)

    @staticmethod
    def create_label(parent: Any, text: str, font: Tuple[str, int, str] = FONT_LABEL,
                    **kwargs) -> ttk.Label:
        """Create a styled label."""
        return ttk.Label(parent, text=text, font=font, **kwargs)

    @staticmethod
    def create_listbox(parent: ttk.Frame, height: int = 10, width: int = 28,
                      **kwargs) -> tk.Listbox:
        """Create a styled listbox."""
        return tk.Listbox(parent, height=height, width=width, activestyle="dotbox", **kwargs)


class GUIFactory:
    """Main factory for creating the non-widget components from configuration."""

    @staticmethod
    def create_controller(config: CheckersConfig) -> TurnController:
        strategy = get_move_strategy(config.rules.ai_seed)
        return TurnController(human_player=config.rules.human, strategy=strategy)

    @staticmethod
    def create_board_renderer(canvas: tk.Canvas, config: CheckersConfig) -> BoardRenderer:
        return BoardRenderer(
            canvas,
            square_size=config.ui.square_size,
            show_coordinates=config.ui.show_coordinates,
            highlight_moves=config.ui.highlight_moves,
        )

    @staticmethod
    def create_move_manager() -> MoveManager:
        return MoveManager()

    @staticmethod
    def create_ai_scheduler(root: tk.Tk, controller: TurnController,
                            config: CheckersConfig, on_move: Any = None) -> AiScheduler:
        return AiScheduler(root, controller, delay_ms=config.ui.ai_move_delay_ms,
                           continuation_delay_ms=config.ui.continuation_delay_ms, on_move=on_move)
