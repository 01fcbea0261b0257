"""
Computer player integration for the Checkers GUI.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from checkers.controller import PendingAiMove, TurnController
from checkers.types import Move

logger = logging.getLogger(__name__)


class AiScheduler:
    """Runs the computer's turns on the Tk event loop.

    `root` is anything with Tk's `after`/`after_cancel` pair. Each computer
    move waits `delay_ms` (`continuation_delay_ms` for a continuing jump)
    before it is resolved; `cancel` drops both the timer and the controller's
    pending token.
    """

    def __init__(self, root: Any, controller: TurnController, delay_ms: int = 750,
                 continuation_delay_ms: int = 375,
                 on_move: Optional[Callable[[Optional[Move]], None]] = None):
        self.root = root
        self.controller = controller
        self.delay_ms = max(0, int(delay_ms))
        self.continuation_delay_ms = max(0, int(continuation_delay_ms))
        self.on_move = on_move
        self._after_id: Optional[str] = None

    @property
    def is_thinking(self) -> bool:
        return self._after_id is not None

    def schedule(self) -> bool:
        """Schedule the next computer move if it is the computer's turn."""
        if self._after_id is not None:
            return False
        pending = self.controller.begin_ai_move()
        if pending is None:
            return False
        delay = self.continuation_delay_ms if pending.continuing else self.delay_ms
        self._after_id = self.root.after(delay, lambda: self._fire(pending))
        return True

    def cancel(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.controller.cancel_ai_move()

    def _fire(self, pending: PendingAiMove) -> None:
        self._after_id = None
        move = self.controller.resolve_ai_move(pending)
        if move is None:
            return
        if self.on_move is not None:
            self.on_move(move)
        # Continues a multi-jump; no-op once the turn has passed to the human.
        self.schedule()
