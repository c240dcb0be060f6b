"""Qt bridge that paces agent play on the main thread."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from checkie.core.enums import Side
from checkie.engine.greedy import GreedyAgent
from checkie.game.controller import GameController
from checkie.game.player import AIPlayer

if TYPE_CHECKING:
    from checkie.engine.search import IAgent
    from checkie.game.interfaces import IGameController

_LOGGER = logging.getLogger(__name__)


class AgentWorker(QObject):
    """Plays the agent's turns one hop at a time with short pauses.

    The delays are purely cosmetic; every hop still goes through the
    controller's public API synchronously.
    """

    move_played = pyqtSignal(object)  # MoveResult
    turn_skipped = pyqtSignal(int)  # Side
    turn_finished = pyqtSignal(int)  # Side
    agent_error = pyqtSignal(str)

    __slots__ = (
        "_agent",
        "_controller",
        "_side",
        "_timer",
        "_first_move_delay_ms",
        "_chain_delay_ms",
    )

    def __init__(
        self,
        *,
        agent: IAgent | None = None,
        first_move_delay_ms: int = 600,
        chain_delay_ms: int = 400,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._agent = agent or GreedyAgent()
        self._controller: GameController | None = None
        self._side: Side | None = None
        self._first_move_delay_ms = first_move_delay_ms
        self._chain_delay_ms = chain_delay_ms
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._step)

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def create_ai_player(self, side: Side, name: str = "Checkie AI") -> AIPlayer:
        """Create an AI player wired to this worker."""
        return AIPlayer(
            side,
            name,
            on_request_move=self.request_turn,
            on_cancel=self.cancel,
        )

    def request_turn(self, controller: IGameController) -> None:
        """Schedule the agent's turn on *controller*."""
        if not isinstance(controller, GameController):
            self.agent_error.emit("Agent received an unsupported controller")
            return
        self._controller = controller
        self._side = controller.current_side
        self._timer.start(self._first_move_delay_ms)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop any scheduled hop."""
        self._timer.stop()
        self._controller = None
        self._side = None

    @pyqtSlot(int, int)
    def set_delays(self, first_move_delay_ms: int, chain_delay_ms: int) -> None:
        """Update pacing (takes effect on the next scheduled hop)."""
        self._first_move_delay_ms = first_move_delay_ms
        self._chain_delay_ms = chain_delay_ms

    @pyqtSlot()
    def _step(self) -> None:
        controller = self._controller
        side = self._side
        if controller is None or side is None:
            return
        if controller.current_side != side:
            # The turn moved on without us (skip, new game).
            self.cancel()
            return

        try:
            result = self._agent.play_step(controller)
        except Exception as exc:
            _LOGGER.exception("Agent failed while playing %s", side)
            self.cancel()
            self.agent_error.emit(str(exc))
            return

        if result is None:
            self._finish()
            self.turn_skipped.emit(int(side))
            return

        if not result.success:
            self.cancel()
            self.agent_error.emit(result.message or "Agent move rejected")
            return

        self.move_played.emit(result)
        if result.must_continue:
            self._timer.start(self._chain_delay_ms)
            return

        self._finish()
        self.turn_finished.emit(int(side))

    def _finish(self) -> None:
        # The controller may already have re-armed us for the next turn.
        if not self._timer.isActive():
            self._controller = None
            self._side = None
