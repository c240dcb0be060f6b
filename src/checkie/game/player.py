"""Seats at the board: human players and callback-driven agents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from checkie.core.enums import Side
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.game.interfaces import IGameController

_LOGGER = logging.getLogger(__name__)

TurnRequest = Callable[["IGameController"], None]


class _Seat(IPlayer):
    """Side and display name shared by every player kind."""

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str) -> None:
        self._side = side
        self._name = name

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._side.title}, {self._name!r})"


class HumanPlayer(_Seat):
    """Moves arrive through ``select_piece``/``move_piece`` calls."""

    __slots__ = ()

    def __init__(self, side: Side, name: str = "") -> None:
        super().__init__(side, name or f"{side.title} player")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, controller: IGameController) -> None:
        pass

    def cancel(self) -> None:
        pass


class AIPlayer(_Seat):
    """Hands its turns to *on_request_move*.

    The callback is only invoked while this player's side is to move; a
    prompt for the other side is ignored. In production it is
    :meth:`checkie.engine.qt_bridge.AgentWorker.request_turn`.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        side: Side,
        name: str = "Agent",
        on_request_move: TurnRequest | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(side, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, controller: IGameController) -> None:
        if controller.current_side != self._side:
            _LOGGER.debug(
                "%r prompted on %s's turn, ignoring", self, controller.current_side
            )
            return
        if self._on_request_move is not None:
            self._on_request_move(controller)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
