"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Side

if TYPE_CHECKING:
    from checkie.core.move import MoveResult
    from checkie.core.types import Square


# ── Turn FSM states ──────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game.

    A won game stays in the selection states; game over is reported via
    events and queries but never blocks further calls.
    """

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, controller: IGameController) -> None:
        """Begin the move-selection process for a new turn.

        For humans this is a no-op (they interact via UI).
        For AI this kicks off (possibly deferred) move selection.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel a pending move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the rules engine / turn state machine."""

    @property
    @abstractmethod
    def current_side(self) -> Side:
        """Side to move."""

    @abstractmethod
    def initialize_board(self) -> None:
        """Reset the board and turn state for a new game."""

    @abstractmethod
    def select_piece(self, square: Square) -> bool:
        """Select the piece on *square*. Returns False if there is none."""

    @abstractmethod
    def deselect_piece(self) -> None:
        """Clear the current selection."""

    @abstractmethod
    def move_piece(self, destination: Square) -> MoveResult:
        """Move the selected piece by one hop."""

    @abstractmethod
    def skip_turn(self) -> None:
        """Pass the turn to the opponent unconditionally."""

    @abstractmethod
    def check_winner(self) -> Side | None:
        """Side that has captured every opposing piece, if any."""
