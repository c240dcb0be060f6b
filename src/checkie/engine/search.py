"""Shared agent models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.move import Move, MoveResult
    from checkie.game.controller import GameController


@dataclass(slots=True, frozen=True)
class AgentChoice:
    """A move picked by an agent together with its heuristic score."""

    move: Move
    score: float


class IAgent(Protocol):
    """Protocol for opponents driven through the controller's public API."""

    def choose_move(self, controller: GameController) -> AgentChoice | None: ...

    def play_step(self, controller: GameController) -> MoveResult | None: ...

    def play_turn(self, controller: GameController) -> list[MoveResult]: ...
