"""One-ply greedy opponent."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from checkie.core.enums import Rank
from checkie.engine.search import AgentChoice, IAgent

if TYPE_CHECKING:
    from checkie.core.move import Move, MoveResult
    from checkie.core.piece import Piece
    from checkie.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

CAPTURE_WEIGHT = 10
PROMOTION_WEIGHT = 5
KING_WEIGHT = 1

# Upper bound for tie-breaking noise; must stay below the smallest weight.
MAX_JITTER = 1.0


class GreedyAgent(IAgent):
    """Picks the highest-scoring legal move, one turn at a time.

    ``score = 10 * captures + 5 * promotes + 1 * mover is king + jitter``,
    where ``jitter`` is drawn uniformly from ``[0, jitter)`` so equal moves
    are chosen at random without ever outweighing a real advantage.
    """

    __slots__ = ("_jitter", "_rng")

    def __init__(self, jitter: float = 0.5, rng: random.Random | None = None) -> None:
        if not 0 <= jitter < MAX_JITTER:
            raise ValueError(f"Jitter must be in [0, {MAX_JITTER}), got {jitter}")
        self._jitter = jitter
        self._rng = rng or random.Random()

    def score(self, move: Move, piece: Piece) -> float:
        value = (
            CAPTURE_WEIGHT * move.capture_count
            + PROMOTION_WEIGHT * int(move.promotes)
            + KING_WEIGHT * int(piece.rank == Rank.KING)
        )
        return value + self._rng.random() * self._jitter

    def choose_move(self, controller: GameController) -> AgentChoice | None:
        """Best legal move for the side to move, or ``None`` if stuck.

        During a capture chain only the bound piece's moves are considered.
        """
        board = controller.board
        best: AgentChoice | None = None
        for move in controller.legal_moves():
            piece = board.piece_at(move.origin)
            if piece is None:
                continue
            score = self.score(move, piece)
            if best is None or score > best.score:
                best = AgentChoice(move, score)
        return best

    def play_step(self, controller: GameController) -> MoveResult | None:
        """Play one hop; skip the turn and return ``None`` if no move exists."""
        choice = self.choose_move(controller)
        if choice is None:
            _LOGGER.info("%s has no legal move, skipping", controller.current_side)
            controller.skip_turn()
            return None

        hop = choice.move.first_hop()
        result = controller.play(hop.origin, hop.destination)
        if not result.success:
            _LOGGER.warning("Agent move %s rejected: %s", hop, result.message)
        return result

    def play_turn(self, controller: GameController) -> list[MoveResult]:
        """Play a whole turn, following capture chains to their end."""
        results: list[MoveResult] = []
        while True:
            result = self.play_step(controller)
            if result is None:
                break
            results.append(result)
            if not (result.success and result.must_continue):
                break
        return results
