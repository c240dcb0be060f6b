"""Turn state and small value types shared by the game layer."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Side
from checkie.core.types import Square


@dataclass
class TurnState:
    """Whose turn it is and whether a capture chain must be continued.

    ``must_continue_with`` is the stable id of the bound piece, never a
    list index. ``captured_this_turn`` holds the squares emptied by the
    chain so far; they stay closed to the bound piece until the turn ends.
    """

    side_to_move: Side = Side.BLACK
    must_continue_with: int | None = None
    starting_side: Side = Side.BLACK
    captured_this_turn: tuple[Square, ...] = ()

    def reset(self, starting_side: Side) -> None:
        self.starting_side = starting_side
        self.side_to_move = starting_side
        self._end_chain()

    def pass_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._end_chain()

    def continue_chain(self, piece_id: int, captured: tuple[Square, ...]) -> None:
        """Bind *piece_id* for another hop, remembering what it has taken."""
        self.must_continue_with = piece_id
        self.captured_this_turn += captured

    def _end_chain(self) -> None:
        self.must_continue_with = None
        self.captured_this_turn = ()


@dataclass(frozen=True, slots=True)
class PieceCounts:
    """Live piece count per side."""

    black: int
    white: int

    def __getitem__(self, side: Side) -> int:
        return self.black if side == Side.BLACK else self.white
