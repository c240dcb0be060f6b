"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Rank, Side
from checkie.core.types import Square

# Diagram character <-> (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "b": (Side.BLACK, Rank.MAN),
    "B": (Side.BLACK, Rank.KING),
    "w": (Side.WHITE, Rank.MAN),
    "W": (Side.WHITE, Rank.KING),
}

_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(eq=False, slots=True)
class Piece:
    """A live piece on a board.

    Pieces are compared by identity: two men of the same side on different
    squares are different pieces. ``id`` is a stable handle assigned by the
    owning :class:`~checkie.core.board.Board`; only the board mutates
    ``rank`` and ``square``.
    """

    id: int
    side: Side
    rank: Rank
    square: Square

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.side, self.rank)]

    @staticmethod
    def parse_char(char: str) -> tuple[Side, Rank]:
        """Decode a diagram character, e.g. 'W' -> white king."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
