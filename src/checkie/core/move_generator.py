"""Per-piece move generation: simple moves and multi-jump capture sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Rank, Side
from checkie.core.move import Move
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    FORWARD,
    Direction,
    Square,
    is_on_board,
    step,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkie.core.board import Board
    from checkie.core.piece import Piece

_PROMOTION_RANK: dict[Side, int] = {
    side: BOARD_SIZE - 1 if forward > 0 else 0 for side, forward in FORWARD.items()
}


def forward_directions(side: Side) -> tuple[Direction, ...]:
    """The two diagonals a man of *side* may step along."""
    forward = FORWARD[side]
    return ((1, forward), (-1, forward))


def promotion_rank(side: Side) -> int:
    """Rank on which a man of *side* is crowned."""
    return _PROMOTION_RANK[side]


class MoveGenerator:
    """Generates the moves of a single piece, ignoring the rest of its side.

    Forced-capture filtering across a whole side is done by
    :class:`~checkie.core.rules.Rules`; this class only knows movement
    geometry. The board is read, never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def moves_for(self, piece: Piece) -> list[Move]:
        """Capture sequences followed by simple moves of *piece*."""
        return self.capture_moves(piece) + self.simple_moves(piece)

    def simple_moves(self, piece: Piece) -> list[Move]:
        """Non-capturing moves.

        A man steps one square along a forward diagonal. A king slides any
        distance along any diagonal, stopping before the first occupied
        square.
        """
        board = self._board
        moves: list[Move] = []
        origin = piece.square

        if piece.rank == Rank.KING:
            for direction in DIAGONALS:
                to_sq = step(origin, direction)
                while is_on_board(to_sq) and board.is_empty(to_sq):
                    moves.append(Move(origin, (to_sq,)))
                    to_sq = step(to_sq, direction)
            return moves

        promo_rank = _PROMOTION_RANK[piece.side]
        for direction in forward_directions(piece.side):
            to_sq = step(origin, direction)
            if is_on_board(to_sq) and board.is_empty(to_sq):
                moves.append(Move(origin, (to_sq,), promotes=to_sq[1] == promo_rank))
        return moves

    def capture_moves(
        self, piece: Piece, already_captured: Iterable[Square] = ()
    ) -> list[Move]:
        """Every terminal capture sequence available to *piece*.

        *already_captured* lists squares taken earlier in the same turn.
        They stay blocked until the turn ends even though their pieces have
        left the board.
        """
        return self._search(
            piece,
            piece.square,
            piece.rank,
            captured=(),
            path=(),
            promoted=False,
            blocked=frozenset(already_captured),
        )

    def has_capture(
        self, piece: Piece, already_captured: Iterable[Square] = ()
    ) -> bool:
        blocked = frozenset(already_captured)
        return bool(self._jumps_from(piece, piece.square, piece.rank, blocked))

    def pieces_with_captures(self, side: Side) -> list[Piece]:
        """Pieces of *side* that have at least one capture available."""
        return [p for p in self._board.pieces(side) if self.has_capture(p)]

    # -- Capture search (private) -------------------------------------------

    def _search(
        self,
        piece: Piece,
        from_sq: Square,
        rank: Rank,
        captured: tuple[Square, ...],
        path: tuple[Square, ...],
        promoted: bool,
        blocked: frozenset[Square],
    ) -> list[Move]:
        jumps = self._jumps_from(piece, from_sq, rank, blocked.union(captured))
        if not jumps:
            if not captured:
                return []
            return [Move(piece.square, path, captured, promoted)]

        promo_rank = _PROMOTION_RANK[piece.side]
        sequences: list[Move] = []
        for victim, landing in jumps:
            crowned = rank == Rank.MAN and landing[1] == promo_rank
            sequences.extend(
                self._search(
                    piece,
                    landing,
                    Rank.KING if crowned else rank,
                    captured + (victim,),
                    path + (landing,),
                    promoted or crowned,
                    blocked,
                )
            )
        return sequences

    def _jumps_from(
        self,
        piece: Piece,
        from_sq: Square,
        rank: Rank,
        captured: frozenset[Square],
    ) -> list[tuple[Square, Square]]:
        """Single hops ``(victim, landing)`` available from *from_sq*.

        The moving piece's own starting square counts as empty. A square in
        *captured* blocks the ray whether or not its piece is still on the
        board.
        """
        board = self._board
        origin = piece.square
        long_range = rank == Rank.KING
        hops: list[tuple[Square, Square]] = []

        for direction in DIAGONALS:
            victim_sq = step(from_sq, direction)
            if long_range:
                while (
                    is_on_board(victim_sq)
                    and victim_sq not in captured
                    and (victim_sq == origin or board.is_empty(victim_sq))
                ):
                    victim_sq = step(victim_sq, direction)
            if (
                not is_on_board(victim_sq)
                or victim_sq == origin
                or victim_sq in captured
            ):
                continue

            victim = board[victim_sq]
            if victim is None or victim.side == piece.side:
                continue

            landing = step(victim_sq, direction)
            while (
                is_on_board(landing)
                and landing not in captured
                and (landing == origin or board.is_empty(landing))
            ):
                hops.append((victim_sq, landing))
                if not long_range:
                    break
                landing = step(landing, direction)
        return hops
