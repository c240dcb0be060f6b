"""Board - piece registry on a 10x10 draughts board."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Rank, Side
from checkie.core.errors import InvariantViolation
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    ROWS_PER_SIDE,
    Square,
    is_on_board,
    is_playable,
    make_square,
    square_name,
)


class Board:
    """Mutable board owning the set of live pieces.

    Pieces are indexed both by square and by their stable ``id`` so lookups
    stay O(1) and removals never shift references held elsewhere.
    """

    __slots__ = ("_by_square", "_by_id", "_next_id")

    def __init__(self) -> None:
        self._by_square: dict[Square, Piece] = {}
        self._by_id: dict[int, Piece] = {}
        self._next_id = 1

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._by_square.get(sq)

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self._by_id.get(piece.id) is piece

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` for empty and off-board squares."""
        return self._by_square.get(sq)

    def get(self, piece_id: int) -> Piece | None:
        """Live piece with handle *piece_id*, if any."""
        return self._by_id.get(piece_id)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._by_square

    @staticmethod
    def is_on_board(sq: Square) -> bool:
        return is_on_board(sq)

    @staticmethod
    def is_playable(sq: Square) -> bool:
        return is_playable(sq)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side | None = None) -> list[Piece]:
        """Live pieces, optionally restricted to *side*, in placement order."""
        if side is None:
            return list(self._by_id.values())
        return [p for p in self._by_id.values() if p.side == side]

    def count(self, side: Side) -> int:
        return sum(1 for p in self._by_id.values() if p.side == side)

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, sq: Square, side: Side, rank: Rank = Rank.MAN) -> Piece:
        """Create a piece on *sq*. Used during setup only."""
        if not is_playable(sq):
            raise ValueError(f"Cannot place a piece on {square_name(sq)}: not playable")
        if sq in self._by_square:
            raise ValueError(f"Cannot place a piece on {square_name(sq)}: occupied")
        piece = Piece(self._next_id, side, rank, sq)
        self._next_id += 1
        self._by_square[sq] = piece
        self._by_id[piece.id] = piece
        return piece

    def remove_piece(self, piece: Piece) -> None:
        """Delete *piece*. Removing a piece that is not on the board raises."""
        if piece not in self:
            raise ValueError(f"Piece {piece.id} is not on the board")
        del self._by_id[piece.id]
        del self._by_square[piece.square]

    def move_piece_to(self, piece: Piece, sq: Square) -> None:
        """Relocate *piece* without checking move legality."""
        if piece not in self:
            raise ValueError(f"Piece {piece.id} is not on the board")
        occupant = self._by_square.get(sq)
        if occupant is not None and occupant is not piece:
            raise ValueError(f"Cannot move onto {square_name(sq)}: occupied")
        del self._by_square[piece.square]
        piece.square = sq
        self._by_square[sq] = piece

    def promote(self, piece: Piece) -> bool:
        """Crown *piece*. Returns ``True`` if its rank changed."""
        if piece not in self:
            raise ValueError(f"Piece {piece.id} is not on the board")
        if piece.rank == Rank.KING:
            return False
        piece.rank = Rank.KING
        return True

    def copy(self) -> Board:
        """Deep copy; piece handles are preserved."""
        b = Board()
        for piece in self._by_id.values():
            clone = Piece(piece.id, piece.side, piece.rank, piece.square)
            b._by_square[clone.square] = clone
            b._by_id[clone.id] = clone
        b._next_id = self._next_id
        return b

    def clear(self) -> None:
        self._by_square.clear()
        self._by_id.clear()

    def validate(self) -> None:
        """Raise :class:`InvariantViolation` if the registry is inconsistent."""
        if len(self._by_square) != len(self._by_id):
            raise InvariantViolation(
                f"Square index holds {len(self._by_square)} pieces, "
                f"id index holds {len(self._by_id)}"
            )
        for sq, piece in self._by_square.items():
            if piece.square != sq:
                raise InvariantViolation(
                    f"Piece {piece.id} indexed at {square_name(sq)} "
                    f"but located at {square_name(piece.square)}"
                )
            if self._by_id.get(piece.id) is not piece:
                raise InvariantViolation(f"Piece {piece.id} missing from id index")
            if not is_playable(sq):
                raise InvariantViolation(
                    f"Piece {piece.id} on unplayable square {square_name(sq)}"
                )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: Black on ranks 1-4, White on ranks 7-10."""
        b = cls()
        for side, ranks in (
            (Side.BLACK, range(ROWS_PER_SIDE)),
            (Side.WHITE, range(BOARD_SIZE - ROWS_PER_SIDE, BOARD_SIZE)),
        ):
            for rank in ranks:
                for file in range(BOARD_SIZE):
                    sq = make_square(file, rank)
                    if is_playable(sq):
                        b.place_piece(sq, side)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        if self._by_square.keys() != other._by_square.keys():
            return False
        return all(
            (p.side, p.rank) == (other._by_square[sq].side, other._by_square[sq].rank)
            for sq, p in self._by_square.items()
        )

    def __repr__(self) -> str:
        from checkie.core.notation import board_to_diagram

        rows = board_to_diagram(self).splitlines()
        labelled = [
            f"{BOARD_SIZE - i:>2} {' '.join(row)}" for i, row in enumerate(rows)
        ]
        labelled.append("   a b c d e f g h i j")
        return "\n".join(labelled)
