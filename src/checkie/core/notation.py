"""Text diagrams for boards.

A diagram is ten lines of ten characters, rank 10 first::

    w.w.w.w.w.
    ...
    .b.b.b.b.b

``b``/``w`` are men, ``B``/``W`` kings and ``.`` an empty square. Blank
lines and surrounding whitespace are ignored; spaces between characters
are allowed.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, make_square


def board_from_diagram(text: str) -> Board:
    """Build a :class:`Board` from a text diagram."""
    rows = ["".join(line.split()) for line in text.strip().splitlines()]
    rows = [row for row in rows if row]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid diagram (must contain {BOARD_SIZE} ranks): {text!r}")

    board = Board()
    for i, row in enumerate(rows):
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram rank width: {row!r}")
        rank = BOARD_SIZE - 1 - i
        for file, ch in enumerate(row):
            if ch == ".":
                continue
            side, piece_rank = Piece.parse_char(ch)
            board.place_piece(make_square(file, rank), side, piece_rank)
    return board


def board_to_diagram(board: Board) -> str:
    """Render *board* as a text diagram (inverse of :func:`board_from_diagram`)."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        row = []
        for file in range(BOARD_SIZE):
            p = board[make_square(file, rank)]
            row.append(str(p) if p else ".")
        rows.append("".join(row))
    return "\n".join(rows)
