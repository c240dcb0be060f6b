"""Square type alias, coordinate helpers and board-layout constants.

Board layout::

    (file, rank) with file 0-9 (a-j) and rank 0-9 (1-10).
    a1=(0, 0), b1=(1, 0), ..., j10=(9, 9)

Only dark squares, where ``file + rank`` is odd, are playable.
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.enums import Side

Square: TypeAlias = tuple[int, int]
Direction: TypeAlias = tuple[int, int]

BOARD_SIZE = 10
ROWS_PER_SIDE = 4

# Rank delta of a forward step for each side.
FORWARD: dict[Side, int] = {Side.BLACK: 1, Side.WHITE: -1}

DIAGONALS: tuple[Direction, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))

_FILE_NAMES = "abcdefghij"


def file_of(sq: Square) -> int:
    """File index 0-9 (a-j)."""
    return sq[0]


def rank_of(sq: Square) -> int:
    """Rank index 0-9 (1-10)."""
    return sq[1]


def make_square(file: int, rank: int) -> Square:
    return (file, rank)


def is_on_board(sq: Square) -> bool:
    """Whether both coordinates fall inside the board."""
    return 0 <= sq[0] < BOARD_SIZE and 0 <= sq[1] < BOARD_SIZE


def is_playable(sq: Square) -> bool:
    """Whether *sq* is an on-board dark square."""
    return is_on_board(sq) and (sq[0] + sq[1]) % 2 == 1


def step(sq: Square, direction: Direction, distance: int = 1) -> Square:
    return (sq[0] + direction[0] * distance, sq[1] + direction[1] * distance)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) -> 'a1', (9, 9) -> 'j10'."""
    if not is_on_board(sq):
        return f"({sq[0]}, {sq[1]})"
    return _FILE_NAMES[sq[0]] + str(sq[1] + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'b4' -> (1, 3)."""
    if len(name) not in (2, 3) or name[0] not in _FILE_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    digits = name[1:]
    if not digits.isdigit() or not 1 <= int(digits) <= BOARD_SIZE:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_FILE_NAMES.index(name[0]), int(digits) - 1)
