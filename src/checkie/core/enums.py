"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side (owner) of a piece."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def title(self) -> str:
        """Capitalised display name, e.g. ``"Black"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. A man may become a king, never the other way round."""

    MAN = 1
    KING = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLACK_WINS = 1
    WHITE_WINS = 2


class MoveError(IntEnum):
    """Reason a requested move was rejected."""

    NO_SELECTION = 1
    WRONG_TURN = 2
    MUST_CONTINUE_CAPTURE = 3
    OFF_BOARD = 4
    OCCUPIED = 5
    MUST_CAPTURE = 6
    NOT_DIAGONAL = 7
    BACKWARD = 8
    PATH_BLOCKED = 9
    NO_PIECE_TO_JUMP = 10
    OWN_PIECE = 11
    ILLEGAL_MOVE = 12
