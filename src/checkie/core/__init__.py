"""Core domain layer: pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Rules, Side

    board = Board.initial()
    for move in Rules.legal_moves(board, Side.BLACK):
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import GameResult, MoveError, Rank, Side
from checkie.core.errors import InvariantViolation
from checkie.core.move import Move, MoveResult
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import board_from_diagram, board_to_diagram
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import (
    BOARD_SIZE,
    ROWS_PER_SIDE,
    Square,
    file_of,
    is_on_board,
    is_playable,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "MoveError",
    "Rank",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "ROWS_PER_SIDE",
    "Square",
    "file_of",
    "is_on_board",
    "is_playable",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "InvariantViolation",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Rules",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
]
