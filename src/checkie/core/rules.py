"""High-level draughts rules: forced capture, win detection, move diagnosis."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import GameResult, MoveError, Rank, Side
from checkie.core.move_generator import MoveGenerator, forward_directions, promotion_rank
from checkie.core.types import Square, step

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkie.core.board import Board
    from checkie.core.move import Move
    from checkie.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Capturing is mandatory, but any capture sequence may be chosen
    #   (no majority-capture rule).
    # - A side wins when the opponent has no pieces left. Running out of
    #   moves is not a loss; the caller may skip the turn instead.

    @staticmethod
    def promotion_rank(side: Side) -> int:
        return promotion_rank(side)

    @staticmethod
    def has_any_capture(board: Board, side: Side) -> bool:
        gen = MoveGenerator(board)
        return any(gen.has_capture(p) for p in board.pieces(side))

    @staticmethod
    def legal_moves(
        board: Board,
        side: Side,
        must_continue_with: Piece | None = None,
        captured_this_turn: Iterable[Square] = (),
    ) -> list[Move]:
        """All legal moves for *side* with forced capture applied.

        When *must_continue_with* is given only that piece may move, and only
        by capturing; squares in *captured_this_turn* cannot be crossed or
        jumped again.
        """
        gen = MoveGenerator(board)
        if must_continue_with is not None:
            return gen.capture_moves(must_continue_with, captured_this_turn)

        pieces = board.pieces(side)
        captures = [m for p in pieces for m in gen.capture_moves(p)]
        if captures:
            return captures
        return [m for p in pieces for m in gen.simple_moves(p)]

    @staticmethod
    def has_legal_move(board: Board, side: Side) -> bool:
        return bool(Rules.legal_moves(board, side))

    @staticmethod
    def winner(board: Board) -> Side | None:
        """The side whose opponent has no pieces left, if any."""
        for side in (Side.BLACK, Side.WHITE):
            if board.count(side.opposite) == 0 and board.count(side) > 0:
                return side
        return None

    @staticmethod
    def game_result(board: Board) -> GameResult:
        winner = Rules.winner(board)
        if winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.BLACK_WINS if winner == Side.BLACK else GameResult.WHITE_WINS

    @staticmethod
    def diagnose(board: Board, piece: Piece, destination: Square) -> MoveError:
        """Name the movement rule that forbids *piece* going to *destination*.

        Only called for destinations already known to be illegal.
        """
        df = destination[0] - piece.square[0]
        dr = destination[1] - piece.square[1]
        if df == 0 or abs(df) != abs(dr):
            return MoveError.NOT_DIAGONAL

        distance = abs(df)
        direction = (df // distance, dr // distance)
        between = [step(piece.square, direction, i) for i in range(1, distance)]
        occupied = [sq for sq in between if not board.is_empty(sq)]

        if not occupied:
            if piece.rank == Rank.MAN:
                if distance == 2:
                    return MoveError.NO_PIECE_TO_JUMP
                if distance == 1 and direction not in forward_directions(piece.side):
                    return MoveError.BACKWARD
            return MoveError.ILLEGAL_MOVE

        blocker = board[occupied[0]]
        if blocker is not None and blocker.side == piece.side:
            return MoveError.OWN_PIECE
        if len(occupied) > 1:
            return MoveError.PATH_BLOCKED
        return MoveError.ILLEGAL_MOVE
