"""Tests for text diagrams."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Rank, Side
from checkie.core.notation import board_from_diagram, board_to_diagram

INITIAL = """
w.w.w.w.w.
.w.w.w.w.w
w.w.w.w.w.
.w.w.w.w.w
..........
..........
b.b.b.b.b.
.b.b.b.b.b
b.b.b.b.b.
.b.b.b.b.b
"""


class TestFromDiagram:
    def test_initial_position(self) -> None:
        assert board_from_diagram(INITIAL) == Board.initial()

    def test_kings_and_men(self) -> None:
        board = board_from_diagram(
            """
            W.........
            ..........
            ..........
            ..........
            ..........
            ..........
            ..........
            ..........
            ..........
            .B.....w..
            """
        )
        assert len(board) == 3
        assert board[(0, 9)].side == Side.WHITE
        assert board[(0, 9)].rank == Rank.KING
        assert board[(1, 0)].rank == Rank.KING
        assert board[(7, 0)].rank == Rank.MAN

    def test_spaces_between_characters(self) -> None:
        spaced = "\n".join(" ".join(row) for row in INITIAL.strip().splitlines())
        assert board_from_diagram(spaced) == Board.initial()

    def test_wrong_rank_count(self) -> None:
        with pytest.raises(ValueError, match="ranks"):
            board_from_diagram("..........\n" * 9)

    def test_wrong_width(self) -> None:
        rows = INITIAL.strip().splitlines()
        rows[0] = rows[0] + "."
        with pytest.raises(ValueError, match="width"):
            board_from_diagram("\n".join(rows))

    def test_bad_character(self) -> None:
        rows = INITIAL.strip().splitlines()
        rows[4] = "x........."
        with pytest.raises(ValueError):
            board_from_diagram("\n".join(rows))

    def test_piece_on_light_square(self) -> None:
        rows = INITIAL.strip().splitlines()
        rows[4] = ".b........"
        with pytest.raises(ValueError, match="not playable"):
            board_from_diagram("\n".join(rows))


class TestToDiagram:
    def test_initial_position(self) -> None:
        assert board_to_diagram(Board.initial()) == INITIAL.strip()

    def test_empty_board(self) -> None:
        assert board_to_diagram(Board()) == "\n".join(["." * 10] * 10)

    def test_round_trip_preserves_kings(self) -> None:
        board = Board()
        board.place_piece((4, 5), Side.BLACK, Rank.KING)
        board.place_piece((7, 2), Side.WHITE)
        assert board_from_diagram(board_to_diagram(board)) == board
