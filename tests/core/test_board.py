"""Tests for Board and square helpers."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Rank, Side
from checkie.core.errors import InvariantViolation
from checkie.core.types import (
    BOARD_SIZE,
    is_on_board,
    is_playable,
    parse_square,
    rank_of,
    square_name,
)


class TestSquares:
    def test_names(self) -> None:
        assert square_name((0, 0)) == "a1"
        assert square_name((9, 9)) == "j10"
        assert square_name((4, 5)) == "e6"

    def test_parse(self) -> None:
        assert parse_square("a1") == (0, 0)
        assert parse_square("j10") == (9, 9)
        assert parse_square("b4") == (1, 3)

    @pytest.mark.parametrize("name", ["", "k1", "a0", "a11", "a", "ab"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_on_board(self) -> None:
        assert is_on_board((0, 0))
        assert is_on_board((9, 9))
        assert not is_on_board((10, 0))
        assert not is_on_board((0, -1))

    def test_playable_is_dark_square(self) -> None:
        assert is_playable((0, 1))
        assert is_playable((1, 0))
        assert not is_playable((0, 0))
        assert not is_playable((-1, 0))


class TestBoardInitial:
    def test_twenty_pieces_per_side(self) -> None:
        board = Board.initial()
        assert board.count(Side.BLACK) == 20
        assert board.count(Side.WHITE) == 20
        assert len(board) == 40

    def test_all_pieces_on_dark_squares(self) -> None:
        board = Board.initial()
        assert all(is_playable(p.square) for p in board)

    def test_opposite_row_bands(self) -> None:
        board = Board.initial()
        assert {rank_of(p.square) for p in board.pieces(Side.BLACK)} == {0, 1, 2, 3}
        assert {rank_of(p.square) for p in board.pieces(Side.WHITE)} == {6, 7, 8, 9}

    def test_middle_rows_empty(self) -> None:
        board = Board.initial()
        for file in range(BOARD_SIZE):
            assert board.piece_at((file, 4)) is None
            assert board.piece_at((file, 5)) is None

    def test_all_men(self) -> None:
        board = Board.initial()
        assert all(p.rank == Rank.MAN for p in board)

    def test_unique_ids(self) -> None:
        board = Board.initial()
        ids = [p.id for p in board]
        assert len(set(ids)) == len(ids)

    def test_validates(self) -> None:
        Board.initial().validate()


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = Board()
        piece = board.place_piece((3, 4), Side.WHITE)
        assert board.piece_at((3, 4)) is piece
        assert board[(3, 4)] is piece
        assert board.get(piece.id) is piece
        assert piece.side == Side.WHITE
        assert piece.rank == Rank.MAN

    def test_piece_at_empty_or_off_board(self) -> None:
        board = Board.initial()
        assert board.piece_at((4, 5)) is None
        assert board.piece_at((42, 0)) is None
        assert board.piece_at((-1, 2)) is None

    def test_place_on_light_square_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="not playable"):
            board.place_piece((0, 0), Side.BLACK)

    def test_place_off_board_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="not playable"):
            board.place_piece((10, 1), Side.BLACK)

    def test_place_on_occupied_raises(self) -> None:
        board = Board()
        board.place_piece((0, 1), Side.BLACK)
        with pytest.raises(ValueError, match="occupied"):
            board.place_piece((0, 1), Side.WHITE)

    def test_remove(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        board.remove_piece(piece)
        assert board.piece_at((0, 1)) is None
        assert piece not in board
        assert len(board) == 0

    def test_remove_absent_raises(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        board.remove_piece(piece)
        with pytest.raises(ValueError, match="not on the board"):
            board.remove_piece(piece)

    def test_removal_keeps_other_handles(self) -> None:
        board = Board.initial()
        first, second = board.pieces(Side.BLACK)[:2]
        board.remove_piece(first)
        assert board.get(second.id) is second
        assert board.piece_at(second.square) is second

    def test_move_piece_to(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        board.move_piece_to(piece, (5, 6))
        assert piece.square == (5, 6)
        assert board.piece_at((5, 6)) is piece
        assert board.piece_at((0, 1)) is None

    def test_move_onto_other_piece_raises(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        board.place_piece((1, 2), Side.WHITE)
        with pytest.raises(ValueError, match="occupied"):
            board.move_piece_to(piece, (1, 2))

    def test_promote_is_monotonic(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        assert board.promote(piece) is True
        assert piece.rank == Rank.KING
        assert board.promote(piece) is False
        assert piece.rank == Rank.KING

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.remove_piece(copy.piece_at((0, 1)))
        assert board != copy
        assert board.piece_at((0, 1)) is not None

    def test_copy_preserves_handles(self) -> None:
        board = Board.initial()
        copy = board.copy()
        for piece in board:
            clone = copy.get(piece.id)
            assert clone is not None and clone is not piece
            assert clone.square == piece.square

    def test_ids_not_reused(self) -> None:
        board = Board()
        first = board.place_piece((0, 1), Side.BLACK)
        board.remove_piece(first)
        second = board.place_piece((0, 1), Side.BLACK)
        assert second.id != first.id

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert len(board) == 0
        assert board.piece_at((0, 1)) is None

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "b" in text and "w" in text
        assert "a b c d e f g h i j" in text


class TestBoardInvariants:
    def test_corrupted_square_detected(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        piece.square = (0, 3)  # bypasses the board on purpose
        with pytest.raises(InvariantViolation):
            board.validate()

    def test_light_square_detected(self) -> None:
        board = Board()
        piece = board.place_piece((0, 1), Side.BLACK)
        board.move_piece_to(piece, (0, 0))
        with pytest.raises(InvariantViolation, match="unplayable"):
            board.validate()
