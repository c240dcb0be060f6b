"""GameController: the rules engine and turn state machine of a game.

Coordinates: Board, TurnState, MoveGenerator, Players.
Emits events via simple callbacks so the presentation layer / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, MoveError, Rank, Side
from checkie.core.move import Move, MoveResult
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.rules import Rules
from checkie.core.types import Square, is_playable, square_name
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import HumanPlayer
from checkie.game.state import PieceCounts, TurnState

_LOGGER = logging.getLogger(__name__)

_GEOMETRY_MESSAGES: dict[MoveError, str] = {
    MoveError.NOT_DIAGONAL: "Must move diagonally",
    MoveError.BACKWARD: "Regular pieces can only move forward",
    MoveError.PATH_BLOCKED: "Path is blocked",
    MoveError.NO_PIECE_TO_JUMP: "No piece to jump over",
    MoveError.OWN_PIECE: "Cannot jump over own piece",
    MoveError.ILLEGAL_MOVE: "Illegal move",
}

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
TurnCallback = Callable[[Side], None]  # side now to move
GameOverCallback = Callable[[Side], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns one board and its turn state; validates and applies moves.

    Every mutating call validates first and applies second, so a rejected
    move leaves no trace. Rule violations come back as a failed
    :class:`MoveResult`, never as exceptions.

    Thread-safety: none. Calls must be serialised by the caller (the
    agent's Qt pacing runs on the main thread).
    """

    __slots__ = (
        "_board",
        "_turn",
        "_players",
        "_phase",
        "_selected_id",
        "_next_starting_side",
        "_winner_announced",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board()
        self._turn = TurnState()
        self._players: dict[Side, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._selected_id: int | None = None
        self._next_starting_side = Side.BLACK
        self._winner_announced = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> TurnState:
        return self._turn

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_side(self) -> Side:
        return self._turn.side_to_move

    @property
    def result(self) -> GameResult:
        return Rules.game_result(self._board)

    @property
    def selected_piece(self) -> Piece | None:
        if self._selected_id is None:
            return None
        return self._board.get(self._selected_id)

    @property
    def bound_piece(self) -> Piece | None:
        """Piece that must continue its capture chain, if any."""
        if self._turn.must_continue_with is None:
            return None
        return self._board.get(self._turn.must_continue_with)

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._turn.side_to_move)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        black: IPlayer | None = None,
        white: IPlayer | None = None,
        board: Board | None = None,
        side_to_move: Side = Side.BLACK,
    ) -> None:
        """Assign players (humans by default) and set up the board.

        With *board* the game starts from that position instead of the
        initial setup.
        """
        for cp in self._players.values():
            cp.cancel()
        self._players = {
            Side.BLACK: black or HumanPlayer(Side.BLACK),
            Side.WHITE: white or HumanPlayer(Side.WHITE),
        }
        if board is None:
            self.initialize_board()
        else:
            self.load_position(board, side_to_move)

    def initialize_board(self) -> None:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

        starting_side = self._next_starting_side
        self._next_starting_side = starting_side.opposite

        self._board = Board.initial()
        self._turn.reset(starting_side)
        self._selected_id = None
        self._winner_announced = False
        self._phase = GamePhase.AWAITING_SELECTION
        _LOGGER.info("New game: %s moves first", starting_side)

        self._emit_turn_changed()
        self._prompt_current_player()

    def load_position(self, board: Board, side_to_move: Side) -> None:
        """Continue play from an arbitrary position.

        Does not affect which side starts the next initialised game.
        """
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

        board.validate()
        self._board = board
        self._turn.reset(side_to_move)
        self._selected_id = None
        self._winner_announced = self.check_winner() is not None
        self._phase = GamePhase.AWAITING_SELECTION
        _LOGGER.info("Position loaded: %s to move", side_to_move)

        self._emit_turn_changed()
        self._prompt_current_player()

    # ── Selection ────────────────────────────────────────────────────────

    def select_piece(self, square: Square) -> bool:
        piece = self._board.piece_at(square)
        if piece is None:
            return False
        self._selected_id = piece.id
        self._phase = GamePhase.PIECE_SELECTED
        return True

    def deselect_piece(self) -> None:
        self._selected_id = None
        if self._phase == GamePhase.PIECE_SELECTED:
            self._phase = GamePhase.AWAITING_SELECTION

    def is_selectable(self, square: Square) -> bool:
        """Whether the piece on *square* may move this turn."""
        piece = self._board.piece_at(square)
        if piece is None or piece.side != self._turn.side_to_move:
            return False
        bound = self.bound_piece
        if bound is not None:
            return piece is bound
        gen = MoveGenerator(self._board)
        if Rules.has_any_capture(self._board, piece.side):
            return gen.has_capture(piece)
        return bool(gen.simple_moves(piece))

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, piece: Piece | None = None) -> list[Move]:
        """Legal moves of the side to move, optionally for one *piece*."""
        moves = self._legal_moves()
        if piece is None:
            return moves
        return [m for m in moves if m.origin == piece.square]

    def capturing_pieces(self) -> list[Piece]:
        """Pieces of the side to move that are obliged to capture."""
        bound = self.bound_piece
        if bound is not None:
            return [bound]
        gen = MoveGenerator(self._board)
        return gen.pieces_with_captures(self._turn.side_to_move)

    def check_winner(self) -> Side | None:
        return Rules.winner(self._board)

    def piece_counts(self) -> PieceCounts:
        return PieceCounts(
            black=self._board.count(Side.BLACK),
            white=self._board.count(Side.WHITE),
        )

    def status_message(self) -> str:
        winner = self.check_winner()
        if winner is not None:
            return f"{winner.title} wins! All opponent pieces have been captured."

        side = self._turn.side_to_move
        if self.bound_piece is not None or Rules.has_any_capture(self._board, side):
            return f"{side.title}'s turn - Must capture!"
        return f"{side.title}'s turn"

    # ── Moves ────────────────────────────────────────────────────────────

    def play(self, origin: Square, destination: Square) -> MoveResult:
        """Select the piece on *origin* and move it to *destination*."""
        if not self.select_piece(origin):
            return self._reject(
                MoveError.NO_SELECTION, f"No piece on {square_name(origin)}"
            )
        return self.move_piece(destination)

    def move_piece(self, destination: Square) -> MoveResult:
        piece = self.selected_piece
        if piece is None:
            return self._reject(MoveError.NO_SELECTION, "No piece selected")

        side = self._turn.side_to_move
        if piece.side != side:
            return self._reject(MoveError.WRONG_TURN, f"It's {side}'s turn")

        bound = self.bound_piece
        if bound is not None and piece is not bound:
            return self._reject(
                MoveError.MUST_CONTINUE_CAPTURE,
                f"Must continue capturing with the piece on {square_name(bound.square)}",
            )

        if not is_playable(destination):
            return self._reject(
                MoveError.OFF_BOARD, "Target position is not a playable square"
            )
        if not self._board.is_empty(destination):
            return self._reject(MoveError.OCCUPIED, "Target position is occupied")

        legal = self._legal_moves()
        hop = next(
            (
                m.first_hop()
                for m in legal
                if m.origin == piece.square and m.path[0] == destination
            ),
            None,
        )
        if hop is None:
            return self._reject_geometry(piece, destination, legal)

        return self._apply_hop(piece, hop)

    def skip_turn(self) -> None:
        skipped = self._turn.side_to_move
        self._turn.pass_turn()
        self.deselect_piece()
        _LOGGER.info("%s skips the turn", skipped)
        self._emit_turn_changed()
        self._prompt_current_player()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _legal_moves(self) -> list[Move]:
        return Rules.legal_moves(
            self._board,
            self._turn.side_to_move,
            self.bound_piece,
            self._turn.captured_this_turn,
        )

    def _apply_hop(self, piece: Piece, hop: Move) -> MoveResult:
        board = self._board
        origin = piece.square

        for sq in hop.captured:
            victim = board.piece_at(sq)
            if victim is not None:
                board.remove_piece(victim)
        board.move_piece_to(piece, hop.destination)

        became_king = False
        if (
            piece.rank == Rank.MAN
            and hop.destination[1] == Rules.promotion_rank(piece.side)
        ):
            became_king = board.promote(piece)

        taken = self._turn.captured_this_turn + hop.captured
        must_continue = hop.is_capture and MoveGenerator(board).has_capture(
            piece, taken
        )
        if must_continue:
            self._turn.continue_chain(piece.id, hop.captured)
        else:
            self._turn.pass_turn()
            self.deselect_piece()

        if __debug__:
            board.validate()

        _LOGGER.debug(
            "%s %s%s%s",
            piece.side,
            square_name(origin),
            "x" if hop.is_capture else "-",
            square_name(hop.destination),
        )

        result = MoveResult(
            success=True,
            captured=hop.captured,
            became_king=became_king,
            must_continue=must_continue,
        )
        self._emit_move(result)

        winner = self.check_winner()
        if winner is not None and not self._winner_announced:
            self._winner_announced = True
            _LOGGER.info("%s wins", winner)
            self._emit_game_over(winner)

        if not must_continue:
            self._emit_turn_changed()
            if winner is None:
                self._prompt_current_player()
        return result

    def _reject_geometry(
        self,
        piece: Piece,
        destination: Square,
        legal: list[Move],
    ) -> MoveResult:
        if any(m.is_capture for m in legal):
            simple = MoveGenerator(self._board).simple_moves(piece)
            if any(m.destination == destination for m in simple):
                return self._reject(
                    MoveError.MUST_CAPTURE, "Must capture when available"
                )
        error = Rules.diagnose(self._board, piece, destination)
        return self._reject(error, _GEOMETRY_MESSAGES[error])

    @staticmethod
    def _reject(error: MoveError, message: str) -> MoveResult:
        _LOGGER.debug("Move rejected (%s): %s", error.name, message)
        return MoveResult.rejected(error, message)

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None or cp.is_human:
            return
        cp.request_move(self)

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result)

    def _emit_turn_changed(self) -> None:
        side = self._turn.side_to_move
        for cb in self.events.on_turn_changed:
            cb(side)

    def _emit_game_over(self, winner: Side) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
