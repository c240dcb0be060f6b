"""Tests for the Qt agent worker."""

from __future__ import annotations

import random

import pytest
from PyQt6.QtTest import QSignalSpy

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.types import Square
from checkie.engine.greedy import GreedyAgent
from checkie.engine.qt_bridge import AgentWorker
from checkie.game.controller import GameController
from checkie.game.player import HumanPlayer


def _worker(**kwargs: int) -> AgentWorker:
    kwargs.setdefault("first_move_delay_ms", 0)
    kwargs.setdefault("chain_delay_ms", 0)
    return AgentWorker(agent=GreedyAgent(rng=random.Random(5)), **kwargs)


def _board(black: tuple[Square, ...], white: tuple[Square, ...]) -> Board:
    board = Board()
    for sq in black:
        board.place_piece(sq, Side.BLACK)
    for sq in white:
        board.place_piece(sq, Side.WHITE)
    return board


@pytest.mark.usefixtures("qapp")
class TestAgentWorker:
    def test_rejects_unknown_controller(self) -> None:
        worker = _worker()
        errors = QSignalSpy(worker.agent_error)
        worker.request_turn(object())
        assert len(errors) == 1
        assert not worker.is_pending

    def test_plays_single_move(self) -> None:
        worker = _worker()
        played = QSignalSpy(worker.move_played)
        finished = QSignalSpy(worker.turn_finished)
        ctrl = GameController()
        ctrl.new_game(worker.create_ai_player(Side.BLACK), HumanPlayer(Side.WHITE))
        assert worker.is_pending

        assert finished.wait(2000)
        assert finished[0][0] == int(Side.BLACK)
        assert len(played) == 1
        assert ctrl.current_side == Side.WHITE
        assert ctrl.piece_counts().black == 20

    def test_plays_whole_capture_chain(self) -> None:
        worker = _worker()
        played = QSignalSpy(worker.move_played)
        finished = QSignalSpy(worker.turn_finished)
        ctrl = GameController()
        ctrl.new_game(
            worker.create_ai_player(Side.BLACK),
            HumanPlayer(Side.WHITE),
            board=_board(((2, 3),), ((3, 4), (5, 6), (9, 8))),
        )

        assert finished.wait(2000)
        assert len(played) == 2
        assert played[0][0].must_continue
        assert not played[1][0].must_continue
        assert ctrl.current_side == Side.WHITE
        assert ctrl.board[(6, 7)] is not None

    def test_skips_when_stuck(self) -> None:
        worker = _worker()
        skipped = QSignalSpy(worker.turn_skipped)
        ctrl = GameController()
        ctrl.new_game(
            worker.create_ai_player(Side.BLACK),
            HumanPlayer(Side.WHITE),
            board=_board(((0, 9),), ((5, 4),)),
        )

        assert skipped.wait(2000)
        assert skipped[0][0] == int(Side.BLACK)
        assert ctrl.current_side == Side.WHITE

    def test_cancel_drops_pending_turn(self) -> None:
        worker = _worker(first_move_delay_ms=50)
        played = QSignalSpy(worker.move_played)
        ctrl = GameController()
        ctrl.new_game(worker.create_ai_player(Side.BLACK), HumanPlayer(Side.WHITE))
        assert worker.is_pending

        worker.cancel()
        assert not worker.is_pending
        assert not played.wait(200)
        assert ctrl.board == Board.initial()

    def test_new_game_cancels_agent(self) -> None:
        worker = _worker(first_move_delay_ms=50)
        ctrl = GameController()
        ctrl.new_game(worker.create_ai_player(Side.BLACK), HumanPlayer(Side.WHITE))
        ctrl.new_game()
        assert not worker.is_pending

    def test_set_delays(self) -> None:
        worker = _worker(first_move_delay_ms=5000)
        worker.set_delays(0, 0)
        finished = QSignalSpy(worker.turn_finished)
        ctrl = GameController()
        ctrl.new_game(worker.create_ai_player(Side.BLACK), HumanPlayer(Side.WHITE))
        assert finished.wait(2000)

    def test_ai_player_name(self) -> None:
        player = _worker().create_ai_player(Side.WHITE)
        assert player.name == "Checkie AI"
        assert not player.is_human
