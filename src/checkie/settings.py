"""Runtime settings for a game session."""

from __future__ import annotations

import random
from dataclasses import dataclass

from PyQt6.QtCore import QObject

from checkie.core.enums import Side
from checkie.engine.greedy import GreedyAgent
from checkie.engine.qt_bridge import AgentWorker
from checkie.game.controller import GameController
from checkie.game.player import HumanPlayer


@dataclass
class GameSettings:
    """Knobs the presentation layer may expose to the user.

    ``agent_side`` of ``None`` means both sides are human.
    """

    agent_side: Side | None = Side.WHITE
    agent_jitter: float = 0.5
    agent_seed: int | None = None
    first_move_delay_ms: int = 600
    chain_delay_ms: int = 400

    def create_agent(self) -> GreedyAgent:
        """Build a greedy agent, reproducible when ``agent_seed`` is set."""
        return GreedyAgent(
            jitter=self.agent_jitter,
            rng=random.Random(self.agent_seed),
        )

    def create_worker(self, parent: QObject | None = None) -> AgentWorker:
        return AgentWorker(
            agent=self.create_agent(),
            first_move_delay_ms=self.first_move_delay_ms,
            chain_delay_ms=self.chain_delay_ms,
            parent=parent,
        )

    def start_game(
        self,
        controller: GameController,
        worker: AgentWorker | None = None,
    ) -> None:
        """Seat the players on *controller* and set up a fresh board.

        A *worker* is required when ``agent_side`` is set.
        """
        players = {side: HumanPlayer(side) for side in Side}
        if self.agent_side is not None:
            if worker is None:
                raise ValueError("An AgentWorker is required to seat the agent")
            players[self.agent_side] = worker.create_ai_player(self.agent_side)
        controller.new_game(black=players[Side.BLACK], white=players[Side.WHITE])
