"""Opponent agent package: greedy move selection and Qt pacing bridge."""

from checkie.engine.greedy import GreedyAgent
from checkie.engine.qt_bridge import AgentWorker
from checkie.engine.search import AgentChoice, IAgent

__all__ = [
    "AgentChoice",
    "AgentWorker",
    "GreedyAgent",
    "IAgent",
]
