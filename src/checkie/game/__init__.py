"""Game management layer: rules engine, turn state and players.

Quick start::

    from checkie.core import Side, parse_square
    from checkie.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    result = ctrl.play(parse_square("a4"), parse_square("b5"))
    print(result.success, ctrl.status_message())
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import AIPlayer, HumanPlayer
from checkie.game.state import PieceCounts, TurnState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "PieceCounts",
    "TurnState",
]
