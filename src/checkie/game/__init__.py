"""Game management layer: controller, players, state machine.

Quick start::

    from checkie.core import Player
    from checkie.game import GameController, HumanPlayer, AIPlayer

    ctrl = GameController()
    ctrl.new_game(
        light=HumanPlayer(Player.LIGHT, "Alice"),
        dark=AIPlayer(Player.DARK, skill="hard", on_request_move=...),
    )
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import AIPlayer, HumanPlayer
from checkie.game.state import GameState, MoveEvent

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveEvent",
]
