"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete player classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Player

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.game.state import GameState


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is choosing
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def player(self) -> Player: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, state: GameState) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For the computer this kicks off move selection.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (computer only)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, light: IPlayer, dark: IPlayer) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, player: Player) -> None:
        """*player* resigns."""
