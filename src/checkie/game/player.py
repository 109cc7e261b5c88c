"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from checkie.core.enums import Player, Skill
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.game.state import GameState


class HumanPlayer(IPlayer):
    """A human participant: moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_player", "_name")

    def __init__(self, player: Player, name: str = "") -> None:
        self._player = player
        self._name = name or f"Player ({player})"

    @property
    def player(self) -> Player:
        return self._player

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """A computer participant that delegates move choice to a callback.

    ``AIPlayer`` only stores the *skill* and a bridge callable invoked on
    ``request_move``.  In a Qt application the callable hands an
    ``EngineRequest`` to an ``EngineWorker`` living in a ``QThread``.

    Args:
        player: Side the computer plays.
        skill: Strength tier passed on to the selector.
        name: Display name.
        on_request_move: ``(AIPlayer, GameState) -> None``: called when
            the controller asks the computer to start thinking.
        on_cancel: ``() -> None``: called to abort a running search.
    """

    __slots__ = ("_player", "_skill", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        player: Player,
        skill: Skill = Skill.MEDIUM,
        name: str = "Computer",
        on_request_move: Callable[[AIPlayer, GameState], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._player = player
        self._skill = Skill(skill)
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def player(self) -> Player:
        return self._player

    @property
    def skill(self) -> Skill:
        return self._skill

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(self, state)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
