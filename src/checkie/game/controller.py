"""GameController: the central orchestrator of a draughts game.

Coordinates: Players, GameState, move selection callbacks.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.state import GameState, MoveEvent

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveEvent, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, passes turns (or keeps
    them during a capture chain), notifies listeners.

    Methods are meant to be called from a single thread (the main/UI
    thread).  Computer moves arrive via ``submit_move``, typically from an
    ``EngineWorker`` signal delivered on that thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Player, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.current_player)

    def player(self, side: Player) -> IPlayer | None:
        return self._players.get(side)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, light: IPlayer, dark: IPlayer, start_id: int = 1) -> None:
        for p in self._players.values():
            if not p.is_human:
                p.cancel()
        self._players = {Player.LIGHT: light, Player.DARK: dark}
        self._state = GameState()
        self._state.setup(start_id)

        self._emit_phase(GamePhase.AWAITING_MOVE)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        event = self._state.commit_move(move)
        if event is None:
            return False

        self._emit_move(event)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def resign(self, player: Player) -> None:
        if self._state.is_game_over:
            return
        cp = self.current_player
        if cp and not cp.is_human:
            cp.cancel()
        self._state.resign(player)
        self._emit_game_over(self._state.result)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state)

    def _emit_move(self, event: MoveEvent) -> None:
        for cb in self.events.on_move:
            cb(event, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game finished: %s", result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
