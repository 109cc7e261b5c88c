"""Game state machine: tracks turns, chains, winner and move history."""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field

from checkie.core.board import Board, create_initial_board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move, is_same_move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules, apply_move
from checkie.engine.search import RandomSource
from checkie.engine.selector import choose_best_move
from checkie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveEvent:
    """What happened on the last committed move."""

    move: Move
    mover: Player
    capture: bool
    promoted: bool
    forced_continuation: bool


@dataclass
class GameState:
    """Single in-memory game: board, side to move, chain and outcome.

    This is a pure data/logic class: no threading, no UI.
    """

    board: Board = field(default_factory=Board.empty, init=False)
    current_player: Player = field(default=Player.LIGHT, init=False)
    forced_piece_id: int | None = field(default=None, init=False)
    legal_moves: list[Move] = field(default_factory=list, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    winner: Player | None = field(default=None, init=False)
    selected_piece_id: int | None = field(default=None, init=False)
    last_move_event: MoveEvent | None = field(default=None, init=False)
    captured_piece_ids: list[int] = field(default_factory=list, init=False)
    history: list[MoveEvent] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        start_id: int = 1,
        first_player: Player = Player.LIGHT,
        board: Board | None = None,
    ) -> None:
        """Initialise (or reset) the game, optionally from a custom board."""
        if board is None:
            board, _ = create_initial_board(start_id)
        self.board = board
        self.current_player = first_player
        self.forced_piece_id = None
        self.phase = GamePhase.AWAITING_MOVE
        self.winner = None
        self.selected_piece_id = None
        self.last_move_event = None
        self.captured_piece_ids.clear()
        self.history.clear()
        self._refresh_legal_moves()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def result(self) -> GameResult:
        return Rules.result_for(self.winner)

    def pieces_with_moves(self) -> set[int]:
        """Ids of the pieces that may be selected this turn."""
        return {move.piece_id for move in self.legal_moves}

    def moves_for_piece(self, piece_id: int) -> list[Move]:
        return [move for move in self.legal_moves if move.piece_id == piece_id]

    def find_legal(self, move: Move) -> Move | None:
        """The legal move structurally equal to *move*, if any."""
        for candidate in self.legal_moves:
            if is_same_move(candidate, move):
                return candidate
        return None

    # ── Selection ────────────────────────────────────────────────────────

    def select_piece(self, piece_id: int | None) -> int | None:
        """Select *piece_id* if it has a legal move, else clear the selection."""
        if piece_id is not None and piece_id not in self.pieces_with_moves():
            piece_id = None
        self.selected_piece_id = piece_id
        return piece_id

    def clear_selection(self) -> None:
        self.selected_piece_id = None

    # ── Move application ─────────────────────────────────────────────────

    def commit_move(self, move: Move) -> MoveEvent | None:
        """Apply *move* if it is legal now; ``None`` means rejected."""
        if self.is_game_over:
            return None
        legal = self.find_legal(move)
        if legal is None:
            _LOGGER.debug("Rejected move %s for %s", move, self.current_player)
            return None

        mover = self.current_player
        nxt = apply_move(self.board, legal, mover)

        self.board = nxt.board
        self.current_player = nxt.current_player
        self.forced_piece_id = nxt.forced_piece_id
        if nxt.captured_piece_id is not None:
            self.captured_piece_ids.append(nxt.captured_piece_id)

        event = MoveEvent(
            move=legal,
            mover=mover,
            capture=legal.is_capture,
            promoted=nxt.promoted,
            forced_continuation=nxt.forced_continuation,
        )
        self.last_move_event = event
        self.history.append(event)

        self.selected_piece_id = nxt.forced_piece_id

        self._refresh_legal_moves()
        self.winner = Rules.winner(
            self.board, self.current_player, self.forced_piece_id
        )
        if self.winner is not None:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.debug("Game over: %s wins", self.winner)
        return event

    def resign(self, player: Player) -> None:
        self.winner = player.opposite
        self.phase = GamePhase.GAME_OVER

    def hint(self, random: RandomSource = _random.random) -> Move | None:
        """Greedy suggestion for the side to move."""
        if self.is_game_over:
            return None
        return choose_best_move(self.legal_moves, self.board, self.current_player, random)

    def _refresh_legal_moves(self) -> None:
        self.legal_moves = MoveGenerator(self.board).generate_legal_moves(
            self.current_player, self.forced_piece_id
        )
