"""Qt bridge to run computer move selection in a worker thread."""

from __future__ import annotations

import logging
import random as _random
import threading
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.enums import Player, Skill
from checkie.core.move_generator import MoveGenerator
from checkie.engine.search import RandomSource
from checkie.engine.selector import choose_move

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class EngineRequest:
    """Snapshot handed to the worker for one computer turn."""

    board: Board
    player: Player
    forced_piece_id: int | None = None
    skill: Skill = Skill.HARD


class EngineWorker(QObject):
    """Thread-affine worker that computes computer moves on demand."""

    best_move_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(self, *, random: RandomSource | None = None) -> None:
        super().__init__()
        self._random = random or _random.random
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, request_obj: object, request_id: int) -> None:
        """Choose a move for *request_obj* and emit the result."""
        if not isinstance(request_obj, EngineRequest):
            self.search_error.emit(request_id, "Engine received invalid request")
            return

        self._cancel_event.clear()
        try:
            moves = MoveGenerator(request_obj.board).generate_legal_moves(
                request_obj.player, request_obj.forced_piece_id
            )
            move = choose_move(
                request_obj.skill,
                moves,
                request_obj.board,
                request_obj.player,
                self._random,
            )
        except Exception as exc:
            _LOGGER.exception("Move selection failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the request in flight."""
        self._cancel_event.set()
