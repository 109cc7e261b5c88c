"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Player
    from checkie.core.move import Move

RandomSource = Callable[[], float]

HARD_SEARCH_DEPTH = 4


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = HARD_SEARCH_DEPTH


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for draughts engines used by the game layer."""

    def search(
        self,
        board: Board,
        player: Player,
        moves: list[Move] | None = None,
        forced_piece_id: int | None = None,
        limits: SearchLimits = SearchLimits(),
        random: RandomSource | None = None,
    ) -> SearchResult: ...
