"""Pure-Python draughts search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
import random as _random

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import apply_move
from checkie.engine.evaluate import evaluate
from checkie.engine.search import IEngine, RandomSource, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = float("inf")
_WIN_SCORE = 1000.0
_LEAF_JITTER = 0.01
_TIE_EPSILON = 0.001


class MinimaxSearchEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    The root side is the maximizing player for the whole tree.  A chain
    capture keeps the same side to move in the child node, but every
    child still costs one ply of depth.
    """

    __slots__ = ("_nodes", "_random")

    def __init__(self) -> None:
        self._nodes = 0
        self._random: RandomSource = _random.random

    def search(
        self,
        board: Board,
        player: Player,
        moves: list[Move] | None = None,
        forced_piece_id: int | None = None,
        limits: SearchLimits = SearchLimits(),
        random: RandomSource | None = None,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._random = random or _random.random

        if moves is None:
            moves = MoveGenerator(board).generate_legal_moves(player, forced_piece_id)
        if not moves:
            return SearchResult(None, -_WIN_SCORE, 0, self._nodes)

        score, best_move = self._search_root(board, player, moves, limits.max_depth)
        _LOGGER.debug(
            "Search for %s: best=%s score=%.3f depth=%d nodes=%d",
            player,
            best_move,
            score,
            limits.max_depth,
            self._nodes,
        )
        return SearchResult(best_move, score, limits.max_depth, self._nodes)

    def _search_root(
        self,
        board: Board,
        player: Player,
        root_moves: list[Move],
        depth: int,
    ) -> tuple[float, Move]:
        best_move = root_moves[0]
        best_score = -_INF_SCORE

        for move in root_moves:
            nxt = apply_move(board, move, player)
            score = self._minimax(
                nxt.board,
                nxt.current_player,
                nxt.forced_piece_id,
                player,
                depth - 1,
                -_INF_SCORE,
                _INF_SCORE,
            )

            if score > best_score:
                best_score = score
                best_move = move
                continue

            # Coin flip among equal scores spreads the choice over them.
            if abs(score - best_score) < _TIE_EPSILON and self._random() > 0.5:
                best_move = move

        return best_score, best_move

    def _minimax(
        self,
        board: Board,
        current_player: Player,
        forced_piece_id: int | None,
        maximizing_player: Player,
        depth: int,
        alpha: float,
        beta: float,
    ) -> float:
        self._nodes += 1

        moves = MoveGenerator(board).generate_legal_moves(
            current_player, forced_piece_id
        )
        if not moves:
            # Prefer quick wins and slow losses.
            if current_player == maximizing_player:
                return -_WIN_SCORE - depth
            return _WIN_SCORE + depth

        if depth <= 0:
            return evaluate(board, maximizing_player) + self._random() * _LEAF_JITTER

        maximizing = current_player == maximizing_player
        value = -_INF_SCORE if maximizing else _INF_SCORE

        for move in moves:
            nxt = apply_move(board, move, current_player)
            score = self._minimax(
                nxt.board,
                nxt.current_player,
                nxt.forced_piece_id,
                maximizing_player,
                depth - 1,
                alpha,
                beta,
            )
            if maximizing:
                value = max(value, score)
                alpha = max(alpha, value)
            else:
                value = min(value, score)
                beta = min(beta, value)
            if beta <= alpha:
                break

        return value


def choose_best_lookahead_move(
    moves: list[Move],
    board: Board,
    player: Player,
    random: RandomSource = _random.random,
    limits: SearchLimits = SearchLimits(),
) -> Move | None:
    """Best move for *player* among *moves* by alpha-beta lookahead."""
    if not moves:
        return None
    result = MinimaxSearchEngine().search(
        board, player, moves=moves, limits=limits, random=random
    )
    return result.best_move
