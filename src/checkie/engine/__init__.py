"""Draughts engine package: evaluation, search, skill selection, Qt worker."""

from checkie.engine.evaluate import evaluate, score_move
from checkie.engine.minimax_search import (
    MinimaxSearchEngine,
    choose_best_lookahead_move,
)
from checkie.engine.qt_bridge import EngineRequest, EngineWorker
from checkie.engine.search import (
    HARD_SEARCH_DEPTH,
    IEngine,
    RandomSource,
    SearchLimits,
    SearchResult,
)
from checkie.engine.selector import choose_best_move, choose_move

__all__ = [
    "HARD_SEARCH_DEPTH",
    "EngineRequest",
    "EngineWorker",
    "IEngine",
    "MinimaxSearchEngine",
    "RandomSource",
    "SearchLimits",
    "SearchResult",
    "choose_best_lookahead_move",
    "choose_best_move",
    "choose_move",
    "evaluate",
    "score_move",
]
