"""Computer move selection by skill tier."""

from __future__ import annotations

import math
import random as _random

from checkie.core.board import Board
from checkie.core.enums import Player, Skill
from checkie.core.move import Move
from checkie.engine.evaluate import score_move
from checkie.engine.minimax_search import choose_best_lookahead_move
from checkie.engine.search import RandomSource


def choose_best_move(
    moves: list[Move],
    board: Board,
    player: Player,
    random: RandomSource = _random.random,
) -> Move | None:
    """Greedy one-ply pick; the first of several equal scores wins."""
    if not moves:
        return None

    best_move = moves[0]
    best_score = -math.inf
    for move in moves:
        score = score_move(move, board, player, random)
        if score > best_score:
            best_score = score
            best_move = move
    return best_move


def choose_move(
    skill: Skill | str,
    moves: list[Move],
    board: Board,
    player: Player,
    random: RandomSource = _random.random,
) -> Move | None:
    """Pick a move from *moves* for a computer player of the given *skill*.

    Returns ``None`` only when *moves* is empty.
    """
    try:
        skill = Skill(skill)
    except ValueError:
        raise ValueError(f"Unknown skill: {skill!r}") from None

    if not moves:
        return None

    if skill is Skill.EASY:
        index = min(len(moves) - 1, math.floor(random() * len(moves)))
        return moves[index]

    if skill is Skill.MEDIUM:
        return choose_best_move(moves, board, player, random)

    return choose_best_lookahead_move(moves, board, player, random)
