"""Static position evaluation and single-ply move scoring."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.types import center_distance
from checkie.engine.search import RandomSource

KING_VALUE = 3.8
MAN_VALUE = 1.2
ADVANCEMENT_WEIGHT = 0.35
CENTER_WEIGHT = 0.05
MOBILITY_WEIGHT = 0.06

# Greedy move scoring (medium skill).
_CAPTURE_BONUS = 6.0
_KING_CAPTURE_BONUS = 3.0
_PROMOTION_BONUS = 4.0
_ADVANCE_WEIGHT = 0.55
_TARGET_CENTER_WEIGHT = 0.12
_MOVE_JITTER = 0.2


def _piece_value(piece: Piece, row: int, col: int) -> float:
    promotion_distance = abs(row - piece.player.promotion_row)
    advancement = (7 - promotion_distance) / 7
    center_control = (7 - center_distance(row, col)) * CENTER_WEIGHT
    base = KING_VALUE if piece.king else MAN_VALUE
    return base + advancement * ADVANCEMENT_WEIGHT + center_control


def evaluate(board: Board, perspective: Player) -> float:
    """Heuristic score of *board*; higher is better for *perspective*."""
    score = 0.0
    for (row, col), piece in board.pieces():
        value = _piece_value(piece, row, col)
        score += value if piece.player == perspective else -value

    gen = MoveGenerator(board)
    my_mobility = len(gen.generate_legal_moves(perspective))
    their_mobility = len(gen.generate_legal_moves(perspective.opposite))
    score += (my_mobility - their_mobility) * MOBILITY_WEIGHT
    return score


def score_move(
    move: Move,
    board: Board,
    player: Player,
    random: RandomSource,
) -> float:
    """One-ply greedy desirability of *move* for *player*."""
    score = random() * _MOVE_JITTER
    moving_piece = board[move.from_sq]

    if move.capture is not None:
        score += _CAPTURE_BONUS
        captured = board[move.capture]
        if captured is not None and captured.king:
            score += _KING_CAPTURE_BONUS

    if moving_piece is not None and not moving_piece.king:
        target_row = move.to_sq[0]
        if target_row == player.promotion_row:
            score += _PROMOTION_BONUS
        else:
            advance = (target_row - move.from_sq[0]) * player.forward
            score += advance * _ADVANCE_WEIGHT

    score += (7 - center_distance(*move.to_sq)) * _TARGET_CENTER_WEIGHT
    return score
