"""Core domain layer: pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Player, apply_move, create_initial_board, legal_moves

    board, _ = create_initial_board()
    moves = legal_moves(board, Player.LIGHT)
    result = apply_move(board, moves[0], Player.LIGHT)
"""

from checkie.core.board import Board, create_initial_board
from checkie.core.enums import GameResult, Player, Skill
from checkie.core.move import Move, is_same_move
from checkie.core.move_generator import MoveGenerator, legal_moves
from checkie.core.piece import Piece
from checkie.core.rules import AppliedMove, Rules, apply_move
from checkie.core.types import (
    Coord,
    center_distance,
    is_dark_square,
    is_inside,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "Player",
    "Skill",
    # Types / helpers
    "Coord",
    "center_distance",
    "is_dark_square",
    "is_inside",
    "parse_square",
    "square_name",
    # Domain objects
    "AppliedMove",
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "create_initial_board",
    "is_same_move",
    "legal_moves",
]
