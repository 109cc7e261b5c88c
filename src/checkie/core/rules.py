"""Turn rules: applying moves, promotion, capture chains and game end."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Outcome of applying one move to a board."""

    board: Board
    current_player: Player
    forced_piece_id: int | None
    captured_piece_id: int | None
    promoted: bool

    @property
    def forced_continuation(self) -> bool:
        return self.forced_piece_id is not None


def apply_move(board: Board, move: Move, current_player: Player) -> AppliedMove:
    """Advance *board* by *move* and work out who moves next.

    *move* is expected to come from the current legal set.  *board* is
    left untouched; the result always holds a fresh copy.
    """
    next_board = board.copy()
    moving_piece = next_board[move.from_sq]

    if moving_piece is None:
        _LOGGER.debug("No piece on %s, move %s ignored", move.from_sq, move)
        return AppliedMove(
            board=next_board,
            current_player=current_player,
            forced_piece_id=None,
            captured_piece_id=None,
            promoted=False,
        )

    next_board[move.from_sq] = None

    captured_piece_id: int | None = None
    if move.capture is not None:
        captured = next_board[move.capture]
        next_board[move.capture] = None
        if captured is not None:
            captured_piece_id = captured.id

    promoted = False
    if not moving_piece.king and Rules.is_promotion_row(
        moving_piece.player, move.to_sq[0]
    ):
        moving_piece = moving_piece.crowned()
        promoted = True
    next_board[move.to_sq] = moving_piece

    next_player = current_player.opposite
    forced_piece_id: int | None = None

    # Crowning ends the move even if the new king could jump again.
    if move.capture is not None and not promoted:
        if MoveGenerator(next_board).captures_for(move.to_sq):
            next_player = current_player
            forced_piece_id = moving_piece.id

    return AppliedMove(
        board=next_board,
        current_player=next_player,
        forced_piece_id=forced_piece_id,
        captured_piece_id=captured_piece_id,
        promoted=promoted,
    )


class Rules:
    """Static rule helpers that operate on a :class:`Board`."""

    @staticmethod
    def other_player(player: Player) -> Player:
        return player.opposite

    @staticmethod
    def is_promotion_row(player: Player, row: int) -> bool:
        return row == player.promotion_row

    @staticmethod
    def is_game_over(
        board: Board,
        player: Player,
        forced_piece_id: int | None = None,
    ) -> bool:
        """A side with nothing to play has lost."""
        gen = MoveGenerator(board)
        return not gen.generate_legal_moves(player, forced_piece_id)

    @staticmethod
    def winner(
        board: Board,
        player: Player,
        forced_piece_id: int | None = None,
    ) -> Player | None:
        """The winner when *player* is to move, or ``None`` if play goes on."""
        if Rules.is_game_over(board, player, forced_piece_id):
            return player.opposite
        return None

    @staticmethod
    def game_result(
        board: Board,
        player: Player,
        forced_piece_id: int | None = None,
    ) -> GameResult:
        return Rules.result_for(Rules.winner(board, player, forced_piece_id))

    @staticmethod
    def result_for(winner: Player | None) -> GameResult:
        if winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.LIGHT_WINS if winner is Player.LIGHT else GameResult.DARK_WINS
