"""Legal move generation under the mandatory-capture rule."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import Coord, is_inside

KING_DIRS: tuple[tuple[int, int], ...] = ((1, -1), (1, 1), (-1, -1), (-1, 1))

_MAN_DIRS: dict[Player, tuple[tuple[int, int], ...]] = {
    Player.LIGHT: ((-1, -1), (-1, 1)),
    Player.DARK: ((1, -1), (1, 1)),
}


def directions(piece: Piece) -> tuple[tuple[int, int], ...]:
    """Diagonal steps available to *piece*: forward only for a man."""
    if piece.king:
        return KING_DIRS
    return _MAN_DIRS[piece.player]


class MoveGenerator:
    """Generates legal moves on a :class:`Board`.

    The generator only reads the board; it never changes it.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(
        self,
        player: Player,
        forced_piece_id: int | None = None,
    ) -> list[Move]:
        """All legal moves for *player*.

        With *forced_piece_id* set, only that piece's jumps count: it is
        in the middle of a capture chain.
        """
        if forced_piece_id is not None:
            found = self._board.find_piece(forced_piece_id)
            if found is None:
                return []
            return self.captures_for(found[0])

        captures: list[Move] = []
        slides: list[Move] = []
        for sq, _piece in self._board.pieces(player):
            piece_captures = self.captures_for(sq)
            if piece_captures:
                captures.extend(piece_captures)
            else:
                slides.extend(self.slides_for(sq))

        # Mandatory capture: any jump on the board rules out every slide.
        return captures if captures else slides

    # -- Per-piece generators -----------------------------------------------

    def captures_for(self, sq: Coord) -> list[Move]:
        """Jumps available to the piece on *sq*, in every legal direction."""
        board = self._board
        piece = board[sq]
        if piece is None:
            return []

        row, col = sq
        moves: list[Move] = []
        for dr, dc in directions(piece):
            mid = (row + dr, col + dc)
            target = (row + 2 * dr, col + 2 * dc)
            if not is_inside(*target):
                continue
            jumped = board[mid]
            if jumped is None or jumped.player == piece.player:
                continue
            if not board.is_empty(target):
                continue
            moves.append(Move(piece.id, sq, target, mid))
        return moves

    def slides_for(self, sq: Coord) -> list[Move]:
        """Single diagonal steps onto empty squares."""
        board = self._board
        piece = board[sq]
        if piece is None:
            return []

        row, col = sq
        moves: list[Move] = []
        for dr, dc in directions(piece):
            target = (row + dr, col + dc)
            if is_inside(*target) and board.is_empty(target):
                moves.append(Move(piece.id, sq, target))
        return moves


def legal_moves(
    board: Board,
    player: Player,
    forced_piece_id: int | None = None,
) -> list[Move]:
    """Shortcut for ``MoveGenerator(board).generate_legal_moves(...)``."""
    return MoveGenerator(board).generate_legal_moves(player, forced_piece_id)
