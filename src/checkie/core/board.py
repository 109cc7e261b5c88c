"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from checkie.core.enums import Player
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Coord, is_dark_square, is_inside

_SETUP_ROWS: tuple[tuple[Player, range], ...] = (
    (Player.DARK, range(0, 3)),
    (Player.LIGHT, range(5, 8)),
)


class Board:
    """64-square board of immutable pieces.

    The rules layer never mutates a board it was given: it takes a
    :meth:`copy` and edits that.  Pieces are frozen, so a shallow copy
    of the square list is a full value copy.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    @staticmethod
    def _index(sq: Coord) -> int:
        row, col = sq
        if not is_inside(row, col):
            raise IndexError(f"Square off the board: {sq!r}")
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Coord) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Coord, piece: Piece | None) -> None:
        self._squares[self._index(sq)] = piece

    def is_empty(self, sq: Coord) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, player: Player | None = None) -> Iterator[tuple[Coord, Piece]]:
        """Occupied squares in row-major order, optionally for one side."""
        for idx, piece in enumerate(self._squares):
            if piece is None:
                continue
            if player is not None and piece.player != player:
                continue
            yield divmod(idx, BOARD_SIZE), piece

    def find_piece(self, piece_id: int) -> tuple[Coord, Piece] | None:
        """Locate a piece by its stable id."""
        for sq, piece in self.pieces():
            if piece.id == piece_id:
                return sq, piece
        return None

    def count(self, player: Player) -> int:
        return sum(1 for _ in self.pieces(player))

    # -- Copying / factories --------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, placement: Mapping[Coord, Piece]) -> Board:
        """Build a board from ``{(row, col): piece}``."""
        b = cls()
        for sq, piece in placement.items():
            b[sq] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def create_initial_board(start_id: int = 1) -> tuple[Board, int]:
    """Standard starting position and the next unused piece id.

    Ids are handed out in row-major order, dark side first.
    """
    board = Board()
    next_id = start_id
    for player, rows in _SETUP_ROWS:
        for row in rows:
            for col in range(BOARD_SIZE):
                if is_dark_square(row, col):
                    board[(row, col)] = Piece(next_id, player)
                    next_id += 1
    return board, next_id
