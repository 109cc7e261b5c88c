"""Coordinate type alias and board geometry helpers.

Coordinates are ``(row, col)`` pairs.  Row 0 is the dark side's back rank
and row 7 the light side's::

    8 | row 0
    ...
    1 | row 7
        a ... h
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]

BOARD_SIZE = 8
_CENTER = (BOARD_SIZE - 1) / 2


def is_inside(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(row: int, col: int) -> bool:
    """Playable squares are the ones where ``row + col`` is odd."""
    return (row + col) % 2 == 1


def center_distance(row: int, col: int) -> float:
    """Manhattan distance from the geometric centre (3.5, 3.5)."""
    return abs(row - _CENTER) + abs(col - _CENTER)


def square_name(sq: Coord) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Coord:
    """Parse square name, e.g. 'b6' → (2, 1)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
