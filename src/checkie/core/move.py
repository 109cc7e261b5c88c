"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Coord, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single step or jump.

    ``capture`` names the square of the jumped piece, always the midpoint
    of ``from_sq`` and ``to_sq``.
    """

    piece_id: int
    from_sq: Coord
    to_sq: Coord
    capture: Coord | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.capture is not None else "-"
        return f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"

    @property
    def is_capture(self) -> bool:
        return self.capture is not None


def is_same_move(left: Move, right: Move) -> bool:
    """Structural equality, including the captured square."""
    return (
        left.piece_id == right.piece_id
        and left.from_sq == right.from_sq
        and left.to_sq == right.to_sq
        and left.capture == right.capture
    )
