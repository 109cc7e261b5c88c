"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from checkie.core.enums import Player

_CHARS: dict[tuple[Player, bool], str] = {
    (Player.LIGHT, False): "l",
    (Player.LIGHT, True): "L",
    (Player.DARK, False): "d",
    (Player.DARK, True): "D",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a draughts piece.

    ``id`` is assigned once when the board is set up and stays with the
    piece for the whole game; only ``king`` ever changes, by replacement.
    """

    id: int
    player: Player
    king: bool = False

    def __str__(self) -> str:
        """Single board character: lowercase man, uppercase king."""
        return _CHARS[(self.player, self.king)]

    def crowned(self) -> Piece:
        """Return the promoted copy of this piece."""
        return replace(self, king=True)
