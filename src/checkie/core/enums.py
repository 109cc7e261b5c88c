"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Player(StrEnum):
    """Side to move. Light starts at the bottom and moves up the board."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> Player:
        return Player.DARK if self is Player.LIGHT else Player.LIGHT

    @property
    def forward(self) -> int:
        """Row step of a man of this side."""
        return -1 if self is Player.LIGHT else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Player.LIGHT else 7


class Skill(StrEnum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2
