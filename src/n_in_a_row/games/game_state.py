"""
GameState - immutable projection of the board.

Never stored by the engine; recomputed from the board on every query.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional


class Status(Enum):
    SEAT_TO_MOVE = auto()
    PLAYER_WON = auto()
    DRAW = auto()


class GameState(NamedTuple):
    """
    Lightweight state value.

    ``player`` is the seat to move for SEAT_TO_MOVE, the winner for
    PLAYER_WON, and None for DRAW.
    """

    status: Status
    player: Optional[int] = None

    @classmethod
    def seat_to_move(cls, player: int) -> "GameState":
        return cls(Status.SEAT_TO_MOVE, player)

    @classmethod
    def player_won(cls, player: int) -> "GameState":
        return cls(Status.PLAYER_WON, player)

    @classmethod
    def draw(cls) -> "GameState":
        return cls(Status.DRAW, None)

    @property
    def is_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.status is not Status.SEAT_TO_MOVE

    def __str__(self) -> str:
        if self.status is Status.DRAW:
            return "Draw"
        name = "SeatToMove" if self.status is Status.SEAT_TO_MOVE else "PlayerWon"
        return f"{name}({self.player})"
