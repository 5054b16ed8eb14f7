"""
Exceptions raised by the game engine.

Two families:
- NewGameError: the configuration cannot produce a game.
- PlayMoveError: a move was rejected; the board is left untouched.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from n_in_a_row.games.game_state import GameState


class NewGameReason(Enum):
    PLAYERS_MUST_BE_AT_LEAST_2 = "at least 2 players are required"
    WIDTH_MUST_BE_AT_LEAST_2 = "width must be at least 2"
    HEIGHT_MUST_BE_AT_LEAST_2 = "height must be at least 2"
    GOAL_MUST_BE_LESS_THAN_HEIGHT = "goal must not exceed the height"
    GOAL_MUST_BE_LESS_THAN_WIDTH = "goal must not exceed the width"
    GOAL_MUST_BE_AT_LEAST_2 = "goal must be at least 2"


class InvalidPoint(Enum):
    X_TOO_SMALL = "x is too small"
    X_TOO_LARGE = "x is too large"
    Y_TOO_SMALL = "y is too small"
    Y_TOO_LARGE = "y is too large"


class GameError(Exception):
    """Base class for all engine errors."""


class NewGameError(GameError, ValueError):
    def __init__(self, reason: NewGameReason):
        super().__init__(reason.value)
        self.reason = reason


class PlayMoveError(GameError):
    """A move was rejected. The board is unchanged."""


class InvalidPointError(PlayMoveError, IndexError):
    def __init__(self, reason: InvalidPoint):
        super().__init__(reason.value)
        self.reason = reason


class PointIsPopulatedError(PlayMoveError):
    def __init__(self, occupant: int):
        super().__init__(f"point is already taken by player {occupant}")
        self.occupant = occupant


class InvalidGameStateError(PlayMoveError):
    def __init__(self, state: "GameState"):
        super().__init__(f"no move can be played in state {state}")
        self.state = state
