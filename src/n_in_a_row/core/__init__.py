"""
Core module - geometry, weight profiles and errors.

This module provides the building blocks used throughout the engine.
"""

from n_in_a_row.core.types import (
    Point,
    PointLike,
    DIRECTIONS,
    EMPTY,
    as_point,
    player_symbol,
)
from n_in_a_row.core.weights import (
    Difficulty,
    Strategy,
    ComputerWeights,
    WEIGHT_TABLE,
    weights_for,
)
from n_in_a_row.core.errors import (
    GameError,
    NewGameError,
    NewGameReason,
    PlayMoveError,
    InvalidPoint,
    InvalidPointError,
    PointIsPopulatedError,
    InvalidGameStateError,
)

__all__ = [
    # Types
    "Point",
    "PointLike",
    "Difficulty",
    "Strategy",
    "ComputerWeights",
    # Constants
    "DIRECTIONS",
    "EMPTY",
    "WEIGHT_TABLE",
    # Functions
    "as_point",
    "player_symbol",
    "weights_for",
    # Errors
    "GameError",
    "NewGameError",
    "NewGameReason",
    "PlayMoveError",
    "InvalidPoint",
    "InvalidPointError",
    "PointIsPopulatedError",
    "InvalidGameStateError",
]
