"""
N-in-a-row - a generalized connect-N board game engine.

Boards of any size, any run length, and any number of seats, each played
by a human or by a heuristic computer player.

Quick Start:
    from n_in_a_row import NInARow, Human, Computer, Difficulty

    game = NInARow(6, 6, 4, [Human(), Computer(Difficulty.HARD)])
    game.play_move((2, 3))     # computer replies inside the same call
    print(game.state_string())
    print(game.get_gamestate())

Modules:
    core       - Point geometry, weight profiles, errors
    agent      - Seat controllers (Human, Computer)
    games      - Game state engine and board rules
    selection  - Heuristic move evaluation for computer seats
    utils      - Settings and factories
"""

from n_in_a_row.agent import Human, Computer, PlayerType
from n_in_a_row.api import play_interactive
from n_in_a_row.core import (
    Point,
    Difficulty,
    Strategy,
    ComputerWeights,
    weights_for,
    GameError,
    NewGameError,
    NewGameReason,
    PlayMoveError,
    InvalidPoint,
    InvalidPointError,
    PointIsPopulatedError,
    InvalidGameStateError,
)
from n_in_a_row.games import GameState, Status, NInARow
from n_in_a_row.selection import get_computer_move, evaluate_location
from n_in_a_row.utils import GameSettings, create_game, parse_player_type

__version__ = "1.0.0"

__all__ = [
    # Main API
    "NInARow",
    "GameSettings",
    "create_game",
    "parse_player_type",
    "play_interactive",
    "get_computer_move",
    "evaluate_location",
    # Types
    "Point",
    "GameState",
    "Status",
    "Human",
    "Computer",
    "PlayerType",
    "Difficulty",
    "Strategy",
    "ComputerWeights",
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
