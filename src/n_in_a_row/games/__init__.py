"""
Games module - the N-in-a-row engine.
"""

from n_in_a_row.games.game_state import GameState, Status
from n_in_a_row.games.game_base import GameBase
from n_in_a_row.games.game_rules import in_bounds, board_full, find_winner, empty_board
from n_in_a_row.games.n_in_a_row import NInARow

__all__ = [
    "GameState",
    "Status",
    "GameBase",
    "NInARow",
    "in_bounds",
    "board_full",
    "find_winner",
    "empty_board",
]
