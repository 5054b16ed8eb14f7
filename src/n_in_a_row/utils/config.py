"""
Game settings with sensible defaults.
"""

from __future__ import annotations

import random
from typing import List, Optional

from n_in_a_row.agent.agent import Computer, Human, PlayerType
from n_in_a_row.core.weights import Difficulty
from n_in_a_row.games.n_in_a_row import NInARow


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = 6
DEFAULT_HEIGHT = 6
DEFAULT_GOAL = 4


def default_players() -> List[PlayerType]:
    return [Human(), Computer(Difficulty.NORMAL)]


class GameSettings:
    """
    Editable configuration for a new game.

    Nothing is validated here; NInARow checks the values when the game is
    built, so a settings screen can hold intermediate invalid values.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        goal: int = DEFAULT_GOAL,
        players: Optional[List[PlayerType]] = None,
    ):
        self.width = width
        self.height = height
        self.goal = goal
        self.players: List[PlayerType] = list(players) if players is not None else default_players()

    def add_player(self, player_type: Optional[PlayerType] = None) -> None:
        self.players.append(player_type if player_type is not None else Human())

    def remove_player(self, index: int) -> PlayerType:
        return self.players.pop(index)

    def set_player_type(self, index: int, player_type: PlayerType) -> None:
        self.players[index] = player_type

    def to_game(self, rng: Optional[random.Random] = None) -> NInARow:
        """Build a game; raises NewGameError for invalid settings."""
        return NInARow(self.width, self.height, self.goal, self.players, rng=rng)

    def __repr__(self) -> str:
        return (
            f"GameSettings(width={self.width}, height={self.height}, "
            f"goal={self.goal}, players={self.players!r})"
        )


# Default configuration
DEFAULT_SETTINGS = GameSettings()
