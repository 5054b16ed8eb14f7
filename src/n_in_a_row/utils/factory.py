"""
Factory functions for creating games and seat controllers.
"""

import random
from typing import Optional

from n_in_a_row.agent.agent import Computer, Human, PlayerType
from n_in_a_row.core.weights import Difficulty, Strategy
from n_in_a_row.games.n_in_a_row import NInARow
from n_in_a_row.utils.config import GameSettings


def parse_player_type(text: str) -> PlayerType:
    """
    Parse a seat description.

    Accepted forms (case-insensitive):
        human
        computer
        computer:<difficulty>
        computer:<difficulty>:<strategy>

    Raises:
        ValueError: for unknown kinds, difficulties or strategies
    """
    parts = [p.strip().lower() for p in text.split(":")]
    kind = parts[0]

    if kind == "human" and len(parts) == 1:
        return Human()
    if kind != "computer" or len(parts) > 3:
        raise ValueError(
            f"Unknown player: {text!r}. "
            "Expected 'human' or 'computer[:difficulty[:strategy]]'."
        )

    difficulty = Difficulty.NORMAL
    strategy = Strategy.NEUTRAL

    if len(parts) > 1:
        try:
            difficulty = Difficulty(parts[1])
        except ValueError:
            available = ", ".join(d.value for d in Difficulty)
            raise ValueError(f"Unknown difficulty: {parts[1]!r}. Available: {available}") from None

    if len(parts) > 2:
        try:
            strategy = Strategy(parts[2])
        except ValueError:
            available = ", ".join(s.value for s in Strategy)
            raise ValueError(f"Unknown strategy: {parts[2]!r}. Available: {available}") from None

    return Computer(difficulty, strategy)


def create_game(
    settings: Optional[GameSettings] = None,
    rng: Optional[random.Random] = None,
) -> NInARow:
    """
    Create a game from settings.

    Args:
        settings: Game settings (defaults: 6x6 board, goal 4, human vs computer)
        rng: Random source for computer tie-breaks

    Returns:
        Empty game with seat 0 to move
    """
    if settings is None:
        settings = GameSettings()
    return settings.to_game(rng=rng)
