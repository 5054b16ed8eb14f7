"""
Utils module - settings and factories.
"""

from n_in_a_row.utils.config import GameSettings, DEFAULT_SETTINGS
from n_in_a_row.utils.factory import create_game, parse_player_type

__all__ = [
    "GameSettings",
    "DEFAULT_SETTINGS",
    "create_game",
    "parse_player_type",
]
