"""
Agent module - per-seat controller types.
"""

from n_in_a_row.agent.agent import Human, Computer, PlayerType

__all__ = [
    "Human",
    "Computer",
    "PlayerType",
]
