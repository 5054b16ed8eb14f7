"""
Selection module - heuristic move choice for computer seats.

Provides the main entry point:
- get_computer_move(): best-scoring empty cell, random among ties
"""

from n_in_a_row.selection.heuristic import (
    evaluate_location,
    evaluate_board,
    best_points,
    get_computer_move,
)

__all__ = [
    "evaluate_location",
    "evaluate_board",
    "best_points",
    "get_computer_move",
]
