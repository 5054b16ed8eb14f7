"""
NumPy utilities for N-in-a-row boards.

Boards are int16 arrays of shape (height, width) indexed ``board[y, x]``,
with EMPTY marking unoccupied cells.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from n_in_a_row.core.errors import InvalidPoint, InvalidPointError
from n_in_a_row.core.types import DIRECTIONS, EMPTY, Point


def empty_board(width: int, height: int) -> np.ndarray:
    """Fresh board with every cell EMPTY."""
    return np.full((height, width), EMPTY, dtype=np.int16)


def in_bounds(board: np.ndarray, point: Point) -> bool:
    """Return True if point is inside the board."""
    rows, cols = board.shape
    return 0 <= point.x < cols and 0 <= point.y < rows


def check_point(board: np.ndarray, point: Point) -> None:
    """
    Raise InvalidPointError naming the first axis that is out of range.

    The x axis is checked before the y axis.
    """
    rows, cols = board.shape
    if point.x < 0:
        raise InvalidPointError(InvalidPoint.X_TOO_SMALL)
    if point.x >= cols:
        raise InvalidPointError(InvalidPoint.X_TOO_LARGE)
    if point.y < 0:
        raise InvalidPointError(InvalidPoint.Y_TOO_SMALL)
    if point.y >= rows:
        raise InvalidPointError(InvalidPoint.Y_TOO_LARGE)


def occupant(board: np.ndarray, point: Point) -> Optional[int]:
    """Seat at an in-bounds point, or None."""
    value = int(board[point.y, point.x])
    return None if value == EMPTY else value


def occupied_count(board: np.ndarray) -> int:
    return int(np.count_nonzero(board != EMPTY))


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is EMPTY."""
    return not np.any(board == EMPTY)


def occupied_points(board: np.ndarray) -> Iterator[Point]:
    """Occupied cells in row-major order."""
    for y, x in np.argwhere(board != EMPTY):
        yield Point(int(x), int(y))


def empty_points(board: np.ndarray) -> List[Point]:
    """Empty cells in row-major order."""
    return [Point(int(x), int(y)) for y, x in np.argwhere(board == EMPTY)]


def has_run(board: np.ndarray, start: Point, direction: Point, goal: int) -> bool:
    """
    Return True if ``goal`` cells starting at ``start`` and stepping by
    ``direction`` all hold the same seat as ``start``.
    """
    player = board[start.y, start.x]
    if player == EMPTY:
        return False

    for i in range(1, goal):
        p = start + direction * i
        if not in_bounds(board, p) or board[p.y, p.x] != player:
            return False
    return True


def find_winner(board: np.ndarray, goal: int) -> Optional[int]:
    """
    Scan every occupied cell in all four directions.

    Rays are walked in both senses, so a run is found from either end.
    Returns the seat owning the first run found, or None.
    """
    for start in occupied_points(board):
        for direction in DIRECTIONS:
            if has_run(board, start, direction, goal) or has_run(board, start, -direction, goal):
                return int(board[start.y, start.x])
    return None


def to_rows(board: np.ndarray) -> List[List[Optional[int]]]:
    """Row-major snapshot with None for empty cells."""
    return [
        [None if value == EMPTY else int(value) for value in row]
        for row in board.tolist()
    ]
