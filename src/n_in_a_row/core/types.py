"""
Core types and constants.

This module contains the geometry used throughout the engine:
- Point: integer board coordinate with vector arithmetic
- DIRECTIONS: the four line orientations scanned for runs
- Player display symbols
"""

from __future__ import annotations

import string
from typing import NamedTuple, Tuple, Union


class Point(NamedTuple):
    """Board coordinate. ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def __add__(self, other: Tuple[int, int]) -> "Point":  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __mul__(self, factor: int) -> "Point":  # type: ignore[override]
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)


PointLike = Union[Point, Tuple[int, int]]


def as_point(value: PointLike) -> Point:
    """Coerce an ``(x, y)`` pair into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


# ─── Line Orientations ────────────────────────────────────────────────────────

# Horizontal, anti-diagonal, vertical, diagonal.
# With their reverses these cover every undirected line through a cell.
DIRECTIONS: Tuple[Point, ...] = (
    Point(1, 0),
    Point(-1, 1),
    Point(0, 1),
    Point(1, 1),
)

# ──────────────────────────────────────────────────────────────────────────────

# Board value for a cell nobody occupies
EMPTY = -1

PLAYER_SYMBOLS = string.ascii_uppercase


def player_symbol(player: int) -> str:
    """Display string for a seat: A, B, ..., Z, then A1, B1, ..."""
    lap, index = divmod(player, len(PLAYER_SYMBOLS))
    symbol = PLAYER_SYMBOLS[index]
    return symbol if lap == 0 else f"{symbol}{lap}"
