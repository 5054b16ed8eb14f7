"""
Heuristic move selection for computer seats.

Every empty cell is scored by looking along the four line orientations
through it. For each seat met along a line, the score grows with the open
space around the cell and, exponentially, with the length of that seat's
streak. Own streaks reward extending, opponent streaks reward blocking;
the balance comes from the seat's ComputerWeights.

Reads the game only through GameBase queries; never mutates it.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple, TYPE_CHECKING

from n_in_a_row.core.errors import InvalidPointError
from n_in_a_row.core.types import DIRECTIONS, Point
from n_in_a_row.core.weights import ComputerWeights

if TYPE_CHECKING:
    from n_in_a_row.agent.agent import Computer
    from n_in_a_row.games.game_base import GameBase

logger = logging.getLogger(__name__)

_RAYS = (-1, 1)


def evaluate_location(
    game: "GameBase",
    point: Point,
    computer: int,
    weights: ComputerWeights,
) -> int:
    """
    Score an empty cell for ``computer``.

    Per ray, cells are read in two phases: leading empty cells, then the
    cells after the first occupant. In the second phase the occupant's
    pieces add to its streak, empty cells add to its open space, and any
    other seat (or the board edge) ends the ray.

    A seat only contributes on a line where ``open + streak >= goal - 1``,
    i.e. where a winning run could still pass through this cell.
    """
    goal = game.goal
    player_count = game.player_count
    score = 0

    for direction in DIRECTIONS:
        initial_empty = 0
        empty = [0] * player_count
        count = [0] * player_count

        for d in _RAYS:
            streak_owner: Optional[int] = None
            for i in range(1, goal):
                try:
                    tile = game.get_tile(point + direction * (d * i))
                except InvalidPointError:
                    break

                if streak_owner is None:
                    if tile is None:
                        initial_empty += 1
                    else:
                        streak_owner = tile
                        count[tile] += 1
                elif tile is None:
                    empty[streak_owner] += 1
                elif tile == streak_owner:
                    count[streak_owner] += 1
                else:
                    break

        for player in range(player_count):
            open_cells = initial_empty + empty[player]
            streak = count[player]
            if open_cells + streak < goal - 1:
                continue

            if player == computer:
                overall = weights.own_weight
                streak_base = weights.own_streak_exponent_base
            else:
                overall = weights.opponent_weight
                streak_base = weights.opponent_streak_exponent_base

            score += overall * (
                weights.empty_cell_weight * open_cells
                + streak * weights.populated_cell_weight * streak_base ** streak
            )

    return score


def evaluate_board(
    game: "GameBase",
    computer: int,
    weights: ComputerWeights,
) -> List[Tuple[Point, int]]:
    """Score every empty cell, row-major."""
    evaluations: List[Tuple[Point, int]] = []
    for y in range(game.height):
        for x in range(game.width):
            point = Point(x, y)
            if game.get_tile(point) is None:
                evaluations.append((point, evaluate_location(game, point, computer, weights)))
    return evaluations


def best_points(evaluations: List[Tuple[Point, int]]) -> List[Point]:
    """All points tied for the maximum score."""
    if not evaluations:
        return []
    top = max(score for _, score in evaluations)
    return [point for point, score in evaluations if score == top]


def get_computer_move(
    game: "GameBase",
    params: "Computer",
    rng: Optional[random.Random] = None,
) -> Optional[Point]:
    """
    Pick a move for the seat to act.

    Returns None only when the board has no empty cell. Ties for the best
    score are broken uniformly at random.
    """
    computer = game.get_current_player()
    evaluations = evaluate_board(game, computer, params.weights)
    candidates = best_points(evaluations)
    if not candidates:
        return None

    choice = (rng or random).choice(candidates)
    logger.debug(
        "player %d (%s) picks (%d, %d), %d tied of %d",
        computer, params.label, choice.x, choice.y, len(candidates), len(evaluations),
    )
    return choice
