"""
Tests for n_in_a_row.games.game_rules

Tests numpy board helpers directly on hand-built arrays.
"""

import numpy as np
import pytest

from n_in_a_row.core.errors import InvalidPoint, InvalidPointError
from n_in_a_row.core.types import EMPTY, Point
from n_in_a_row.games.game_rules import (
    board_full,
    check_point,
    empty_board,
    empty_points,
    find_winner,
    has_run,
    in_bounds,
    occupied_count,
    to_rows,
)


@pytest.fixture
def board() -> np.ndarray:
    """4 wide, 3 high, empty."""
    return empty_board(4, 3)


class TestEmptyBoard:
    """empty_board tests."""

    def test_shape_is_height_by_width(self, board: np.ndarray):
        assert board.shape == (3, 4)

    def test_all_empty(self, board: np.ndarray):
        assert np.all(board == EMPTY)
        assert occupied_count(board) == 0


class TestBounds:
    """in_bounds / check_point tests."""

    def test_corners_in_bounds(self, board: np.ndarray):
        for p in [Point(0, 0), Point(3, 0), Point(0, 2), Point(3, 2)]:
            assert in_bounds(board, p)

    def test_outside(self, board: np.ndarray):
        for p in [Point(-1, 0), Point(4, 0), Point(0, -1), Point(0, 3)]:
            assert not in_bounds(board, p)

    @pytest.mark.parametrize("point,reason", [
        (Point(-1, 0), InvalidPoint.X_TOO_SMALL),
        (Point(4, 0), InvalidPoint.X_TOO_LARGE),
        (Point(0, -1), InvalidPoint.Y_TOO_SMALL),
        (Point(0, 3), InvalidPoint.Y_TOO_LARGE),
        (Point(-1, -1), InvalidPoint.X_TOO_SMALL),
        (Point(9, 9), InvalidPoint.X_TOO_LARGE),
    ])
    def test_check_point_reason(self, board: np.ndarray, point: Point, reason: InvalidPoint):
        """Reports the first failing axis, x before y."""
        with pytest.raises(InvalidPointError) as exc:
            check_point(board, point)
        assert exc.value.reason is reason

    def test_check_point_valid(self, board: np.ndarray):
        check_point(board, Point(3, 2))


class TestFullness:
    """board_full / empty_points tests."""

    def test_full(self):
        assert board_full(np.zeros((2, 2), dtype=np.int16))

    def test_not_full(self, board: np.ndarray):
        board[0, 0] = 1
        assert not board_full(board)

    def test_empty_points_row_major(self, board: np.ndarray):
        board[:, :] = 0
        board[2, 1] = EMPTY
        board[0, 3] = EMPTY
        assert empty_points(board) == [Point(3, 0), Point(1, 2)]


class TestWinner:
    """has_run / find_winner tests."""

    def test_no_winner_on_empty(self, board: np.ndarray):
        assert find_winner(board, 3) is None

    def test_horizontal(self, board: np.ndarray):
        board[1, 1:4] = 2
        assert find_winner(board, 3) == 2

    def test_vertical(self, board: np.ndarray):
        board[0:3, 2] = 0
        assert find_winner(board, 3) == 0

    def test_diagonal(self, board: np.ndarray):
        for i in range(3):
            board[i, i] = 1
        assert find_winner(board, 3) == 1

    def test_anti_diagonal(self, board: np.ndarray):
        for i in range(3):
            board[i, 3 - i] = 1
        assert find_winner(board, 3) == 1

    def test_broken_run(self, board: np.ndarray):
        board[0, 0] = 0
        board[0, 1] = 1
        board[0, 2] = 0
        board[0, 3] = 0
        assert find_winner(board, 3) is None

    def test_run_stops_at_edge(self, board: np.ndarray):
        board[0, 2:4] = 0
        assert not has_run(board, Point(2, 0), Point(1, 0), 3)

    def test_run_from_far_end(self, board: np.ndarray):
        board[2, 0:3] = 0
        assert has_run(board, Point(2, 2), Point(-1, 0), 3)

    def test_empty_start_has_no_run(self, board: np.ndarray):
        assert not has_run(board, Point(0, 0), Point(1, 0), 2)


class TestToRows:
    """to_rows snapshot tests."""

    def test_none_for_empty(self, board: np.ndarray):
        board[1, 2] = 0
        rows = to_rows(board)
        assert len(rows) == 3
        assert all(len(row) == 4 for row in rows)
        assert rows[1][2] == 0
        assert rows[0][0] is None

    def test_plain_ints(self, board: np.ndarray):
        board[0, 0] = 1
        assert type(to_rows(board)[0][0]) is int
