"""
N-in-a-row game implementation.

Uses an int16 board:
    EMPTY (-1) = empty
    0, 1, 2... = seat index of the occupant

Turn order is not stored: the seat to act is the number of occupied cells
modulo the number of seats.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from n_in_a_row.agent.agent import Computer, PlayerType
from n_in_a_row.core.errors import (
    InvalidGameStateError,
    NewGameError,
    NewGameReason,
    PointIsPopulatedError,
)
from n_in_a_row.core.types import Point, PointLike, as_point, player_symbol
from n_in_a_row.games import game_rules
from n_in_a_row.games.game_base import GameBase
from n_in_a_row.games.game_state import GameState, Status
from n_in_a_row.selection.heuristic import get_computer_move

logger = logging.getLogger(__name__)


def _validate(width: int, height: int, goal: int, players: Sequence[PlayerType]) -> None:
    """Raise NewGameError for the first violated constraint."""
    if len(players) < 2:
        raise NewGameError(NewGameReason.PLAYERS_MUST_BE_AT_LEAST_2)
    if width < 2:
        raise NewGameError(NewGameReason.WIDTH_MUST_BE_AT_LEAST_2)
    if height < 2:
        raise NewGameError(NewGameReason.HEIGHT_MUST_BE_AT_LEAST_2)
    if goal > height:
        raise NewGameError(NewGameReason.GOAL_MUST_BE_LESS_THAN_HEIGHT)
    if goal > width:
        raise NewGameError(NewGameReason.GOAL_MUST_BE_LESS_THAN_WIDTH)
    if goal < 2:
        raise NewGameError(NewGameReason.GOAL_MUST_BE_AT_LEAST_2)


class NInARow(GameBase):
    """Board of arbitrary size, any run length, two or more seats."""

    __slots__ = ('_width', '_height', '_goal', '_players', '_board', '_rng')

    def __init__(
        self,
        width: int,
        height: int,
        goal: int,
        players: Sequence[PlayerType],
        rng: Optional[random.Random] = None,
    ):
        _validate(width, height, goal, players)

        self._width = width
        self._height = height
        self._goal = goal
        self._players = tuple(players)
        self._board = game_rules.empty_board(width, height)
        self._rng = rng if rng is not None else random.Random()

        logger.debug(
            "new game %dx%d, goal %d, seats: %s",
            width, height, goal, ", ".join(p.label for p in self._players),
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def goal(self) -> int:
        return self._goal

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def players(self) -> tuple:
        return self._players

    # ------------------------------------------------------------------
    # Board queries
    # ------------------------------------------------------------------

    def get_tile(self, point: PointLike) -> Optional[int]:
        point = as_point(point)
        game_rules.check_point(self._board, point)
        return game_rules.occupant(self._board, point)

    def get_board(self) -> List[List[Optional[int]]]:
        return game_rules.to_rows(self._board)

    def empty_points(self) -> List[Point]:
        return game_rules.empty_points(self._board)

    def get_current_player(self) -> int:
        return game_rules.occupied_count(self._board) % self.player_count

    def get_gamestate(self) -> GameState:
        winner = game_rules.find_winner(self._board, self._goal)
        if winner is not None:
            return GameState.player_won(winner)
        if game_rules.board_full(self._board):
            return GameState.draw()
        return GameState.seat_to_move(self.get_current_player())

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play_move(self, point: PointLike) -> None:
        point = as_point(point)
        seat = self._seat_to_move()

        current = self.get_tile(point)
        if current is not None:
            raise PointIsPopulatedError(current)

        self._place(point, seat)
        self.resolve_computer_turns()

        if logger.isEnabledFor(logging.DEBUG):
            state = self.get_gamestate()
            if state.is_over:
                logger.debug("game over: %s", state)

    def play_computer_move(self) -> Optional[Point]:
        """
        Play one ply for a computer seat.

        Returns the point played, or None if the game is over or the seat
        to act is human.
        """
        state = self.get_gamestate()
        if state.status is not Status.SEAT_TO_MOVE:
            return None

        player_type = self._players[state.player]
        if not isinstance(player_type, Computer):
            return None

        point = self.get_computer_move(player_type)
        if point is None:
            return None

        self._place(point, state.player)
        return point

    def resolve_computer_turns(self) -> List[Point]:
        """Play computer seats until a human must act or the game ends."""
        played: List[Point] = []
        while True:
            point = self.play_computer_move()
            if point is None:
                return played
            played.append(point)

    def get_computer_move(self, params: Computer) -> Optional[Point]:
        """Heuristic choice for the seat to act, using this game's rng."""
        return get_computer_move(self, params, rng=self._rng)

    def clear(self) -> None:
        self._board = game_rules.empty_board(self._width, self._height)
        logger.debug("board cleared")

    def _seat_to_move(self) -> int:
        state = self.get_gamestate()
        if state.status is not Status.SEAT_TO_MOVE:
            raise InvalidGameStateError(state)
        return state.player

    def _place(self, point: Point, seat: int) -> None:
        self._board[point.y, point.x] = seat
        logger.debug("player %d plays (%d, %d)", seat, point.x, point.y)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def state_string(self) -> str:
        board = [
            [" " if v is None else player_symbol(v) for v in row]
            for row in self.get_board()
        ]
        width = len(player_symbol(self.player_count - 1))

        header = "    " + " ".join(f"{x:^{width + 2}}" for x in range(self._width))
        top = "   ╭" + "┬".join("─" * (width + 2) for _ in range(self._width)) + "╮"
        sep = "   ├" + "┼".join("─" * (width + 2) for _ in range(self._width)) + "┤"
        bottom = "   ╰" + "┴".join("─" * (width + 2) for _ in range(self._width)) + "╯"

        lines = [header, top]
        for y, row in enumerate(board):
            lines.append(f"{y:>2} │ " + " │ ".join(f"{v:^{width}}" for v in row) + " │")
            if y < self._height - 1:
                lines.append(sep)
        lines.append(bottom)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"NInARow(width={self._width}, height={self._height}, "
            f"goal={self._goal}, players={list(self._players)!r})"
        )
