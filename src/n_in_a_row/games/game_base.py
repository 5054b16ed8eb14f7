"""
GameBase - abstract interface consumed by front ends.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from n_in_a_row.core.types import PointLike
from n_in_a_row.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for grid games driven by a front end.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Front ends only supply coordinates and read back board + state.
    - Game state is DERIVED from the board on every query, never stored.
    - play_move() resolves computer seats before returning, so callers
      must re-read the board afterwards.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @property
    @abstractmethod
    def goal(self) -> int:
        """Run length needed to win."""
        pass

    @property
    @abstractmethod
    def player_count(self) -> int:
        pass

    @abstractmethod
    def get_tile(self, point: PointLike) -> Optional[int]:
        """
        Return the seat occupying a point, or None.

        Raises InvalidPointError for points off the board.
        """
        pass

    @abstractmethod
    def get_board(self) -> List[List[Optional[int]]]:
        """Row-major snapshot: ``height`` rows of ``width`` cells."""
        pass

    @abstractmethod
    def get_current_player(self) -> int:
        """Return the seat to act."""
        pass

    @abstractmethod
    def get_gamestate(self) -> GameState:
        pass

    @abstractmethod
    def play_move(self, point: PointLike) -> None:
        """
        Apply a move for the seat to act. Mutates internal state.

        Raises a PlayMoveError subclass and leaves the board untouched
        if the move is rejected.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Empty the board, keeping dimensions and seats."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the board."""
        pass
