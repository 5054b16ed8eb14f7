"""
Seat controllers: who makes the moves for a given player slot.
"""

from dataclasses import dataclass
from typing import Union

from n_in_a_row.core.weights import ComputerWeights, Difficulty, Strategy, weights_for


@dataclass(frozen=True)
class Human:
    """Seat whose moves come from the front end."""

    @property
    def label(self) -> str:
        return "Human"


@dataclass(frozen=True)
class Computer:
    """Seat played by the heuristic evaluator."""

    difficulty: Difficulty = Difficulty.NORMAL
    strategy: Strategy = Strategy.NEUTRAL

    @property
    def weights(self) -> ComputerWeights:
        """Weight profile derived from difficulty and strategy."""
        return weights_for(self.difficulty, self.strategy)

    @property
    def label(self) -> str:
        return f"{self.difficulty.label} {self.strategy.label}".strip()


PlayerType = Union[Human, Computer]
