"""
Computer difficulty settings and the heuristic weight table.

Every (Difficulty, Strategy) pair maps to a fixed ComputerWeights tuple.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Tuple


class Difficulty(Enum):
    RANDOM = "random"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    INSANE = "insane"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Strategy(Enum):
    NEUTRAL = "neutral"
    OFFENSIVE = "offensive"
    DEFENSIVE = "defensive"

    @property
    def label(self) -> str:
        return {"neutral": "", "offensive": "Off", "defensive": "Def"}[self.value]


class ComputerWeights(NamedTuple):
    """Coefficients consumed by the location evaluator."""

    own_weight: int
    opponent_weight: int
    empty_cell_weight: int
    populated_cell_weight: int
    own_streak_exponent_base: int
    opponent_streak_exponent_base: int


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                          WEIGHT PROFILE TABLE                               ║
# ║                                                                             ║
# ║  Strategy sets own/opponent balance:                                        ║
# ║    Neutral   1 / 1                                                          ║
# ║    Offensive 3 / 2   → prefers extending its own lines                      ║
# ║    Defensive 2 / 3   → prefers blocking opponents                           ║
# ║                                                                             ║
# ║  Difficulty sets how much existing pieces matter:                           ║
# ║    (populated weight, neutral streak base)                                  ║
# ║    Easy 1,1   Normal 2,1   Hard 2,2   Insane 3,3                            ║
# ║  Offensive/Defensive bump the own/opponent streak base by one               ║
# ║  once the base is above 1.                                                  ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

_STRATEGY_BALANCE: Dict[Strategy, Tuple[int, int]] = {
    Strategy.NEUTRAL: (1, 1),
    Strategy.OFFENSIVE: (3, 2),
    Strategy.DEFENSIVE: (2, 3),
}

_DIFFICULTY_SHAPE: Dict[Difficulty, Tuple[int, int]] = {
    Difficulty.EASY: (1, 1),
    Difficulty.NORMAL: (2, 1),
    Difficulty.HARD: (2, 2),
    Difficulty.INSANE: (3, 3),
}

# Every cell scores zero, so the tie-break picks uniformly at random
_RANDOM_WEIGHTS = ComputerWeights(0, 0, 0, 0, 1, 1)


def _build_table() -> Dict[Tuple[Difficulty, Strategy], ComputerWeights]:
    table: Dict[Tuple[Difficulty, Strategy], ComputerWeights] = {}
    for strategy in Strategy:
        table[(Difficulty.RANDOM, strategy)] = _RANDOM_WEIGHTS

    for difficulty, (populated, streak) in _DIFFICULTY_SHAPE.items():
        for strategy, (own, opponent) in _STRATEGY_BALANCE.items():
            own_streak = opponent_streak = streak
            if streak > 1 and strategy is Strategy.OFFENSIVE:
                own_streak += 1
            if streak > 1 and strategy is Strategy.DEFENSIVE:
                opponent_streak += 1
            table[(difficulty, strategy)] = ComputerWeights(
                own_weight=own,
                opponent_weight=opponent,
                empty_cell_weight=1,
                populated_cell_weight=populated,
                own_streak_exponent_base=own_streak,
                opponent_streak_exponent_base=opponent_streak,
            )
    return table


WEIGHT_TABLE: Dict[Tuple[Difficulty, Strategy], ComputerWeights] = _build_table()


def weights_for(
    difficulty: Difficulty,
    strategy: Strategy = Strategy.NEUTRAL,
) -> ComputerWeights:
    """Look up the weight profile for a difficulty/strategy pair."""
    return WEIGHT_TABLE[(difficulty, strategy)]
