"""
Shared test fixtures for n_in_a_row tests.

Design principles:
- Seeded randomness so computer choices are reproducible
- Public API only; boards are built by playing moves
- Minimal, focused fixtures
"""

import random

import pytest

from n_in_a_row.agent.agent import Computer, Human
from n_in_a_row.core.weights import Difficulty
from n_in_a_row.games.n_in_a_row import NInARow


# =============================================================================
# Randomness
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def two_humans(rng: random.Random) -> NInARow:
    """6x6 board, goal 4, two human seats."""
    return NInARow(6, 6, 4, [Human(), Human()], rng=rng)


@pytest.fixture
def tic_tac_toe(rng: random.Random) -> NInARow:
    """3x3 board, goal 3, two human seats."""
    return NInARow(3, 3, 3, [Human(), Human()], rng=rng)


@pytest.fixture
def human_vs_computer(rng: random.Random) -> NInARow:
    """6x6 board, goal 4, human then normal computer."""
    return NInARow(6, 6, 4, [Human(), Computer(Difficulty.NORMAL)], rng=rng)
