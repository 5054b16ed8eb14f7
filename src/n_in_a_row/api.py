"""
Public API for interactive play.

Usage:
    from n_in_a_row import GameSettings, play_interactive

    game = GameSettings(width=7, height=6, goal=4).to_game()
    play_interactive(game)
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

from n_in_a_row.core.errors import PlayMoveError
from n_in_a_row.core.types import Point, player_symbol
from n_in_a_row.games.game_state import GameState, Status

if TYPE_CHECKING:
    from n_in_a_row.games.n_in_a_row import NInARow


def _parse_point(raw: str) -> Point:
    parts = [p.strip() for p in raw.replace(" ", ",").split(",") if p.strip()]
    if len(parts) != 2:
        raise ValueError(f"expected 2 comma-separated values, got {len(parts)}")
    return Point(int(parts[0]), int(parts[1]))


def _human_turn(
    game: "NInARow",
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
) -> None:
    """Prompt until a move is accepted; computer replies are applied too."""
    player = game.get_current_player()
    output_fn(f"\nYour turn (Player {player_symbol(player)})")
    output_fn("Format: x,y (e.g., 0,0)")

    while True:
        raw = input_fn("Move: ").strip()
        try:
            game.play_move(_parse_point(raw))
            return
        except ValueError as e:
            output_fn(f"Invalid input: {e}")
        except PlayMoveError as e:
            output_fn(f"Illegal move: {e}")


def _announce(state: GameState, output_fn: Callable[[str], None]) -> None:
    if state.status is Status.PLAYER_WON:
        output_fn(f"\nPlayer {player_symbol(state.player)} wins!")
    else:
        output_fn("\nDraw!")


def play_interactive(
    game: "NInARow",
    input_fn: Optional[Callable[[str], str]] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> GameState:
    """
    Main entry point: play a game to the end.

    Parameters
    ----------
    game:
        A freshly created (or partly played) game.
    input_fn:
        Reads one line of user input given a prompt (default: input).
    output_fn:
        Writes one line of output (default: print).

    Returns
    -------
    The terminal GameState (winner or draw).
    """
    input_fn = input_fn or input
    output_fn = output_fn or print

    # Seat 0 (and any seats after it) may be computers
    game.resolve_computer_turns()

    state = game.get_gamestate()
    while not state.is_over:
        output_fn(game.state_string())
        _human_turn(game, input_fn, output_fn)
        state = game.get_gamestate()

    output_fn(game.state_string())
    _announce(state, output_fn)
    return state
