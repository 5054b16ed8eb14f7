"""
Command-line interface for N-in-a-row play.
"""

import argparse
import logging
import random
from typing import List, Optional

from n_in_a_row.api import play_interactive
from n_in_a_row.core.errors import NewGameError
from n_in_a_row.utils.config import DEFAULT_GOAL, DEFAULT_HEIGHT, DEFAULT_WIDTH, GameSettings
from n_in_a_row.utils.factory import create_game, parse_player_type

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play N-in-a-row against humans or computer players"
    )
    parser.add_argument(
        "--width", "-W",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Board width (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height", "-H",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Board height (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--goal", "-g",
        type=int,
        default=DEFAULT_GOAL,
        help=f"Run length needed to win (default: {DEFAULT_GOAL})",
    )
    parser.add_argument(
        "--player", "-p",
        dest="players",
        action="append",
        default=None,
        help=(
            "Seat controller, repeat once per seat in turn order: 'human' or "
            "'computer[:difficulty[:strategy]]' (default: human, computer:normal)"
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for computer tie-breaks",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine and computer decisions",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        players = [parse_player_type(p) for p in args.players] if args.players else None
    except ValueError as e:
        parser.error(str(e))

    settings = GameSettings(
        width=args.width,
        height=args.height,
        goal=args.goal,
        players=players,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        game = create_game(settings, rng=rng)
    except NewGameError as e:
        parser.error(f"Invalid settings: {e}")

    logger.info("starting %r", game)
    try:
        play_interactive(game)
    except (KeyboardInterrupt, EOFError):
        print("\nGame abandoned.")


if __name__ == "__main__":
    main()
