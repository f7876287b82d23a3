"""Command-line interface for the toroidal Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional

from ..core.game import BOARD_SIZE, GENERATION_COUNT, GameOfLife
from ..core.patterns import Pattern, list_patterns


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="torlife",
        description=(
            f"Run Conway's Game of Life on a {BOARD_SIZE}x{BOARD_SIZE} wrap-around board "
            f"for {GENERATION_COUNT} generations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Patterns (case-insensitive): "
            + ", ".join(list_patterns())
            + "\nAny other name, or none at all, seeds a random board."
        ),
    )

    parser.add_argument("pattern", nargs="?", default=None, help="Seed pattern name (default: random)")

    return parser


def run_simulation(pattern: Optional[str] = None, generations: int = GENERATION_COUNT) -> None:
    """Seed a board, then print it for each generation.

    Args:
        pattern: Seed pattern name
        generations: Number of generations to print
    """
    game = GameOfLife(BOARD_SIZE, BOARD_SIZE)
    used = game.seed(pattern)
    print(pattern if used is not Pattern.RANDOM else Pattern.RANDOM.value)

    for board in game.iter_generations(generations):
        print(board.render(), end="")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    parser = create_parser()
    # Unrecognised tokens are ignored; the first one still names a pattern
    args, extras = parser.parse_known_args(argv)
    if args.pattern is None and extras:
        args.pattern = extras[0]

    try:
        run_simulation(args.pattern)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
