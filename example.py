#!/usr/bin/env python3
"""
Example usage of the torlife package.
"""

import numpy as np

from torlife import GameOfLife


def main():
    """Demonstrate programmatic usage of the torlife package."""
    game = GameOfLife(10, 10)

    # A fixed seed makes the random board repeatable
    pattern = game.seed("random", rng=np.random.default_rng(2024))
    print(f"Seeded with {pattern.value}, population {game.population}")
    print()

    for board in game.iter_generations(6):
        print(f"Generation {game.generation}:")
        print(board.render(), end="")

    print(f"Population history: {game.population_history}")


if __name__ == "__main__":
    main()
